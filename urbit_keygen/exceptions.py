#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

This are only meant to discriminate between Exceptions being raised
by urbit_keygen from those raised by other codebase
(e.g. btclib, PyNaCl, or argon2-cffi, whose errors are never wrapped).

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the urbit_keygen versions are derived.
"""


class KeygenValueError(ValueError):
    pass


class KeygenTypeError(TypeError):
    pass


class InsufficientShardsError(KeygenValueError):
    "Too few distinct shards to reconstruct a secret."
