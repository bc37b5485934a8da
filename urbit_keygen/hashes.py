#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from urbit_keygen.alias import String
from urbit_keygen.utils import bytes_from_string

SHA512_SIZE = 64


def sha512(*args: String) -> bytes:
    """Return the SHA512(*) of the concatenated inputs.

    Text string inputs are UTF-8 encoded, so that
    sha512("some seed", "type-0") == sha512(b"some seedtype-0").
    """

    h = hashlib.sha512()
    for arg in args:
        h.update(bytes_from_string(arg))
    return h.digest()
