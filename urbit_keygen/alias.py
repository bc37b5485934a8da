#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Dict, Union

# bytes or text string (not hex-string)
#
# this is for seeds, tickets and passwords, which are
# converted to bytes using encode()
#    if isinstance(seed, str):
#        seed = seed.encode()
#
# e.g.:
# "some seed"
# "~doznec-marbud"
# b"\x88\x35\x9b\xa6"
#
# use urbit_keygen.utils.bytes_from_string to convert String to bytes
String = Union[bytes, str]

# the nested mapping of a serialized Wallet
WalletDict = Dict[str, Any]
