#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Hex is the canonical text form of any byte sequence crossing
the package boundary: lower case, no "0x" prefix,
two hex-digits per byte.
"""

import string
from typing import Optional

from dataclasses_json import config

from urbit_keygen.alias import String
from urbit_keygen.exceptions import KeygenTypeError, KeygenValueError

_HEXDIGITS = frozenset(string.hexdigits)


def bytes_from_string(value: Optional[String]) -> bytes:
    """Return bytes from a text string or bytes.

    Text strings are UTF-8 encoded (they are not hex-strings);
    None is the empty byte string.
    """

    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise KeygenTypeError(f"not bytes or text string: {type(value).__name__}")


def hex_from_bytes(data: bytes) -> str:
    "Return the lower-case hex-string of a byte sequence."
    return bytes(data).hex()


def bytes_from_hex(hex_str: str) -> bytes:
    """Return bytes from a hex-string.

    Unlike bytes.fromhex, whitespace is not tolerated:
    odd length or non-hex characters are malformed encodings.
    """

    if not isinstance(hex_str, str):
        raise KeygenTypeError(f"not a hex-string: {type(hex_str).__name__}")
    if len(hex_str) % 2 != 0:
        raise KeygenValueError(f"odd-length hex-string: {len(hex_str)} digits")
    if not _HEXDIGITS.issuperset(hex_str):
        raise KeygenValueError("invalid hex-string: non-hex characters")
    return bytes.fromhex(hex_str)


def xor_bytes(*buffers: bytes) -> bytes:
    "Return the bytewise XOR of equal-length byte sequences."

    if not buffers:
        raise KeygenValueError("no byte sequence to xor")
    size = len(buffers[0])
    if any(len(buf) != size for buf in buffers):
        raise KeygenValueError("xor of byte sequences with different lengths")

    result = int.from_bytes(buffers[0], byteorder="big", signed=False)
    for buf in buffers[1:]:
        result ^= int.from_bytes(buf, byteorder="big", signed=False)
    return result.to_bytes(size, byteorder="big", signed=False)


# dataclasses_json field metadata, serializing bytes as hex-string
HEX = config(encoder=hex_from_bytes, decoder=bytes_from_hex)


def non_negative_int(value: int, name: str) -> int:
    "Return the value if it is a non-negative int, e.g. a revision or ship."

    # bool is an int subclass, but not a valid index
    if isinstance(value, bool) or not isinstance(value, int):
        raise KeygenTypeError(f"invalid {name}: {value!r}")
    if value < 0:
        raise KeygenValueError(f"negative {name}: {value}")
    return value
