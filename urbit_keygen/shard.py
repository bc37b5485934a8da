#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""2-of-3 secret sharding.

A secret k is split with two random pads k1 and k2,
of the same length as the secret:

    k0 = k ^ k1 ^ k2
    shards = (k0, k1), (k0, k2), (k1, k2)

Any two shards together hold k0, k1, and k2 (one of them twice),
whose XOR is k; a single shard is indistinguishable from random.

Shards are combined by pooling their pads, dropping repeated values,
and xor-ing what is left:
the two pads shared by different shards are equal by value,
whatever their position in each shard.
"""

import logging
import secrets
from typing import List, Optional, Sequence, Tuple

from urbit_keygen.exceptions import InsufficientShardsError, KeygenValueError
from urbit_keygen.utils import bytes_from_hex, hex_from_bytes, xor_bytes

_logger = logging.getLogger(__name__)

ShardBuffer = Tuple[bytes, bytes]

# shorter secrets are not sharded:
# pads would collide too often for value deduplication to be safe
MIN_SHARD_BYTES = 8


def shard_buffer(secret: bytes) -> List[ShardBuffer]:
    """Return three shards, any two of them reconstructing the secret.

    Pads are redrawn until pairwise distinct,
    as combining drops repeated pad values.
    """

    secret = bytes(secret)
    if not secret:
        raise KeygenValueError("empty secret")

    while True:
        k1 = secrets.token_bytes(len(secret))
        k2 = secrets.token_bytes(len(secret))
        k0 = xor_bytes(secret, k1, k2)
        if len({k0, k1, k2}) == 3:
            break
        _logger.debug("colliding pads for %d-byte secret, redrawing", len(secret))

    return [(k0, k1), (k0, k2), (k1, k2)]


def combine_buffer(shards: Sequence[Optional[ShardBuffer]]) -> bytes:
    """Return the secret reconstructed from at least two shards.

    Missing shards are represented by None.
    """

    present = [s for s in shards if s is not None]
    if len(present) < 2:
        err_msg = f"insufficient shards: {len(present)} instead of at least 2"
        raise InsufficientShardsError(err_msg)

    uniques: List[bytes] = []
    for pad in (bytes(p) for s in present for p in s):
        if pad not in uniques:
            uniques.append(pad)

    if len({len(pad) for pad in uniques}) > 1:
        raise KeygenValueError("shards with different lengths")
    if len(uniques) < 3:
        err_msg = f"insufficient shards: {len(uniques)} distinct pads instead of 3"
        raise InsufficientShardsError(err_msg)
    if len(uniques) > 3:
        raise KeygenValueError(f"inconsistent shards: {len(uniques)} distinct pads")

    return xor_bytes(*uniques)


def shard(hex_secret: str) -> List[str]:
    """Return three hex-string shards of the hex-string secret.

    Each shard is the concatenation of its two pads.
    Secrets shorter than MIN_SHARD_BYTES are returned unsharded,
    as the only element of the list:
    check the list length before assuming a 2-of-3 scheme.
    """

    secret = bytes_from_hex(hex_secret)
    if len(secret) < MIN_SHARD_BYTES:
        _logger.debug("%d-byte secret left unsharded", len(secret))
        return [hex_from_bytes(secret)]

    _logger.debug("sharding %d-byte secret", len(secret))
    return [hex_from_bytes(a + b) for a, b in shard_buffer(secret)]


def _split_shard(hex_shard: str) -> ShardBuffer:
    data = bytes_from_hex(hex_shard)
    if len(data) % 2 != 0:
        raise KeygenValueError(f"invalid shard: odd length ({len(data)} bytes)")
    half = len(data) // 2
    return data[:half], data[half:]


def combine(shards: Sequence[Optional[str]]) -> str:
    """Return the hex-string secret reconstructed from hex-string shards.

    Missing shards are represented by None.
    """

    buffers = [None if s is None else _split_shard(s) for s in shards]
    return hex_from_bytes(combine_buffer(buffers))
