#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `urbit_keygen.shard` module."

import secrets
from itertools import combinations

import pytest

from urbit_keygen.exceptions import InsufficientShardsError, KeygenValueError
from urbit_keygen.shard import (
    MIN_SHARD_BYTES,
    combine,
    combine_buffer,
    shard,
    shard_buffer,
)


def test_shard_buffer() -> None:

    secret = bytes(
        [54, 65, 105, 225, 146, 251, 171, 131, 56, 4, 132, 194, 99, 111, 78, 171]
    )
    shards = shard_buffer(secret)
    assert len(shards) == 3
    for pads in shards:
        assert len(pads) == 2
        assert all(len(pad) == len(secret) for pad in pads)
    # pads are shared by value between shards
    k0, k1 = shards[0]
    assert shards[1][0] == k0
    assert shards[2][0] == k1

    assert combine_buffer(shards) == secret
    for subset in combinations(shards, 2):
        assert combine_buffer(subset) == secret


def test_shard_buffer_short_secrets() -> None:

    # with 1-byte pads random collisions are frequent
    for secret in (b"\x00", b"\x5a", b"\xff"):
        for _ in range(2000):
            shards = shard_buffer(secret)
            assert len({pad for pads in shards for pad in pads}) == 3
            for subset in combinations(shards, 2):
                assert combine_buffer(subset) == secret


def test_fresh_pads() -> None:

    secret = secrets.token_bytes(32)
    assert shard_buffer(secret) != shard_buffer(secret)

    hex_secret = secret.hex()
    assert shard(hex_secret) != shard(hex_secret)


def test_missing_shards() -> None:

    secret = secrets.token_bytes(32)
    s0, s1, s2 = shard_buffer(secret)
    assert combine_buffer([s0, s1, None]) == secret
    assert combine_buffer([s0, None, s2]) == secret
    assert combine_buffer([None, s1, s2]) == secret


def test_insufficient_shards() -> None:

    secret = secrets.token_bytes(32)
    s0, s1, s2 = shard_buffer(secret)

    for shards in ([], [None, None, None], [s0], [s1, None, None], [None, None, s2]):
        with pytest.raises(InsufficientShardsError, match="insufficient shards: "):
            combine_buffer(shards)

    # the same shard twice is still a single shard
    with pytest.raises(InsufficientShardsError, match="distinct pads"):
        combine_buffer([s0, s0])

    # InsufficientShardsError is a ValueError
    with pytest.raises(ValueError):
        combine_buffer([s2])


def test_inconsistent_shards() -> None:

    s0, _, _ = shard_buffer(secrets.token_bytes(32))
    _, t1, _ = shard_buffer(secrets.token_bytes(32))
    with pytest.raises(KeygenValueError, match="inconsistent shards: "):
        combine_buffer([s0, t1])

    _, u1, _ = shard_buffer(secrets.token_bytes(16))
    with pytest.raises(KeygenValueError, match="different lengths"):
        combine_buffer([s0, u1])


def test_empty_secret() -> None:

    with pytest.raises(KeygenValueError, match="empty secret"):
        shard_buffer(b"")


def test_shard_combine() -> None:

    for secret in (
        "736f6d652073656564",
        "544a22a7a9de737a1ed342cb1f03158314ecee7d364550daf27990cdacb9a7ea",
        "02bb80a59fd51ed853285f3b7738b4542f619a52819a04680e5f36c4d76547eec9",
        "00" * MIN_SHARD_BYTES,
        secrets.token_bytes(64).hex(),
    ):
        shards = shard(secret)
        assert len(shards) == 3
        assert all(len(s) == 2 * len(secret) for s in shards)
        for subset in combinations(shards, 2):
            assert combine(list(subset)) == secret
        assert combine([shards[0], None, shards[2]]) == secret
        assert combine(shards) == secret


def test_short_secret() -> None:

    for secret in ("00", "736f6d65", "00" * (MIN_SHARD_BYTES - 1)):
        assert shard(secret) == [secret]


def test_malformed_shards() -> None:

    with pytest.raises(KeygenValueError, match="odd-length hex-string: "):
        shard("736f6d65207365656")

    shards = shard("736f6d652073656564")
    with pytest.raises(KeygenValueError, match="invalid shard: odd length"):
        combine([shards[0], shards[1][:-2]])

    with pytest.raises(KeygenValueError, match="invalid hex-string: "):
        combine([shards[0], "zz" + shards[1][2:]])

    with pytest.raises(InsufficientShardsError):
        combine([shards[0]])
