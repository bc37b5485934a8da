#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `urbit_keygen.argon2u` module."

import pytest
from argon2.exceptions import HashingError
from argon2.low_level import Type

from urbit_keygen.argon2u import DEFAULT_SEED_SIZE, StretchParams, argon2u
from urbit_keygen.exceptions import KeygenValueError

# cheap parameters, not suitable for real tickets
FAST = StretchParams(memory_cost=1024, parallelism=1)


def test_default_params() -> None:

    params = StretchParams()
    assert params.salt == b"urbitkeygen"
    assert params.time_cost == 1
    assert params.memory_cost == 512000
    assert params.parallelism == 4
    assert params.type == Type.ID


def test_argon2u() -> None:

    seed = argon2u("password123", params=FAST)
    assert len(seed) == DEFAULT_SEED_SIZE
    assert argon2u(b"password123", params=FAST) == seed

    for seed_size in (16, 32, 48):
        assert len(argon2u("~doznec-marbud", seed_size, FAST)) == seed_size

    assert argon2u("password124", params=FAST) != seed

    params = StretchParams(salt=b"another salt", memory_cost=1024, parallelism=1)
    assert argon2u("password123", params=params) != seed

    params = StretchParams(time_cost=2, memory_cost=1024, parallelism=1)
    assert argon2u("password123", params=params) != seed


def test_exceptions() -> None:

    with pytest.raises(KeygenValueError, match="invalid seed size: "):
        argon2u("password123", 0, FAST)

    # argon2 errors are not wrapped
    params = StretchParams(salt=b"short", memory_cost=1024, parallelism=1)
    with pytest.raises(HashingError):
        argon2u("password123", params=params)
