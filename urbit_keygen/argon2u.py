#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ticket stretching.

A ticket is low-entropy, human-transcribable input:
it is stretched into a high-entropy root seed
with the Argon2 memory-hard function.

Memory and time costs are configuration, not data:
they are provided as StretchParams and,
for fixed parameters and input, the output is deterministic.
Argon2 errors (e.g. a too short salt or output length)
are propagated as raised by argon2-cffi.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from argon2.low_level import Type, hash_secret_raw

from urbit_keygen.alias import String
from urbit_keygen.exceptions import KeygenValueError
from urbit_keygen.utils import bytes_from_string

_logger = logging.getLogger(__name__)

DEFAULT_SEED_SIZE = 64


@dataclass(frozen=True)
class StretchParams:
    salt: bytes = b"urbitkeygen"
    time_cost: int = 1
    # KiB
    memory_cost: int = 512000
    parallelism: int = 4
    type: Type = Type.ID


def argon2u(
    entropy: String,
    seed_size: int = DEFAULT_SEED_SIZE,
    params: Optional[StretchParams] = None,
) -> bytes:
    """Return a seed_size bytes seed stretching the entropy.

    The entropy is usually a ticket,
    as text string or bytes of at least 16 bytes.
    """

    if seed_size < 1:
        raise KeygenValueError(f"invalid seed size: {seed_size}")
    params = params or StretchParams()

    _logger.debug(
        "stretching %d-byte seed (time_cost=%d, memory_cost=%d KiB)",
        seed_size,
        params.time_cost,
        params.memory_cost,
    )
    return hash_secret_raw(
        secret=bytes_from_string(entropy),
        salt=params.salt,
        time_cost=params.time_cost,
        memory_cost=params.memory_cost,
        parallelism=params.parallelism,
        hash_len=seed_size,
        type=params.type,
    )
