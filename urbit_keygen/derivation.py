#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Child seed derivation.

A child seed is derived from its parent seed and a salt
identifying the child purpose (its type), revision,
and, when applicable, the ship it is scoped to:

    salt = "{type}-{revision}-{ship}"  or  "{type}-{revision}"
    child = SHA512(seed + salt + password)[:len(seed)]

Truncation to the parent length keeps every seed of the tree
the same size, so that derivation can be applied recursively
(e.g. network seeds are derived from the management seed).
As SHA512 is 64 bytes long, seeds longer than that
have 64-byte children.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from dataclasses_json import DataClassJsonMixin

from urbit_keygen.alias import String
from urbit_keygen.exceptions import KeygenTypeError, KeygenValueError
from urbit_keygen.hashes import sha512
from urbit_keygen.hd_wallet import WalletKeys, wallet_from_seed
from urbit_keygen.utils import (
    HEX,
    bytes_from_string,
    hex_from_bytes,
    non_negative_int,
)


class ChildSeedType(Enum):
    OWNERSHIP = "ownership"
    TRANSFER = "transfer"
    SPAWN = "spawn"
    DELEGATE = "delegate"
    MANAGE = "manage"
    NETWORK = "network"


# a ChildSeedType or any other label
SeedType = Union[ChildSeedType, str]


def _type_label(type_: SeedType) -> str:
    if isinstance(type_, ChildSeedType):
        return type_.value
    if isinstance(type_, str):
        return type_
    raise KeygenTypeError(f"invalid seed type: {type(type_).__name__}")


def child_seed_salt(
    type_: SeedType, revision: Optional[int] = 0, ship: Optional[int] = None
) -> str:
    "Return the salt identifying a child seed."

    label = _type_label(type_)
    revision = 0 if revision is None else non_negative_int(revision, "revision")
    if ship is None:
        return f"{label}-{revision}"
    return f"{label}-{revision}-{non_negative_int(ship, 'ship')}"


def child_seed_from_seed(
    seed: String,
    type_: SeedType,
    revision: Optional[int] = 0,
    ship: Optional[int] = None,
    password: Optional[String] = "",
) -> bytes:
    "Return the child seed of the given type, revision, and ship."

    seed = bytes_from_string(seed)
    if not seed:
        raise KeygenValueError("empty seed")
    salt = child_seed_salt(type_, revision, ship)
    return sha512(seed, salt, password)[: len(seed)]


@dataclass(frozen=True)
class NodeMeta(DataClassJsonMixin):
    type: str
    revision: int = 0
    ship: Optional[int] = None


def node_meta(
    type_: SeedType, revision: Optional[int] = None, ship: Optional[int] = None
) -> NodeMeta:
    return NodeMeta(
        type=_type_label(type_),
        revision=0 if revision is None else revision,
        ship=ship,
    )


@dataclass(frozen=True)
class Node(DataClassJsonMixin):
    meta: NodeMeta
    seed: bytes = field(metadata=HEX)
    keys: WalletKeys


def child_node_from_seed(
    seed: String,
    type_: SeedType,
    revision: Optional[int] = 0,
    ship: Optional[int] = None,
    password: Optional[String] = "",
) -> Node:
    """Return the child node of the given type, revision, and ship.

    The node keys are derived from the hex-string of the child seed,
    i.e. from the node seed as it is serialized.
    """

    child_seed = child_seed_from_seed(seed, type_, revision, ship, password)
    return Node(
        meta=node_meta(type_, revision, ship),
        seed=child_seed,
        keys=wallet_from_seed(hex_from_bytes(child_seed), password),
    )
