#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Full HD wallet.

A full wallet is the tree of nodes derived from the owner (root) seed:

- owner: the root seed itself, with its BIP32 master keys
- manage: management proxy, derived from the owner seed
- delegate: voting proxy, derived from the owner seed
- transfer: one transfer proxy per ship, derived from the owner seed
- spawn: one spawn proxy per ship, derived from the owner seed
- network: one set of network keys per ship, derived from the
  management seed, only if the ships are to be booted

Every branch is a pure function of the owner seed, the password,
the branch revision, and the ship:
any single branch can be re-derived without rebuilding the wallet.
"""

import logging
from dataclasses import dataclass, fields
from typing import Iterable, List, Mapping, Optional, Union

from dataclasses_json import DataClassJsonMixin

from urbit_keygen.alias import String, WalletDict
from urbit_keygen.argon2u import DEFAULT_SEED_SIZE, StretchParams, argon2u
from urbit_keygen.derivation import (
    ChildSeedType,
    Node,
    child_node_from_seed,
    node_meta,
)
from urbit_keygen.exceptions import KeygenValueError
from urbit_keygen.hd_wallet import wallet_from_seed
from urbit_keygen.network import NetworkNode, network_node_from_seed
from urbit_keygen.shard import shard
from urbit_keygen.utils import bytes_from_string, hex_from_bytes, non_negative_int

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Revisions:
    "Revision of each derived branch of the wallet."

    transfer: int
    spawn: int
    delegate: int
    manage: int
    network: int

    def __post_init__(self) -> None:
        for f in fields(self):
            non_negative_int(getattr(self, f.name), f"{f.name} revision")

    @classmethod
    def from_mapping(
        cls, mapping: Optional[Mapping[Union[ChildSeedType, str], int]] = None
    ) -> "Revisions":
        "Return the Revisions of a partial mapping, zero for missing branches."

        revisions = {
            (k.value if isinstance(k, ChildSeedType) else k): v
            for k, v in (mapping or {}).items()
        }
        names = [f.name for f in fields(cls)]
        unknown = sorted(set(revisions) - set(names))
        if unknown:
            raise KeygenValueError(f"unknown revision branches: {', '.join(unknown)}")
        return cls(**{name: revisions.get(name, 0) for name in names})


RevisionsLike = Union[Revisions, Mapping[Union[ChildSeedType, str], int], None]


@dataclass(frozen=True)
class Wallet(DataClassJsonMixin):
    owner: Node
    manage: Node
    delegate: Node
    transfer: List[Node]
    spawn: List[Node]
    network: List[NetworkNode]


def full_wallet_from_seed(
    owner_seed: String,
    ships: Iterable[int],
    password: Optional[String] = "",
    revisions: RevisionsLike = None,
    boot: bool = False,
) -> Wallet:
    """Return the full wallet derived from the owner seed.

    Transfer, spawn, and network nodes are in the same order
    as the input ships; duplicated ships yield duplicated nodes.
    """

    owner_seed = bytes_from_string(owner_seed)
    if not owner_seed:
        raise KeygenValueError("empty seed")
    if not isinstance(revisions, Revisions):
        revisions = Revisions.from_mapping(revisions)
    ships = list(ships)

    _logger.debug("deriving wallet for %d ship(s), boot=%s", len(ships), boot)

    owner = Node(
        meta=node_meta(ChildSeedType.OWNERSHIP),
        seed=owner_seed,
        keys=wallet_from_seed(owner_seed, password),
    )
    manage = child_node_from_seed(
        owner_seed, ChildSeedType.MANAGE, revisions.manage, None, password
    )
    delegate = child_node_from_seed(
        owner_seed, ChildSeedType.DELEGATE, revisions.delegate, None, password
    )
    transfer = [
        child_node_from_seed(
            owner_seed, ChildSeedType.TRANSFER, revisions.transfer, ship, password
        )
        for ship in ships
    ]
    spawn = [
        child_node_from_seed(
            owner_seed, ChildSeedType.SPAWN, revisions.spawn, ship, password
        )
        for ship in ships
    ]

    network: List[NetworkNode] = []
    if boot:
        # network seeds are children of the hex-encoded management seed
        manage_seed = hex_from_bytes(manage.seed)
        network = [
            network_node_from_seed(manage_seed, ship, revisions.network, password)
            for ship in ships
        ]

    return Wallet(
        owner=owner,
        manage=manage,
        delegate=delegate,
        transfer=transfer,
        spawn=spawn,
        network=network,
    )


def full_wallet_from_ticket(
    ticket: String,
    ships: Iterable[int],
    seed_size: int = DEFAULT_SEED_SIZE,
    password: Optional[String] = "",
    revisions: RevisionsLike = None,
    boot: bool = False,
    params: Optional[StretchParams] = None,
) -> Wallet:
    "Return the full wallet derived from the stretched ticket."

    owner_seed = argon2u(ticket, seed_size, params)
    return full_wallet_from_seed(owner_seed, ships, password, revisions, boot)


def shard_wallet(wallet: Wallet) -> WalletDict:
    """Return the serialized wallet, with the owner seed sharded.

    The owner seed is replaced by the list of its hex-string shards:
    a one-element list if the seed is too short to be sharded.
    """

    wallet_dict = wallet.to_dict()
    wallet_dict["owner"]["seed"] = shard(wallet_dict["owner"]["seed"])
    return wallet_dict
