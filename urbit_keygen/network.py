#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Urbit network keys.

Network keys are two Ed25519 key pairs,
one for encryption (crypt) and one for authentication (auth),
derived from a seed according to ++pit:nu:crub:crypto:

- the seed, salted with the optional password, is byte-reversed
  and hashed with SHA-512, as NaCl crypto_hash does;
- the first 32 bytes of the hash are the auth seed,
  the last 32 bytes are the crypt seed;
- each seed is expanded into an Ed25519 key pair;
- private seeds and public keys are byte-reversed again.

Urbit atoms are little-endian, hence both reversals:
dropping either one yields keys of the right length and format,
but not the keys Urbit derives.
"""

from dataclasses import dataclass, field
from typing import Optional

from dataclasses_json import DataClassJsonMixin
from nacl.encoding import RawEncoder
from nacl.hash import sha512 as nacl_sha512
from nacl.signing import SigningKey

from urbit_keygen.alias import String
from urbit_keygen.derivation import (
    ChildSeedType,
    NodeMeta,
    child_seed_from_seed,
    node_meta,
)
from urbit_keygen.utils import HEX, bytes_from_string


@dataclass(frozen=True)
class Keypair(DataClassJsonMixin):
    public: bytes = field(metadata=HEX)
    private: bytes = field(metadata=HEX)


@dataclass(frozen=True)
class NetworkKeys(DataClassJsonMixin):
    crypt: Keypair
    auth: Keypair


@dataclass(frozen=True)
class NetworkNode(DataClassJsonMixin):
    meta: NodeMeta
    seed: bytes = field(metadata=HEX)
    keys: NetworkKeys


def reverse_bytes(data: bytes) -> bytes:
    "Return the byte sequence in reversed order."
    return bytes(data)[::-1]


def network_hash(seed: String, password: Optional[String] = "") -> bytes:
    "Return the 64-byte SHA512 of the byte-reversed seed+password."

    data = bytes_from_string(seed) + bytes_from_string(password)
    return nacl_sha512(reverse_bytes(data), encoder=RawEncoder)


def _keypair(half: bytes) -> Keypair:
    verify_key = SigningKey(half).verify_key
    return Keypair(
        public=reverse_bytes(verify_key.encode()),
        private=reverse_bytes(half),
    )


def urbit_keys_from_seed(seed: String, password: Optional[String] = "") -> NetworkKeys:
    "Return the Urbit network keys derived from the seed."

    h = network_hash(seed, password)
    return NetworkKeys(crypt=_keypair(h[32:]), auth=_keypair(h[:32]))


def network_node_from_seed(
    seed: String,
    ship: int,
    revision: Optional[int] = 0,
    password: Optional[String] = "",
) -> NetworkNode:
    "Return the network node of the ship, derived from the (management) seed."

    child_seed = child_seed_from_seed(
        seed, ChildSeedType.NETWORK, revision, ship, password
    )
    return NetworkNode(
        meta=node_meta(ChildSeedType.NETWORK, revision, ship),
        seed=child_seed,
        keys=urbit_keys_from_seed(child_seed, password),
    )
