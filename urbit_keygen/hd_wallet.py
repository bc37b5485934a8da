#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 master node from an arbitrary-length seed.

BIP32 root derivation
(https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki)
accepts seeds of 128 to 512 bits only.
Seeds here can be short passphrases or long tickets,
so the seed (salted with the optional password)
is first hashed with SHA-512:
the resulting 512 bits are always in range.

No further path derivation is performed:
the master key pair and chain code are returned as they are.
"""

from dataclasses import dataclass, field
from typing import Optional

from btclib.bip32.bip32 import BIP32KeyData, rootxprv_from_seed, xpub_from_xprv
from dataclasses_json import DataClassJsonMixin

from urbit_keygen.alias import String
from urbit_keygen.hashes import sha512
from urbit_keygen.utils import HEX


@dataclass(frozen=True)
class WalletKeys(DataClassJsonMixin):
    # 33 bytes, compressed secp256k1 point
    public: bytes = field(metadata=HEX)
    # 32 bytes
    private: bytes = field(metadata=HEX)
    # 32 bytes
    chain: bytes = field(metadata=HEX)


def wallet_from_seed(seed: String, password: Optional[String] = "") -> WalletKeys:
    """Return the BIP32 master keys derived from SHA512(seed+password).

    Errors from the BIP32 primitive (e.g. a private key not in 1..n-1)
    are propagated as BTClibValueError.
    """

    seed_hash = sha512(seed, password)
    xprv = BIP32KeyData.b58decode(rootxprv_from_seed(seed_hash))
    xpub = BIP32KeyData.b58decode(xpub_from_xprv(xprv))
    return WalletKeys(
        public=xpub.key,
        # strip the 0x00 private key prefix
        private=xprv.key[1:],
        chain=xprv.chain_code,
    )
