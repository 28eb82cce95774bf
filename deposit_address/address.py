#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Segwit (p2wpkh) deposit addresses, bech32 encoded by btclib."

from __future__ import annotations

from btclib import b32
from btclib.ec.curve import secp256k1
from btclib.ec.sec_point import bytes_from_point
from btclib.hashes import hash160
from btclib.network import NETWORKS

from deposit_address.exceptions import DepositAddrValueError
from deposit_address.segwit_tweak import PubKey, point_from_pub_key

DEFAULT_NETWORK = "mainnet"


def require_network(network: str) -> str:
    "Return the network name, if known to btclib."

    if network not in NETWORKS:
        err_msg = f"unknown network: {network!r}, "
        err_msg += f"known networks are {', '.join(sorted(NETWORKS))}"
        raise DepositAddrValueError(err_msg)
    return network


def segwit_address_from_pub_key(
    pub_key: PubKey | None, network: str = DEFAULT_NETWORK
) -> str:
    "Return the p2wpkh bech32 address of the compressed public key."

    network = require_network(network)
    P = point_from_pub_key(pub_key)
    pub_key = bytes_from_point(P, secp256k1, compressed=True)
    return b32.address_from_witness(0, hash160(pub_key), network)
