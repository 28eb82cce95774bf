#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Deposit address derivation from a master public key.

A Tweaker is bound to a single master public key,
parsed once at construction and never modified afterwards:
derivations are pure functions of the master key and the tweak bytes,
so a Tweaker can be shared among threads.

derive_address_for_chain composes, for stateless callers,
tweak bytes calculation, public key tweak, and address encoding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from btclib.alias import Octets, Point
from btclib.ec.curve import secp256k1
from btclib.ec.sec_point import bytes_from_point

from deposit_address.address import DEFAULT_NETWORK, segwit_address_from_pub_key
from deposit_address.chain import ChainType, ChainTypeLike, compute_tweak
from deposit_address.segwit_tweak import PubKey, point_from_pub_key, tweak_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tweaker:
    "Deposit key derivation bound to one master public key."

    point: Point

    def __init__(self, pub_key: PubKey | None) -> None:
        object.__setattr__(self, "point", point_from_pub_key(pub_key))

    @property
    def pub_key(self) -> bytes:
        "Return the SEC1 compressed master public key."
        return bytes_from_point(self.point, secp256k1, compressed=True)

    def derive_pub_key(self, tweak: Octets) -> bytes:
        "Return the SEC1 compressed public key derived from the tweak bytes."

        derived = bytes_from_point(tweak_point(self.point, tweak), secp256k1)
        logger.debug("derived %s from %s", derived.hex(), self.pub_key.hex())
        return derived

    def derive_address(self, tweak: Octets, network: str = DEFAULT_NETWORK) -> str:
        "Return the p2wpkh address derived from the tweak bytes."

        return self.derive_segwit(tweak, network)[0]

    def derive_segwit(
        self, tweak: Octets, network: str = DEFAULT_NETWORK
    ) -> Tuple[str, bytes]:
        "Return the derived p2wpkh address and its public key."

        derived = self.derive_pub_key(tweak)
        address = segwit_address_from_pub_key(derived, network)
        logger.debug("derived %s address %s", network, address)
        return address, derived

    def derive_for_chain(
        self,
        chain_type: ChainTypeLike,
        chain_id: Octets,
        bridge_address: Octets,
        wallet_address: Octets,
        aux_data: Octets,
        network: str = DEFAULT_NETWORK,
    ) -> str:
        "Return the p2wpkh deposit address for the destination."

        tweak = compute_tweak(
            chain_type, chain_id, bridge_address, wallet_address, aux_data
        )
        return self.derive_address(tweak, network)


def derive_address_for_chain(
    chain_type: ChainTypeLike,
    chain_id: Octets,
    bridge_address: Octets,
    wallet_address: Octets,
    aux_data: Octets,
    master_key: PubKey | None,
    network: str = DEFAULT_NETWORK,
) -> str:
    "Return the p2wpkh deposit address of the master key for the destination."

    tweaker = Tweaker(master_key)
    return tweaker.derive_for_chain(
        chain_type, chain_id, bridge_address, wallet_address, aux_data, network
    )


def evm_deposit_pub_key(
    pub_key: PubKey | None,
    bridge_address: Octets,
    wallet_address: Octets,
    chain_id: Octets,
    aux_data: Octets,
) -> bytes:
    "Return the SEC1 compressed public key for an EVM deposit."

    tweak = compute_tweak(
        ChainType.EVM, chain_id, bridge_address, wallet_address, aux_data
    )
    return Tweaker(pub_key).derive_pub_key(tweak)


def evm_deposit_address(
    pub_key: PubKey | None,
    bridge_address: Octets,
    wallet_address: Octets,
    chain_id: Octets,
    aux_data: Octets,
    network: str = DEFAULT_NETWORK,
) -> str:
    "Return the p2wpkh address for an EVM deposit."

    derived = evm_deposit_pub_key(
        pub_key, bridge_address, wallet_address, chain_id, aux_data
    )
    return segwit_address_from_pub_key(derived, network)
