#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""DepositRequest dataclass.

Dataclass encapsulating the inputs a deposit address is bound to:
chain type, chain id, bridge contract, wallet, and aux data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Type, Union

from btclib.alias import Octets

from deposit_address.address import DEFAULT_NETWORK
from deposit_address.aux_data import AUX_DATA_SIZE, AUX_DATA_V0, compute_aux_data
from deposit_address.chain import (
    ADDRESS_SIZES,
    CHAIN_ID_SIZE,
    ChainType,
    ChainTypeLike,
    chain_id_from_integer,
    compute_tweak,
)
from deposit_address.segwit_tweak import PubKey
from deposit_address.tweaker import Tweaker
from deposit_address.utils import bytes_from_hex_or_octets, require_size


@dataclass(frozen=True)
class DepositRequest:
    chain_type: ChainType
    chain_id: bytes
    bridge_address: bytes
    wallet_address: bytes
    aux_data: bytes

    def __init__(
        self,
        chain_type: ChainTypeLike,
        chain_id: Union[int, Octets],
        bridge_address: Octets,
        wallet_address: Octets,
        aux_data: Octets,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "chain_type", ChainType.from_tag(chain_type))
        # int chain ids are padded, Octets must already be 32 bytes
        if isinstance(chain_id, int):
            chain_id = chain_id_from_integer(chain_id)
        object.__setattr__(self, "chain_id", bytes_from_hex_or_octets(chain_id))
        object.__setattr__(
            self, "bridge_address", bytes_from_hex_or_octets(bridge_address)
        )
        object.__setattr__(
            self, "wallet_address", bytes_from_hex_or_octets(wallet_address)
        )
        object.__setattr__(self, "aux_data", bytes_from_hex_or_octets(aux_data))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        address_size = ADDRESS_SIZES[self.chain_type]
        require_size(self.chain_id, CHAIN_ID_SIZE, "chain_id")
        require_size(self.bridge_address, address_size, "bridge_address")
        require_size(self.wallet_address, address_size, "wallet_address")
        require_size(self.aux_data, AUX_DATA_SIZE, "aux_data")

    def to_dict(self, check_validity: bool = True) -> Dict[str, str]:
        "Return a dictionary with 0x-prefixed hex strings for all byte fields."

        if check_validity:
            self.assert_valid()

        return {
            "chain_type": self.chain_type.name.lower(),
            "chain_id": "0x" + self.chain_id.hex(),
            "bridge_address": "0x" + self.bridge_address.hex(),
            "wallet_address": "0x" + self.wallet_address.hex(),
            "aux_data": "0x" + self.aux_data.hex(),
        }

    @classmethod
    def from_dict(
        cls: Type[DepositRequest],
        dict_: Mapping[str, Any],
        check_validity: bool = True,
    ) -> DepositRequest:
        """Return a DepositRequest from a dictionary.

        Instead of aux_data, the dictionary can provide
        nonce, referrer_id, and optionally version:
        aux_data is then computed from them.
        """

        if "aux_data" in dict_:
            aux_data = dict_["aux_data"]
        else:
            aux_data = compute_aux_data(
                dict_["nonce"],
                dict_["referrer_id"],
                dict_.get("version", AUX_DATA_V0),
            )
        return cls(
            dict_["chain_type"],
            dict_["chain_id"],
            dict_["bridge_address"],
            dict_["wallet_address"],
            aux_data,
            check_validity,
        )

    def tweak(self) -> bytes:
        "Return the tweak bytes of the request."
        return compute_tweak(
            self.chain_type,
            self.chain_id,
            self.bridge_address,
            self.wallet_address,
            self.aux_data,
        )

    def pub_key(self, master_key: Union[PubKey, Tweaker]) -> bytes:
        "Return the SEC1 compressed deposit public key."
        if not isinstance(master_key, Tweaker):
            master_key = Tweaker(master_key)
        return master_key.derive_pub_key(self.tweak())

    def address(
        self, master_key: Union[PubKey, Tweaker], network: str = DEFAULT_NETWORK
    ) -> str:
        "Return the p2wpkh deposit address."
        if not isinstance(master_key, Tweaker):
            master_key = Tweaker(master_key)
        return master_key.derive_address(self.tweak(), network)
