#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Chain-specific tweak bytes.

The tweak bytes bind a deposit address to its destination:
chain type, chain id, bridge contract, and wallet,
together with the aux data commitment.
Each chain type has its own fixed serialization,
hashed with the "LombardDepositAddr" tagged hash.

For EVM chains the tweak bytes are

    tagged_hash("LombardDepositAddr",
                aux_data || 0x00 || chain_id || bridge || wallet)

with aux_data and chain_id 32 bytes each (chain_id big-endian),
0x00 being the EVM chain type tag,
and bridge and wallet being 20 bytes EVM addresses.

To support a new chain type add a ChainType member,
whose value is the new 1-byte tag,
and register its tweak function in TWEAK_FUNCTIONS.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

from btclib.alias import Octets

from deposit_address.aux_data import AUX_DATA_SIZE
from deposit_address.exceptions import (
    DepositAddrValueError,
    InvalidLengthError,
    UnsupportedChainTypeError,
)
from deposit_address.hashes import deposit_hasher
from deposit_address.utils import bytes_from_hex_or_octets, require_size

CHAIN_ID_SIZE = 32
EVM_ADDRESS_SIZE = 20


class ChainType(Enum):
    "Destination chain types: the value is the 1-byte chain type tag."

    EVM = 0

    @property
    def tag(self) -> bytes:
        return self.value.to_bytes(1, byteorder="big", signed=False)

    @classmethod
    def from_tag(cls, chain_type: ChainTypeLike) -> ChainType:
        """Return the ChainType from a member, its name, or its tag.

        Names are case insensitive, e.g. "evm" or "EVM".
        """

        if isinstance(chain_type, cls):
            return chain_type
        try:
            if isinstance(chain_type, str):
                return cls[chain_type.strip().upper()]
            if isinstance(chain_type, int) and not isinstance(chain_type, bool):
                return cls(chain_type)
        except (KeyError, ValueError) as e:
            err_msg = f"unsupported chain type: {chain_type!r}"
            raise UnsupportedChainTypeError(err_msg) from e
        raise UnsupportedChainTypeError(f"unsupported chain type: {chain_type!r}")


ChainTypeLike = Union[ChainType, str, int]


def chain_id_from_integer(chain_id: Union[int, Octets]) -> bytes:
    """Return the 32 bytes big-endian chain id.

    Native chain ids narrower than 32 bytes (e.g. the EVM uint64 ones)
    are left zero-padded; wider ones are rejected, never truncated.
    Octets are taken as big-endian serialization.
    """

    if isinstance(chain_id, bool):
        raise DepositAddrValueError(f"invalid chain id: {chain_id}")
    if isinstance(chain_id, int):
        if chain_id < 0:
            raise DepositAddrValueError(f"negative chain id: {chain_id}")
        if chain_id.bit_length() > CHAIN_ID_SIZE * 8:
            err_msg = f"invalid chain_id: {hex(chain_id)}"
            err_msg += f" is wider than {CHAIN_ID_SIZE} bytes"
            raise InvalidLengthError(err_msg)
        return chain_id.to_bytes(CHAIN_ID_SIZE, byteorder="big", signed=False)

    chain_id = bytes_from_hex_or_octets(chain_id)
    if len(chain_id) > CHAIN_ID_SIZE:
        err_msg = f"invalid chain_id size: {len(chain_id)} bytes,"
        err_msg += f" max is {CHAIN_ID_SIZE}"
        raise InvalidLengthError(err_msg)
    return chain_id.rjust(CHAIN_ID_SIZE, b"\x00")


def evm_deposit_tweak(
    bridge_address: Octets, wallet_address: Octets, chain_id: Octets, aux_data: Octets
) -> bytes:
    "Return the tweak bytes for an EVM deposit address."

    bridge = require_size(bridge_address, EVM_ADDRESS_SIZE, "bridge_address")
    wallet = require_size(wallet_address, EVM_ADDRESS_SIZE, "wallet_address")
    aux_data = require_size(aux_data, AUX_DATA_SIZE, "aux_data")
    # no padding here: see chain_id_from_integer
    chain_id = require_size(chain_id, CHAIN_ID_SIZE, "chain_id")

    h = deposit_hasher()
    h.absorb(aux_data)
    h.absorb(ChainType.EVM.tag)
    h.absorb(chain_id)
    h.absorb(bridge)
    h.absorb(wallet)
    return h.finalize()


TweakF = Callable[[Octets, Octets, Octets, Octets], bytes]

TWEAK_FUNCTIONS: Dict[ChainType, TweakF] = {
    ChainType.EVM: evm_deposit_tweak,
}

ADDRESS_SIZES: Dict[ChainType, int] = {
    ChainType.EVM: EVM_ADDRESS_SIZE,
}


def compute_tweak(
    chain_type: ChainTypeLike,
    chain_id: Octets,
    bridge_address: Octets,
    wallet_address: Octets,
    aux_data: Octets,
) -> bytes:
    "Return the tweak bytes, dispatching on the chain type."

    chain_type = ChainType.from_tag(chain_type)
    try:
        tweak_f = TWEAK_FUNCTIONS[chain_type]
    except KeyError as e:
        err_msg = f"no tweak function for chain type: {chain_type.name}"
        raise UnsupportedChainTypeError(err_msg) from e
    return tweak_f(bridge_address, wallet_address, chain_id, aux_data)
