#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Deposit aux data.

The aux data is a 32 bytes commitment to chain-agnostic information
folded into the deposit address derivation.
Version 0 is defined as

    tagged_hash("LombardDepositAux", 0x00 || nonce || referrer_id)

with nonce serialized as 4 big-endian bytes
and referrer_id an arbitrary byte sequence of at most 256 bytes.
"""

from __future__ import annotations

from btclib.alias import Octets

from deposit_address.exceptions import DepositAddrValueError
from deposit_address.hashes import aux_data_hasher
from deposit_address.utils import require_max_size

AUX_DATA_SIZE = 32
NONCE_SIZE = 4
MAX_REFERRER_ID_SIZE = 256
AUX_DATA_V0 = 0

VERSIONS = (AUX_DATA_V0,)


def compute_aux_data(
    nonce: int, referrer_id: Octets, version: int = AUX_DATA_V0
) -> bytes:
    "Return the 32 bytes aux data for the given nonce and referrer id."

    if version not in VERSIONS:
        raise DepositAddrValueError(f"unknown aux data version: {version}")
    if isinstance(nonce, bool) or not 0 <= nonce <= 0xFFFFFFFF:
        raise DepositAddrValueError(f"invalid nonce: {nonce}")
    referrer_id = require_max_size(referrer_id, MAX_REFERRER_ID_SIZE, "referrer_id")

    h = aux_data_hasher()
    h.absorb(version.to_bytes(1, byteorder="big", signed=False))
    h.absorb(nonce.to_bytes(NONCE_SIZE, byteorder="big", signed=False))
    h.absorb(referrer_id)
    return h.finalize()


def compute_aux_data_v0(nonce: int, referrer_id: Octets) -> bytes:
    "Return the version 0 aux data."
    return compute_aux_data(nonce, referrer_id, AUX_DATA_V0)
