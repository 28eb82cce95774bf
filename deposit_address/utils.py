#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Utility functions.

Byte-valued inputs follow the btclib Octets convention:
bytes or hex-string.
Here hex-strings may also carry the '0x' prefix customary for EVM data,
e.g. "0x5FbDB2315678afecb367f032d93F642f64180aa3".
"""

from __future__ import annotations

from btclib.alias import Octets
from btclib.utils import bytes_from_octets

from deposit_address.exceptions import InvalidLengthError


def bytes_from_hex_or_octets(octets: Octets) -> bytes:
    """Return bytes from bytes or (possibly 0x-prefixed) hex-string.

    Leading/trailing spaces are stripped.
    """

    if isinstance(octets, str):
        octets = octets.strip()
        if octets[:2] in ("0x", "0X"):
            octets = octets[2:]
    return bytes(bytes_from_octets(octets))


def require_size(octets: Octets, size: int, name: str) -> bytes:
    "Return bytes from Octets, ensuring the required size."

    data = bytes_from_hex_or_octets(octets)
    if len(data) != size:
        err_msg = f"invalid {name} size: {len(data)} bytes instead of {size}"
        raise InvalidLengthError(err_msg)
    return data


def require_max_size(octets: Octets, max_size: int, name: str) -> bytes:
    "Return bytes from Octets, ensuring they are not longer than max_size."

    data = bytes_from_hex_or_octets(octets)
    if len(data) > max_size:
        err_msg = f"invalid {name} size: {len(data)} bytes, max is {max_size}"
        raise InvalidLengthError(err_msg)
    return data
