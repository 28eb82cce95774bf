#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `deposit_address.utils` module."

import pytest

from deposit_address.exceptions import InvalidLengthError
from deposit_address.utils import (
    bytes_from_hex_or_octets,
    require_max_size,
    require_size,
)


def test_bytes_from_hex_or_octets() -> None:
    data = bytes.fromhex("5fbdb2315678afecb367f032d93f642f64180aa3")
    for octets in (
        data,
        data.hex(),
        "0x" + data.hex(),
        "0X" + data.hex().upper(),
        "  0x" + data.hex() + " ",
        bytearray(data),
    ):
        result = bytes_from_hex_or_octets(octets)  # type: ignore[arg-type]
        assert result == data
        assert isinstance(result, bytes)

    assert bytes_from_hex_or_octets("") == b""
    assert bytes_from_hex_or_octets("0x") == b""

    with pytest.raises(ValueError):
        bytes_from_hex_or_octets("0xzz")


def test_require_size() -> None:
    assert require_size("0x" + "00" * 20, 20, "address") == b"\x00" * 20

    err_msg = "invalid address size: 19 bytes instead of 20"
    with pytest.raises(InvalidLengthError, match=err_msg):
        require_size(b"\x00" * 19, 20, "address")


def test_require_max_size() -> None:
    for size in (0, 1, 256):
        assert require_max_size(b"\x01" * size, 256, "referrer_id") == b"\x01" * size

    err_msg = "invalid referrer_id size: 257 bytes, max is 256"
    with pytest.raises(InvalidLengthError, match=err_msg):
        require_max_size(b"\x01" * 257, 256, "referrer_id")
