#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Segwit public key tweak.

Given a public key P and 32 tweak bytes, the tweak scalar is

    t = int(tagged_hash("SegwitTweak", bytes(P) || tweak))

where bytes(P) is the 33 bytes SEC1 compressed serialization of P.
The tweaked public key is

    P' = P + t*G

with G being the secp256k1 generator.
The holder of the private key q (P = q*G)
obtains the private key of P' as q' = (q + t) mod n.

The digest is used as scalar only if 0 < t < n:
for secp256k1 the digest overflows the curve order n
with probability about 2^-128,
but the failure is still reported (it is never reduced mod n)
as it would make the result unverifiable by other implementations.
"""

from __future__ import annotations

from typing import Union

from btclib.alias import Octets, Point
from btclib.ec.curve import mult, secp256k1
from btclib.ec.curve_group import jac_from_aff
from btclib.ec.sec_point import bytes_from_point, point_from_octets
from btclib.to_prv_key import PrvKey, int_from_prv_key
from btclib.utils import hex_string

from deposit_address.exceptions import (
    DepositAddrRuntimeError,
    InvalidPublicKeyError,
    NilKeyError,
    ScalarOverflowError,
)
from deposit_address.hashes import segwit_tweak_hasher
from deposit_address.utils import bytes_from_hex_or_octets, require_size

TWEAK_SIZE = 32
PUB_KEY_SIZE = 33

# SEC1 Octets (compressed or uncompressed) or an affine point tuple
PubKey = Union[bytes, str, Point]


def point_from_pub_key(pub_key: PubKey | None) -> Point:
    "Return the secp256k1 point of a public key."

    if pub_key is None:
        raise NilKeyError("nil public key")

    ec = secp256k1
    try:
        if isinstance(pub_key, tuple):
            ec.require_on_curve(pub_key)
            if pub_key[1] == 0:
                raise InvalidPublicKeyError("infinity point is not a public key")
            return pub_key
        return point_from_octets(bytes_from_hex_or_octets(pub_key), ec)
    except InvalidPublicKeyError:
        raise
    except (TypeError, ValueError) as e:
        raise InvalidPublicKeyError(f"invalid public key: {e}") from e


def scalar_from_digest(digest: bytes) -> int:
    "Return the digest as a secp256k1 scalar, failing if not in [1, n-1]."

    t = int.from_bytes(digest, byteorder="big", signed=False)
    if t >= secp256k1.n:
        err_msg = f"tweak digest overflows the curve order: '{hex_string(t)}'"
        raise ScalarOverflowError(err_msg)
    if t == 0:
        raise ScalarOverflowError("zero tweak digest")
    return t


def _tweak_scalar(P: Point, tweak: bytes) -> int:
    h = segwit_tweak_hasher()
    h.absorb(bytes_from_point(P, secp256k1, compressed=True))
    h.absorb(tweak)
    return scalar_from_digest(h.finalize())


def tweak_scalar(pub_key: PubKey | None, tweak: Octets) -> int:
    "Return the tweak scalar t for the public key and the 32 tweak bytes."

    tweak = require_size(tweak, TWEAK_SIZE, "tweak")
    P = point_from_pub_key(pub_key)
    return _tweak_scalar(P, tweak)


def tweak_with_scalar(P: Point, t: int) -> Point:
    "Return P + t*G."

    ec = secp256k1
    # t*G uses libsecp256k1, if available
    T = mult(t, ec.G, ec)
    # Jacobian addition, then a single affine normalization
    RJ = ec.add_jac(jac_from_aff(P), jac_from_aff(T))
    R = ec.aff_from_jac(RJ)
    if R[1] == 0:
        raise DepositAddrRuntimeError("tweaked public key is the infinity point")
    return R


def tweak_point(pub_key: PubKey | None, tweak: Octets) -> Point:
    "Return the tweaked public key as affine point."

    tweak = require_size(tweak, TWEAK_SIZE, "tweak")
    P = point_from_pub_key(pub_key)
    t = _tweak_scalar(P, tweak)
    return tweak_with_scalar(P, t)


def tweak_pub_key(pub_key: PubKey | None, tweak: Octets) -> bytes:
    """Return the tweaked public key P + t*G, SEC1 compressed.

    The input public key can be compressed or uncompressed,
    the tweak must be exactly 32 bytes.
    """

    return bytes_from_point(tweak_point(pub_key, tweak), secp256k1, compressed=True)


def tweak_prv_key(prv_key: PrvKey, tweak: Octets) -> int:
    "Return the private key (q + t) mod n of the tweaked public key."

    tweak = require_size(tweak, TWEAK_SIZE, "tweak")
    q = int_from_prv_key(prv_key, secp256k1)
    t = _tweak_scalar(mult(q, secp256k1.G, secp256k1), tweak)
    q_tweaked = (q + t) % secp256k1.n
    if q_tweaked == 0:
        raise DepositAddrRuntimeError("tweaked private key is zero")
    return q_tweaked
