#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""BIP340-style tagged hashes.

For a given tag, the tagged hash of data is defined as

    sha256(sha256(tag) || sha256(tag) || data)

where || is concatenation.
A TaggedHash is a sha256 accumulator already fed with the tag prefix:
data is then absorbed in call order and the digest is returned
by finalize, which consumes the accumulator.
"""

from __future__ import annotations

import functools
import hashlib

from btclib.alias import HashF, Octets

from deposit_address.exceptions import DepositAddrRuntimeError
from deposit_address.utils import bytes_from_hex_or_octets

DEPOSIT_AUX_TAG = "LombardDepositAux"
DEPOSIT_ADDR_TAG = "LombardDepositAddr"
SEGWIT_TWEAK_TAG = "SegwitTweak"


@functools.lru_cache()
def tag_digest(tag: str, hf: HashF = hashlib.sha256) -> bytes:
    "Return the digest of the ASCII tag."
    h = hf()
    h.update(tag.encode("ascii"))
    return bytes(h.digest())


class TaggedHash:
    """Hash accumulator initialized with H(tag) || H(tag).

    A TaggedHash must not be reused after finalize:
    always use a fresh instance for each derivation.
    """

    def __init__(self, tag: str, hf: HashF = hashlib.sha256) -> None:
        self.tag = tag
        prefix = tag_digest(tag, hf)
        self._h = hf()
        self._h.update(prefix + prefix)
        self._finalized = False

    def __repr__(self) -> str:
        return f"TaggedHash({self.tag!r})"

    def _require_not_finalized(self) -> None:
        if self._finalized:
            raise DepositAddrRuntimeError(f"finalized {self!r} cannot be reused")

    def absorb(self, data: Octets) -> TaggedHash:
        "Append data to the accumulator; return self for chaining."
        self._require_not_finalized()
        self._h.update(bytes_from_hex_or_octets(data))
        return self

    def finalize(self) -> bytes:
        "Return the digest, consuming the accumulator."
        self._require_not_finalized()
        self._finalized = True
        digest = bytes(self._h.digest())
        return digest


def tagged_hasher(tag: str, hf: HashF = hashlib.sha256) -> TaggedHash:
    "Return a fresh TaggedHash for the tag."
    return TaggedHash(tag, hf)


def tagged_hash(tag: str, *chunks: Octets) -> bytes:
    "Return the sha256 tagged hash of the concatenated chunks."
    h = tagged_hasher(tag)
    for chunk in chunks:
        h.absorb(chunk)
    return h.finalize()


def aux_data_hasher() -> TaggedHash:
    "Return a TaggedHash for the deposit aux data."
    return tagged_hasher(DEPOSIT_AUX_TAG)


def deposit_hasher() -> TaggedHash:
    "Return a TaggedHash for the deposit address tweak bytes."
    return tagged_hasher(DEPOSIT_ADDR_TAG)


def segwit_tweak_hasher() -> TaggedHash:
    "Return a TaggedHash for the segwit public key tweak."
    return tagged_hasher(SEGWIT_TWEAK_TAG)
