#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Shared known-answer test vectors.

Only the expected outputs are stored:
inputs are recomputed from a seed
with a chain of sha256 hashes.
"""

import json
from hashlib import sha256
from pathlib import Path
from typing import Any, List, NamedTuple

import pytest
from btclib.ec.curve import mult, secp256k1
from btclib.ec.sec_point import bytes_from_point

from deposit_address.chain import chain_id_from_integer

DATA_DIR = Path(__file__).parent / "_data"


def load_json(filename: str) -> Any:
    with open(DATA_DIR / filename, "r", encoding="ascii") as file_:
        return json.load(file_)


def pub_key_from_seed(seed: bytes) -> bytes:
    q = int.from_bytes(seed, byteorder="big", signed=False) % secp256k1.n
    return bytes_from_point(mult(q, secp256k1.G, secp256k1))


class EvmDepositVector(NamedTuple):
    bridge_address: bytes
    wallet_address: bytes
    chain_id: bytes
    aux_data: bytes
    tweak: bytes
    pub_key: bytes
    address: str


class EvmDepositVectors(NamedTuple):
    master_key: bytes
    network: str
    vectors: List[EvmDepositVector]


@pytest.fixture(scope="session")
def evm_deposit_vectors() -> EvmDepositVectors:
    data = load_json("evm_deposit.json")

    hash_val = sha256(data["seed"].encode("ascii")).digest()
    master_key = pub_key_from_seed(hash_val)

    vectors = []
    for known_answer in data["vectors"]:
        v1 = sha256(hash_val).digest()
        v2 = sha256(v1).digest()
        v3 = sha256(v2).digest()
        v4 = sha256(v3).digest()
        hash_val = v4

        # the first 8 bytes of v3 are used as uint64 chain id
        chain_id = chain_id_from_integer(int.from_bytes(v3[:8], byteorder="big"))
        vectors.append(
            EvmDepositVector(
                v1[:20],
                v2[:20],
                chain_id,
                v4,
                bytes.fromhex(known_answer["tweak"]),
                bytes.fromhex(known_answer["pub_key"]),
                known_answer["address"],
            )
        )

    return EvmDepositVectors(master_key, data["network"], vectors)
