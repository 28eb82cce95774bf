#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by deposit_address from those raised by other codebase.

They derive from the btclib exceptions, hence from the regular
ValueError, TypeError, and RuntimeError:
users are usually better off just dealing with those.
"""

from btclib.exceptions import BTClibRuntimeError, BTClibTypeError, BTClibValueError


class DepositAddrValueError(BTClibValueError):
    pass


class DepositAddrTypeError(BTClibTypeError):
    pass


class DepositAddrRuntimeError(BTClibRuntimeError):
    pass


class InvalidLengthError(DepositAddrValueError):
    "A fixed-width field has the wrong size."


class UnsupportedChainTypeError(DepositAddrValueError):
    "The chain type is not among the known variants."


class NilKeyError(DepositAddrTypeError):
    "No public key has been provided."


class InvalidPublicKeyError(DepositAddrValueError):
    "The public key is not a valid SEC1 curve point."


class ScalarOverflowError(DepositAddrRuntimeError):
    """The tweak digest is not a valid scalar.

    It happens when the digest is not lower than the curve order,
    or it is zero: with probability about 2^-128.
    """
