#!/usr/bin/env python3

# Copyright (C) The deposit-address developers
#
# This file is part of deposit-address. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of deposit-address including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"__init__ module for the deposit_address package."

import logging

name = "deposit_address"
__version__ = "2024.6.1"
__author__ = "The deposit-address developers"
__author_email__ = "devs@lombard.finance"
__copyright__ = "Copyright (C) 2024 The deposit-address developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
