#!/usr/bin/env python3

# Copyright (C) 2018-2022 The urbit_keygen developers
#
# This file is part of urbit_keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urbit_keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the urbit_keygen package."

import logging

name = "urbit_keygen"
__version__ = "2022.6.1"
__author__ = "The urbit_keygen developers"
__author_email__ = "devs@urbit-keygen.org"
__copyright__ = "Copyright (C) 2018-2022 The urbit_keygen developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
