#
# Copyright (c) 2023 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os.path
import sys
import pytest


here = os.path.dirname(__file__)
sys.path.insert(0, here)


@pytest.fixture(scope="session")
def root_dir():
    return here
