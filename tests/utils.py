# -*- coding: utf-8 -*-
# SPDX-FileCopyrightText: 2024 Ledger SAS
# SPDX-License-Identifier: LicenseRef-LEDGER
"""
This module provides tests utility functions
"""
from typing import Union

from input_files.keypath import KeypathTestCase, CoinFromPathTestCase
from input_files.keypath import ChainIdTestCase, RejectTestCase
from input_files.signTx import SignTxTestCase, SignTxRejectTestCase


def idTestFunc(testCase: Union[KeypathTestCase, CoinFromPathTestCase, ChainIdTestCase,
                               RejectTestCase, SignTxTestCase, SignTxRejectTestCase]) -> str:
    """Retrieve the test case name for friendly display

    Args:
        testCase (xxxTestCase): Targeted test case

    Returns:
        Test case name
    """
    return testCase.name
