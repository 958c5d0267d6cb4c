# -*- coding: utf-8 -*-
# SPDX-FileCopyrightText: 2024 Ledger SAS
# SPDX-License-Identifier: LicenseRef-LEDGER
"""
This module provides tests for Sign TX data sanitization
"""

import dataclasses

import pytest

from eth_sign_client.app_def import ETHCoin, EthSignError, SanitizationFailed
from eth_sign_client.sign_request import sanitize_eth_transaction_data

from input_files.signTx import SignTxTestCase, SignTxRejectTestCase
from input_files.signTx import signTxTestCases, rejectSignTxTestCases, sig_data, RECIPIENT_HEX

from utils import idTestFunc


@pytest.mark.parametrize(
    "testCase",
    signTxTestCases,
    ids=idTestFunc
)
def test_sign_tx_sanitize(testCase: SignTxTestCase) -> None:
    """Check Sign TX data sanitization"""

    request = sanitize_eth_transaction_data(testCase.sigData)

    # Check the response
    assert request == testCase.expected
    assert isinstance(request.recipient, bytes)
    assert isinstance(request.data, bytes)


@pytest.mark.parametrize(
    "testCase",
    rejectSignTxTestCases,
    ids=idTestFunc
)
def test_sign_tx_sanitize_reject(testCase: SignTxRejectTestCase) -> None:
    """Check Reject Sign TX data sanitization"""

    with pytest.raises(SanitizationFailed) as err:
        sanitize_eth_transaction_data(testCase.sigData)

    # Check the wrapped error
    assert isinstance(err.value, EthSignError)
    assert isinstance(err.value.cause, testCase.causeType)
    assert err.value.__cause__ is err.value.cause


def test_sign_tx_request_fields() -> None:
    """Check the signing request record handed to the device"""

    sigData = sig_data(data=[])
    request = sanitize_eth_transaction_data(sigData)

    assert request.to_dict() == {
        "coin": ETHCoin.ETH,
        "path": [2147483692, 2147483708, 2147483648, 0],
        "nonce": 0,
        "gasPrice": "1000000000",
        "gasLimit": 21000,
        "recipient": bytes.fromhex(RECIPIENT_HEX),
        "value": "1",
        "data": b"",
        "chainId": 1,
    }
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.nonce = 1


def test_sign_tx_buffers_copied() -> None:
    """Check the byte buffers are copied from the input"""

    recipient = bytearray.fromhex(RECIPIENT_HEX)
    data = bytearray(b"\x01\x02")
    request = sanitize_eth_transaction_data(sig_data(recipient=recipient, data=data))
    recipient[0] = 0
    data[0] = 0

    assert request.recipient == bytes.fromhex(RECIPIENT_HEX)
    assert request.data == b"\x01\x02"


def test_sign_tx_input_untouched() -> None:
    """Check the signature data is not modified"""

    sigData = sig_data(tx={"nonce": "0x1"})
    expected = sig_data(tx={"nonce": "0x1"})
    sanitize_eth_transaction_data(sigData)

    assert sigData == expected


def test_sign_tx_request_dict_keys() -> None:
    """Check the signing request record lists every field"""

    request = sanitize_eth_transaction_data(sig_data())

    assert list(request.to_dict()) == [field.name for field in dataclasses.fields(request)]
    assert isinstance(request.to_dict()["path"], list)
