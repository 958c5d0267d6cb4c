# -*- coding: utf-8 -*-
# SPDX-FileCopyrightText: 2024 Ledger SAS
# SPDX-License-Identifier: LicenseRef-LEDGER
"""
This module provides the Ethereum signing Client application.
It contains the transaction data sanitization.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Tuple

import eth_utils

from eth_sign_client.app_def import DEFAULT_BINDING, FirmwareBinding
from eth_sign_client.app_def import EthSignError, SanitizationFailed
from eth_sign_client.keypath import coin_from_chain_id, path_from_string


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignRequest:
    """Transaction fields in the format expected by the device signing call"""
    coin: Any
    path: Tuple[int, ...]
    nonce: int
    gasPrice: str
    gasLimit: int
    recipient: bytes
    value: str
    data: bytes
    chainId: int

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "path": list(self.path)}


def parse_quantity(quantity: Any) -> int:
    """Parse a transaction quantity

    Args:
        quantity: Hex string ("0x" standing for zero), non-negative int
            or big endian buffer

    Returns:
        The quantity as an int
    """

    if isinstance(quantity, bool):
        raise TypeError(f"Invalid quantity: {quantity!r}")
    if isinstance(quantity, int):
        if quantity < 0:
            raise ValueError(f"Negative quantity: {quantity}")
        return quantity
    if isinstance(quantity, (bytes, bytearray, memoryview)):
        return eth_utils.to_int(primitive=bytes(quantity))
    if not isinstance(quantity, str):
        raise TypeError(f"Invalid quantity: {quantity!r}")
    if not eth_utils.is_hexstr(quantity):
        raise ValueError(f"Invalid hex quantity: {quantity!r}")
    if not eth_utils.remove_0x_prefix(quantity):
        return 0
    return eth_utils.to_int(hexstr=quantity)


def to_bytes(buffer: Any) -> bytes:
    """Copy a byte-like value (buffer, list of ints or 0x-prefixed hex) into bytes"""

    if isinstance(buffer, str):
        if not eth_utils.is_0x_prefixed(buffer) or not eth_utils.is_hexstr(buffer):
            raise ValueError(f"Invalid 0x-prefixed hex string: {buffer!r}")
        if len(eth_utils.remove_0x_prefix(buffer)) % 2:
            raise ValueError(f"Hex string of odd length: {buffer!r}")
        return eth_utils.to_bytes(hexstr=buffer)
    if buffer is None or isinstance(buffer, (int, dict)):
        raise TypeError(f"Invalid byte buffer: {buffer!r}")
    return bytes(buffer)


def sanitize_eth_transaction_data(sigData: Mapping[str, Any],
                                  binding: FirmwareBinding = DEFAULT_BINDING) -> SignRequest:
    """Sanitize transaction data, as provided by ethereumjs Transaction

    Args:
        sigData (Mapping): Signature data, in the following format:
            {
                "path": "m/44'/60'/0'/0/0",
                "recipient": tx.to,     # bytes (20B)
                "data": tx.data,        # bytes
                "tx": {
                    "value": hex,       # optional
                    "data": hex,
                    "chainId": int,
                    "nonce": hex,       # optional
                    "gasLimit": hex,
                    "gasPrice": hex,
                },
            }
        binding (FirmwareBinding): Provider of the coins and the hardened offset

    Returns:
        The signing request expected by the device
    """

    try:
        tx = sigData["tx"]
        coin = coin_from_chain_id(tx["chainId"], binding)
        path = tuple(path_from_string(sigData["path"], binding))
        nonce = 0
        if tx.get("nonce"):
            nonce = parse_quantity(tx["nonce"])
        gasPrice = str(parse_quantity(tx["gasPrice"]))
        gasLimit = parse_quantity(tx["gasLimit"])
        recipient = to_bytes(sigData["recipient"])
        value = "0"
        if tx.get("value"):
            value = str(parse_quantity(tx["value"]))
        data = to_bytes(sigData["data"])
        request = SignRequest(coin=coin,
                              path=path,
                              nonce=nonce,
                              gasPrice=gasPrice,
                              gasLimit=gasLimit,
                              recipient=recipient,
                              value=value,
                              data=data,
                              chainId=tx["chainId"])
    except (EthSignError, AttributeError, KeyError, TypeError, ValueError) as err:
        raise SanitizationFailed(err) from err

    logger.debug("Sanitized transaction for chain id %d, nonce %d", request.chainId, request.nonce)
    return request
