# -*- coding: utf-8 -*-
# SPDX-FileCopyrightText: 2024 Ledger SAS
# SPDX-License-Identifier: LicenseRef-LEDGER
"""
Ethereum signing Client application.
Prepares ethereumjs transactions for the hardware wallet signing call.
"""
from eth_sign_client.app_def import HARDENED, ETHCoin, FirmwareBinding, DEFAULT_BINDING
from eth_sign_client.app_def import EthSignError, InvalidKeypath, UnsupportedNetwork, SanitizationFailed
from eth_sign_client.keypath import path_from_string, path_to_string
from eth_sign_client.keypath import coin_from_chain_id, coin_from_path
from eth_sign_client.sign_request import SignRequest, sanitize_eth_transaction_data
from eth_sign_client.command_sender import CommandSender

__all__ = [
    "CommandSender",
    "DEFAULT_BINDING",
    "ETHCoin",
    "EthSignError",
    "FirmwareBinding",
    "HARDENED",
    "InvalidKeypath",
    "SanitizationFailed",
    "SignRequest",
    "UnsupportedNetwork",
    "coin_from_chain_id",
    "coin_from_path",
    "path_from_string",
    "path_to_string",
    "sanitize_eth_transaction_data",
]
