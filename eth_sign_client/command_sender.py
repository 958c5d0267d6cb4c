# -*- coding: utf-8 -*-
# SPDX-FileCopyrightText: 2024 Ledger SAS
# SPDX-License-Identifier: LicenseRef-LEDGER
"""
This module provides the Ethereum signing Client application.
It contains the request sending part.
"""
import logging
from typing import Any, Mapping, Protocol

from eth_sign_client.app_def import DEFAULT_BINDING, FirmwareBinding
from eth_sign_client.keypath import coin_from_path, path_from_string
from eth_sign_client.sign_request import SignRequest, sanitize_eth_transaction_data


logger = logging.getLogger(__name__)


class EthSignBackend(Protocol):
    def eth_sign(self, request: SignRequest) -> bytes:
        ...


class CommandSender:
    """Hand sanitized signing requests to the device backend"""

    def __init__(self, backend: EthSignBackend, binding: FirmwareBinding = DEFAULT_BINDING) -> None:
        """Class initializer"""

        self._backend = backend
        self._binding = binding


    def get_coin(self, pathString: str) -> Any:
        """Resolve the device coin of a keypath

        Args:
            pathString (str): Keypath, e.g. m/44'/60'/0'/0

        Returns:
            Coin of the firmware binding
        """

        return coin_from_path(path_from_string(pathString, self._binding), self._binding)


    def sign_transaction(self, sigData: Mapping[str, Any]) -> bytes:
        """Sign an ethereumjs transaction on the device

        Args:
            sigData (Mapping): Signature data, see sanitize_eth_transaction_data

        Returns:
            Signature returned by the backend
        """

        request = sanitize_eth_transaction_data(sigData, self._binding)
        logger.debug("Sending signing request for coin %s", request.coin)
        return self._backend.eth_sign(request)
