# -*- coding: utf-8 -*-
# SPDX-FileCopyrightText: 2024 Ledger SAS
# SPDX-License-Identifier: LicenseRef-LEDGER
"""
This module provides the Ethereum signing Client application.
It contains the firmware binding definitions.
"""
from enum import IntEnum
from dataclasses import dataclass
from typing import Any, Optional


HARDENED = 0x80000000


class ETHCoin(IntEnum):
    """Coin identifiers understood by the device firmware"""

    ETH = 0
    RopstenETH = 1
    RinkebyETH = 2


class ChainId(IntEnum):
    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    KOVAN = 42


class Purpose(IntEnum):
    BIP44 = 44


class CoinType(IntEnum):
    MAINNET = 60
    TESTNET = 1


@dataclass(frozen=True)
class FirmwareBinding:
    """Values supplied by the device firmware interface

    coins must expose the ETH, RopstenETH and RinkebyETH members.
    """
    coins: Any
    hardened: int


BitBox02 = FirmwareBinding(ETHCoin, HARDENED)
DEFAULT_BINDING = BitBox02


class EthSignError(Exception):
    """Base class of the signing request errors"""


class InvalidKeypath(EthSignError, ValueError):
    def __init__(self, keypath: Any, reason: str = "Invalid keypath") -> None:
        super().__init__(f"{reason}: {keypath!r}")
        self.keypath = keypath


class UnsupportedNetwork(EthSignError, ValueError):
    def __init__(self, chainId: Any) -> None:
        super().__init__(f"Unsupported network: chain id {chainId!r}")
        self.chainId = chainId


class SanitizationFailed(EthSignError):
    """Raised when transaction data cannot be turned into a signing request

    The original error is kept in ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, cause: Optional[BaseException]) -> None:
        super().__init__(f"ethTx data sanitization failed: {cause}")
        self.cause = cause
