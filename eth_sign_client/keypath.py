# -*- coding: utf-8 -*-
# SPDX-FileCopyrightText: 2024 Ledger SAS
# SPDX-License-Identifier: LicenseRef-LEDGER
"""
This module provides the Ethereum signing Client application.
It contains the keypath parsing and the coin resolution.
"""
import logging
import re
from typing import Any, List, Sequence

from eth_sign_client.app_def import DEFAULT_BINDING, FirmwareBinding
from eth_sign_client.app_def import ChainId, CoinType, Purpose
from eth_sign_client.app_def import InvalidKeypath, UnsupportedNetwork


logger = logging.getLogger(__name__)

MAX_KEYPATH_INDEX = 0xFFFFFFFF

_INDEX_RE = re.compile(r"[0-9]+")


def path_from_string(pathString: str, binding: FirmwareBinding = DEFAULT_BINDING) -> List[int]:
    """Convert a keypath string into its list of indexes

    Args:
        pathString (str): Keypath in string format, e.g. m/44'/1'/0'/0
        binding (FirmwareBinding): Provider of the hardened offset

    Returns:
        Keypath as a list, e.g. [2147483692, 2147483649, 2147483648, 0]
    """

    if not isinstance(pathString, str):
        raise InvalidKeypath(pathString)
    levels = pathString.lower().split("/")
    if levels[0] != "m":
        raise InvalidKeypath(pathString, "Keypath must start with 'm'")

    path = []
    for level in levels[1:]:
        if level in ("", "m"):
            continue
        hardened = level.endswith("'")
        if hardened:
            level = level[:-1]
        if not _INDEX_RE.fullmatch(level):
            raise InvalidKeypath(pathString)
        digits = level.lstrip("0") or "0"
        if len(digits) > len(str(MAX_KEYPATH_INDEX)):
            raise InvalidKeypath(pathString, "Index out of range")
        index = int(digits)
        if hardened:
            if index >= binding.hardened:
                raise InvalidKeypath(pathString, "Hardened index out of range")
            index += binding.hardened
        if index > MAX_KEYPATH_INDEX:
            raise InvalidKeypath(pathString, "Index out of range")
        path.append(index)
    return path


def path_to_string(path: Sequence[int], binding: FirmwareBinding = DEFAULT_BINDING) -> str:
    """Convert a list of indexes back into the keypath string format"""

    levels = ["m"]
    for index in path:
        if isinstance(index, bool) or not isinstance(index, int) \
                or not 0 <= index <= MAX_KEYPATH_INDEX:
            raise InvalidKeypath(path)
        if index >= binding.hardened:
            levels.append(f"{index - binding.hardened}'")
        else:
            levels.append(str(index))
    return "/".join(levels)


def coin_from_chain_id(chainId: Any, binding: FirmwareBinding = DEFAULT_BINDING) -> Any:
    """Resolve the device coin for an EVM chain id

    Rinkeby and Kovan are shown as Ropsten on the device until the
    firmware is given the network by the integrating service.
    """

    if isinstance(chainId, bool) or not isinstance(chainId, int):
        raise UnsupportedNetwork(chainId)
    if chainId == ChainId.MAINNET:
        return binding.coins.ETH
    if chainId == ChainId.ROPSTEN:
        return binding.coins.RopstenETH
    if chainId in (ChainId.RINKEBY, ChainId.KOVAN):
        logger.debug("Chain id %d is reported as Ropsten to the device", chainId)
        return binding.coins.RopstenETH
    raise UnsupportedNetwork(chainId)


def coin_from_path(path: Sequence[int], binding: FirmwareBinding = DEFAULT_BINDING) -> Any:
    """Resolve the device coin from the coin type of a BIP44 keypath

    Args:
        path (Sequence[int]): Keypath, e.g. [44, 1, 0, 0] or
            [2147483692, 2147483649, 2147483648, 0]
        binding (FirmwareBinding): Provider of the coins and the hardened offset

    Returns:
        ETH for mainnet ([44, 60]) and RopstenETH for testnets ([44, 1])
    """

    if isinstance(path, str) or not isinstance(path, Sequence):
        raise InvalidKeypath(path)
    if len(path) < 1 or path[0] not in (Purpose.BIP44, Purpose.BIP44 + binding.hardened):
        raise InvalidKeypath(path, "Keypath is not a BIP44 keypath")
    coinType = path[1] if len(path) > 1 else None
    if coinType in (CoinType.MAINNET, CoinType.MAINNET + binding.hardened):
        return binding.coins.ETH
    if coinType in (CoinType.TESTNET, CoinType.TESTNET + binding.hardened):
        return binding.coins.RopstenETH
    raise InvalidKeypath(path, "Unknown coin type")
