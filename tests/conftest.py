from typing import List

import pytest

from eth_sign_client.app_def import DEFAULT_BINDING, FirmwareBinding
from eth_sign_client.command_sender import CommandSender
from eth_sign_client.sign_request import SignRequest


SIGNATURE = bytes.fromhex("aa" * 64 + "01")


class FakeBackend:
    """Records the signing requests instead of talking to a device"""

    def __init__(self) -> None:
        self.requests: List[SignRequest] = []

    def eth_sign(self, request: SignRequest) -> bytes:
        self.requests.append(request)
        return SIGNATURE


@pytest.fixture
def binding() -> FirmwareBinding:
    return DEFAULT_BINDING


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend, binding: FirmwareBinding) -> CommandSender:
    return CommandSender(backend, binding)


@pytest.fixture
def signature() -> bytes:
    return SIGNATURE
