from __future__ import annotations

import pytest
from web3 import Web3

from splits_api.swapper import SwapperClient
from splits_api.templates import TemplatesClient
from splits_api.testing import InMemoryTransport, StaticSigner


def address(fill: str) -> str:
    return Web3.to_checksum_address("0x" + fill * 40)


OWNER = address("a")
BENEFICIARY = address("b")
TOKEN = address("c")
SWAPPER_ID = address("d")
ORACLE = address("e")
SIGNER_ADDRESS = address("f")


@pytest.fixture()
def transport() -> InMemoryTransport:
    return InMemoryTransport(gas_estimate=123_456)


@pytest.fixture()
def signer() -> StaticSigner:
    return StaticSigner(SIGNER_ADDRESS)


@pytest.fixture()
def swapper_client(transport: InMemoryTransport, signer: StaticSigner) -> SwapperClient:
    return SwapperClient(1, transport, signer)


@pytest.fixture()
def templates_client(transport: InMemoryTransport, signer: StaticSigner) -> TemplatesClient:
    return TemplatesClient(1, transport, signer)
