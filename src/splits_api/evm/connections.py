"""Transport and signer interfaces plus their web3.py implementations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, cast

import aiohttp
from eth_account import Account
from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.types import ChecksumAddress, TxParams

from ..exceptions import ValidationError
from .config import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class Signer(ABC):
    """Something able to sign transactions for a single account."""

    @property
    @abstractmethod
    def address(self) -> ChecksumAddress:
        pass

    @abstractmethod
    async def sign_transaction(self, tx: TxParams) -> bytes:
        """Return the raw signed transaction ready for broadcast."""
        pass


class Transport(ABC):
    """Network primitives the dispatcher relies on."""

    @abstractmethod
    async def send_transaction(self, tx: TxParams, signer: Signer) -> HexBytes:
        pass

    @abstractmethod
    async def wait_for_receipt(self, tx_hash: HexBytes, timeout: float) -> Mapping[str, Any]:
        pass

    @abstractmethod
    async def estimate_gas(self, tx: TxParams) -> int:
        pass

    @abstractmethod
    async def call(self, tx: TxParams) -> bytes:
        pass


class LocalSigner(Signer):
    """Sign with an in-process eth-account key."""

    def __init__(self, account: LocalAccount) -> None:
        self._account = account

    @classmethod
    def from_key(cls, private_key: str) -> LocalSigner:
        try:
            account = cast(LocalAccount, Account.from_key(private_key))
        except Exception as exc:
            raise ValidationError(
                "Failed to derive signer account from provided private key",
                field="private_key",
                details={"error": str(exc)},
            ) from exc
        return cls(account)

    @property
    def address(self) -> ChecksumAddress:
        return self._account.address

    async def sign_transaction(self, tx: TxParams) -> bytes:
        signed = self._account.sign_transaction(cast(dict, tx))
        return bytes(signed.raw_transaction)


class Web3Transport(Transport):
    """Transport backed by an ``AsyncWeb3`` instance."""

    def __init__(self, web3: AsyncWeb3) -> None:
        self._web3 = web3

    @classmethod
    def from_url(
        cls, rpc_url: str, *, request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    ) -> Web3Transport:
        provider = AsyncHTTPProvider(
            rpc_url,
            request_kwargs={"timeout": aiohttp.ClientTimeout(total=request_timeout)},
        )
        logger.info("Using RPC endpoint %s", rpc_url)
        return cls(AsyncWeb3(provider))

    @property
    def web3(self) -> AsyncWeb3:
        return self._web3

    async def send_transaction(self, tx: TxParams, signer: Signer) -> HexBytes:
        eth = self._web3.eth
        prepared = cast(dict[str, Any], dict(tx))
        prepared["from"] = signer.address

        if "chainId" not in prepared:
            prepared["chainId"] = await eth.chain_id
        if "nonce" not in prepared:
            prepared["nonce"] = await eth.get_transaction_count(signer.address, "pending")
        if "gas" not in prepared:
            prepared["gas"] = await eth.estimate_gas(cast(TxParams, prepared))
        if "gasPrice" not in prepared and "maxFeePerGas" not in prepared:
            prepared["gasPrice"] = await eth.gas_price

        logger.debug(
            "Signing transaction to=%s nonce=%s gas=%s",
            prepared.get("to"),
            prepared["nonce"],
            prepared["gas"],
        )
        raw_transaction = await signer.sign_transaction(cast(TxParams, prepared))
        return HexBytes(await eth.send_raw_transaction(raw_transaction))

    async def wait_for_receipt(self, tx_hash: HexBytes, timeout: float) -> Mapping[str, Any]:
        return await self._web3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)

    async def estimate_gas(self, tx: TxParams) -> int:
        return int(await self._web3.eth.estimate_gas(tx))

    async def call(self, tx: TxParams) -> bytes:
        return bytes(await self._web3.eth.call(tx))
