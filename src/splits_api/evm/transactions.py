"""Transaction dispatch for every execution mode."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, cast

from eth_typing import HexStr
from hexbytes import HexBytes
from web3.types import TxParams

from ..exceptions import MissingProviderError, MissingSignerError, TransactionFailedError
from ..types import CallData, ExecutionMode, SubmittedTransaction, TransactionResult
from .connections import Signer, Transport
from .descriptors import OperationDescriptor
from .registry import ChainRegistry

logger = logging.getLogger(__name__)


class ExecutionDispatcher:
    """Encode an operation once and carry it out in the requested mode.

    All three modes share the same encoding path, so the payload that gas is
    estimated for is byte-for-byte the payload that gets submitted.
    """

    def __init__(
        self,
        registry: ChainRegistry,
        *,
        provider: Transport | None,
        signer: Signer | None,
        receipt_timeout: float,
    ) -> None:
        self._registry = registry
        self._provider = provider
        self._signer = signer
        self._receipt_timeout = receipt_timeout

    @property
    def provider(self) -> Transport:
        if self._provider is None:
            raise MissingProviderError()
        return self._provider

    @property
    def signer(self) -> Signer:
        if self._signer is None:
            raise MissingSignerError()
        return self._signer

    def check_prerequisites(self, mode: ExecutionMode) -> None:
        """Fail fast when the provider (or, to execute, the signer) is missing."""

        self.provider  # raises when no transport is configured
        if mode is ExecutionMode.EXECUTE:
            self.signer

    def resolve_target(
        self, descriptor: OperationDescriptor, chain_id: int, target: str | None
    ) -> str:
        if target is None:
            return self._registry.resolve_address(chain_id, descriptor.contract_kind)

        self._registry.assert_supported(chain_id, descriptor.contract_kind)
        return target

    async def dispatch(
        self,
        descriptor: OperationDescriptor,
        chain_id: int,
        args: Sequence[Any],
        mode: ExecutionMode,
        *,
        target: str | None = None,
        value: int = 0,
    ) -> TransactionResult:
        self.check_prerequisites(mode)
        destination = self.resolve_target(descriptor, chain_id, target)
        data = descriptor.encode(args)

        if mode is ExecutionMode.BUILD_CALL_DATA:
            logger.debug("Built calldata for %s to %s", descriptor.name, destination)
            return CallData(target=destination, value=value, data=HexStr(data.to_0x_hex()))

        tx: dict[str, Any] = {"to": destination, "data": data.to_0x_hex(), "value": value}

        if mode is ExecutionMode.ESTIMATE_GAS:
            if self._signer is not None:
                tx["from"] = self._signer.address
            gas = await self.provider.estimate_gas(cast(TxParams, tx))
            logger.debug("Estimated %s gas for %s", gas, descriptor.name)
            return int(gas)

        return await self._submit(descriptor, cast(TxParams, tx))

    async def call(
        self,
        descriptor: OperationDescriptor,
        chain_id: int,
        args: Sequence[Any] = (),
        *,
        target: str | None = None,
    ) -> tuple[Any, ...]:
        """Run a read-only call and decode its outputs."""

        provider = self.provider
        destination = self.resolve_target(descriptor, chain_id, target)
        data = descriptor.encode(args)
        tx = cast(TxParams, {"to": destination, "data": data.to_0x_hex()})
        result = await provider.call(tx)
        return descriptor.function.decode_output(result)

    async def _submit(self, descriptor: OperationDescriptor, tx: TxParams) -> SubmittedTransaction:
        signer = self.signer
        logger.info("Dispatching %s to %s", descriptor.name, tx["to"])

        tx_hash = HexBytes(await self.provider.send_transaction(tx, signer))
        tx_hex = tx_hash.to_0x_hex()
        logger.info("Transaction sent for action=%s hash=%s", descriptor.name, tx_hex)

        receipt = await self.provider.wait_for_receipt(tx_hash, self._receipt_timeout)
        block_number = receipt.get("blockNumber")
        if receipt.get("status", 1) == 0:
            raise TransactionFailedError(
                f"Transaction for {descriptor.name} reverted",
                tx_hash=tx_hex,
                details={"block_number": block_number},
            )

        logger.info(
            "Transaction confirmed for action=%s hash=%s block=%s",
            descriptor.name,
            tx_hex,
            block_number,
        )
        return SubmittedTransaction(tx_hash=tx_hex, receipt=receipt)
