"""Shared pipeline for the Splits module clients."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar, cast

from .constants import ContractKind
from .exceptions import InvalidConfigError, InvalidResponseError, TransactionFailedError
from .evm.config import DEFAULT_RECEIPT_TIMEOUT, ClientConfig
from .evm.connections import Signer, Transport
from .evm.descriptors import OperationDescriptor
from .evm.events import EventExtractor
from .evm.registry import ChainRegistry
from .evm.transactions import ExecutionDispatcher
from .types import CallData, DomainEvent, ExecutionMode, SubmittedTransaction

logger = logging.getLogger(__name__)

R = TypeVar("R")
ClientT = TypeVar("ClientT", bound="SplitsClientBase")


class SplitsClientBase:
    """Compose validation output with dispatch and event extraction.

    A client is bound to one ``ExecutionMode`` for its whole lifetime. The
    ``EXECUTE`` client carries ``estimate_gas`` and ``call_data`` siblings
    that share its configuration and run the exact same operation methods.
    The siblings have no siblings of their own; asking them for one raises
    ``InvalidConfigError``.
    """

    contract_kinds: tuple[ContractKind, ...] = ()

    def __init__(
        self,
        chain_id: int,
        provider: Transport | None = None,
        signer: Signer | None = None,
        *,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        registry: ChainRegistry | None = None,
        mode: ExecutionMode = ExecutionMode.EXECUTE,
    ) -> None:
        config = ClientConfig(
            chain_id=chain_id,
            provider=provider,
            signer=signer,
            receipt_timeout=receipt_timeout,
            registry=registry,
        )
        config.validate()

        self._config = config
        self._registry = config.resolved_registry()
        self._registry.assert_supported(chain_id, *self.contract_kinds)

        self.chain_id = chain_id
        self.mode = mode
        self._dispatcher = ExecutionDispatcher(
            self._registry,
            provider=provider,
            signer=signer,
            receipt_timeout=receipt_timeout,
        )
        self._descriptors: Mapping[str, OperationDescriptor] = self._build_descriptors()
        self._extractor = EventExtractor(
            schema for descriptor in self._descriptors.values() for schema in descriptor.events
        )
        self.event_topics = {
            name: list(descriptor.event_topics)
            for name, descriptor in self._descriptors.items()
            if descriptor.events
        }

        self._siblings: dict[ExecutionMode, SplitsClientBase] = {}
        if mode is ExecutionMode.EXECUTE:
            self._siblings = {
                sibling_mode: self._sibling(sibling_mode)
                for sibling_mode in (ExecutionMode.ESTIMATE_GAS, ExecutionMode.BUILD_CALL_DATA)
            }

    @classmethod
    def from_config(
        cls: type[ClientT], config: ClientConfig, mode: ExecutionMode = ExecutionMode.EXECUTE
    ) -> ClientT:
        return cls(
            config.chain_id,
            config.provider,
            config.signer,
            receipt_timeout=config.receipt_timeout,
            registry=config.registry,
            mode=mode,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def estimate_gas(self: ClientT) -> ClientT:
        """Same operations, returning a gas estimate instead of submitting."""
        return self._mode_client(ExecutionMode.ESTIMATE_GAS)

    @property
    def call_data(self: ClientT) -> ClientT:
        """Same operations, returning unsigned ``CallData`` without any network call."""
        return self._mode_client(ExecutionMode.BUILD_CALL_DATA)

    def _mode_client(self: ClientT, mode: ExecutionMode) -> ClientT:
        sibling = self._siblings.get(mode)
        if sibling is None:
            raise InvalidConfigError(
                f"The {mode.value} client is only available on an executing client",
                details={"mode": self.mode.value},
            )
        return cast(ClientT, sibling)

    def _require_executing(self) -> None:
        if self.mode is not ExecutionMode.EXECUTE:
            raise InvalidConfigError(
                "Submitting a transaction requires an executing client",
                details={"mode": self.mode.value},
            )

    def _sibling(self: ClientT, mode: ExecutionMode) -> ClientT:
        return type(self)(
            self.chain_id,
            self._config.provider,
            self._config.signer,
            receipt_timeout=self._config.receipt_timeout,
            registry=self._registry,
            mode=mode,
        )

    def _build_descriptors(self) -> Mapping[str, OperationDescriptor]:
        raise NotImplementedError

    def _descriptor(self, name: str) -> OperationDescriptor:
        return self._descriptors[name]

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    async def _execute(
        self,
        operation: str,
        args: Sequence[Any],
        build: Callable[[DomainEvent], R],
        *,
        target: str | None = None,
        value: int = 0,
    ) -> R | int | CallData:
        """Dispatch a formatted operation and map the outcome for this mode."""

        descriptor = self._descriptor(operation)
        if self.mode is ExecutionMode.EXECUTE:
            submitted = await self._submit(operation, args, target=target, value=value)
            event = self._extractor.extract(submitted, descriptor.event_topics)
            if event is None:
                logger.error("No %s event found in transaction %s", operation, submitted.tx_hash)
                raise TransactionFailedError(
                    f"Transaction for {operation} was mined without the expected event",
                    tx_hash=submitted.tx_hash,
                    details={"expected_events": [schema.name for schema in descriptor.events]},
                )
            return build(event)

        result = await self._dispatcher.dispatch(
            descriptor, self.chain_id, args, self.mode, target=target, value=value
        )

        if self.mode is ExecutionMode.ESTIMATE_GAS:
            if isinstance(result, bool) or not isinstance(result, int):
                raise InvalidResponseError(
                    "Expected a gas estimate", details={"operation": operation}
                )
            return result

        if not isinstance(result, CallData):
            raise InvalidResponseError("Expected call data", details={"operation": operation})
        return result

    async def _submit(
        self,
        operation: str,
        args: Sequence[Any],
        *,
        target: str | None = None,
        value: int = 0,
    ) -> SubmittedTransaction:
        """Submit and wait for inclusion without decoding any event."""

        result = await self._dispatcher.dispatch(
            self._descriptor(operation),
            self.chain_id,
            args,
            ExecutionMode.EXECUTE,
            target=target,
            value=value,
        )
        if not isinstance(result, SubmittedTransaction):
            raise InvalidResponseError(
                "Expected a mined transaction", details={"operation": operation}
            )
        return result

    async def _read(
        self, operation: str, args: Sequence[Any] = (), *, target: str | None = None
    ) -> tuple[Any, ...]:
        """Call a view function; needs a provider but never a signer."""

        return await self._dispatcher.call(
            self._descriptor(operation), self.chain_id, args, target=target
        )

    def _require_prerequisites(self) -> None:
        self._dispatcher.check_prerequisites(self.mode)


def build_descriptors(
    specs: Iterable[tuple[str, ContractKind, Sequence[Mapping[str, Any]], str, Sequence[str]]],
) -> dict[str, OperationDescriptor]:
    """Build a name -> descriptor table from ``(name, kind, abi, fn, events)`` rows."""

    return {
        name: OperationDescriptor.from_abi(name, kind, abi, function_name, event_names)
        for name, kind, abi, function_name, event_names in specs
    }
