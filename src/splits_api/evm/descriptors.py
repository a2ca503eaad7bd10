"""Operation descriptors built from static ABI artifacts.

A descriptor pins down everything needed to turn formatted arguments into
calldata and to recognise the operation's success event in a receipt. The
schemas are derived once from the ABI and never change afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_utils.abi import (
    collapse_if_tuple,
    event_abi_to_log_topic,
    function_abi_to_4byte_selector,
)
from hexbytes import HexBytes
from web3 import Web3

from ..constants import ContractKind
from ..types import DomainEvent


def _find_abi_entry(abi: Iterable[Mapping[str, Any]], entry_type: str, name: str) -> Mapping:
    for entry in abi:
        if entry.get("type") == entry_type and entry.get("name") == name:
            return entry
    raise KeyError(f"ABI has no {entry_type} named {name!r}")


def normalise_abi_value(abi_input: Mapping[str, Any], value: Any) -> Any:
    """Checksum decoded addresses, recursing through arrays and tuples."""

    abi_type = abi_input["type"]
    if abi_type.endswith("]"):
        element = {**abi_input, "type": abi_type[: abi_type.rindex("[")]}
        return [normalise_abi_value(element, item) for item in value]

    if abi_type == "tuple":
        components = abi_input.get("components", [])
        return tuple(
            normalise_abi_value(component, item) for component, item in zip(components, value)
        )

    if abi_type == "address":
        return Web3.to_checksum_address(value)

    return value


@dataclass(frozen=True)
class FunctionSchema:
    """Selector and canonical argument types of a contract function."""

    name: str
    selector: bytes
    input_types: tuple[str, ...]
    output_types: tuple[str, ...]
    outputs: tuple[Mapping[str, Any], ...]
    payable: bool = False

    @classmethod
    def from_abi(cls, abi: Iterable[Mapping[str, Any]], name: str) -> FunctionSchema:
        entry = _find_abi_entry(abi, "function", name)
        return cls(
            name=name,
            selector=bytes(function_abi_to_4byte_selector(entry)),
            input_types=tuple(collapse_if_tuple(item) for item in entry.get("inputs", [])),
            output_types=tuple(collapse_if_tuple(item) for item in entry.get("outputs", [])),
            outputs=tuple(entry.get("outputs", [])),
            payable=entry.get("stateMutability") == "payable",
        )

    def encode(self, args: Sequence[Any]) -> HexBytes:
        if len(args) != len(self.input_types):
            raise ValueError(
                f"{self.name} expects {len(self.input_types)} arguments, got {len(args)}"
            )
        return HexBytes(self.selector + abi_encode(list(self.input_types), list(args)))

    def decode_output(self, data: bytes) -> tuple[Any, ...]:
        if not self.output_types:
            return tuple()
        decoded = abi_decode(list(self.output_types), bytes(data))
        return tuple(
            normalise_abi_value(output, value) for output, value in zip(self.outputs, decoded)
        )


@dataclass(frozen=True)
class EventInput:
    name: str
    abi_type: str
    indexed: bool
    abi: Mapping[str, Any]


@dataclass(frozen=True)
class EventSchema:
    """Topic and argument layout of a contract event."""

    name: str
    topic: HexBytes
    inputs: tuple[EventInput, ...]

    @classmethod
    def from_abi(cls, abi: Iterable[Mapping[str, Any]], name: str) -> EventSchema:
        entry = _find_abi_entry(abi, "event", name)
        inputs = tuple(
            EventInput(
                name=item["name"],
                abi_type=collapse_if_tuple(item),
                indexed=bool(item.get("indexed")),
                abi=item,
            )
            for item in entry.get("inputs", [])
        )
        return cls(name=name, topic=HexBytes(event_abi_to_log_topic(entry)), inputs=inputs)

    @property
    def indexed_inputs(self) -> tuple[EventInput, ...]:
        return tuple(item for item in self.inputs if item.indexed)

    @property
    def data_inputs(self) -> tuple[EventInput, ...]:
        return tuple(item for item in self.inputs if not item.indexed)

    def decode(self, log: Mapping[str, Any]) -> DomainEvent:
        """Decode a raw log whose first topic matches this schema."""

        topics = [HexBytes(topic) for topic in log.get("topics", [])]
        if not topics or topics[0] != self.topic:
            raise ValueError(f"Log does not carry the {self.name} topic")

        args: dict[str, Any] = {}
        for item, topic in zip(self.indexed_inputs, topics[1:]):
            if item.abi.get("type") in ("string", "bytes", "tuple") or item.abi_type.endswith("]"):
                # dynamic indexed values are stored as their keccak hash
                args[item.name] = topic
                continue
            (value,) = abi_decode([item.abi_type], bytes(topic))
            args[item.name] = normalise_abi_value(item.abi, value)

        data_inputs = self.data_inputs
        if data_inputs:
            data_types = [item.abi_type for item in data_inputs]
            values = abi_decode(data_types, bytes(HexBytes(log["data"])))
            for item, value in zip(data_inputs, values):
                args[item.name] = normalise_abi_value(item.abi, value)

        tx_hash = log.get("transactionHash")
        address = log.get("address")
        return DomainEvent(
            name=self.name,
            args=args,
            address=Web3.to_checksum_address(address) if address else None,
            block_number=log.get("blockNumber"),
            transaction_hash=HexBytes(tx_hash).to_0x_hex() if tx_hash is not None else None,
            log_index=log.get("logIndex"),
        )


@dataclass(frozen=True)
class OperationDescriptor:
    """Static metadata for one callable operation."""

    name: str
    contract_kind: ContractKind
    function: FunctionSchema
    events: tuple[EventSchema, ...] = ()

    @classmethod
    def from_abi(
        cls,
        name: str,
        contract_kind: ContractKind,
        abi: Iterable[Mapping[str, Any]],
        function_name: str,
        event_names: Sequence[str] = (),
    ) -> OperationDescriptor:
        abi = tuple(abi)
        return cls(
            name=name,
            contract_kind=contract_kind,
            function=FunctionSchema.from_abi(abi, function_name),
            events=tuple(EventSchema.from_abi(abi, event_name) for event_name in event_names),
        )

    @property
    def event_topics(self) -> tuple[HexBytes, ...]:
        return tuple(event.topic for event in self.events)

    def encode(self, args: Sequence[Any]) -> HexBytes:
        return self.function.encode(args)
