"""In-memory transport and log helpers for exercising clients without a node."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence
from typing import Any

from eth_abi import encode as abi_encode
from eth_utils import keccak
from hexbytes import HexBytes
from web3.exceptions import ContractLogicError
from web3.types import TxParams

from .evm.connections import Signer, Transport
from .evm.descriptors import EventSchema, FunctionSchema


def encode_event_log(
    schema: EventSchema,
    args: Mapping[str, Any],
    *,
    address: str,
    block_number: int = 1,
    log_index: int = 0,
) -> dict[str, Any]:
    """Build a raw receipt log that ``schema`` decodes back into ``args``."""

    topics = [HexBytes(schema.topic)]
    for item in schema.indexed_inputs:
        topics.append(HexBytes(abi_encode([item.abi_type], [args[item.name]])))

    data_inputs = schema.data_inputs
    data = abi_encode(
        [item.abi_type for item in data_inputs], [args[item.name] for item in data_inputs]
    )
    return {
        "address": address,
        "topics": topics,
        "data": HexBytes(data),
        "blockNumber": block_number,
        "logIndex": log_index,
    }


class InMemoryTransport(Transport):
    """Records every request and replays programmed receipts and call results.

    Receipts are consumed in the order they were queued, one per submitted
    transaction. Call results are keyed by target address and selector.
    """

    def __init__(self, gas_estimate: int = 21_000) -> None:
        self.gas_estimate = gas_estimate
        self.sent: list[dict[str, Any]] = []
        self.estimated: list[dict[str, Any]] = []
        self.calls: list[dict[str, Any]] = []
        self._receipts: deque[dict[str, Any]] = deque()
        self._mined: dict[bytes, dict[str, Any]] = {}
        self._call_results: dict[tuple[str, bytes], bytes] = {}

    def queue_receipt(
        self,
        logs: Sequence[Mapping[str, Any]] = (),
        *,
        status: int = 1,
        block_number: int = 1,
    ) -> None:
        self._receipts.append(
            {"status": status, "blockNumber": block_number, "logs": [dict(log) for log in logs]}
        )

    def set_call_result(self, to: str, function: FunctionSchema, *values: Any) -> None:
        self._call_results[(to.lower(), function.selector)] = abi_encode(
            list(function.output_types), list(values)
        )

    @property
    def transport_calls(self) -> int:
        return len(self.sent) + len(self.estimated) + len(self.calls)

    async def send_transaction(self, tx: TxParams, signer: Signer) -> HexBytes:
        record = dict(tx)
        record["from"] = signer.address
        self.sent.append(record)

        tx_hash = HexBytes(keccak(text=f"in-memory-tx-{len(self.sent)}"))
        if not self._receipts:
            raise AssertionError("No receipt queued for submitted transaction")

        receipt = self._receipts.popleft()
        receipt["transactionHash"] = tx_hash
        for index, log in enumerate(receipt["logs"]):
            log.setdefault("transactionHash", tx_hash)
            log.setdefault("blockNumber", receipt["blockNumber"])
            log.setdefault("logIndex", index)
        self._mined[bytes(tx_hash)] = receipt
        return tx_hash

    async def wait_for_receipt(self, tx_hash: HexBytes, timeout: float) -> Mapping[str, Any]:
        return self._mined[bytes(tx_hash)]

    async def estimate_gas(self, tx: TxParams) -> int:
        self.estimated.append(dict(tx))
        return self.gas_estimate

    async def call(self, tx: TxParams) -> bytes:
        self.calls.append(dict(tx))
        data = bytes(HexBytes(tx["data"]))
        key = (str(tx["to"]).lower(), data[:4])
        if key not in self._call_results:
            raise ContractLogicError(f"execution reverted: no result for call to {tx['to']}")
        return self._call_results[key]


class StaticSigner(Signer):
    """Signer with a fixed address that returns the transaction repr as bytes."""

    def __init__(self, address: str) -> None:
        self._address = address

    @property
    def address(self) -> Any:
        return self._address

    async def sign_transaction(self, tx: TxParams) -> bytes:
        return repr(sorted(dict(tx).items())).encode()
