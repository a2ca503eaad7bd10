"""Type definitions and data models for the 0xSplits module client."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from eth_typing import HexStr
from hexbytes import HexBytes


class ExecutionMode(Enum):
    """How a mutating operation is carried out."""

    EXECUTE = "execute"  # submit and wait for inclusion
    ESTIMATE_GAS = "estimate_gas"
    BUILD_CALL_DATA = "build_call_data"


Address = str  # 20-byte hex address
Percent = int | float | Decimal
TokenAmount = int | float | Decimal | str


# ----------------------------------------------------------------------
# Dispatcher results
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class CallData:
    """Unsigned call payload returned in BUILD_CALL_DATA mode."""

    target: Address
    value: int
    data: HexStr


@dataclass(frozen=True)
class SubmittedTransaction:
    """Handle to a mined transaction returned in EXECUTE mode."""

    tx_hash: str
    receipt: Mapping[str, Any]

    @property
    def block_number(self) -> int | None:
        return self.receipt.get("blockNumber")

    @property
    def logs(self) -> list[Mapping[str, Any]]:
        return list(self.receipt.get("logs") or [])


TransactionResult = SubmittedTransaction | int | CallData


@dataclass(frozen=True)
class DomainEvent:
    """Decoded protocol event matched in a transaction receipt."""

    name: str
    args: dict[str, Any]
    address: Address | None = None
    block_number: int | None = None
    transaction_hash: str | None = None
    log_index: int | None = None


# ----------------------------------------------------------------------
# Swapper inputs
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class CreateOracleParams:
    """Factory call used to deploy a fresh oracle alongside the swapper."""

    factory: Address
    data: str | bytes = b""


@dataclass(frozen=True)
class OracleParams:
    """Either an existing oracle address or the params to create one."""

    address: Address | None = None
    create_oracle_params: CreateOracleParams | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "OracleParams":
        """Construct oracle params from a JSON-like dictionary."""

        if data is None:
            return cls()

        create = data.get("createOracleParams") or data.get("create_oracle_params")
        if isinstance(create, Mapping):
            create = CreateOracleParams(
                factory=create.get("factory", ""),
                data=create.get("data") or b"",
            )

        return cls(address=data.get("address"), create_oracle_params=create)


@dataclass(frozen=True)
class QuotePair:
    base: Address
    quote: Address


@dataclass(frozen=True)
class ScaledOfferFactorOverride:
    """Per-pair scaled offer factor, expressed as a discount percentage."""

    base_token: Address
    quote_token: Address
    scaled_offer_factor_percent: Percent


@dataclass(frozen=True)
class SwapperCall:
    """Arbitrary call executed by the swapper owner."""

    to: Address
    value: int = 0
    data: str | bytes = "0x"


@dataclass(frozen=True)
class CreateSwapperConfig:
    owner: Address
    paused: bool
    beneficiary: Address
    token_to_beneficiary: Address
    oracle_params: OracleParams
    default_scaled_offer_factor_percent: Percent
    scaled_offer_factor_overrides: tuple[ScaledOfferFactorOverride, ...] = ()


# ----------------------------------------------------------------------
# Recoup inputs
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class SplitRecipient:
    address: Address
    percent_allocation: Percent


@dataclass(frozen=True)
class CreateSplitConfig:
    """A split used as a waterfall tranche recipient."""

    recipients: tuple[SplitRecipient, ...]
    distributor_fee_percent: Percent
    controller: Address | None = None


@dataclass(frozen=True)
class RecoupTranche:
    """One waterfall tranche; every tranche but the last carries a size."""

    recipient: Address | CreateSplitConfig
    size: TokenAmount | None = None


@dataclass(frozen=True)
class CreateRecoupConfig:
    token: Address
    tranches: tuple[RecoupTranche, ...]
    non_waterfall_recipient: Address | None = None
    non_waterfall_recipient_tranche_index: int | None = None


# ----------------------------------------------------------------------
# Caller-facing results
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class EventResult:
    event: DomainEvent


@dataclass(frozen=True)
class CreateSwapperResult:
    swapper_id: Address
    event: DomainEvent


@dataclass(frozen=True)
class CreateRecoupResult:
    waterfall_module_id: Address
    event: DomainEvent


@dataclass(frozen=True)
class FormattedTranche:
    """On-chain shape of a recoup tranche."""

    recipients: list[Address] = field(default_factory=list)
    percent_allocations: list[int] = field(default_factory=list)
    controller: Address = ""
    distributor_fee: int = 0

    def as_tuple(self) -> tuple[list[str], list[int], str, int]:
        """Return the tranche as a tuple consumable by eth-abi."""

        return (
            list(self.recipients),
            list(self.percent_allocations),
            self.controller,
            self.distributor_fee,
        )


def ensure_bytes(value: str | bytes | bytearray | HexBytes) -> bytes:
    """Coerce a hex string or bytes-like value to bytes."""

    if isinstance(value, bytes | bytearray):
        return bytes(value)

    return bytes(HexBytes(value))
