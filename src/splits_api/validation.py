"""Input validation for Swapper and Recoup operations.

Every validator is synchronous and side-effect free. It either returns the
normalised value or raises ``ValidationError`` (single field) or
``InvalidArgumentError`` (cross-field rule).
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from hexbytes import HexBytes
from web3 import Web3
from web3.types import ChecksumAddress

from .constants import MAX_DISTRIBUTOR_FEE_PERCENT, PERCENT_DECIMALS, ZERO_ADDRESS
from .exceptions import InvalidArgumentError, ValidationError
from .types import (
    CreateSplitConfig,
    OracleParams,
    QuotePair,
    RecoupTranche,
    ScaledOfferFactorOverride,
    SwapperCall,
)


# ----------------------------------------------------------------------
# Primitives
# ----------------------------------------------------------------------
def validate_address(address: Any, field: str = "address") -> ChecksumAddress:
    """Validate a 20-byte address and return its checksum form."""

    if not isinstance(address, str) or not Web3.is_address(address):
        raise ValidationError(
            f"Invalid address: {address!r}; must be 20 bytes, checksum-valid if mixed case",
            field=field,
            value=address,
        )
    return Web3.to_checksum_address(address)


def validate_optional_address(address: Any, field: str = "address") -> ChecksumAddress | None:
    if address is None:
        return None
    return validate_address(address, field)


def validate_hex_data(data: Any, field: str = "data") -> bytes:
    """Validate a calldata-like hex string (or bytes) and return raw bytes."""

    if isinstance(data, bytes | bytearray):
        return bytes(data)

    if not isinstance(data, str) or not data.startswith("0x"):
        raise ValidationError("Data must be a 0x-prefixed hex string", field=field, value=data)

    try:
        return bytes(HexBytes(data))
    except ValueError as exc:
        raise ValidationError(
            "Data must be a 0x-prefixed hex string",
            field=field,
            value=data,
            details={"error": str(exc)},
        ) from exc


def validate_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be a boolean", field=field, value=value)
    return value


def _to_decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal | str):
        raise ValidationError("Value must be numeric", field=field, value=value)

    try:
        number = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError("Value must be numeric", field=field, value=value) from exc

    if not number.is_finite():
        raise ValidationError("Value must be finite", field=field, value=value)
    return number


def _decimal_places(number: Decimal) -> int:
    # Counted from the digit tuple; normalize() would round past 28 digits.
    _, digits, exponent = number.as_tuple()
    significant = "".join(str(digit) for digit in digits).rstrip("0")
    if not significant:
        return 0
    trailing_zeros = len(digits) - len(significant)
    return max(0, -int(exponent) - trailing_zeros)



def validate_percent(
    value: Any,
    field: str = "percent",
    *,
    minimum: Decimal = Decimal(0),
    maximum: Decimal = Decimal(100),
    allow_minimum: bool = True,
) -> Decimal:
    """Validate a percentage within bounds and at fixed-point precision."""

    number = _to_decimal(value, field)

    below = number < minimum if allow_minimum else number <= minimum
    if below or number > maximum:
        bound = "[" if allow_minimum else "("
        raise ValidationError(
            f"{field} must be in {bound}{minimum},{maximum}]", field=field, value=value
        )

    if _decimal_places(number) > PERCENT_DECIMALS:
        raise ValidationError(
            f"{field} supports at most {PERCENT_DECIMALS} decimal places",
            field=field,
            value=value,
        )

    return number


# ----------------------------------------------------------------------
# Swapper
# ----------------------------------------------------------------------
def validate_scaled_offer_factor(
    percent: Any, field: str = "scaled_offer_factor_percent"
) -> Decimal:
    return validate_percent(percent, field)


def validate_scaled_offer_factor_overrides(
    overrides: Sequence[ScaledOfferFactorOverride],
) -> None:
    seen: set[tuple[str, str]] = set()
    for index, override in enumerate(overrides):
        base = validate_address(
            override.base_token, f"scaled_offer_factor_overrides[{index}].base_token"
        )
        quote = validate_address(
            override.quote_token, f"scaled_offer_factor_overrides[{index}].quote_token"
        )
        validate_scaled_offer_factor(
            override.scaled_offer_factor_percent,
            f"scaled_offer_factor_overrides[{index}].scaled_offer_factor_percent",
        )

        if (base, quote) in seen:
            raise ValidationError(
                "Duplicate scaled offer factor override for token pair",
                field=f"scaled_offer_factor_overrides[{index}]",
                value=(base, quote),
            )
        seen.add((base, quote))


def validate_quote_pairs(quote_pairs: Sequence[QuotePair]) -> None:
    for index, pair in enumerate(quote_pairs):
        validate_address(pair.base, f"quote_pairs[{index}].base")
        validate_address(pair.quote, f"quote_pairs[{index}].quote")


def validate_oracle_params(oracle_params: OracleParams) -> None:
    create = oracle_params.create_oracle_params
    if (oracle_params.address is None) == (create is None):
        raise InvalidArgumentError(
            "Exactly one of oracle address or create oracle params must be provided",
            details={"oracle_params": oracle_params},
        )

    if create is None:
        validate_address(oracle_params.address, "oracle_params.address")
        return

    validate_address(create.factory, "oracle_params.create_oracle_params.factory")
    validate_hex_data(create.data, "oracle_params.create_oracle_params.data")


def validate_calls(calls: Sequence[SwapperCall]) -> None:
    for index, call in enumerate(calls):
        validate_address(call.to, f"calls[{index}].to")
        if isinstance(call.value, bool) or not isinstance(call.value, int) or call.value < 0:
            raise ValidationError(
                "Call value must be a non-negative integer amount of wei",
                field=f"calls[{index}].value",
                value=call.value,
            )
        validate_hex_data(call.data, f"calls[{index}].data")


# ----------------------------------------------------------------------
# Splits and Recoup
# ----------------------------------------------------------------------
def validate_distributor_fee(percent: Any, field: str = "distributor_fee_percent") -> Decimal:
    return validate_percent(percent, field, maximum=Decimal(MAX_DISTRIBUTOR_FEE_PERCENT))


def validate_split_config(config: CreateSplitConfig, field: str = "split") -> None:
    recipients = config.recipients
    if len(recipients) < 2:
        raise ValidationError(
            "A split needs at least two recipients",
            field=f"{field}.recipients",
            value=len(recipients),
        )

    seen: set[str] = set()
    total = Decimal(0)
    for index, recipient in enumerate(recipients):
        address = validate_address(recipient.address, f"{field}.recipients[{index}].address")
        if address in seen:
            raise ValidationError(
                "Split recipient addresses must be unique",
                field=f"{field}.recipients[{index}].address",
                value=address,
            )
        seen.add(address)

        total += validate_percent(
            recipient.percent_allocation,
            f"{field}.recipients[{index}].percent_allocation",
            allow_minimum=False,
        )

    if total != Decimal(100):
        raise ValidationError(
            "Split recipient allocations must sum to 100",
            field=f"{field}.recipients",
            value=str(total),
        )

    validate_distributor_fee(config.distributor_fee_percent, f"{field}.distributor_fee_percent")
    validate_optional_address(config.controller, f"{field}.controller")


def validate_recoup_tranches(tranches: Sequence[RecoupTranche]) -> None:
    """Validate tranche recipients and sizes.

    Every tranche but the last must carry a positive size and the last must
    not. Sizes are summed into cumulative thresholds during formatting, so
    positive sizes give strictly increasing, non-overlapping thresholds.
    """

    if len(tranches) < 2:
        raise ValidationError(
            "A recoup needs at least two tranches", field="tranches", value=len(tranches)
        )

    last = len(tranches) - 1
    for index, tranche in enumerate(tranches):
        if isinstance(tranche.recipient, CreateSplitConfig):
            validate_split_config(tranche.recipient, f"tranches[{index}].recipient")
        else:
            validate_address(tranche.recipient, f"tranches[{index}].recipient")

        if index == last:
            if tranche.size is not None:
                raise ValidationError(
                    "The last tranche is residual and must not have a size",
                    field=f"tranches[{index}].size",
                    value=tranche.size,
                )
            continue

        if tranche.size is None:
            raise ValidationError(
                "Only the last tranche may omit its size",
                field=f"tranches[{index}].size",
                value=None,
            )
        size = _to_decimal(tranche.size, f"tranches[{index}].size")
        if size <= 0:
            raise ValidationError(
                "Tranche sizes must be positive",
                field=f"tranches[{index}].size",
                value=tranche.size,
            )


def validate_tranche_size_precision(tranches: Sequence[RecoupTranche], decimals: int) -> None:
    """Check every tranche size is representable at the token's decimals."""

    for index, tranche in enumerate(tranches):
        if tranche.size is None:
            continue
        size = _to_decimal(tranche.size, f"tranches[{index}].size")
        if _decimal_places(size) > decimals:
            raise ValidationError(
                f"Tranche size has more than {decimals} decimal places",
                field=f"tranches[{index}].size",
                value=tranche.size,
            )


def validate_recoup_non_waterfall_recipient(
    tranche_count: int,
    recipient: str | None,
    tranche_index: int | None,
) -> None:
    """Enforce that a non-waterfall recipient and its tranche index go together."""

    absent = recipient is None or (
        isinstance(recipient, str) and recipient.lower() == ZERO_ADDRESS
    )
    if absent:
        if tranche_index is not None:
            raise InvalidArgumentError(
                "Non-waterfall recipient tranche index must be unset when the recipient is absent",
                details={"recipient": recipient, "tranche_index": tranche_index},
            )
        return

    validate_address(recipient, "non_waterfall_recipient")

    if tranche_index is None:
        raise InvalidArgumentError(
            "Non-waterfall recipient tranche index is required when a recipient is set",
            details={"recipient": recipient, "tranche_index": tranche_index},
        )

    if (
        isinstance(tranche_index, bool)
        or not isinstance(tranche_index, int)
        or not 0 <= tranche_index < tranche_count
    ):
        raise InvalidArgumentError(
            f"Invalid non-waterfall recipient tranche index; must be in [0,{tranche_count})",
            details={"recipient": recipient, "tranche_index": tranche_index},
        )
