"""Convert validated domain values into their on-chain representation."""

from collections.abc import Sequence
from decimal import Decimal

from web3 import Web3

from .constants import PERCENTAGE_SCALE, ZERO_ADDRESS
from .exceptions import ValidationError
from .types import (
    CreateSplitConfig,
    FormattedTranche,
    OracleParams,
    Percent,
    QuotePair,
    RecoupTranche,
    ScaledOfferFactorOverride,
    SwapperCall,
    TokenAmount,
    ensure_bytes,
)

_PERCENT_MULTIPLIER = Decimal(PERCENTAGE_SCALE) / Decimal(100)


def format_percent(percent: Percent) -> int:
    """Scale a percentage to parts-per-million (100% == PERCENTAGE_SCALE)."""
    return int(Decimal(str(percent)) * _PERCENT_MULTIPLIER)


def format_scaled_offer_factor(percent: Percent) -> int:
    """Encode a discount percentage as the swapper's scaled offer factor.

    A 1% discount quotes at 99% of the oracle price, i.e. 990000.
    """
    return PERCENTAGE_SCALE - format_percent(percent)


def scaled_offer_factor_to_percent(scaled_offer_factor: int) -> Decimal:
    """Convert an on-chain scaled offer factor back to a discount percentage."""
    return (Decimal(PERCENTAGE_SCALE) - Decimal(scaled_offer_factor)) / _PERCENT_MULTIPLIER


def format_address(address: str | None) -> str:
    """Return the checksum address, or the zero sentinel for an absent one."""
    if address is None:
        return ZERO_ADDRESS
    return Web3.to_checksum_address(address)


def format_oracle_params(oracle_params: OracleParams) -> tuple[str, tuple[str, bytes]]:
    create = oracle_params.create_oracle_params
    factory = format_address(create.factory if create else None)
    data = ensure_bytes(create.data) if create else b""
    return (format_address(oracle_params.address), (factory, data))


def format_scaled_offer_factor_overrides(
    overrides: Sequence[ScaledOfferFactorOverride],
) -> list[tuple[tuple[str, str], int]]:
    return [
        (
            (format_address(override.base_token), format_address(override.quote_token)),
            format_scaled_offer_factor(override.scaled_offer_factor_percent),
        )
        for override in overrides
    ]


def format_quote_pairs(quote_pairs: Sequence[QuotePair]) -> list[tuple[str, str]]:
    return [(format_address(pair.base), format_address(pair.quote)) for pair in quote_pairs]


def format_calls(calls: Sequence[SwapperCall]) -> list[tuple[str, int, bytes]]:
    return [(format_address(call.to), int(call.value), ensure_bytes(call.data)) for call in calls]


def to_token_units(amount: TokenAmount, decimals: int) -> int:
    """Convert a human token amount to integer base units.

    Works on the exact digit tuple so amounts wider than the decimal context
    are never rounded. Amounts finer than ``decimals`` are rejected.
    """
    sign, digits, exponent = Decimal(str(amount)).as_tuple()
    if not isinstance(exponent, int):
        raise ValidationError("Token amount must be finite", field="amount", value=amount)

    coefficient = int("".join(str(digit) for digit in digits))
    shift = decimals + exponent
    if shift >= 0:
        units = coefficient * 10**shift
    else:
        units, remainder = divmod(coefficient, 10**-shift)
        if remainder:
            raise ValidationError(
                f"Token amount has more than {decimals} decimal places",
                field="amount",
                value=amount,
            )
    return -units if sign else units



def format_split_recipients(config: CreateSplitConfig) -> tuple[list[str], list[int]]:
    """Return recipients sorted by address with their scaled allocations."""

    ordered = sorted(config.recipients, key=lambda recipient: recipient.address.lower())
    addresses = [format_address(recipient.address) for recipient in ordered]
    allocations = [format_percent(recipient.percent_allocation) for recipient in ordered]
    return addresses, allocations


def format_recoup_tranche(recipient: str | CreateSplitConfig) -> FormattedTranche:
    if isinstance(recipient, CreateSplitConfig):
        addresses, allocations = format_split_recipients(recipient)
        return FormattedTranche(
            recipients=addresses,
            percent_allocations=allocations,
            controller=format_address(recipient.controller),
            distributor_fee=format_percent(recipient.distributor_fee_percent),
        )

    return FormattedTranche(
        recipients=[format_address(recipient)],
        percent_allocations=[PERCENTAGE_SCALE],
        controller=ZERO_ADDRESS,
        distributor_fee=0,
    )


def format_recoup_tranches(
    tranches: Sequence[RecoupTranche], decimals: int
) -> tuple[list[tuple[list[str], list[int], str, int]], list[int]]:
    """Shape tranches for ``createRecoup`` and accumulate sizes into thresholds."""

    formatted: list[tuple[list[str], list[int], str, int]] = []
    thresholds: list[int] = []
    running_total = 0
    for tranche in tranches:
        formatted.append(format_recoup_tranche(tranche.recipient).as_tuple())
        if tranche.size is not None:
            running_total += to_token_units(tranche.size, decimals)
            thresholds.append(running_total)

    return formatted, thresholds


def format_tranche_index(tranche_index: int | None, tranche_count: int) -> int:
    """Encode an absent tranche index as the out-of-range ``tranche_count``."""
    return tranche_count if tranche_index is None else tranche_index
