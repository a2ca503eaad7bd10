"""Tests for splits_api.validation."""

from __future__ import annotations

from decimal import Decimal

import pytest
from conftest import BENEFICIARY, OWNER, TOKEN, address

from splits_api.constants import PERCENTAGE_SCALE, ZERO_ADDRESS
from splits_api.exceptions import InvalidArgumentError, ValidationError
from splits_api.formatting import format_percent, format_scaled_offer_factor
from splits_api.types import (
    CreateOracleParams,
    CreateSplitConfig,
    OracleParams,
    RecoupTranche,
    ScaledOfferFactorOverride,
    SplitRecipient,
    SwapperCall,
)
from splits_api.validation import (
    validate_address,
    validate_bool,
    validate_calls,
    validate_hex_data,
    validate_oracle_params,
    validate_percent,
    validate_recoup_non_waterfall_recipient,
    validate_recoup_tranches,
    validate_scaled_offer_factor_overrides,
    validate_split_config,
    validate_tranche_size_precision,
)


class TestAddress:
    def test_lowercase_is_checksummed(self) -> None:
        assert validate_address("0x" + "a" * 40) == OWNER

    def test_rejects_short_address(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_address("0x1234", "owner")
        assert exc_info.value.field == "owner"

    def test_rejects_bad_checksum(self) -> None:
        mixed = OWNER[:2] + OWNER[2:].swapcase()
        with pytest.raises(ValidationError):
            validate_address(mixed)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ValidationError):
            validate_address(1234)


class TestHexData:
    def test_accepts_bytes_and_hex(self) -> None:
        assert validate_hex_data(b"\x01") == b"\x01"
        assert validate_hex_data("0x0102") == b"\x01\x02"

    def test_requires_prefix(self) -> None:
        with pytest.raises(ValidationError):
            validate_hex_data("0102")

    def test_rejects_non_hex(self) -> None:
        with pytest.raises(ValidationError):
            validate_hex_data("0xzz")


class TestPercent:
    @pytest.mark.parametrize("value", [0, 100, 1, 0.5, "12.3456", Decimal("99.9999")])
    def test_accepts_in_range(self, value: object) -> None:
        validate_percent(value)

    @pytest.mark.parametrize("value", [-0.0001, 100.0001, 101, -1])
    def test_rejects_out_of_range(self, value: object) -> None:
        with pytest.raises(ValidationError, match=r"\[0,100\]"):
            validate_percent(value)

    def test_rejects_excess_precision(self) -> None:
        with pytest.raises(ValidationError, match="decimal places"):
            validate_percent("1.00001")

    @pytest.mark.parametrize("value", [True, None, "abc", float("nan"), float("inf")])
    def test_rejects_non_numeric(self, value: object) -> None:
        with pytest.raises(ValidationError):
            validate_percent(value)

    @pytest.mark.parametrize(
        "value", [0, 0.0001, 0.1, 1.2345, 33.3333, 50, 66.6667, 99.9999, 100, "7.05"]
    )
    def test_accepted_values_format_losslessly(self, value: object) -> None:
        accepted = validate_percent(value)
        scaled = format_percent(value)  # type: ignore[arg-type]

        assert 0 <= scaled <= PERCENTAGE_SCALE
        assert Decimal(scaled) / Decimal(10_000) == accepted
        assert 0 <= format_scaled_offer_factor(value) <= PERCENTAGE_SCALE  # type: ignore[arg-type]


class TestSwapperInputs:
    def test_oracle_requires_exactly_one_source(self) -> None:
        with pytest.raises(InvalidArgumentError):
            validate_oracle_params(OracleParams())
        with pytest.raises(InvalidArgumentError):
            validate_oracle_params(
                OracleParams(address=OWNER, create_oracle_params=CreateOracleParams(OWNER))
            )

    def test_oracle_create_params_are_checked(self) -> None:
        validate_oracle_params(OracleParams(create_oracle_params=CreateOracleParams(OWNER, "0x")))
        with pytest.raises(ValidationError) as exc_info:
            validate_oracle_params(
                OracleParams(create_oracle_params=CreateOracleParams(OWNER, "nothex"))
            )
        assert exc_info.value.field == "oracle_params.create_oracle_params.data"

    def test_oracle_address_is_checked(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_oracle_params(OracleParams(address="0x1234"))
        assert exc_info.value.field == "oracle_params.address"

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_flag_must_be_bool(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_bool(value, "paused")
        assert exc_info.value.field == "paused"
        assert validate_bool(False, "paused") is False

    def test_duplicate_override_pair(self) -> None:
        overrides = [
            ScaledOfferFactorOverride(OWNER, TOKEN, 1),
            ScaledOfferFactorOverride("0x" + "a" * 40, TOKEN, 2),
        ]
        with pytest.raises(ValidationError, match="Duplicate"):
            validate_scaled_offer_factor_overrides(overrides)

    def test_override_percent_field_name(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_scaled_offer_factor_overrides([ScaledOfferFactorOverride(OWNER, TOKEN, 150)])
        assert exc_info.value.field == (
            "scaled_offer_factor_overrides[0].scaled_offer_factor_percent"
        )

    @pytest.mark.parametrize("value", [-1, True, 1.5])
    def test_call_value_must_be_wei(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_calls([SwapperCall(to=OWNER, value=value)])  # type: ignore[arg-type]
        assert exc_info.value.field == "calls[0].value"


def _split(*allocations: float, fee: float = 1) -> CreateSplitConfig:
    recipients = tuple(
        SplitRecipient(address(str(index + 1)), allocation)
        for index, allocation in enumerate(allocations)
    )
    return CreateSplitConfig(recipients=recipients, distributor_fee_percent=fee)


class TestSplitConfig:
    def test_valid_split(self) -> None:
        validate_split_config(_split(50, 50))

    def test_needs_two_recipients(self) -> None:
        with pytest.raises(ValidationError, match="two recipients"):
            validate_split_config(_split(100))

    def test_allocations_sum_to_hundred(self) -> None:
        with pytest.raises(ValidationError, match="sum to 100"):
            validate_split_config(_split(50, 49.9999))

    def test_zero_allocation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_split_config(_split(100, 0))

    def test_duplicate_recipient(self) -> None:
        config = CreateSplitConfig(
            recipients=(SplitRecipient(OWNER, 50), SplitRecipient(OWNER.lower(), 50)),
            distributor_fee_percent=0,
        )
        with pytest.raises(ValidationError, match="unique"):
            validate_split_config(config)

    def test_distributor_fee_capped(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_split_config(_split(50, 50, fee=10.5))
        assert exc_info.value.field == "split.distributor_fee_percent"


class TestRecoupTranches:
    def test_valid_tranches(self) -> None:
        validate_recoup_tranches(
            [RecoupTranche(OWNER, 10), RecoupTranche(_split(60, 40), "2.5"), RecoupTranche(TOKEN)]
        )

    def test_needs_two_tranches(self) -> None:
        with pytest.raises(ValidationError, match="two tranches"):
            validate_recoup_tranches([RecoupTranche(OWNER)])

    def test_last_tranche_has_no_size(self) -> None:
        with pytest.raises(ValidationError, match="residual"):
            validate_recoup_tranches([RecoupTranche(OWNER, 1), RecoupTranche(TOKEN, 1)])

    def test_middle_tranche_needs_size(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_recoup_tranches([RecoupTranche(OWNER), RecoupTranche(TOKEN)])
        assert exc_info.value.field == "tranches[0].size"

    @pytest.mark.parametrize("size", [0, -5])
    def test_sizes_must_be_positive(self, size: int) -> None:
        with pytest.raises(ValidationError, match="positive"):
            validate_recoup_tranches([RecoupTranche(OWNER, size), RecoupTranche(TOKEN)])

    def test_size_precision_against_decimals(self) -> None:
        tranches = [RecoupTranche(OWNER, "1.123"), RecoupTranche(TOKEN)]
        validate_tranche_size_precision(tranches, 6)
        with pytest.raises(ValidationError, match="2 decimal places"):
            validate_tranche_size_precision(tranches, 2)

    def test_size_precision_counts_every_digit(self) -> None:
        validate_tranche_size_precision(
            [RecoupTranche(OWNER, "12345678901.123456789012345678"), RecoupTranche(TOKEN)], 18
        )
        validate_tranche_size_precision([RecoupTranche(OWNER, "1.10"), RecoupTranche(TOKEN)], 1)
        with pytest.raises(ValidationError, match="18 decimal places"):
            validate_tranche_size_precision(
                [RecoupTranche(OWNER, "12345678901.1234567890123456789"), RecoupTranche(TOKEN)],
                18,
            )



class TestNonWaterfallRecipient:
    @pytest.mark.parametrize("recipient", [None, ZERO_ADDRESS])
    def test_absent_recipient_without_index(self, recipient: str | None) -> None:
        validate_recoup_non_waterfall_recipient(3, recipient, None)

    @pytest.mark.parametrize("recipient", [None, ZERO_ADDRESS])
    @pytest.mark.parametrize("index", [0, 1, 5])
    def test_absent_recipient_with_index(self, recipient: str | None, index: int) -> None:
        with pytest.raises(InvalidArgumentError):
            validate_recoup_non_waterfall_recipient(3, recipient, index)

    def test_recipient_without_index(self) -> None:
        with pytest.raises(InvalidArgumentError):
            validate_recoup_non_waterfall_recipient(3, BENEFICIARY, None)

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_recipient_with_valid_index(self, index: int) -> None:
        validate_recoup_non_waterfall_recipient(3, BENEFICIARY, index)

    @pytest.mark.parametrize("index", [-1, 3, True])
    def test_recipient_with_invalid_index(self, index: int) -> None:
        with pytest.raises(InvalidArgumentError, match=r"\[0,3\)"):
            validate_recoup_non_waterfall_recipient(3, BENEFICIARY, index)
