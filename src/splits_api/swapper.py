"""Client for the Swapper module and its factory."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .abi import Swapper_abi, SwapperFactory_abi
from .base import SplitsClientBase, build_descriptors
from .constants import ContractKind
from .evm.descriptors import OperationDescriptor
from .formatting import (
    format_address,
    format_calls,
    format_oracle_params,
    format_quote_pairs,
    format_scaled_offer_factor,
    format_scaled_offer_factor_overrides,
)
from .types import (
    Address,
    CallData,
    CreateSwapperConfig,
    CreateSwapperResult,
    EventResult,
    OracleParams,
    Percent,
    QuotePair,
    ScaledOfferFactorOverride,
    SubmittedTransaction,
    SwapperCall,
)
from .validation import (
    validate_address,
    validate_bool,
    validate_calls,
    validate_oracle_params,
    validate_quote_pairs,
    validate_scaled_offer_factor,
    validate_scaled_offer_factor_overrides,
)

logger = logging.getLogger(__name__)

_FACTORY = ContractKind.SWAPPER_FACTORY
_SWAPPER = ContractKind.SWAPPER

_OPERATIONS = (
    ("create_swapper", _FACTORY, SwapperFactory_abi, "createSwapper", ("CreateSwapper",)),
    ("set_beneficiary", _SWAPPER, Swapper_abi, "setBeneficiary", ("SetBeneficiary",)),
    (
        "set_token_to_beneficiary",
        _SWAPPER,
        Swapper_abi,
        "setTokenToBeneficiary",
        ("SetTokenToBeneficiary",),
    ),
    ("set_oracle", _SWAPPER, Swapper_abi, "setOracle", ("SetOracle",)),
    (
        "set_default_scaled_offer_factor",
        _SWAPPER,
        Swapper_abi,
        "setDefaultScaledOfferFactor",
        ("SetDefaultScaledOfferFactor",),
    ),
    (
        "set_scaled_offer_factor_overrides",
        _SWAPPER,
        Swapper_abi,
        "setPairScaledOfferFactors",
        ("SetPairScaledOfferFactors",),
    ),
    ("set_paused", _SWAPPER, Swapper_abi, "setPaused", ("SetPaused",)),
    ("exec_calls", _SWAPPER, Swapper_abi, "execCalls", ("ExecCalls",)),
    ("get_beneficiary", _SWAPPER, Swapper_abi, "beneficiary", ()),
    ("get_token_to_beneficiary", _SWAPPER, Swapper_abi, "tokenToBeneficiary", ()),
    ("get_oracle", _SWAPPER, Swapper_abi, "oracle", ()),
    ("get_paused", _SWAPPER, Swapper_abi, "paused", ()),
    ("get_default_scaled_offer_factor", _SWAPPER, Swapper_abi, "defaultScaledOfferFactor", ()),
    (
        "get_scaled_offer_factor_overrides",
        _SWAPPER,
        Swapper_abi,
        "getPairScaledOfferFactors",
        (),
    ),
)

_DESCRIPTORS = build_descriptors(_OPERATIONS)


def _event_result(event: Any) -> EventResult:
    return EventResult(event=event)


class SwapperClient(SplitsClientBase):
    """Create and manage Swapper modules.

    Every mutating method returns a result dataclass when executing, an
    ``int`` gas estimate on ``client.estimate_gas`` and a ``CallData`` on
    ``client.call_data``. Reads only need a provider.
    """

    contract_kinds = (_FACTORY, _SWAPPER)

    def _build_descriptors(self) -> Mapping[str, OperationDescriptor]:
        return _DESCRIPTORS

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    async def create_swapper(
        self,
        owner: Address,
        paused: bool,
        beneficiary: Address,
        token_to_beneficiary: Address,
        oracle_params: OracleParams | Mapping[str, Any],
        default_scaled_offer_factor_percent: Percent,
        scaled_offer_factor_overrides: Sequence[ScaledOfferFactorOverride] = (),
    ) -> CreateSwapperResult | int | CallData:
        """Deploy a new Swapper through the factory.

        Args:
            owner: Account allowed to administer the swapper
            paused: Whether the swapper starts paused
            beneficiary: Recipient of swapped tokens
            token_to_beneficiary: Token paid out to the beneficiary
            oracle_params: Existing oracle address or params to create one
            default_scaled_offer_factor_percent: Discount applied to oracle quotes
            scaled_offer_factor_overrides: Per-pair discounts

        Returns:
            ``CreateSwapperResult`` with the new swapper address when executing
        """
        params = self._create_swapper_params(
            owner,
            paused,
            beneficiary,
            token_to_beneficiary,
            oracle_params,
            default_scaled_offer_factor_percent,
            scaled_offer_factor_overrides,
        )

        def build(event: Any) -> CreateSwapperResult:
            return CreateSwapperResult(swapper_id=event.args["swapper"], event=event)

        return await self._execute("create_swapper", (params,), build)

    async def submit_create_swapper(
        self,
        owner: Address,
        paused: bool,
        beneficiary: Address,
        token_to_beneficiary: Address,
        oracle_params: OracleParams | Mapping[str, Any],
        default_scaled_offer_factor_percent: Percent,
        scaled_offer_factor_overrides: Sequence[ScaledOfferFactorOverride] = (),
    ) -> SubmittedTransaction:
        """Submit ``createSwapper`` and return the mined transaction undecoded."""
        self._require_executing()
        params = self._create_swapper_params(
            owner,
            paused,
            beneficiary,
            token_to_beneficiary,
            oracle_params,
            default_scaled_offer_factor_percent,
            scaled_offer_factor_overrides,
        )
        return await self._submit("create_swapper", (params,))

    def _create_swapper_params(
        self,
        owner: Address,
        paused: bool,
        beneficiary: Address,
        token_to_beneficiary: Address,
        oracle_params: OracleParams | Mapping[str, Any],
        default_scaled_offer_factor_percent: Percent,
        scaled_offer_factor_overrides: Sequence[ScaledOfferFactorOverride],
    ) -> tuple[Any, ...]:
        if isinstance(oracle_params, Mapping):
            oracle_params = OracleParams.from_dict(oracle_params)

        validate_address(owner, "owner")
        validate_bool(paused, "paused")
        validate_address(beneficiary, "beneficiary")
        validate_address(token_to_beneficiary, "token_to_beneficiary")
        validate_oracle_params(oracle_params)
        validate_scaled_offer_factor(
            default_scaled_offer_factor_percent, "default_scaled_offer_factor_percent"
        )
        validate_scaled_offer_factor_overrides(scaled_offer_factor_overrides)

        return (
            format_address(owner),
            paused,
            format_address(beneficiary),
            format_address(token_to_beneficiary),
            format_oracle_params(oracle_params),
            format_scaled_offer_factor(default_scaled_offer_factor_percent),
            format_scaled_offer_factor_overrides(scaled_offer_factor_overrides),
        )

    async def create_swapper_from_config(
        self, config: CreateSwapperConfig
    ) -> CreateSwapperResult | int | CallData:
        return await self.create_swapper(
            owner=config.owner,
            paused=config.paused,
            beneficiary=config.beneficiary,
            token_to_beneficiary=config.token_to_beneficiary,
            oracle_params=config.oracle_params,
            default_scaled_offer_factor_percent=config.default_scaled_offer_factor_percent,
            scaled_offer_factor_overrides=config.scaled_offer_factor_overrides,
        )

    async def set_beneficiary(
        self, swapper_id: Address, beneficiary: Address
    ) -> EventResult | int | CallData:
        swapper = validate_address(swapper_id, "swapper_id")
        validate_address(beneficiary, "beneficiary")
        return await self._execute(
            "set_beneficiary", (format_address(beneficiary),), _event_result, target=swapper
        )

    async def set_token_to_beneficiary(
        self, swapper_id: Address, token_to_beneficiary: Address
    ) -> EventResult | int | CallData:
        swapper = validate_address(swapper_id, "swapper_id")
        validate_address(token_to_beneficiary, "token_to_beneficiary")
        return await self._execute(
            "set_token_to_beneficiary",
            (format_address(token_to_beneficiary),),
            _event_result,
            target=swapper,
        )

    async def set_oracle(
        self, swapper_id: Address, oracle: Address
    ) -> EventResult | int | CallData:
        swapper = validate_address(swapper_id, "swapper_id")
        validate_address(oracle, "oracle")
        return await self._execute(
            "set_oracle", (format_address(oracle),), _event_result, target=swapper
        )

    async def set_default_scaled_offer_factor(
        self, swapper_id: Address, default_scaled_offer_factor_percent: Percent
    ) -> EventResult | int | CallData:
        swapper = validate_address(swapper_id, "swapper_id")
        validate_scaled_offer_factor(
            default_scaled_offer_factor_percent, "default_scaled_offer_factor_percent"
        )
        return await self._execute(
            "set_default_scaled_offer_factor",
            (format_scaled_offer_factor(default_scaled_offer_factor_percent),),
            _event_result,
            target=swapper,
        )

    async def set_scaled_offer_factor_overrides(
        self,
        swapper_id: Address,
        scaled_offer_factor_overrides: Sequence[ScaledOfferFactorOverride],
    ) -> EventResult | int | CallData:
        swapper = validate_address(swapper_id, "swapper_id")
        validate_scaled_offer_factor_overrides(scaled_offer_factor_overrides)
        return await self._execute(
            "set_scaled_offer_factor_overrides",
            (format_scaled_offer_factor_overrides(scaled_offer_factor_overrides),),
            _event_result,
            target=swapper,
        )

    async def set_paused(self, swapper_id: Address, paused: bool) -> EventResult | int | CallData:
        swapper = validate_address(swapper_id, "swapper_id")
        validate_bool(paused, "paused")
        return await self._execute("set_paused", (paused,), _event_result, target=swapper)

    async def exec_calls(
        self, swapper_id: Address, calls: Sequence[SwapperCall]
    ) -> EventResult | int | CallData:
        """Run arbitrary calls from the swapper.

        Per-call values are paid from the swapper's own balance, so the
        transaction itself carries no value.
        """
        swapper = validate_address(swapper_id, "swapper_id")
        validate_calls(calls)
        return await self._execute(
            "exec_calls", (format_calls(calls),), _event_result, target=swapper
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    async def get_beneficiary(self, swapper_id: Address) -> Address:
        (beneficiary,) = await self._read(
            "get_beneficiary", target=validate_address(swapper_id, "swapper_id")
        )
        return beneficiary

    async def get_token_to_beneficiary(self, swapper_id: Address) -> Address:
        (token,) = await self._read(
            "get_token_to_beneficiary", target=validate_address(swapper_id, "swapper_id")
        )
        return token

    async def get_oracle(self, swapper_id: Address) -> Address:
        (oracle,) = await self._read(
            "get_oracle", target=validate_address(swapper_id, "swapper_id")
        )
        return oracle

    async def get_paused(self, swapper_id: Address) -> bool:
        (paused,) = await self._read(
            "get_paused", target=validate_address(swapper_id, "swapper_id")
        )
        return bool(paused)

    async def get_default_scaled_offer_factor(self, swapper_id: Address) -> int:
        """Return the raw on-chain factor (1e6 == quote at 100% of the oracle price)."""
        (factor,) = await self._read(
            "get_default_scaled_offer_factor",
            target=validate_address(swapper_id, "swapper_id"),
        )
        return int(factor)

    async def get_scaled_offer_factor_overrides(
        self, swapper_id: Address, quote_pairs: Sequence[QuotePair]
    ) -> list[int]:
        swapper = validate_address(swapper_id, "swapper_id")
        validate_quote_pairs(quote_pairs)

        (factors,) = await self._read(
            "get_scaled_offer_factor_overrides",
            (format_quote_pairs(quote_pairs),),
            target=swapper,
        )
        logger.debug("Read %d scaled offer factor overrides from %s", len(factors), swapper)
        return [int(factor) for factor in factors]
