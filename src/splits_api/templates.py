"""Client for the template factories (Recoup)."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .abi import ERC20_abi, Recoup_abi
from .base import SplitsClientBase, build_descriptors
from .constants import NATIVE_TOKEN_DECIMALS, ZERO_ADDRESS, ContractKind
from .evm.descriptors import OperationDescriptor
from .formatting import format_address, format_recoup_tranches, format_tranche_index
from .types import (
    Address,
    CallData,
    CreateRecoupConfig,
    CreateRecoupResult,
    RecoupTranche,
    SubmittedTransaction,
)
from .validation import (
    validate_address,
    validate_recoup_non_waterfall_recipient,
    validate_recoup_tranches,
    validate_tranche_size_precision,
)

logger = logging.getLogger(__name__)

_OPERATIONS = (
    ("create_recoup", ContractKind.RECOUP, Recoup_abi, "createRecoup", ("CreateRecoup",)),
    ("token_decimals", ContractKind.ERC20, ERC20_abi, "decimals", ()),
)

_DESCRIPTORS = build_descriptors(_OPERATIONS)


class TemplatesClient(SplitsClientBase):
    contract_kinds = (ContractKind.RECOUP,)

    def _build_descriptors(self) -> Mapping[str, OperationDescriptor]:
        return _DESCRIPTORS

    async def get_token_decimals(self, token: Address) -> int:
        """Return the ERC20 decimals, or 18 for the native token."""
        token = validate_address(token, "token")
        if token == ZERO_ADDRESS:
            return NATIVE_TOKEN_DECIMALS

        (decimals,) = await self._read("token_decimals", target=token)
        return int(decimals)

    async def create_recoup(
        self,
        token: Address,
        tranches: Sequence[RecoupTranche],
        non_waterfall_recipient: Address | None = None,
        non_waterfall_recipient_tranche_index: int | None = None,
    ) -> CreateRecoupResult | int | CallData:
        """Deploy a waterfall module whose tranches may be splits.

        Each tranche but the last carries a size in whole token units; sizes
        are accumulated into thresholds at the token's decimals, which are
        read from the token contract before formatting.

        Args:
            token: Token distributed by the waterfall (zero address for native)
            tranches: Ordered tranches; a recipient is an address or a split config
            non_waterfall_recipient: Receives tokens the waterfall cannot distribute
            non_waterfall_recipient_tranche_index: Tranche that receives them instead

        Returns:
            ``CreateRecoupResult`` with the waterfall module address when executing
        """
        args = await self._create_recoup_args(
            token, tranches, non_waterfall_recipient, non_waterfall_recipient_tranche_index
        )

        def build(event: Any) -> CreateRecoupResult:
            return CreateRecoupResult(
                waterfall_module_id=event.args["waterfallModule"], event=event
            )

        return await self._execute("create_recoup", args, build)

    async def submit_create_recoup(
        self,
        token: Address,
        tranches: Sequence[RecoupTranche],
        non_waterfall_recipient: Address | None = None,
        non_waterfall_recipient_tranche_index: int | None = None,
    ) -> SubmittedTransaction:
        """Submit ``createRecoup`` and return the mined transaction undecoded."""
        self._require_executing()
        args = await self._create_recoup_args(
            token, tranches, non_waterfall_recipient, non_waterfall_recipient_tranche_index
        )
        return await self._submit("create_recoup", args)

    async def _create_recoup_args(
        self,
        token: Address,
        tranches: Sequence[RecoupTranche],
        non_waterfall_recipient: Address | None,
        non_waterfall_recipient_tranche_index: int | None,
    ) -> tuple[Any, ...]:
        token = validate_address(token, "token")
        validate_recoup_tranches(tranches)
        validate_recoup_non_waterfall_recipient(
            len(tranches), non_waterfall_recipient, non_waterfall_recipient_tranche_index
        )

        self._require_prerequisites()
        decimals = await self.get_token_decimals(token)
        logger.debug("Using %d decimals for recoup token %s", decimals, token)
        validate_tranche_size_precision(tranches, decimals)

        formatted_tranches, thresholds = format_recoup_tranches(tranches, decimals)
        recipient = non_waterfall_recipient
        if recipient is not None and recipient.lower() == ZERO_ADDRESS:
            recipient = None
        return (
            token,
            format_address(recipient),
            format_tranche_index(non_waterfall_recipient_tranche_index, len(tranches)),
            formatted_tranches,
            thresholds,
        )

    async def create_recoup_from_config(
        self, config: CreateRecoupConfig
    ) -> CreateRecoupResult | int | CallData:
        return await self.create_recoup(
            token=config.token,
            tranches=config.tranches,
            non_waterfall_recipient=config.non_waterfall_recipient,
            non_waterfall_recipient_tranche_index=config.non_waterfall_recipient_tranche_index,
        )
