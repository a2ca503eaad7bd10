"""Configuration container for the Splits module clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..exceptions import InvalidConfigError
from .registry import ChainRegistry

if TYPE_CHECKING:  # pragma: no cover - import-time only
    from .connections import Signer, Transport

DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_RECEIPT_TIMEOUT = 120.0


@dataclass(frozen=True)
class ClientConfig:
    """Aggregated configuration shared by the execute, gas and calldata clients."""

    chain_id: int
    provider: Transport | None = None
    signer: Signer | None = None
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT
    registry: ChainRegistry | None = None

    def validate(self) -> None:
        if isinstance(self.chain_id, bool) or not isinstance(self.chain_id, int):
            raise InvalidConfigError(
                "Chain id must be an integer", details={"chain_id": self.chain_id}
            )
        if self.chain_id <= 0:
            raise InvalidConfigError(
                "Chain id must be positive", details={"chain_id": self.chain_id}
            )
        if self.receipt_timeout <= 0:
            raise InvalidConfigError(
                "Receipt timeout must be positive",
                details={"receipt_timeout": self.receipt_timeout},
            )

    def resolved_registry(self) -> ChainRegistry:
        """Return the injected registry, defaulting to the bundled deployments."""

        return self.registry if self.registry is not None else ChainRegistry.default()
