"""Exception hierarchy for the 0xSplits module client."""

from collections.abc import Iterable
from typing import Any


class SplitsError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(SplitsError):
    """Raised when a single input field violates a constraint."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidArgumentError(SplitsError):
    """Raised when a combination of arguments breaks a cross-field rule."""

    pass


class InvalidConfigError(SplitsError):
    """Raised when the client is constructed with an unusable configuration."""

    pass


class UnsupportedChainError(SplitsError):
    """Raised when a chain id is not supported by an operation."""

    def __init__(self, chain_id: int, supported_chain_ids: Iterable[int]):
        supported = tuple(supported_chain_ids)
        super().__init__(
            f"Unsupported chain {chain_id}; supported chains are {list(supported)}",
            details={"chain_id": chain_id, "supported_chain_ids": list(supported)},
        )
        self.chain_id = chain_id
        self.supported_chain_ids = supported


class MissingProviderError(SplitsError):
    """Raised when an operation needs a provider and none is configured."""

    def __init__(self, message: str = "Provider required to perform this action"):
        super().__init__(message)


class MissingSignerError(SplitsError):
    """Raised when a transaction must be submitted and no signer is configured."""

    def __init__(self, message: str = "Signer required to perform this action"):
        super().__init__(message)


class TransactionFailedError(SplitsError):
    """Raised when a mined transaction did not have its expected effect."""

    def __init__(
        self,
        message: str = "Transaction failed",
        tx_hash: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.tx_hash = tx_hash


class InvalidResponseError(SplitsError):
    """Raised when the dispatcher returns a result that does not match the mode."""

    pass
