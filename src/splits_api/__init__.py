"""0xSplits module client - Swapper and Recoup across EVM networks.

This library validates and formats module parameters, dispatches them in one
of three execution modes (submit, estimate gas, build calldata) and decodes
the resulting protocol events into typed results.
"""

from .base import SplitsClientBase
from .evm import ChainRegistry, ClientConfig, LocalSigner, Signer, Transport, Web3Transport
from .exceptions import (
    InvalidArgumentError,
    InvalidConfigError,
    InvalidResponseError,
    MissingProviderError,
    MissingSignerError,
    SplitsError,
    TransactionFailedError,
    UnsupportedChainError,
    ValidationError,
)
from .swapper import SwapperClient
from .templates import TemplatesClient
from .types import (
    CallData,
    CreateOracleParams,
    CreateRecoupConfig,
    CreateRecoupResult,
    CreateSplitConfig,
    CreateSwapperConfig,
    CreateSwapperResult,
    DomainEvent,
    EventResult,
    ExecutionMode,
    OracleParams,
    QuotePair,
    RecoupTranche,
    ScaledOfferFactorOverride,
    SplitRecipient,
    SubmittedTransaction,
    SwapperCall,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "SplitsClientBase",
    "SwapperClient",
    "TemplatesClient",
    # Execution layer
    "ChainRegistry",
    "ClientConfig",
    "LocalSigner",
    "Signer",
    "Transport",
    "Web3Transport",
    # Types
    "ExecutionMode",
    "CallData",
    "SubmittedTransaction",
    "DomainEvent",
    "EventResult",
    "CreateSwapperResult",
    "CreateRecoupResult",
    "CreateOracleParams",
    "OracleParams",
    "QuotePair",
    "ScaledOfferFactorOverride",
    "SwapperCall",
    "CreateSwapperConfig",
    "SplitRecipient",
    "CreateSplitConfig",
    "RecoupTranche",
    "CreateRecoupConfig",
    # Exceptions
    "SplitsError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidConfigError",
    "UnsupportedChainError",
    "MissingProviderError",
    "MissingSignerError",
    "TransactionFailedError",
    "InvalidResponseError",
]
