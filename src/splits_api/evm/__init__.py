"""Execution layer: registry, descriptors, transport, dispatch and events."""

from .config import DEFAULT_RECEIPT_TIMEOUT, DEFAULT_REQUEST_TIMEOUT, ClientConfig
from .connections import LocalSigner, Signer, Transport, Web3Transport
from .descriptors import EventSchema, FunctionSchema, OperationDescriptor
from .events import EventExtractor
from .registry import ChainRegistry
from .transactions import ExecutionDispatcher

__all__ = [
    "DEFAULT_RECEIPT_TIMEOUT",
    "DEFAULT_REQUEST_TIMEOUT",
    "ChainRegistry",
    "ClientConfig",
    "EventExtractor",
    "EventSchema",
    "ExecutionDispatcher",
    "FunctionSchema",
    "LocalSigner",
    "OperationDescriptor",
    "Signer",
    "Transport",
    "Web3Transport",
]
