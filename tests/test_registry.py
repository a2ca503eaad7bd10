"""Tests for chain support and address resolution."""

from __future__ import annotations

import pytest
from web3 import Web3

from splits_api.constants import (
    RECOUP_ADDRESS,
    SWAPPER_CHAIN_IDS,
    SWAPPER_FACTORY_ADDRESS,
    TEMPLATES_CHAIN_IDS,
    ContractKind,
)
from splits_api.evm.config import ClientConfig
from splits_api.evm.registry import ChainRegistry
from splits_api.exceptions import InvalidConfigError, UnsupportedChainError


@pytest.mark.parametrize("chain_id", SWAPPER_CHAIN_IDS)
def test_swapper_factory_resolves_on_supported_chains(chain_id: int) -> None:
    registry = ChainRegistry.default()
    resolved = registry.resolve_address(chain_id, ContractKind.SWAPPER_FACTORY)

    assert resolved == Web3.to_checksum_address(SWAPPER_FACTORY_ADDRESS)
    assert resolved == registry.resolve_address(chain_id, ContractKind.SWAPPER_FACTORY)


@pytest.mark.parametrize("chain_id", TEMPLATES_CHAIN_IDS)
def test_recoup_resolves_on_supported_chains(chain_id: int) -> None:
    resolved = ChainRegistry.default().resolve_address(chain_id, ContractKind.RECOUP)
    assert resolved == Web3.to_checksum_address(RECOUP_ADDRESS)


@pytest.mark.parametrize("chain_id", [3, 56, 100, 999_999])
def test_unsupported_chain_lists_supported_set(chain_id: int) -> None:
    with pytest.raises(UnsupportedChainError) as exc_info:
        ChainRegistry.default().resolve_address(chain_id, ContractKind.SWAPPER_FACTORY)

    error = exc_info.value
    assert error.chain_id == chain_id
    assert error.supported_chain_ids == SWAPPER_CHAIN_IDS
    assert str(list(SWAPPER_CHAIN_IDS)) in str(error)


def test_templates_support_more_chains_than_swapper() -> None:
    registry = ChainRegistry.default()
    assert registry.is_supported(7777777, ContractKind.RECOUP)
    assert not registry.is_supported(7777777, ContractKind.SWAPPER)


def test_module_kind_without_address_table() -> None:
    registry = ChainRegistry.default()
    registry.assert_supported(1, ContractKind.SWAPPER)

    with pytest.raises(UnsupportedChainError):
        registry.resolve_address(1, ContractKind.SWAPPER)


def test_injected_registry() -> None:
    registry = ChainRegistry(
        {ContractKind.RECOUP: [31337]},
        {ContractKind.RECOUP: {31337: "0x" + "1" * 40}},
    )

    assert registry.resolve_address(31337, ContractKind.RECOUP) == "0x" + "1" * 40
    assert registry.supported_chain_ids(ContractKind.SWAPPER) == ()
    assert ClientConfig(chain_id=31337, registry=registry).resolved_registry() is registry


def test_default_registry_is_shared() -> None:
    assert ChainRegistry.default() is ChainRegistry.default()
    assert ClientConfig(chain_id=1).resolved_registry() is ChainRegistry.default()


@pytest.mark.parametrize(
    ("chain_id", "receipt_timeout"),
    [(0, 10.0), (-1, 10.0), (True, 10.0), ("1", 10.0), (1, 0), (1, -5.0)],
)
def test_invalid_client_config(chain_id: object, receipt_timeout: float) -> None:
    config = ClientConfig(
        chain_id=chain_id, receipt_timeout=receipt_timeout  # type: ignore[arg-type]
    )
    with pytest.raises(InvalidConfigError):
        config.validate()
