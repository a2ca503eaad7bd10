"""Chain support and deployed-address resolution."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType

from web3 import Web3
from web3.types import ChecksumAddress

from ..constants import DEPLOYMENTS, SUPPORTED_CHAINS, ContractKind
from ..exceptions import UnsupportedChainError


class ChainRegistry:
    """Immutable lookup of supported chains and contract addresses per kind."""

    def __init__(
        self,
        supported_chains: Mapping[ContractKind, Iterable[int]],
        addresses: Mapping[ContractKind, Mapping[int, str]] | None = None,
    ) -> None:
        self._supported = MappingProxyType(
            {kind: tuple(chain_ids) for kind, chain_ids in supported_chains.items()}
        )
        self._addresses = MappingProxyType(
            {
                kind: MappingProxyType(
                    {
                        chain_id: Web3.to_checksum_address(address)
                        for chain_id, address in table.items()
                    }
                )
                for kind, table in (addresses or {}).items()
            }
        )

    @classmethod
    @lru_cache(maxsize=1)
    def default(cls) -> ChainRegistry:
        """Registry built once from the bundled deployment tables."""

        return cls(SUPPORTED_CHAINS, DEPLOYMENTS)

    def supported_chain_ids(self, kind: ContractKind) -> tuple[int, ...]:
        return self._supported.get(kind, ())

    def is_supported(self, chain_id: int, kind: ContractKind) -> bool:
        return chain_id in self.supported_chain_ids(kind)

    def assert_supported(self, chain_id: int, *kinds: ContractKind) -> None:
        for kind in kinds:
            if not self.is_supported(chain_id, kind):
                raise UnsupportedChainError(chain_id, self.supported_chain_ids(kind))

    def resolve_address(self, chain_id: int, kind: ContractKind) -> ChecksumAddress:
        self.assert_supported(chain_id, kind)

        table = self._addresses.get(kind, {})
        if chain_id not in table:
            raise UnsupportedChainError(chain_id, tuple(table))
        return table[chain_id]
