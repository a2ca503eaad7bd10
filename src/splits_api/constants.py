"""Constants and deployment tables for the 0xSplits module client."""

from enum import Enum

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# 1e6 == 100%
PERCENTAGE_SCALE = 1_000_000
PERCENT_DECIMALS = 4
MAX_DISTRIBUTOR_FEE_PERCENT = 10

NATIVE_TOKEN_DECIMALS = 18


class ContractKind(str, Enum):
    """Contract families an operation can target."""

    SWAPPER_FACTORY = "swapper_factory"
    SWAPPER = "swapper"
    RECOUP = "recoup"
    ERC20 = "erc20"


ETHEREUM_CHAIN_IDS = (1, 5)
POLYGON_CHAIN_IDS = (137, 80001)
OPTIMISM_CHAIN_IDS = (10, 420)
ARBITRUM_CHAIN_IDS = (42161, 421613)
BASE_CHAIN_IDS = (8453, 84531)
GNOSIS_CHAIN_IDS = (100,)
FANTOM_CHAIN_IDS = (250,)
AVALANCHE_CHAIN_IDS = (43114,)
BSC_CHAIN_IDS = (56,)
AURORA_CHAIN_IDS = (1313161554,)
ZORA_CHAIN_IDS = (7777777,)

SWAPPER_CHAIN_IDS = (
    *ETHEREUM_CHAIN_IDS,
    *POLYGON_CHAIN_IDS,
    *OPTIMISM_CHAIN_IDS,
    *ARBITRUM_CHAIN_IDS,
    *BASE_CHAIN_IDS,
)

TEMPLATES_CHAIN_IDS = (
    *SWAPPER_CHAIN_IDS,
    *GNOSIS_CHAIN_IDS,
    *FANTOM_CHAIN_IDS,
    *AVALANCHE_CHAIN_IDS,
    *BSC_CHAIN_IDS,
    *AURORA_CHAIN_IDS,
    *ZORA_CHAIN_IDS,
)

# Factories are deployed deterministically, so every supported chain shares
# one address per contract.
SWAPPER_FACTORY_ADDRESS = "0xa244bbe019cf1ba177ee5a532250be2663fb55ca"
RECOUP_ADDRESS = "0xf21b6c3d6f7a4e1e8b93d1f5c8c0ad07a45d1b62"

DEPLOYMENTS: dict[ContractKind, dict[int, str]] = {
    ContractKind.SWAPPER_FACTORY: {
        chain_id: SWAPPER_FACTORY_ADDRESS for chain_id in SWAPPER_CHAIN_IDS
    },
    ContractKind.RECOUP: {chain_id: RECOUP_ADDRESS for chain_id in TEMPLATES_CHAIN_IDS},
}

# Module contracts (one instance per created entity) have no fixed address;
# only the chains they exist on are enumerated.
SUPPORTED_CHAINS: dict[ContractKind, tuple[int, ...]] = {
    ContractKind.SWAPPER_FACTORY: SWAPPER_CHAIN_IDS,
    ContractKind.SWAPPER: SWAPPER_CHAIN_IDS,
    ContractKind.RECOUP: TEMPLATES_CHAIN_IDS,
    ContractKind.ERC20: TEMPLATES_CHAIN_IDS,
}
