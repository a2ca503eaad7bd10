"""Static ABI artifacts for the contracts the client talks to."""

from .erc20 import ERC20_abi
from .recoup import Recoup_abi
from .swapper import Swapper_abi
from .swapper_factory import SwapperFactory_abi

__all__ = ["ERC20_abi", "Recoup_abi", "Swapper_abi", "SwapperFactory_abi"]
