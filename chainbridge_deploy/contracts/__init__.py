"""Deployment wrappers for the ChainBridge contracts."""
from .asset import AssetStoreContract
from .bridge import BridgeContract
from .erc20 import ERC20Contract
from .handlers import ERC20HandlerContract, GenericHandlerContract

__all__ = [
    "AssetStoreContract",
    "BridgeContract",
    "ERC20Contract",
    "ERC20HandlerContract",
    "GenericHandlerContract",
]
