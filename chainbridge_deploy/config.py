"""
Default deployment parameters and environment overrides.

Values match the local development chain the ChainBridge contracts are
usually exercised against (ganache with the well-known test accounts).
"""

import os
from decimal import Decimal
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ARTIFACTS_DIR_ENV = "CHAINBRIDGE_ARTIFACTS_DIR"
URL_ENV = "CHAINBRIDGE_URL"
PRIVATE_KEY_ENV = "CHAINBRIDGE_PRIVATE_KEY"
GAS_LIMIT_ENV = "CHAINBRIDGE_GAS_LIMIT"
GAS_PRICE_ENV = "CHAINBRIDGE_GAS_PRICE"

DEFAULT_URL = "http://localhost:8545"
DEFAULT_GAS_LIMIT = 6721975
DEFAULT_GAS_PRICE = 20000000

DEFAULT_SOURCE_ID = 0
DEFAULT_RELAYER_THRESHOLD = 2
DEFAULT_FEE = Decimal("0")
DEFAULT_EXPIRY = 100
DEFAULT_ERC20_DECIMALS = 18

# "alice" development key
DEPLOYER_PRIVATE_KEY = "0x000000000000000000000000000000000000000000000000000000616c696365"
DEPLOYER_ADDRESS = "0xff93B45308FD417dF303D6515aB04D9e89a750Ca"

RELAYER_ADDRESSES = [
    "0xff93B45308FD417dF303D6515aB04D9e89a750Ca",
    "0x8e0a907331554AF72563Bd8D43051C2E64Be5d35",
    "0x24962717f8fA5BA3b931bACaF9ac03924EB475a0",
    "0x148FfB2074A9e59eD58142822b3eB3fcBffb0cd7",
    "0x4CEEf6139f00F9F4535Ad19640Ff7A0137708485",
]

# Identifier the relayer expects for EVM chains in its config file
CHAIN_CONFIG_NAME = "eth"


def load_env(path: Optional[str] = None) -> None:
    """Load a .env file into the process environment without overriding it."""
    load_dotenv(path or find_dotenv(usecwd=True))


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def default_url() -> str:
    return os.getenv(URL_ENV) or DEFAULT_URL


def default_private_key() -> str:
    return os.getenv(PRIVATE_KEY_ENV) or DEPLOYER_PRIVATE_KEY


def default_gas_limit() -> int:
    return _env_int(GAS_LIMIT_ENV, DEFAULT_GAS_LIMIT)


def default_gas_price() -> int:
    return _env_int(GAS_PRICE_ENV, DEFAULT_GAS_PRICE)
