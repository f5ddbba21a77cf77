"""
Artifact loader for compiled ChainBridge contracts.

This module provides functions to load ABI, bytecode, and other metadata
from the Truffle-compiled contract artifacts.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

from ..config import ARTIFACTS_DIR_ENV

# Get the package root directory
PACKAGE_DIR = Path(__file__).parent.parent
# Artifacts are copied during package build to this location
PACKAGED_ARTIFACTS_DIR = PACKAGE_DIR / "data" / "artifacts"
# Development mode: the truffle build directory next to the package
BUILD_ARTIFACTS_DIR = PACKAGE_DIR.parent / "build" / "contracts"

# Explicit override; when unset the directory is resolved on every load so a
# .env file read after import still applies
ARTIFACTS_DIR: Optional[Path] = None

# Contract name mappings
CONTRACT_PATHS = {
    "Bridge": "Bridge.json",
    "ERC20Handler": "ERC20Handler.json",
    "GenericHandler": "GenericHandler.json",
    "ERC20Mintable": "ERC20PresetMinterPauser.json",
    "CentrifugeAsset": "CentrifugeAsset.json",
}


def _artifacts_dir() -> Path:
    """Directory artifacts are read from."""
    if ARTIFACTS_DIR is not None:
        return ARTIFACTS_DIR
    if os.getenv(ARTIFACTS_DIR_ENV):
        return Path(os.environ[ARTIFACTS_DIR_ENV])
    if PACKAGED_ARTIFACTS_DIR.exists():
        return PACKAGED_ARTIFACTS_DIR
    return BUILD_ARTIFACTS_DIR


def load_artifact(contract_name: str) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract (e.g., 'Bridge', 'ERC20Handler')

    Returns:
        Complete artifact dictionary including ABI, bytecode, and metadata

    Raises:
        FileNotFoundError: If the artifact file doesn't exist
        ValueError: If the contract name is not recognized
    """
    if contract_name not in CONTRACT_PATHS:
        available = ", ".join(CONTRACT_PATHS.keys())
        raise ValueError(
            f"Unknown contract: {contract_name}. "
            f"Available contracts: {available}"
        )

    artifact_path = _artifacts_dir() / CONTRACT_PATHS[contract_name]

    if not artifact_path.exists():
        raise FileNotFoundError(
            f"Artifact file not found: {artifact_path}\n"
            f"Compile the contracts or point {ARTIFACTS_DIR_ENV} at the build directory"
        )

    with open(artifact_path, 'r') as f:
        return json.load(f)


def get_abi(contract_name: str) -> list:
    """Get the ABI for a specific contract."""
    artifact = load_artifact(contract_name)
    return artifact.get('abi', [])


def get_bytecode(contract_name: str) -> str:
    """
    Get the deployment bytecode for a specific contract.

    Truffle and Hardhat both store it under ``bytecode``.

    Returns:
        Bytecode as a hex string (with '0x' prefix)
    """
    artifact = load_artifact(contract_name)
    bytecode = artifact.get('bytecode', '0x')
    if not bytecode.startswith('0x'):
        bytecode = '0x' + bytecode
    return bytecode


def list_available_contracts() -> list:
    """List all contracts this package knows how to deploy."""
    return list(CONTRACT_PATHS.keys())


def validate_artifacts() -> Dict[str, bool]:
    """
    Validate that all expected artifacts are present.

    Returns:
        Dictionary mapping contract names to availability status
    """
    status = {}
    for contract_name in CONTRACT_PATHS:
        try:
            load_artifact(contract_name)
            status[contract_name] = True
        except (FileNotFoundError, ValueError):
            status[contract_name] = False

    return status
