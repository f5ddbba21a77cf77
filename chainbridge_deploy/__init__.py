"""
ChainBridge contract deployment tool

Deploys the Bridge, handler, ERC20 and asset store contracts to an EVM chain
over JSON-RPC and reports the resulting addresses.
"""

__version__ = "1.0.0"
__author__ = "ChainBridge contributors"

from .artifacts.loader import (
    get_abi,
    get_bytecode,
    load_artifact,
)

from .deploy import DeploymentSequencer, run_deployment
from .exceptions import (
    ChainBridgeDeployError,
    InvalidBridgeAddress,
    NoTargetSpecified,
)
from .models import ContractKind, DeploymentResult, ExecutionContext, Selection
from .report import format_config, render_config, render_summary

__all__ = [
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'DeploymentSequencer',
    'run_deployment',
    'ChainBridgeDeployError',
    'InvalidBridgeAddress',
    'NoTargetSpecified',
    'ContractKind',
    'DeploymentResult',
    'ExecutionContext',
    'Selection',
    'format_config',
    'render_config',
    'render_summary',
]
