"""
Deployment reports.

``render_summary`` is the human readable recap printed after every run.
``render_config`` produces the chain entry for the ChainBridge relayer config
file; its keys are read by the relayer and must keep their names.
"""

import json
from typing import Any, Dict

from web3 import Web3

from .config import CHAIN_CONFIG_NAME
from .models import ContractKind, DeploymentResult, ExecutionContext

NOT_DEPLOYED = "Not Deployed"
RULE = "=" * 64
SEPARATOR = "-" * 64

CONFIG_HEADER = "EVM Configuration, please copy this into your ChainBridge config file:"

_ADDRESS_LABELS = [
    (ContractKind.BRIDGE, "Bridge:"),
    (ContractKind.ERC20_HANDLER, "Erc20 Handler:"),
    (ContractKind.GENERIC_HANDLER, "Generic Handler:"),
    (ContractKind.ERC20, "Erc20:"),
    (ContractKind.ASSET, "Chain Asset:"),
]


def _address_or_marker(
    context: ExecutionContext, result: DeploymentResult, kind: ContractKind
) -> str:
    if kind is ContractKind.BRIDGE:
        address = result.bridge_address(context)
    else:
        address = result.address_of(kind)
    return address or NOT_DEPLOYED


def render_summary(context: ExecutionContext, result: DeploymentResult) -> str:
    """Render the post-deployment summary."""
    lines = [
        RULE,
        f"Url:         {context.url}",
        f"Deployer:    {context.deployer}",
        f"Gas Limit:   {context.gas_limit}",
        f"Gas Price:   {context.gas_price}",
        f"Deploy Cost: {Web3.from_wei(result.cost, 'ether')}",
        "",
        "Options",
        "=======",
        f"Chain Id:    {context.chain_id}",
        f"Threshold:   {context.relayer_threshold}",
        f"Relayers:    {','.join(context.relayers)}",
        f"Bridge Fee:  {context.fee}",
        f"Expiry:      {context.expiry}",
        "",
        "Contract Addresses",
        RULE,
    ]
    for index, (kind, label) in enumerate(_ADDRESS_LABELS):
        if index:
            lines.append(SEPARATOR)
        lines.append(f"{label:<20}{_address_or_marker(context, result, kind)}")
    lines.append(RULE)
    return "\n".join(lines)


def render_config(context: ExecutionContext, result: DeploymentResult) -> Dict[str, Any]:
    """Build the relayer chain config entry for this deployment."""
    return {
        "name": CHAIN_CONFIG_NAME,
        "chainId": context.chain_id,
        "endpoint": context.url,
        "bridge": result.bridge_address(context),
        "erc20Handler": result.erc20_handler,
        "genericHandler": result.generic_handler,
        "gasLimit": int(context.gas_limit),
        "maxGasPrice": int(context.gas_price),
        "startBlock": "0",
        "http": "false",
        "relayers": list(context.relayers),
    }


def format_config(context: ExecutionContext, result: DeploymentResult) -> str:
    return json.dumps(render_config(context, result), indent=4)
