"""
Deployment sequencer.

Contracts are deployed one at a time, each after the previous one is mined:
handlers need the bridge address, and a single signer cannot safely have
several creation transactions in flight.

A handler without a usable bridge address is skipped with a warning. Every
other failure aborts the run; whatever was deployed before it stays on the
result.
"""

import logging
from typing import Callable, List, Optional, Tuple

from .contracts import (
    AssetStoreContract,
    BridgeContract,
    ERC20Contract,
    ERC20HandlerContract,
    GenericHandlerContract,
)
from .exceptions import NoTargetSpecified
from .models import ContractKind, DeploymentResult, ExecutionContext, Selection, is_valid_address

logger = logging.getLogger(__name__)


class DeploymentSequencer:
    """Deploys a selection of contracts for one execution context."""

    def __init__(
        self,
        context: ExecutionContext,
        client,
        result: Optional[DeploymentResult] = None,
    ):
        self.context = context
        self.client = client
        self.result = result if result is not None else DeploymentResult()
        self.steps: List[Tuple[ContractKind, Callable[[], str]]] = [
            (ContractKind.BRIDGE, self.deploy_bridge),
            (ContractKind.ERC20_HANDLER, self.deploy_erc20_handler),
            (ContractKind.GENERIC_HANDLER, self.deploy_generic_handler),
            (ContractKind.ERC20, self.deploy_erc20),
            (ContractKind.ASSET, self.deploy_asset_store),
        ]

    def run(self, selection: Selection) -> DeploymentResult:
        """
        Deploy every contract the selection asks for.

        Raises:
            NoTargetSpecified: If nothing was selected; no RPC call is made
        """
        if selection.is_empty:
            raise NoTargetSpecified()

        self.result.start_balance = self.client.get_balance(self.context.deployer)
        logger.info("Deploying contracts...")

        try:
            for kind, deploy in self.steps:
                if not selection.includes(kind):
                    continue
                bridge = self.result.bridge_address(self.context)
                if kind.requires_bridge and not is_valid_address(bridge):
                    logger.warning(
                        "%s contract failed to deploy due to invalid bridge address", kind.label
                    )
                    self.result.skipped.append(kind)
                    continue
                self.result.record(kind, deploy())
                logger.info("✓ %s contract deployed", kind.label)
        except Exception:
            self._record_end_balance_after_failure()
            raise

        self.result.end_balance = self.client.get_balance(self.context.deployer)
        return self.result

    def _record_end_balance_after_failure(self) -> None:
        # the deploy error is what the caller sees, not a second RPC failure
        try:
            self.result.end_balance = self.client.get_balance(self.context.deployer)
        except Exception as exc:
            logger.warning("Could not read deployer balance after failed deployment: %s", exc)

    def _deploy(self, wrapper, *args) -> str:
        data = wrapper.get_deployment_data(*args)
        return self.client.deploy(
            data,
            gas_price=self.context.gas_price,
            gas_limit=self.context.gas_limit,
        )

    def deploy_bridge(self) -> str:
        ctx = self.context
        return self._deploy(
            BridgeContract(),
            ctx.chain_id,
            ctx.relayers,
            ctx.relayer_threshold,
            ctx.fee,
            ctx.expiry,
        )

    def deploy_erc20_handler(self) -> str:
        return self._deploy(ERC20HandlerContract(), self.result.bridge_address(self.context))

    def deploy_generic_handler(self) -> str:
        return self._deploy(GenericHandlerContract(), self.result.bridge_address(self.context))

    def deploy_erc20(self) -> str:
        ctx = self.context
        return self._deploy(ERC20Contract(), ctx.erc20_name, ctx.erc20_symbol, ctx.erc20_decimals)

    def deploy_asset_store(self) -> str:
        return self._deploy(AssetStoreContract())


def run_deployment(
    context: ExecutionContext,
    selection: Selection,
    client,
    result: Optional[DeploymentResult] = None,
) -> DeploymentResult:
    """
    Deploy ``selection`` with ``client`` and return the populated result.

    Pass ``result`` to keep access to partial deployments if the run raises.
    """
    return DeploymentSequencer(context, client, result).run(selection)
