"""CLI entrypoint: deploy the ChainBridge contracts via RPC."""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from . import config
from .client import Web3Deployer
from .deploy import DeploymentSequencer
from .exceptions import NoTargetSpecified
from .logging_utils import configure_logging
from .models import ExecutionContext, Selection
from .report import CONFIG_HEADER, format_config, render_summary

logger = logging.getLogger(__name__)


def split_comma_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _decimal(raw: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {raw!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chainbridge-deploy",
        description="Deploys contracts via RPC",
    )

    conn = parser.add_argument_group("connection")
    conn.add_argument(
        "--url",
        default=None,
        help="URL to connect to (default $CHAINBRIDGE_URL or localhost:8545)",
    )
    conn.add_argument("--privateKey", dest="private_key", default=None, help="Private key to use")
    conn.add_argument(
        "--jsonWallet",
        dest="json_wallet",
        default=None,
        help="(Optional) Encrypted JSON wallet",
    )
    conn.add_argument(
        "--jsonWalletPassword",
        dest="json_wallet_password",
        default=None,
        help="(Optional) Password for encrypted JSON wallet",
    )
    conn.add_argument(
        "--gasLimit",
        dest="gas_limit",
        type=int,
        default=None,
        help="Gas limit for transactions",
    )
    conn.add_argument(
        "--gasPrice",
        dest="gas_price",
        type=int,
        default=None,
        help="Gas price for transactions (wei)",
    )
    conn.add_argument(
        "--networkId",
        dest="network_id",
        type=int,
        default=None,
        help="Expected chain id of the node",
    )

    opts = parser.add_argument_group("bridge options")
    opts.add_argument(
        "--chainId",
        dest="chain_id",
        type=int,
        default=config.DEFAULT_SOURCE_ID,
        help="Chain ID for the instance",
    )
    opts.add_argument(
        "--relayers",
        type=split_comma_list,
        default=list(config.RELAYER_ADDRESSES),
        help="List of initial relayers",
    )
    opts.add_argument(
        "--relayerThreshold",
        dest="relayer_threshold",
        type=int,
        default=config.DEFAULT_RELAYER_THRESHOLD,
        help="Number of votes required for a proposal to pass",
    )
    opts.add_argument(
        "--fee",
        type=_decimal,
        default=config.DEFAULT_FEE,
        help="Fee to be taken when making a deposit (decimals allowed)",
    )
    opts.add_argument(
        "--expiry",
        type=int,
        default=config.DEFAULT_EXPIRY,
        help="Number of blocks after which a proposal is considered cancelled",
    )

    targets = parser.add_argument_group("contracts")
    targets.add_argument("--all", action="store_true", help="Deploy all contracts")
    targets.add_argument("--bridge", action="store_true", help="Deploy bridge contract")
    targets.add_argument(
        "--erc20Handler",
        dest="erc20_handler",
        action="store_true",
        help="Deploy erc20Handler contract",
    )
    targets.add_argument(
        "--genericHandler",
        dest="generic_handler",
        action="store_true",
        help="Deploy genericHandler contract",
    )
    targets.add_argument(
        "--bridgeAddress",
        dest="bridge_address",
        default="",
        help="Bridge contract address for independent handler deployment",
    )
    targets.add_argument("--erc20", action="store_true", help="Deploy erc20 contract")
    targets.add_argument(
        "--erc20Symbol",
        dest="erc20_symbol",
        default="",
        help="Symbol for the erc20 contract",
    )
    targets.add_argument(
        "--erc20Name",
        dest="erc20_name",
        default="",
        help="Name for the erc20 contract",
    )
    targets.add_argument(
        "--erc20Decimals",
        dest="erc20_decimals",
        type=int,
        default=config.DEFAULT_ERC20_DECIMALS,
        help="Decimals for erc20 contract",
    )
    targets.add_argument("--asset", action="store_true", help="Deploy chain asset contract")

    parser.add_argument(
        "--config",
        action="store_true",
        help="Logs the configuration based on the deployment",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def selection_from_args(args: argparse.Namespace) -> Selection:
    return Selection.from_flags(
        deploy_all=args.all,
        bridge=args.bridge,
        erc20_handler=args.erc20_handler,
        generic_handler=args.generic_handler,
        erc20=args.erc20,
        asset=args.asset,
    )


def build_context(args: argparse.Namespace, deployer: str) -> ExecutionContext:
    return ExecutionContext(
        url=args.url,
        deployer=deployer,
        chain_id=args.chain_id,
        relayers=list(args.relayers),
        relayer_threshold=args.relayer_threshold,
        fee=args.fee,
        expiry=args.expiry,
        gas_price=args.gas_price,
        gas_limit=args.gas_limit,
        bridge_address=args.bridge_address,
        erc20_name=args.erc20_name,
        erc20_symbol=args.erc20_symbol,
        erc20_decimals=args.erc20_decimals,
    )


def main(argv: Optional[List[str]] = None, client_factory=Web3Deployer.connect) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    config.load_env()
    args.url = args.url or config.default_url()
    args.gas_limit = args.gas_limit if args.gas_limit is not None else config.default_gas_limit()
    args.gas_price = args.gas_price if args.gas_price is not None else config.default_gas_price()
    if not args.json_wallet:
        args.private_key = args.private_key or config.default_private_key()

    selection = selection_from_args(args)
    if selection.is_empty:
        print(f"Error: {NoTargetSpecified()}", file=sys.stderr)
        return 2

    client = client_factory(
        args.url,
        private_key=args.private_key,
        json_wallet=args.json_wallet,
        password=args.json_wallet_password,
        network_id=args.network_id,
    )
    context = build_context(args, client.address)

    sequencer = DeploymentSequencer(context, client)
    try:
        result = sequencer.run(selection)
    except Exception:
        logger.error("Deployment aborted, contracts deployed so far:")
        print(render_summary(context, sequencer.result))
        raise

    print(render_summary(context, result))
    if args.config:
        print(CONFIG_HEADER)
        print(format_config(context, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
