"""
Signer/RPC client used by the deployment sequencer.

``Web3Deployer`` signs contract creation transactions locally with an
``eth_account`` account and submits them through ``web3``. Every call blocks
until the node answers; ``deploy`` blocks until the transaction is mined.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from eth_account import Account
from web3 import Web3

from .exceptions import ChainMismatchError, ContractDeploymentError, RPCConnectionError

logger = logging.getLogger(__name__)

DEFAULT_RECEIPT_TIMEOUT = 120


class Web3Deployer:
    """Deploys contracts from a single local account."""

    def __init__(self, w3: Web3, account, receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT):
        self.w3 = w3
        self.account = account
        self.receipt_timeout = receipt_timeout

    @classmethod
    def connect(
        cls,
        url: str,
        private_key: Optional[str] = None,
        json_wallet: Optional[str] = None,
        password: Optional[str] = None,
        network_id: Optional[int] = None,
    ) -> "Web3Deployer":
        """
        Connect to ``url`` and load the signing account.

        Args:
            url: HTTP JSON-RPC endpoint
            private_key: 0x-hex private key, ignored when ``json_wallet`` is given
            json_wallet: Path to an encrypted JSON keystore
            password: Keystore password
            network_id: Expected chain id of the node, if any

        Raises:
            RPCConnectionError: If the node cannot be reached
            ChainMismatchError: If the node reports another chain id
            ValueError: If no signer can be loaded
        """
        w3 = Web3(Web3.HTTPProvider(url))
        if not w3.is_connected():
            raise RPCConnectionError(f"Could not connect to the RPC URL at {url}")

        if network_id is not None and w3.eth.chain_id != network_id:
            raise ChainMismatchError(
                f"Node at {url} reports chain id {w3.eth.chain_id}, expected {network_id}"
            )

        account = load_account(private_key=private_key, json_wallet=json_wallet, password=password)
        logger.debug("Connected to %s as %s", url, account.address)
        return cls(w3, account)

    @property
    def address(self) -> str:
        return self.account.address

    def get_balance(self, address: str) -> int:
        """Balance of ``address`` in wei."""
        return self.w3.eth.get_balance(address)

    def deploy(self, deployment_data: Dict[str, Any], gas_price: int, gas_limit: int) -> str:
        """
        Deploy a contract and wait for it to be mined.

        Args:
            deployment_data: Output of a wrapper's ``get_deployment_data``
            gas_price: Gas price in wei
            gas_limit: Gas limit for the creation transaction

        Returns:
            Checksummed address of the new contract

        Raises:
            ContractDeploymentError: If the transaction reverted
        """
        contract_name = deployment_data["contract_name"]
        factory = self.w3.eth.contract(
            abi=deployment_data["abi"],
            bytecode=deployment_data["bytecode"],
        )
        tx = factory.constructor(*deployment_data["constructor_args"]).build_transaction({
            "from": self.account.address,
            "nonce": self.w3.eth.get_transaction_count(self.account.address, "pending"),
            "gas": gas_limit,
            "gasPrice": gas_price,
        })

        signed_tx = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        logger.debug("%s creation transaction sent: %s", contract_name, tx_hash.hex())

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)
        if receipt["status"] == 0:
            raise ContractDeploymentError(contract_name, tx_hash.hex(), "transaction reverted")
        address = receipt.get("contractAddress")
        if not address:
            raise ContractDeploymentError(
                contract_name, tx_hash.hex(), "no contract address in receipt"
            )

        logger.debug("%s mined in block %s", contract_name, receipt["blockNumber"])
        return Web3.to_checksum_address(address)


def load_account(
    private_key: Optional[str] = None,
    json_wallet: Optional[str] = None,
    password: Optional[str] = None,
):
    """Build a local signing account from a keystore file or a private key."""
    if json_wallet:
        keystore = json.loads(Path(json_wallet).read_text(encoding="utf-8"))
        key = Account.decrypt(keystore, password or "")
        return Account.from_key(key)
    if not private_key:
        raise ValueError("A private key or JSON wallet is required")
    return Account.from_key(private_key)
