"""
Bridge contract wrapper.

The Bridge coordinates deposit proposals between chains. Relayers vote on
proposals and a proposal passes once ``relayer_threshold`` votes are in, or
is cancelled after ``expiry`` blocks.
"""

from decimal import Decimal
from typing import Any, List, Union

from web3 import Web3

from .base import ContractWrapper


class BridgeContract(ContractWrapper):
    """Wrapper for Bridge contract deployment."""

    CONTRACT_NAME = "Bridge"

    def encode_constructor_params(
        self,
        chain_id: int,
        relayers: List[str],
        relayer_threshold: int,
        fee: Union[Decimal, int, str],
        expiry: int
    ) -> List[Any]:
        """
        Encode constructor parameters for deployment.

        Args:
            chain_id: ChainBridge id of the chain the bridge lives on
            relayers: Initial relayer addresses
            relayer_threshold: Votes required for a proposal to pass
            fee: Deposit fee in ether (decimals allowed)
            expiry: Blocks after which a proposal is considered cancelled

        Returns:
            Constructor arguments in ABI order

        Raises:
            ValueError: If the fee is negative
        """
        return [
            chain_id,
            list(relayers),
            relayer_threshold,
            self.calculate_fee_amount(fee),
            expiry,
        ]

    @staticmethod
    def calculate_fee_amount(fee: Union[Decimal, int, str]) -> int:
        """Convert an ether denominated fee to wei."""
        amount = Decimal(str(fee))
        if amount < 0:
            raise ValueError("Fee cannot be negative")
        return Web3.to_wei(amount, "ether")
