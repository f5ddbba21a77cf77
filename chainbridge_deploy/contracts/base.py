"""
Common pieces of the contract wrappers.

A wrapper knows which artifact backs a contract and how to turn the
deployment parameters into the constructor argument list.
"""

from typing import Any, Dict, List

from ..artifacts.loader import get_abi, get_bytecode


class ContractWrapper:
    """Base class for contract deployment wrappers."""

    CONTRACT_NAME = ""

    def __init__(self):
        """Load ABI and bytecode for the wrapped contract."""
        self.abi = get_abi(self.CONTRACT_NAME)
        self.bytecode = get_bytecode(self.CONTRACT_NAME)

    def encode_constructor_params(self, *args, **kwargs) -> List[Any]:
        raise NotImplementedError

    def get_deployment_data(self, *args, **kwargs) -> Dict[str, Any]:
        """
        Get complete deployment data for the contract.

        Returns:
            Dictionary with bytecode, ABI and ordered constructor args
        """
        constructor_args = self.encode_constructor_params(*args, **kwargs)

        return {
            "bytecode": self.bytecode,
            "abi": self.abi,
            "constructor_args": constructor_args,
            "contract_name": self.CONTRACT_NAME,
        }
