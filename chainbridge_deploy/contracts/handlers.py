"""
Handler contract wrappers.

Handlers are paired with a Bridge and hold the lock/mint logic for one asset
type. Both are deployed with empty resource mappings; resources are
registered on the bridge afterwards.
"""

from typing import Any, List

from ..exceptions import InvalidBridgeAddress
from ..models import is_valid_address
from .base import ContractWrapper


class HandlerContract(ContractWrapper):
    """Handler deployed against an existing bridge."""

    # number of empty initial mapping lists the constructor takes
    MAPPING_COUNT = 0

    def encode_constructor_params(self, bridge_address: str) -> List[Any]:
        """
        Encode constructor parameters for deployment.

        Raises:
            InvalidBridgeAddress: If ``bridge_address`` is not an address
        """
        if not is_valid_address(bridge_address):
            raise InvalidBridgeAddress(bridge_address)

        return [bridge_address] + [[] for _ in range(self.MAPPING_COUNT)]


class ERC20HandlerContract(HandlerContract):
    """
    ERC20Handler: resource ids, token addresses and burnable token list.
    """

    CONTRACT_NAME = "ERC20Handler"
    MAPPING_COUNT = 3


class GenericHandlerContract(HandlerContract):
    """
    GenericHandler: resource ids, contract addresses, deposit and execute
    function signatures.
    """

    CONTRACT_NAME = "GenericHandler"
    MAPPING_COUNT = 4
