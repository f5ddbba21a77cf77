"""ERC20 test token wrapper."""

from typing import Any, List

from .base import ContractWrapper


class ERC20Contract(ContractWrapper):
    """Mintable ERC20 token used to exercise the ERC20Handler."""

    CONTRACT_NAME = "ERC20Mintable"

    def encode_constructor_params(
        self,
        name: str,
        symbol: str,
        decimals: int
    ) -> List[Any]:
        """
        Encode constructor parameters for deployment.

        Name and symbol may be empty.

        Raises:
            ValueError: If decimals do not fit a uint8
        """
        if decimals < 0 or decimals > 255:
            raise ValueError("Decimals must be between 0 and 255")

        return [name, symbol, decimals]
