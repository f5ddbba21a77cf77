"""Chain asset store wrapper."""

from typing import Any, List

from .base import ContractWrapper


class AssetStoreContract(ContractWrapper):
    """Stores asset hashes written through the GenericHandler."""

    CONTRACT_NAME = "CentrifugeAsset"

    def encode_constructor_params(self) -> List[Any]:
        return []
