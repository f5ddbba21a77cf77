"""Errors raised while deploying the ChainBridge contracts."""


class ChainBridgeDeployError(Exception):
    """Base class for deployment errors."""


class NoTargetSpecified(ChainBridgeDeployError):
    """Neither --all nor any individual contract was requested."""

    def __init__(self, message: str = "must specify --all or specific contracts to deploy"):
        super().__init__(message)


class InvalidBridgeAddress(ChainBridgeDeployError):
    """A handler was requested without a usable bridge address."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid bridge address: {address!r}")


class ContractDeploymentError(ChainBridgeDeployError):
    """The creation transaction was mined but did not produce a contract."""

    def __init__(self, contract_name: str, tx_hash: str, reason: str):
        self.contract_name = contract_name
        self.tx_hash = tx_hash
        super().__init__(f"{contract_name} deployment failed in {tx_hash}: {reason}")


class RPCConnectionError(ChainBridgeDeployError):
    """The RPC endpoint could not be reached."""


class ChainMismatchError(ChainBridgeDeployError):
    """The node reports a different network id than the one requested."""
