"""
Data types shared by the deployment sequencer and the report builder.

``ExecutionContext`` holds the inputs of one invocation and never changes.
``DeploymentResult`` collects what the sequencer produced (addresses, cost)
and is what the reports read from.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional

from web3 import Web3


class ContractKind(Enum):
    """Contracts this tool can deploy, in canonical deployment order."""

    BRIDGE = ("bridge", "Bridge")
    ERC20_HANDLER = ("erc20Handler", "ERC20Handler")
    GENERIC_HANDLER = ("genericHandler", "GenericHandler")
    ERC20 = ("erc20", "ERC20")
    ASSET = ("asset", "ChainAsset")

    def __init__(self, flag: str, label: str):
        self.flag = flag
        self.label = label

    @property
    def requires_bridge(self) -> bool:
        return self in (ContractKind.ERC20_HANDLER, ContractKind.GENERIC_HANDLER)


CANONICAL_ORDER = tuple(ContractKind)

# --all deliberately leaves out the asset store
ALL_KINDS = frozenset(
    [
        ContractKind.BRIDGE,
        ContractKind.ERC20_HANDLER,
        ContractKind.GENERIC_HANDLER,
        ContractKind.ERC20,
    ]
)


def is_valid_address(address: Optional[str]) -> bool:
    """
    Check that ``address`` is a 0x-prefixed 20 byte hex address.

    Mixed-case addresses must carry a correct EIP-55 checksum.
    """
    if not address or not isinstance(address, str):
        return False
    if not address.startswith('0x') or len(address) != 42:
        return False
    return Web3.is_address(address)


@dataclass(frozen=True)
class Selection:
    """Which contracts to deploy: everything (``--all``) or an explicit set."""

    deploy_all: bool = False
    requested: FrozenSet[ContractKind] = frozenset()

    @classmethod
    def all(cls) -> "Selection":
        return cls(deploy_all=True)

    @classmethod
    def of(cls, kinds: Iterable[ContractKind]) -> "Selection":
        return cls(requested=frozenset(kinds))

    @classmethod
    def from_flags(
        cls,
        deploy_all: bool = False,
        bridge: bool = False,
        erc20_handler: bool = False,
        generic_handler: bool = False,
        erc20: bool = False,
        asset: bool = False,
    ) -> "Selection":
        """Build a selection from the CLI's boolean flags."""
        if deploy_all:
            return cls.all()
        flags = {
            ContractKind.BRIDGE: bridge,
            ContractKind.ERC20_HANDLER: erc20_handler,
            ContractKind.GENERIC_HANDLER: generic_handler,
            ContractKind.ERC20: erc20,
            ContractKind.ASSET: asset,
        }
        return cls.of(kind for kind, wanted in flags.items() if wanted)

    @property
    def is_empty(self) -> bool:
        return not self.deploy_all and not self.requested

    def includes(self, kind: ContractKind) -> bool:
        if self.deploy_all:
            return kind in ALL_KINDS
        return kind in self.requested

    def kinds(self) -> Iterator[ContractKind]:
        """Yield the requested kinds in canonical order."""
        for kind in CANONICAL_ORDER:
            if self.includes(kind):
                yield kind


@dataclass(frozen=True)
class ExecutionContext:
    """Inputs of one deployment run."""

    url: str
    deployer: str
    chain_id: int
    relayers: List[str]
    relayer_threshold: int
    fee: Decimal
    expiry: int
    gas_price: int
    gas_limit: int
    bridge_address: str = ""
    erc20_name: str = ""
    erc20_symbol: str = ""
    erc20_decimals: int = 18


_ADDRESS_FIELDS = {
    ContractKind.BRIDGE: "bridge",
    ContractKind.ERC20_HANDLER: "erc20_handler",
    ContractKind.GENERIC_HANDLER: "generic_handler",
    ContractKind.ERC20: "erc20",
    ContractKind.ASSET: "asset",
}


@dataclass
class DeploymentResult:
    """Addresses and cost accumulated while deploying."""

    bridge: Optional[str] = None
    erc20_handler: Optional[str] = None
    generic_handler: Optional[str] = None
    erc20: Optional[str] = None
    asset: Optional[str] = None
    start_balance: Optional[int] = None
    end_balance: Optional[int] = None
    skipped: List[ContractKind] = field(default_factory=list)

    def address_of(self, kind: ContractKind) -> Optional[str]:
        return getattr(self, _ADDRESS_FIELDS[kind])

    def record(self, kind: ContractKind, address: str) -> None:
        """Store the address of a freshly deployed contract."""
        name = _ADDRESS_FIELDS[kind]
        if getattr(self, name) is not None:
            raise RuntimeError(f"{kind.label} address already recorded")
        setattr(self, name, address)

    def bridge_address(self, context: ExecutionContext) -> str:
        """Bridge in effect: the one just deployed, else the one supplied."""
        return self.bridge or context.bridge_address

    @property
    def cost(self) -> int:
        """Balance spent by the deployer, in wei."""
        if self.start_balance is None or self.end_balance is None:
            return 0
        return self.start_balance - self.end_balance

    @property
    def deployed(self) -> List[ContractKind]:
        return [kind for kind in CANONICAL_ORDER if self.address_of(kind) is not None]
