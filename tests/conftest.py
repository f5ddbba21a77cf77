"""Shared fixtures: fake artifacts on disk and an in-memory deploy client."""

import json

import pytest

from chainbridge_deploy.artifacts import loader
from chainbridge_deploy.models import ExecutionContext

DEPLOYER = "0xff93B45308FD417dF303D6515aB04D9e89a750Ca"
RELAYER_A = "0x8e0a907331554AF72563Bd8D43051C2E64Be5d35"
RELAYER_B = "0x24962717f8fA5BA3b931bACaF9ac03924EB475a0"


@pytest.fixture(autouse=True)
def artifacts_dir(tmp_path, monkeypatch):
    """Write a minimal artifact for every known contract."""
    for index, (name, filename) in enumerate(loader.CONTRACT_PATHS.items()):
        artifact = {
            "contractName": name,
            "abi": [{"type": "constructor", "inputs": []}],
            "bytecode": "0x6080" + f"{index:02x}",
        }
        (tmp_path / filename).write_text(json.dumps(artifact))
    monkeypatch.setattr(loader, "ARTIFACTS_DIR", tmp_path)
    return tmp_path


class FakeClient:
    """Records every call and hands out sequential contract addresses."""

    def __init__(self, balances=(10 ** 18, 10 ** 18 - 12345), fail_on=None):
        self.address = DEPLOYER
        self.calls = []
        self.deployments = []
        self._balances = list(balances)
        self._fail_on = fail_on

    def get_balance(self, address):
        self.calls.append(("get_balance", address))
        return self._balances.pop(0)

    def deploy(self, deployment_data, gas_price, gas_limit):
        name = deployment_data["contract_name"]
        self.calls.append(("deploy", name))
        if name == self._fail_on:
            raise ConnectionError(f"node rejected {name}")
        address = "0x" + f"{len(self.deployments) + 1:040x}"
        self.deployments.append({
            "name": name,
            "args": deployment_data["constructor_args"],
            "gas_price": gas_price,
            "gas_limit": gas_limit,
            "address": address,
        })
        return address

    @property
    def deployed_names(self):
        return [d["name"] for d in self.deployments]


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def context():
    return ExecutionContext(
        url="http://localhost:8545",
        deployer=DEPLOYER,
        chain_id=1,
        relayers=[RELAYER_A, RELAYER_B],
        relayer_threshold=2,
        fee=0,
        expiry=100,
        gas_price=20000000,
        gas_limit=6721975,
        erc20_name="Test Token",
        erc20_symbol="TST",
        erc20_decimals=18,
    )
