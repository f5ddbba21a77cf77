"""Tests for the deployment sequencer."""

import dataclasses
import logging

import pytest

from chainbridge_deploy.deploy import DeploymentSequencer, run_deployment
from chainbridge_deploy.exceptions import NoTargetSpecified
from chainbridge_deploy.models import ContractKind, DeploymentResult, Selection

from .conftest import FakeClient, RELAYER_A, RELAYER_B

SUPPLIED_BRIDGE = "0x62877ddcd49ad22f5edfc6ac108e9a4b5d2bd88b"


class TestSelection:

    def test_from_flags_empty(self):
        assert Selection.from_flags().is_empty

    def test_all_excludes_asset_store(self):
        assert list(Selection.all().kinds()) == [
            ContractKind.BRIDGE,
            ContractKind.ERC20_HANDLER,
            ContractKind.GENERIC_HANDLER,
            ContractKind.ERC20,
        ]

    def test_explicit_kinds_in_canonical_order(self):
        selection = Selection.from_flags(asset=True, erc20=True, bridge=True)
        assert list(selection.kinds()) == [ContractKind.BRIDGE, ContractKind.ERC20, ContractKind.ASSET]

    def test_handler_flags(self):
        selection = Selection.from_flags(erc20_handler=True, generic_handler=True)
        assert list(selection.kinds()) == [ContractKind.ERC20_HANDLER, ContractKind.GENERIC_HANDLER]

    def test_all_flag_wins(self):
        selection = Selection.from_flags(deploy_all=True, asset=True)
        assert selection.deploy_all
        assert not selection.includes(ContractKind.ASSET)


class TestRunDeployment:

    def test_nothing_selected_fails_before_any_call(self, context, client):
        with pytest.raises(NoTargetSpecified):
            run_deployment(context, Selection.from_flags(), client)
        assert client.calls == []

    def test_all_deploys_in_order_with_bridge_wired(self, context, client):
        result = run_deployment(context, Selection.all(), client)

        assert client.deployed_names == ["Bridge", "ERC20Handler", "GenericHandler", "ERC20Mintable"]
        bridge = client.deployments[0]["address"]
        assert result.bridge == bridge
        assert client.deployments[1]["args"] == [bridge, [], [], []]
        assert client.deployments[2]["args"] == [bridge, [], [], [], []]
        assert result.asset is None

    def test_bridge_and_erc20(self, context, client):
        result = run_deployment(context, Selection.of([ContractKind.BRIDGE, ContractKind.ERC20]), client)

        assert client.deployments[0]["args"] == [1, [RELAYER_A, RELAYER_B], 2, 0, 100]
        assert client.deployments[1]["args"] == ["Test Token", "TST", 18]
        assert result.bridge is not None
        assert result.erc20 is not None
        assert result.erc20_handler is None
        assert result.generic_handler is None
        assert result.asset is None

    def test_gas_parameters_passed_through(self, context, client):
        run_deployment(context, Selection.of([ContractKind.ASSET]), client)
        deployment = client.deployments[0]
        assert deployment["gas_price"] == context.gas_price
        assert deployment["gas_limit"] == context.gas_limit

    def test_handler_without_bridge_is_skipped(self, context, client, caplog):
        with caplog.at_level(logging.WARNING):
            result = run_deployment(context, Selection.of([ContractKind.ERC20_HANDLER]), client)

        assert result.erc20_handler is None
        assert result.skipped == [ContractKind.ERC20_HANDLER]
        assert client.deployments == []
        assert "ERC20Handler contract failed to deploy due to invalid bridge address" in caplog.text

    def test_skip_does_not_stop_later_contracts(self, context, client):
        selection = Selection.of([ContractKind.GENERIC_HANDLER, ContractKind.ERC20])
        result = run_deployment(context, selection, client)

        assert client.deployed_names == ["ERC20Mintable"]
        assert result.skipped == [ContractKind.GENERIC_HANDLER]
        assert result.erc20 is not None

    def test_supplied_bridge_address_used_for_handlers(self, context, client):
        context = dataclasses.replace(context, bridge_address=SUPPLIED_BRIDGE)
        result = run_deployment(context, Selection.of([ContractKind.ERC20_HANDLER]), client)

        assert client.deployments[0]["args"][0] == SUPPLIED_BRIDGE
        assert result.bridge is None
        assert result.bridge_address(context) == SUPPLIED_BRIDGE

    def test_deployed_bridge_takes_precedence_over_supplied(self, context, client):
        context = dataclasses.replace(context, bridge_address=SUPPLIED_BRIDGE)
        selection = Selection.of([ContractKind.BRIDGE, ContractKind.GENERIC_HANDLER])
        run_deployment(context, selection, client)

        assert client.deployments[1]["args"][0] == client.deployments[0]["address"]

    def test_cost_is_balance_difference(self, context):
        client = FakeClient(balances=(5000, 1234))
        result = run_deployment(context, Selection.of([ContractKind.ASSET]), client)
        assert result.start_balance == 5000
        assert result.end_balance == 1234
        assert result.cost == 3766

    def test_network_failure_propagates_and_keeps_partial_result(self, context):
        client = FakeClient(fail_on="GenericHandler")
        result = DeploymentResult()

        with pytest.raises(ConnectionError):
            run_deployment(context, Selection.all(), client, result=result)

        assert result.bridge is not None
        assert result.erc20_handler is not None
        assert result.generic_handler is None
        assert result.erc20 is None
        assert ("deploy", "ERC20Mintable") not in client.calls

    def test_skipped_handler_does_not_need_its_artifact(self, context, client, artifacts_dir):
        (artifacts_dir / "ERC20Handler.json").unlink()
        result = run_deployment(context, Selection.of([ContractKind.ERC20_HANDLER]), client)

        assert result.skipped == [ContractKind.ERC20_HANDLER]
        assert client.deployments == []

    def test_cost_recorded_after_failure(self, context):
        client = FakeClient(balances=(10 ** 18, 6 * 10 ** 17), fail_on="ERC20Handler")
        result = DeploymentResult()

        with pytest.raises(ConnectionError):
            run_deployment(context, Selection.all(), client, result=result)

        assert result.end_balance == 6 * 10 ** 17
        assert result.cost == 4 * 10 ** 17

    def test_balance_error_after_failure_keeps_original_error(self, context, caplog):
        # only the starting balance is available; the second query fails
        client = FakeClient(balances=(10 ** 18,), fail_on="Bridge")
        result = DeploymentResult()

        with caplog.at_level(logging.WARNING):
            with pytest.raises(ConnectionError):
                run_deployment(context, Selection.all(), client, result=result)

        assert result.end_balance is None
        assert "Could not read deployer balance" in caplog.text

    def test_sequencer_exposes_result_after_failure(self, context):
        sequencer = DeploymentSequencer(context, FakeClient(fail_on="Bridge"))
        with pytest.raises(ConnectionError):
            sequencer.run(Selection.all())
        assert sequencer.result.deployed == []


class TestDeploymentResult:

    def test_address_recorded_once(self):
        result = DeploymentResult()
        result.record(ContractKind.ERC20, "0x" + "1" * 40)
        with pytest.raises(RuntimeError):
            result.record(ContractKind.ERC20, "0x" + "2" * 40)

    def test_cost_defaults_to_zero(self):
        assert DeploymentResult().cost == 0
