import importlib
from unittest.mock import MagicMock, patch

from click.testing import CliRunner
from web3 import Web3

from cli import cli
from config.settings import settings
from governance.scenarios.governance_harness import GovernanceHarness
from governance.models.proposal import ProposalInfo
from utils.call_hash_utils import create_call_hash

# Command modules share their names with the commands bound on the cli package
SIMULATE_MODULE = importlib.import_module("cli.simulate_proposal")
CALL_HASH_MODULE = importlib.import_module("cli.call_hash")

TIMELOCK = "0x81758f3361A769016eae4844072FA6d7f828a651"
GSC_VAULT = "0xcA870E8aa4FCEa85b5f0c6F4209C8CBA9265B940"


def test_call_hash_prints_digest():
    runner = CliRunner()

    result = runner.invoke(cli, ["call_hash", "-t", f"{TIMELOCK},{GSC_VAULT}", "-d", "0x01,0x"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == Web3.to_hex(create_call_hash([TIMELOCK, GSC_VAULT], ["0x01", "0x"]))


def test_call_hash_uses_configured_log_level():
    runner = CliRunner()

    with patch.object(CALL_HASH_MODULE, "configure_logging") as mock_configure:
        result = runner.invoke(cli, ["call_hash", "-t", TIMELOCK, "-d", "0x"])

    assert result.exit_code == 0, result.output
    mock_configure.assert_called_once_with(None, settings.app.log_level)


def test_call_hash_rejects_misaligned_lists():
    runner = CliRunner()

    result = runner.invoke(cli, ["call_hash", "-t", f"{TIMELOCK},{GSC_VAULT}", "-d", "0x01"])

    assert result.exit_code != 0
    assert "same length" in result.output


def test_show_proposal_prints_json():
    harness = MagicMock()
    harness.gsc_core_voting.get_proposal.return_value = ProposalInfo(
        proposal_hash="0x" + "00" * 32, created=1, unlock=2, expiration=3, quorum=3, last_call=4
    )
    runner = CliRunner()

    with patch.object(GovernanceHarness, "from_settings", return_value=harness):
        result = runner.invoke(cli, ["show_proposal", "-v", "gsc", "-i", "7"])

    assert result.exit_code == 0, result.output
    harness.gsc_core_voting.get_proposal.assert_called_once_with(7)
    assert '"quorum": 3' in result.output


def test_simulate_proposal_core_runs_every_stage():
    harness = MagicMock()
    runner = CliRunner()

    with patch.object(GovernanceHarness, "from_settings", return_value=harness), patch.object(
        SIMULATE_MODULE, "CoreVotingProposalScenario", autospec=True
    ) as MockScenario:
        scenario = MockScenario.return_value
        result = runner.invoke(cli, ["simulate_proposal", "-v", "core", "--reset"])

    assert result.exit_code == 0, result.output
    harness.reset_fork.assert_called_once()
    ctx = scenario.setup.return_value
    scenario.assert_proposal_created.assert_called_once_with(ctx)
    scenario.execute_proposal.assert_called_once_with(ctx)
    scenario.execute_timelocked_call.assert_called_once_with(ctx)
    scenario.assert_payload_applied.assert_called_once()


def test_simulate_proposal_gsc_blocks_before_voting():
    harness = MagicMock()
    runner = CliRunner()

    with patch.object(GovernanceHarness, "from_settings", return_value=harness), patch.object(
        SIMULATE_MODULE, "GSCProposalScenario", autospec=True
    ) as MockScenario:
        scenario = MockScenario.return_value
        calls = []
        scenario.assert_execution_blocked.side_effect = lambda ctx: calls.append("blocked")
        scenario.cast_member_votes.side_effect = lambda ctx: calls.append("votes") or 3
        scenario.execute_proposal.side_effect = lambda ctx: calls.append("execute") or MagicMock(
            proposal_id=4, block_number=9
        )
        result = runner.invoke(cli, ["simulate_proposal", "-v", "gsc"])

    assert result.exit_code == 0, result.output
    harness.reset_fork.assert_not_called()
    assert calls == ["blocked", "votes", "execute"]
