import pytest

from config.settings import settings
from governance.network.fork_network import ForkNetwork
from governance.scenarios.core_voting_proposal_scenario import CoreVotingProposalScenario
from governance.scenarios.governance_harness import GovernanceHarness
from governance.scenarios.gsc_proposal_scenario import GSCProposalScenario
from utils.logger_utils import configure_logging


@pytest.fixture(scope="session")
def harness():
    configure_logging(log_level=settings.app.log_level)
    network = ForkNetwork.from_uri(settings.fork.rpc_url, timeout=settings.fork.rpc_timeout)
    if not network.is_connected():
        pytest.skip(f"No forking node at {settings.fork.rpc_url}")

    harness = GovernanceHarness(network, settings=settings)
    if settings.fork.mainnet_fork_url:
        harness.reset_fork()
    return harness


@pytest.fixture(scope="session")
def core_scenario(harness):
    return CoreVotingProposalScenario(harness)


@pytest.fixture(scope="session")
def gsc_scenario(harness):
    return GSCProposalScenario(harness)


@pytest.fixture
def core_ctx(harness, core_scenario):
    # Proposal is submitted once; every test starts from the snapshot taken right after it
    return harness.network.load_fixture(core_scenario.setup)


@pytest.fixture
def gsc_ctx(harness, gsc_scenario):
    return harness.network.load_fixture(gsc_scenario.setup)
