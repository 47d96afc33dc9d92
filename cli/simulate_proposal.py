import click

from config.settings import settings
from governance.enums.voting_body import VotingBody
from governance.scenarios.core_voting_proposal_scenario import CoreVotingProposalScenario
from governance.scenarios.governance_harness import GovernanceHarness
from governance.scenarios.gsc_proposal_scenario import GSCProposalScenario
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Simulate Proposal CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-v",
    "--voting-body",
    default=VotingBody.CORE.value,
    show_default=True,
    type=click.Choice([body.value for body in VotingBody]),
    help="core: EGP-16 through CoreVoting and the Timelock. gsc: steering committee quorum flow.",
)
@click.option(
    "-p",
    "--provider-uri",
    default=settings.fork.rpc_url,
    show_default=True,
    type=str,
    help="The URI of the forking node, e.g. http://127.0.0.1:8545",
)
@click.option(
    "--reset/--no-reset",
    default=False,
    show_default=True,
    help="Re-fork mainnet (ALCHEMY_MAINNET_API_KEY, FORK_BLOCK_NUMBER) before simulating.",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def simulate_proposal(voting_body: str, provider_uri: str, reset: bool, log_file: str):
    """Submits, votes on and executes a proposal against the forked chain."""
    configure_logging(log_file, settings.app.log_level)
    harness = GovernanceHarness.from_settings(
        settings.model_copy(update={"fork": settings.fork.model_copy(update={"rpc_url": provider_uri})})
    )

    try:
        if reset:
            harness.reset_fork()

        if VotingBody(voting_body) == VotingBody.CORE:
            _simulate_core(harness)
        else:
            _simulate_gsc(harness)
    except KeyboardInterrupt:
        logger.info("Simulation interrupted by user.")
    except Exception as e:
        logger.exception("An error occurred during the simulation:")
        raise e


def _simulate_core(harness: GovernanceHarness) -> None:
    scenario = CoreVotingProposalScenario(harness)
    ctx = scenario.setup()
    logger.info(f"Submitted proposal {ctx.proposal_id} at block {ctx.current_block}")
    scenario.assert_proposal_created(ctx)

    event = scenario.execute_proposal(ctx)
    logger.info(f"ProposalExecuted({event.proposal_id}) in block {event.block_number}")

    scenario.execute_timelocked_call(ctx)
    scenario.assert_payload_applied()
    click.echo(f"Proposal {ctx.proposal_id} and timelocked call {ctx.timelock_call_hash} executed.")


def _simulate_gsc(harness: GovernanceHarness) -> None:
    scenario = GSCProposalScenario(harness)
    ctx = scenario.setup()
    logger.info(f"Submitted GSC proposal {ctx.proposal_id} at block {ctx.current_block}")
    scenario.assert_proposal_created(ctx)

    scenario.advance_past_unlock(ctx)
    scenario.assert_execution_blocked(ctx)

    yes_power = scenario.cast_member_votes(ctx)
    logger.info(f"GSC proposal {ctx.proposal_id} has {yes_power} YES votes")

    event = scenario.execute_proposal(ctx)
    click.echo(f"GSC proposal {event.proposal_id} executed in block {event.block_number}.")
