import click

from config.settings import settings
from governance.enums.voting_body import VotingBody
from governance.scenarios.governance_harness import GovernanceHarness
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Show Proposal CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-v",
    "--voting-body",
    default=VotingBody.CORE.value,
    show_default=True,
    type=click.Choice([body.value for body in VotingBody]),
    help="Which CoreVoting contract to read: the general body or the steering committee.",
)
@click.option("-i", "--proposal-id", required=True, type=int, help="Proposal id.")
@click.option(
    "-p",
    "--provider-uri",
    default=settings.fork.rpc_url,
    show_default=True,
    type=str,
    help="The URI of the web3 provider, e.g. http://127.0.0.1:8545",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def show_proposal(voting_body: str, proposal_id: int, provider_uri: str, log_file: str):
    """Prints the stored proposal record as JSON."""
    configure_logging(log_file, settings.app.log_level)
    harness = GovernanceHarness.from_settings(
        settings.model_copy(update={"fork": settings.fork.model_copy(update={"rpc_url": provider_uri})})
    )
    service = harness.core_voting if VotingBody(voting_body) == VotingBody.CORE else harness.gsc_core_voting

    try:
        proposal = service.get_proposal(proposal_id)
    except Exception as e:
        logger.exception("An error occurred while reading the proposal:")
        raise e

    click.echo(proposal.model_dump_json(indent=2))
