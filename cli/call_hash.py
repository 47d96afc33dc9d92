from typing import List

import click
from web3 import Web3

from config.settings import settings
from utils.call_hash_utils import create_call_hash
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Call Hash CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-t", "--targets", required=True, type=str, help="Comma-separated target addresses, in call order.")
@click.option(
    "-d",
    "--calldatas",
    required=True,
    type=str,
    help="Comma-separated 0x-prefixed calldata, one per target. Use 0x for empty calldata.",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def call_hash(targets: str, calldatas: str, log_file: str):
    """Prints keccak256(abi.encode(address[] targets, bytes[] calldatas))."""
    configure_logging(log_file, settings.app.log_level)
    targets_list = _parse_csv(targets)
    calldatas_list = _parse_csv(calldatas)

    try:
        digest = create_call_hash(targets_list, calldatas_list)
    except ValueError as e:
        raise click.BadParameter(str(e))

    click.echo(Web3.to_hex(digest))


def _parse_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
