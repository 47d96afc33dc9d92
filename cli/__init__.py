import click


from cli.call_hash import call_hash
from cli.show_proposal import show_proposal
from cli.simulate_proposal import simulate_proposal


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    pass


# Commitment digest of a target/calldata list
cli.add_command(call_hash, "call_hash")

# Stored proposal record
cli.add_command(show_proposal, "show_proposal")

# Full propose / vote / execute flow on the fork
cli.add_command(simulate_proposal, "simulate_proposal")
