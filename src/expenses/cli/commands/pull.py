"""Pull command."""

import click

from expenses.cli.error_handling import handle_error
from expenses.config import PullOptions
from expenses.domain.errors import ExpensesError
from expenses.domain.registry import ENTITY_TYPES, RegistryService


@click.command("pull")
@click.argument("kind", type=click.Choice(sorted(ENTITY_TYPES), case_sensitive=False))
@click.option("--limit", type=int, default=0, help="Maximum number of records (0 for all)")
@click.option("--offset", type=int, default=0, help="Number of records to skip")
@click.pass_context
def pull_records(ctx, kind: str, limit: int, offset: int):
    """Pull records of KIND as JSON.

    Actors and labels are sorted by name, transactions by date.
    """
    db = ctx.obj["db"]
    service = RegistryService(db)

    try:
        click.echo(service.pull_request(ENTITY_TYPES[kind.lower()], PullOptions(limit=limit, offset=offset)))
    except ExpensesError as e:
        handle_error(ctx, e)


def register_commands(cli):
    """Register pull command with main CLI."""
    cli.add_command(pull_records)
