"""Push command."""

import click

from expenses.cli.error_handling import handle_error
from expenses.config import DEFAULT_BATCH_SIZE, PushMode, PushOptions
from expenses.domain.errors import ExpensesError
from expenses.domain.registry import ENTITY_TYPES, RegistryService
from expenses.domain.serialization import from_json


@click.command("push")
@click.argument("kind", type=click.Choice(sorted(ENTITY_TYPES), case_sensitive=False))
@click.argument("json_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--batch-size",
    type=int,
    default=DEFAULT_BATCH_SIZE,
    show_default=True,
    envvar="EXPENSES_BATCH_SIZE",
    help="Maximum number of rows per insert statement",
)
@click.option("--append-only", is_flag=True, help="Keep existing records untouched on conflict")
@click.option("--no-atomic", is_flag=True, help="Commit every batch on its own")
@click.pass_context
def push_records(ctx, kind: str, json_file, batch_size: int, append_only: bool, no_atomic: bool):
    """Push records of KIND from a JSON file ('-' for stdin).

    Prints the pushed records as JSON, including generated UUIDs.
    """
    db = ctx.obj["db"]
    service = RegistryService(db)

    options = PushOptions(
        batch_size=batch_size,
        mode=PushMode.APPEND_ONLY if append_only else PushMode.REPLACE,
        atomic=not no_atomic,
    )

    try:
        records = from_json(json_file.read(), ENTITY_TYPES[kind.lower()])
        if not isinstance(records, list):
            records = [records]
        click.echo(service.push_request(records, options))
    except ExpensesError as e:
        handle_error(ctx, e)


def register_commands(cli):
    """Register push command with main CLI."""
    cli.add_command(push_records)
