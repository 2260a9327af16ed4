"""Schema management commands."""

import click

from expenses.cli.error_handling import handle_error
from expenses.domain.errors import ExpensesError


@click.command("install")
@click.pass_context
def install(ctx):
    """Create the registry tables."""
    db = ctx.obj["db"]

    try:
        db.install()
    except ExpensesError as e:
        handle_error(ctx, e)
    click.echo("Installed tables: actors, labels, transactions, details")


@click.command("uninstall")
@click.confirmation_option(prompt="Drop every registry table and its records?")
@click.pass_context
def uninstall(ctx):
    """Drop the registry tables."""
    db = ctx.obj["db"]

    try:
        db.uninstall()
    except ExpensesError as e:
        handle_error(ctx, e)
    click.echo("Dropped tables: details, transactions, labels, actors")


def register_commands(cli):
    """Register schema commands with main CLI."""
    cli.add_command(install)
    cli.add_command(uninstall)
