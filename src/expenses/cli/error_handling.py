"""CLI error handling helpers."""

import click

from expenses.domain.errors import ExpensesError


def handle_error(ctx: click.Context, error: ExpensesError) -> None:
    """Render a registry error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
