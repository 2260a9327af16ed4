"""Main CLI entry point."""

import logging

import click

from expenses.database.factories import create_database, create_sqlite_database

# Import and register all commands at module level
from expenses.cli.commands import pull, push, schema


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides EXPENSES_DB_PATH environment variable)",
    envvar="EXPENSES_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy database URL, takes precedence over --db-path",
    envvar="EXPENSES_DATABASE_URL",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, database_url: str | None, verbose: bool):
    """Expenses - registry of actors, labels and transactions.

    Records are pushed from and pulled as JSON.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        if database_url:
            db = create_database(database_url)
        else:
            db = create_sqlite_database(database_path=db_path)
        db.connect()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
schema.register_commands(cli)
push.register_commands(cli)
pull.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
