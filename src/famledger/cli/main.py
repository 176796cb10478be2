"""Main CLI entry point."""

import logging

import click
from famledger.cli.error_handling import error_boundary
from famledger.database.factories import create_sqlite_database

# Import and register all commands at module level
from famledger.cli.commands import (
    add,
    actions,
    view,
    summary,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to database file (overrides FAMLEDGER_DB_PATH environment variable)",
    envvar="FAMLEDGER_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FAMLEDGER_LOG_LEVEL",
    help="Logging verbosity (written to stderr)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """famledger - Household wallet ledger.

    Record income, expenses, loans and transfers between family members,
    and see each person's wallet balance and history.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        with error_boundary(ctx):
            db.connect()
            db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
actions.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
