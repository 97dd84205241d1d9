"""Main CLI entry point."""

import click
from weekledger import __version__
from weekledger.database.factories import create_sqlite_database
from weekledger.utils.logging_config import setup_logging

# Import and register all commands at module level
from weekledger.cli.commands import add, entry, summary, export


@click.group()
@click.version_option(version=__version__, prog_name="weekledger")
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides WEEKLEDGER_DB_PATH environment variable)",
    envvar="WEEKLEDGER_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="WEEKLEDGER_LOG_LEVEL",
    help="Logging verbosity (overrides WEEKLEDGER_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Weekledger - Small business expense and income ledger.

    Record expenses, income and investments, and view totals per
    Thursday-to-Sunday work week, per category and per month.
    """
    ctx.ensure_object(dict)
    setup_logging(level=log_level)

    # Open the store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_database(database_path=db_path)
        store.connect()
        store.initialize_schema()
        ctx.obj["store"] = store
        ctx.call_on_close(store.disconnect)


# Register all commands
add.register_commands(cli)
entry.register_commands(cli)
summary.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
