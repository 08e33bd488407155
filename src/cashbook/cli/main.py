"""Main CLI entry point."""

import click
from cashbook.database.factories import create_sqlite_database
from cashbook.logging_setup import configure_logging

# Import and register all commands at module level
from cashbook.cli.commands import (
    ledger,
    analytics,
    token,
    expense,
    adjustment,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CASHBOOK_DB_PATH environment variable)",
    envvar="CASHBOOK_DB_PATH",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. DEBUG or INFO (overrides CASHBOOK_LOG_LEVEL)",
    envvar="CASHBOOK_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Cashbook - Cash ledger for a jewelry testing counter.

    Record tokens, expenses and cash adjustments, and reconcile them into a
    monthly cash book with running balances.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
ledger.register_commands(cli)
analytics.register_commands(cli)
token.register_commands(cli)
expense.register_commands(cli)
adjustment.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
