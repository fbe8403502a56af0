"""Main CLI entry point."""

import logging

import click
from expensetrack.database.factories import create_sqlite_database

# Import and register all commands at module level
from expensetrack.cli.commands import (
    category,
    expense,
    serve,
    summary,
    user,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides EXPENSETRACK_DB_PATH environment variable)",
    envvar="EXPENSETRACK_DB_PATH",
)
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Expensetrack - personal expense tracking.

    Record expenses by category and review monthly and per-category totals,
    or serve the same data over a REST API.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
user.register_commands(cli)
category.register_commands(cli)
expense.register_commands(cli)
summary.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
