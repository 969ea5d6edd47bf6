"""Main CLI entry point."""

import click

from budgetdash.config import DEFAULT_LOG_LEVEL, DOCUMENT_PATH_ENV, LOG_LEVEL_ENV, resolve_document_path
from budgetdash.utils.logging import setup_logging

# Import and register all commands at module level
from budgetdash.cli.commands import (
    compare,
    dashboard,
    document,
    entries,
    payoff,
    progress,
)


@click.group()
@click.option(
    "--file",
    "document_path",
    type=click.Path(dir_okay=False),
    help="Path to budget file (overrides BUDGETDASH_FILE environment variable)",
    envvar=DOCUMENT_PATH_ENV,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar=LOG_LEVEL_ENV,
    help="Log level (overrides BUDGETDASH_LOG_LEVEL environment variable)",
)
@click.option("--log-json", is_flag=True, help="Write log lines as JSON")
@click.pass_context
def cli(ctx, document_path: str | None, log_level: str, log_json: bool):
    """Budgetdash - Budget projections for your current reality and your plan.

    Keeps two scenarios (current and plan) of income, expenses, debts and
    savings goals in one JSON file and projects debt payoff, savings rate
    and goal timelines from them.
    """
    ctx.ensure_object(dict)

    # Resolve the budget file only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        setup_logging(log_level, json_format=log_json)
        ctx.obj["document_path"] = resolve_document_path(document_path)


# Register all commands
document.register_commands(cli)
dashboard.register_commands(cli)
payoff.register_commands(cli)
progress.register_commands(cli)
compare.register_commands(cli)
entries.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
