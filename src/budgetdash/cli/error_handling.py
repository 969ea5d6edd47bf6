"""CLI error handling helpers."""

import logging

import click

from budgetdash.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError | OSError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command failed: %s", error, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
