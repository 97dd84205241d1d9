"""Rendering of command failures on stderr."""

import click

from weekledger.domain.errors import DomainError
from weekledger.utils.logging_config import get_logger

logger = get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Report a rejected operation as "Cannot <command>: <reason>" and exit 1.

    The command name comes from the click context, so ``entry delete`` with an
    unknown ID prints ``Cannot delete: Entry '...' not found``.
    """
    logger.debug("%s rejected by %s", ctx.info_name, type(error).__name__)
    click.echo(f"Cannot {ctx.info_name}: {error}", err=True)
    ctx.exit(1)


def handle_bad_option(ctx: click.Context, what: str, error: ValueError) -> None:
    """Report an option value that could not be parsed and exit 1."""
    click.echo(f"Invalid {what}: {error}", err=True)
    ctx.exit(1)
