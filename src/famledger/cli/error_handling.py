"""CLI error handling helpers."""

import logging
from contextlib import contextmanager
from typing import Iterator

import click

from famledger.cli.output import echo_json
from famledger.domain.errors import StorageError, ValidationError

logger = logging.getLogger(__name__)

# 2 is click's own usage error status
EXIT_INVALID_INPUT = 1
EXIT_FAILURE = 3

INTERNAL_ERROR = "Internal error"


def fail(ctx: click.Context, message: str, exit_code: int, as_json: bool = False) -> None:
    """Render an error message on stderr and exit."""
    if as_json:
        echo_json({"error": message}, err=True)
    else:
        click.echo(f"Error: {message}", err=True)
    ctx.exit(exit_code)


def handle_domain_error(ctx: click.Context, error: ValueError, as_json: bool = False) -> None:
    """Render a domain error and exit with failure."""
    fail(ctx, str(error), EXIT_INVALID_INPUT, as_json)


@contextmanager
def error_boundary(ctx: click.Context, as_json: bool = False) -> Iterator[None]:
    """Translate ledger errors raised inside the block into a CLI failure.

    Validation problems are the caller's to fix. Storage and unexpected
    failures are logged, and the caller only sees that the operation did not
    complete.
    """
    try:
        yield
    except ValidationError as e:
        handle_domain_error(ctx, e, as_json)
    except StorageError as e:
        logger.error("Storage failure: %s", e, exc_info=e)
        fail(ctx, str(e), EXIT_FAILURE, as_json)
    except (click.exceptions.Exit, click.ClickException, click.Abort):
        raise
    except Exception:
        logger.exception("Unexpected failure")
        fail(ctx, INTERNAL_ERROR, EXIT_FAILURE, as_json)
