"""Console logging for seeding runs.

Lines look like ``[12:04:31] OK   Modules seeded: 3 added, 0 updated``.
Errors go to stderr.
"""

from datetime import datetime

import click

from .models import SeedOptions


def _format(level: str, message: str) -> str:
    timestamp = datetime.now().strftime("%H:%M:%S")
    return f"[{timestamp}] {level} {message}"


def log_info(message: str) -> None:
    click.echo(_format("INFO", message))


def log_success(message: str) -> None:
    click.echo(_format(click.style("OK  ", fg="green"), message))


def log_warn(message: str) -> None:
    click.echo(_format(click.style("WARN", fg="yellow"), message))


def log_error(message: str) -> None:
    click.echo(_format(click.style("ERR ", fg="red"), message), err=True)


def log_verbose(message: str, options: SeedOptions) -> None:
    """Log a per-record detail line, only when verbose output is enabled."""
    if options.verbose:
        click.echo(_format(click.style("... ", dim=True), message))
