"""Fixture seeding for the Church Latin course PocketBase backend."""

from .cli import cli

__all__ = ["cli", "main"]


def main() -> None:
    """Entry point for the latin-seeder CLI."""
    cli()
