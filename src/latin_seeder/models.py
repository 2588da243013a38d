"""Run options and result types shared by all seeders."""

from dataclasses import dataclass, field
from typing import Any

# Error codes of records that were skipped rather than failed
SKIP_CODES = ("missing_field", "invalid_record", "rejected")


@dataclass
class SeedOptions:
    """Options for a seeding run."""

    dry_run: bool = False
    reset: bool = False
    verbose: bool = False
    # Run only seeders whose collection name contains this (case-insensitive)
    collection: str | None = None


@dataclass
class SeedError:
    """A validation or processing failure for one fixture record."""

    message: str
    record: Any = None
    code: str | None = None


@dataclass
class SeedResult:
    """Outcome of one seeder run."""

    collection: str
    added: int = 0
    updated: int = 0
    skipped: int = 0
    errors: list[SeedError] = field(default_factory=list)
    duration: float = 0.0  # seconds

    @property
    def status(self) -> str:
        """Overall status: ok, skipped (every error was a skip) or failed."""
        if not self.errors:
            return "ok"
        if all(e.code in SKIP_CODES for e in self.errors):
            return "skipped"
        return "failed"


@dataclass
class SeedSummary:
    """Totals over all seeder results of a run."""

    total_added: int
    total_updated: int
    total_skipped: int
    total_errors: int
    total_duration: float
    results: list[SeedResult]

    @classmethod
    def from_results(cls, results: list[SeedResult]) -> "SeedSummary":
        return cls(
            total_added=sum(r.added for r in results),
            total_updated=sum(r.updated for r in results),
            total_skipped=sum(r.skipped for r in results),
            total_errors=sum(len(r.errors) for r in results),
            total_duration=sum(r.duration for r in results),
            results=results,
        )
