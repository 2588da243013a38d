"""Shared reconciliation loop for fixture seeders.

A seeder loads a fixture file and, record by record, validates required
fields, maps the record to its backend form (keyed by ``resourceId``), looks
the key up and creates or updates the backend record. Failures are collected
per record; only a fixture that cannot be loaded aborts the seeder.
"""

import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pocketbase.utils import ClientResponseError

from .. import schema
from ..backend import Backend, get_backend
from ..data import extract_number, read_json_data, validate_required_fields
from ..errors import FixtureError, RecordRejected
from ..log import log_info, log_success, log_verbose, log_warn
from ..models import SeedError, SeedOptions, SeedResult
from ..paths import fixture_path


def clear_collection(backend: Backend, collection: str, options: SeedOptions) -> int:
    """Delete every record in a collection. Returns the number of records.

    In dry-run mode the records are counted but nothing is deleted.
    """
    records = backend.list_all(collection)
    if not options.dry_run:
        for record in records:
            backend.delete(collection, record.id)
        log_success(f"Cleared {collection} ({len(records)} records)")
    else:
        log_info(f"[DRY RUN] Would clear {collection} ({len(records)} records)")
    return len(records)


def resolve_lesson(backend: Backend, lesson_id: Any) -> str:
    """Backend id of the lesson a fixture ``lessonId`` ("L001") refers to."""
    lesson_number = extract_number(lesson_id)
    if lesson_number is None:
        raise RecordRejected(f"Invalid lesson ID format: {lesson_id}")

    lesson = backend.find_first(schema.LESSONS, lessonNumber=lesson_number)
    if lesson is None:
        raise RecordRejected(f"Failed to find lesson {lesson_id} (number {lesson_number})")
    return lesson.id


class Seeder(ABC):
    """Reconciles one backend collection with one fixture file.

    Subclasses set the class attributes and implement ``build_record``.
    """

    name: str
    collection_name: str
    fixture: str
    required_fields: tuple[str, ...] = ()
    # Noun used in per-record log lines ("Created module M01")
    label: str = "record"
    # Seeders sharing a collection with an earlier seeder must not clear it
    resets_collection: bool = True

    def __init__(self, backend: Backend | None = None, data_dir: Path | None = None):
        self._backend = backend
        self.data_dir = data_dir

    @property
    def backend(self) -> Backend:
        if self._backend is None:
            self._backend = get_backend()
        return self._backend

    @property
    def fixture_path(self) -> Path:
        return fixture_path(self.fixture, self.data_dir)

    def load(self) -> list[Any]:
        """Load the fixture records."""
        return read_json_data(self.fixture_path)

    def record_key(self, data: dict[str, Any]) -> str:
        """Natural identifier of a fixture record, for messages."""
        return str(data.get("id"))

    @abstractmethod
    def build_record(self, data: dict[str, Any], options: SeedOptions) -> dict[str, Any] | None:
        """Map a validated fixture record to its backend payload.

        The payload must contain ``resourceId``. Return None to skip the
        record without reporting an error; raise RecordRejected to skip it
        with one.
        """

    def after_write(self) -> None:
        """Hook run after each committed create/update."""

    def seed(self, options: SeedOptions) -> SeedResult:
        """Seed the collection from the fixture file."""
        start = time.perf_counter()
        result = SeedResult(collection=self.collection_name)
        noun = self.name.lower()

        try:
            log_info(f"Loading {noun} from {self.fixture}...")
            records = self.load()

            cleared = options.reset and self.resets_collection
            if cleared:
                clear_collection(self.backend, self.collection_name, options)

            log_info(f"Seeding {len(records)} {noun}...")
            for data in records:
                self._seed_record(data, options, result, cleared)

            log_success(
                f"{self.name} seeded: {result.added} added, "
                f"{result.updated} updated, {result.skipped} skipped"
            )
        except FixtureError as e:
            log_warn(f"Error seeding {noun}: {e}")
            result.errors.append(SeedError(f"Failed to load {noun} data: {e}", code="fixture"))
        except ClientResponseError as e:
            log_warn(f"Error resetting {self.collection_name}: {e}")
            result.errors.append(
                SeedError(f"Failed to clear {self.collection_name}: {e}", code="reset")
            )

        result.duration = time.perf_counter() - start
        return result

    def _seed_record(
        self, data: Any, options: SeedOptions, result: SeedResult, cleared: bool = False
    ) -> None:
        error = validate_required_fields(data, self.required_fields)
        if error is not None:
            result.errors.append(error)
            result.skipped += 1
            return

        key = self.record_key(data)
        try:
            record = self.build_record(data, options)
            if record is None:
                result.skipped += 1
                return
            self._upsert(record, key, options, result, cleared)
        except RecordRejected as e:
            result.errors.append(SeedError(str(e), record=data, code="rejected"))
            result.skipped += 1
        except Exception as e:
            result.errors.append(
                SeedError(f"Failed to seed {self.label} {key}: {e}", record=data, code="backend")
            )

    def _upsert(
        self,
        record: dict[str, Any],
        key: str,
        options: SeedOptions,
        result: SeedResult,
        cleared: bool = False,
    ) -> None:
        if options.dry_run and cleared:
            # Records a real reset would have deleted count as new
            existing = None
        else:
            # Lookups run in dry-run mode too so the counts reflect the backend
            existing = self.backend.find_by_resource_id(self.collection_name, record["resourceId"])

        if existing is not None:
            if not options.dry_run:
                self.backend.update(self.collection_name, existing.id, record)
                self.after_write()
            result.updated += 1
            action = "update"
        else:
            if not options.dry_run:
                self.backend.create(self.collection_name, record)
                self.after_write()
            result.added += 1
            action = "create"

        if options.dry_run:
            log_verbose(f"[DRY RUN] Would {action} {self.label} {key}", options)
        else:
            log_verbose(f"{action.capitalize()}d {self.label} {key}", options)
