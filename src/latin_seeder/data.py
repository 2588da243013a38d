"""Fixture file I/O and record validation helpers."""

import csv
import json
import re
from pathlib import Path
from typing import Any

from .errors import FixtureError
from .models import SeedError

_NUMBER_RE = re.compile(r"\d+")


def read_json_data(path: Path) -> list[dict[str, Any]]:
    """Load a JSON fixture file holding an array of records.

    Raises:
        FixtureError: If the file is missing, malformed, or not an array.
    """
    if not path.exists():
        raise FixtureError(f"Data file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FixtureError(f"Invalid JSON in {path.name}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise FixtureError(f"Cannot read {path.name}: {e}") from e

    if not isinstance(data, list):
        raise FixtureError(f"Expected a JSON array in {path.name}, got {type(data).__name__}")

    return data


def read_csv_data(path: Path) -> list[dict[str, str]]:
    """Load a CSV fixture file with a header row.

    Cells are stripped; short rows are padded with empty strings.

    Raises:
        FixtureError: If the file is missing, unreadable, or not valid CSV.
    """
    if not path.exists():
        raise FixtureError(f"Data file not found: {path}")

    try:
        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
    except csv.Error as e:
        raise FixtureError(f"Invalid CSV in {path.name}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise FixtureError(f"Cannot read {path.name}: {e}") from e

    if not rows:
        return []

    headers = [h.strip() for h in rows[0]]
    records: list[dict[str, str]] = []
    for values in rows[1:]:
        # Skip blank lines
        if not any(v.strip() for v in values):
            continue
        records.append({
            header: values[i].strip() if i < len(values) else ""
            for i, header in enumerate(headers)
        })

    return records


def write_json_data(path: Path, data: Any) -> None:
    """Write data as pretty-printed UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def is_missing(value: Any) -> bool:
    """Whether a fixture value counts as absent (None, "" or an empty list)."""
    return value is None or value == "" or value == []


def validate_required_fields(data: Any, required_fields: tuple[str, ...]) -> SeedError | None:
    """Check a fixture record for required fields.

    Returns a single error naming every missing field, or None if the
    record is complete.
    """
    if not isinstance(data, dict):
        return SeedError(f"Record is not an object: {data!r}", record=data, code="invalid_record")

    missing = [name for name in required_fields if is_missing(data.get(name))]
    if not missing:
        return None

    noun = "field" if len(missing) == 1 else "fields"
    return SeedError(
        f"Missing required {noun}: {', '.join(missing)}",
        record=data,
        code="missing_field",
    )


def extract_number(identifier: Any) -> int | None:
    """Extract the first run of digits from an identifier ("L001" -> 1)."""
    match = _NUMBER_RE.search(str(identifier))
    if match is None:
        return None
    return int(match.group())
