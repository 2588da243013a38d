"""Seeder for church_latin_vocabulary (vocabulary.csv)."""

import time
from typing import Any

from .. import schema
from ..data import read_csv_data
from ..fixtures import VOCABULARY_COLUMNS, VOCABULARY_FILE, VocabularyData
from ..models import SeedOptions
from .base import Seeder, resolve_lesson

# Pause between committed writes to stay under the backend rate limit
WRITE_DELAY_SECONDS = 0.01


def normalize_frequency(value: str | None) -> str:
    """Lowercase a frequency, mapping missing or unknown values to "unknown"."""
    if value and value.lower() in schema.FREQUENCIES:
        return value.lower()
    return "unknown"


def normalize_part_of_speech(value: str | None) -> str | None:
    """Lowercase a part of speech, or None if it is not a valid select value."""
    if value and value.lower() in schema.PARTS_OF_SPEECH:
        return value.lower()
    return None


class VocabularySeeder(Seeder):
    name = "Vocabulary"
    collection_name = schema.VOCABULARY
    fixture = VOCABULARY_FILE
    required_fields = ("word", "meaning", "lessonId")
    label = "word"

    write_delay = WRITE_DELAY_SECONDS

    def load(self) -> list[dict[str, Any]]:
        rows = read_csv_data(self.fixture_path)
        return [{column: row.get(column, "") for column in VOCABULARY_COLUMNS} for row in rows]

    def record_key(self, data: dict[str, Any]) -> str:
        return str(data.get("word"))

    def build_record(self, data: VocabularyData, options: SeedOptions) -> dict[str, Any]:
        lesson_record_id = resolve_lesson(self.backend, data["lessonId"])

        record: dict[str, Any] = {
            "resourceId": f"vocab_{data['word'].lower()}_{data['lessonId']}",
            "word": data["word"],
            "meaning": data["meaning"],
            "lessonId": lesson_record_id,
            "frequency": normalize_frequency(data.get("frequency")),
            "caseInfo": data.get("caseInfo") or None,
            "conjugationInfo": data.get("conjugationInfo") or None,
            "liturgicalContext": data.get("liturgicalContext") or None,
        }

        # Invalid values would be rejected by the select field
        part_of_speech = normalize_part_of_speech(data.get("partOfSpeech"))
        if part_of_speech is not None:
            record["partOfSpeech"] = part_of_speech

        return record

    def after_write(self) -> None:
        if self.write_delay:
            time.sleep(self.write_delay)
