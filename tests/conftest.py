"""Pytest configuration and fixtures.

This module provides:
- An in-memory stand-in for the PocketBase backend wrapper
- Fixture file writers for a temporary seed data directory
- A small but complete sample course
"""

import csv
import json
from collections import defaultdict
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from latin_seeder.seeders.vocabulary import VocabularySeeder


class FakeBackend:
    """In-memory replacement for latin_seeder.backend.Backend.

    Records are SimpleNamespace objects with an ``id`` plus the written
    fields. Every create/update/delete is logged in ``writes`` so tests can
    assert that nothing was mutated.
    """

    __test__ = False  # Prevent pytest from collecting this as a test class

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, SimpleNamespace]] = defaultdict(dict)
        self.writes: list[tuple[str, str, str]] = []
        # resourceIds whose create/update raises, to simulate API failures
        self.failing_resource_ids: set[str] = set()
        self._next_id = 0

    def _new_id(self) -> str:
        self._next_id += 1
        return f"rec{self._next_id:012d}"

    def add(self, collection: str, **fields: Any) -> SimpleNamespace:
        """Insert a record directly (not counted as a write)."""
        record = SimpleNamespace(id=self._new_id(), **fields)
        self.collections[collection][record.id] = record
        return record

    def records(self, collection: str) -> list[SimpleNamespace]:
        return list(self.collections[collection].values())

    def find_first(self, collection: str, **criteria: Any) -> SimpleNamespace | None:
        matches = self.list_all(collection, **criteria)
        return matches[0] if matches else None

    def find_by_resource_id(self, collection: str, resource_id: str) -> SimpleNamespace | None:
        return self.find_first(collection, resourceId=resource_id)

    def list_all(self, collection: str, **criteria: Any) -> list[SimpleNamespace]:
        return [
            r for r in self.records(collection)
            if all(getattr(r, k, None) == v for k, v in criteria.items())
        ]

    def count(self, collection: str) -> int:
        return len(self.collections[collection])

    def create(self, collection: str, data: dict[str, Any]) -> SimpleNamespace:
        if data.get("resourceId") in self.failing_resource_ids:
            raise RuntimeError("backend unavailable")
        record = self.add(collection, **data)
        self.writes.append(("create", collection, record.id))
        return record

    def update(self, collection: str, record_id: str, data: dict[str, Any]) -> SimpleNamespace:
        if data.get("resourceId") in self.failing_resource_ids:
            raise RuntimeError("backend unavailable")
        record = self.collections[collection][record_id]
        for key, value in data.items():
            setattr(record, key, value)
        self.writes.append(("update", collection, record_id))
        return record

    def delete(self, collection: str, record_id: str) -> None:
        del self.collections[collection][record_id]
        self.writes.append(("delete", collection, record_id))


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def write_csv(path: Path, rows: list[dict[str, str]], columns: list[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=columns)
        writer.writeheader()
        writer.writerows(rows)
    return path


SAMPLE_MODULES = [
    {"id": "M01", "name": "Foundations", "description": "Pronunciation and prayers"},
    {"id": "M02", "name": "The Mass", "description": "Texts of the Ordinary"},
]

SAMPLE_LESSONS = [
    {"id": "L001", "title": "Pronunciation", "moduleId": "M01", "day": 1},
    {"id": "L002", "title": "Sign of the Cross", "moduleId": "M01", "day": 2},
    {"id": "L003", "title": "First Declension", "moduleId": "M02", "day": 3},
]

SAMPLE_CONTENT = [
    {"lessonId": "L001", "content": ["c before e is ch"], "materials": ["chart"], "practice": ["read"]},
    {"lessonId": "L002", "content": ["In nomine Patris"], "materials": ["text"], "practice": ["recite"]},
]

SAMPLE_QUIZZES = [
    {"id": "Q001", "lessonId": "L001", "title": "Pronunciation Check"},
    {"id": "Q002", "lessonId": "L002", "title": "Sign of the Cross"},
]

SAMPLE_QUESTIONS = [
    {
        "questionId": "D1-Q01",
        "type": "multiple-choice",
        "lessonId": "L001",
        "question": "How is c pronounced before e?",
        "options": ["k", "ch"],
        "correctAnswer": "ch",
        "explanation": "Italianate pronunciation",
    },
    {
        "questionId": "D2-Q01",
        "type": "matching",
        "lessonId": "L002",
        "question": "Match the words.",
        "options": ["Father", "Son"],
        "correctAnswer": ["Patris - Father", "Filii - Son"],
    },
]

VOCAB_COLUMNS = ["word", "meaning", "lessonId", "partOfSpeech", "frequency"]

SAMPLE_VOCABULARY = [
    {"word": "Pater", "meaning": "father", "lessonId": "L002", "partOfSpeech": "noun", "frequency": "High"},
    {"word": "Filius", "meaning": "son", "lessonId": "L002", "partOfSpeech": "Noun", "frequency": ""},
    {"word": "Sanctus", "meaning": "holy", "lessonId": "L002", "partOfSpeech": "participle", "frequency": "often"},
]

SAMPLE_TEMPLATES = [
    {"id": "VT-MATCH", "lessonId": "L002", "type": "vocab-matching", "wordCount": 2,
     "instruction": "Match each word."},
    {"id": "VT-TRANS", "lessonId": "L002", "type": "vocab-translation", "wordCount": 3,
     "instruction": "Translate each word."},
]


@pytest.fixture(autouse=True)
def no_write_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable the vocabulary write throttle."""
    monkeypatch.setattr(VocabularySeeder, "write_delay", 0)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def seed_dir(tmp_path: Path) -> Path:
    """An empty seed data directory."""
    path = tmp_path / "seed"
    path.mkdir()
    return path


@pytest.fixture
def course_dir(seed_dir: Path) -> Path:
    """A seed data directory holding the complete sample course."""
    write_json(seed_dir / "modules.json", SAMPLE_MODULES)
    write_json(seed_dir / "lessons.json", SAMPLE_LESSONS)
    write_json(seed_dir / "lesson-content.json", SAMPLE_CONTENT)
    write_json(seed_dir / "quizzes.json", SAMPLE_QUIZZES)
    write_json(seed_dir / "quiz-questions.json", SAMPLE_QUESTIONS)
    write_csv(seed_dir / "vocabulary.csv", SAMPLE_VOCABULARY, VOCAB_COLUMNS)
    write_json(seed_dir / "vocab-question-templates.json", SAMPLE_TEMPLATES)
    return seed_dir
