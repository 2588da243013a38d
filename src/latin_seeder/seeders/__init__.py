"""Seeder registry, in dependency order."""

from pathlib import Path

from ..backend import Backend
from ..log import log_info
from ..models import SeedOptions, SeedResult
from .base import Seeder, clear_collection
from .lesson_content import LessonContentSeeder
from .lessons import LessonsSeeder
from .modules import ModulesSeeder
from .question_templates import QuestionTemplatesSeeder
from .quiz_questions import QuizQuestionsSeeder
from .quizzes import QuizzesSeeder
from .vocabulary import VocabularySeeder

__all__ = [
    "LessonContentSeeder",
    "LessonsSeeder",
    "ModulesSeeder",
    "QuestionTemplatesSeeder",
    "QuizQuestionsSeeder",
    "QuizzesSeeder",
    "SEEDER_CLASSES",
    "Seeder",
    "VocabularySeeder",
    "build_seeders",
    "clear_collection",
    "run_seeders",
]

# Relations point to records created by earlier seeders
SEEDER_CLASSES: tuple[type[Seeder], ...] = (
    ModulesSeeder,
    LessonsSeeder,
    LessonContentSeeder,
    QuizzesSeeder,
    QuizQuestionsSeeder,
    VocabularySeeder,
    QuestionTemplatesSeeder,
)


def build_seeders(
    collection: str | None = None,
    backend: Backend | None = None,
    data_dir: Path | None = None,
) -> list[Seeder]:
    """Instantiate seeders, optionally only those whose collection matches.

    ``collection`` matches as a case-insensitive substring of the collection
    name, so "vocab" selects church_latin_vocabulary.
    """
    seeders = [cls(backend=backend, data_dir=data_dir) for cls in SEEDER_CLASSES]
    if collection:
        needle = collection.lower()
        seeders = [s for s in seeders if needle in s.collection_name.lower()]
    return seeders


def run_seeders(seeders: list[Seeder], options: SeedOptions) -> list[SeedResult]:
    """Run seeders one after another and collect their results."""
    results: list[SeedResult] = []
    for seeder in seeders:
        log_info(f"Starting {seeder.name}...")
        results.append(seeder.seed(options))
    return results
