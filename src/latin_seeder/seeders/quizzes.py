"""Seeder for church_latin_quizzes (quizzes.json)."""

from typing import Any

from .. import schema
from ..fixtures import QUIZZES_FILE, QuizData
from ..models import SeedOptions
from .base import Seeder, resolve_lesson


class QuizzesSeeder(Seeder):
    name = "Quizzes"
    collection_name = schema.QUIZZES
    fixture = QUIZZES_FILE
    required_fields = ("id", "lessonId", "title")
    label = "quiz"

    def build_record(self, data: QuizData, options: SeedOptions) -> dict[str, Any]:
        return {
            "resourceId": f"quiz_{data['id']}",
            "lessonId": resolve_lesson(self.backend, data["lessonId"]),
            "title": data["title"],
            "description": data.get("description") or None,
        }
