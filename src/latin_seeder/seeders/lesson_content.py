"""Seeder for church_latin_lesson_content (lesson-content.json)."""

from typing import Any

from .. import schema
from ..fixtures import LESSON_CONTENT_FILE, LessonContentData
from ..models import SeedOptions
from .base import Seeder, resolve_lesson


class LessonContentSeeder(Seeder):
    name = "Lesson Content"
    collection_name = schema.LESSON_CONTENT
    fixture = LESSON_CONTENT_FILE
    required_fields = ("lessonId", "content", "materials", "practice")
    label = "content for lesson"

    def record_key(self, data: dict[str, Any]) -> str:
        return str(data.get("lessonId"))

    def build_record(self, data: LessonContentData, options: SeedOptions) -> dict[str, Any]:
        return {
            "resourceId": f"content_{data['lessonId']}",
            "lessonId": resolve_lesson(self.backend, data["lessonId"]),
            "content": data["content"],
            "materials": data["materials"],
            "practice": data["practice"],
        }
