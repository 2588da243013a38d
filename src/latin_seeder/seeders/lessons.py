"""Seeder for church_latin_lessons (lessons.json).

Lessons reference their module by backend id, so modules must be seeded
first.
"""

from typing import Any

from .. import schema
from ..data import extract_number
from ..errors import RecordRejected
from ..fixtures import LESSONS_FILE, LessonData
from ..models import SeedOptions
from .base import Seeder


class LessonsSeeder(Seeder):
    name = "Lessons"
    collection_name = schema.LESSONS
    fixture = LESSONS_FILE
    required_fields = ("id", "title", "moduleId", "day")
    label = "lesson"

    def build_record(self, data: LessonData, options: SeedOptions) -> dict[str, Any]:
        module_number = extract_number(data["moduleId"])
        if module_number is None:
            raise RecordRejected(f"Invalid module ID format: {data['moduleId']}")

        module = self.backend.find_first(schema.MODULES, moduleNumber=module_number)
        if module is None:
            raise RecordRejected(
                f"Failed to find module with number {module_number} for lesson {data['id']}"
            )

        # Lesson ids without digits fall back to their day
        lesson_number = extract_number(data["id"])
        if lesson_number is None:
            lesson_number = data["day"]

        return {
            "resourceId": f"lesson_{data['id']}",
            "name": data["title"],
            "lessonNumber": lesson_number,
            "moduleId": module.id,
            "displayOrder": data["day"],
        }
