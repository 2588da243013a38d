"""Seeder for church_latin_quiz_questions (quiz-questions.json).

List-valued fields are stored JSON-encoded: ``options`` and ``vocabulary``
always, ``correctAnswer`` when a question has several correct answers
(matching questions).
"""

import json
from typing import Any

from .. import schema
from ..fixtures import QUIZ_QUESTIONS_FILE, QuizQuestionData
from ..models import SeedOptions
from .base import Seeder, resolve_lesson


def _json_or_none(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


class QuizQuestionsSeeder(Seeder):
    name = "Quiz Questions"
    collection_name = schema.QUIZ_QUESTIONS
    fixture = QUIZ_QUESTIONS_FILE
    required_fields = ("questionId", "type", "lessonId", "question")
    label = "question"

    def record_key(self, data: dict[str, Any]) -> str:
        return str(data.get("questionId"))

    def build_record(self, data: QuizQuestionData, options: SeedOptions) -> dict[str, Any]:
        lesson_record_id = resolve_lesson(self.backend, data["lessonId"])

        correct_answer = data.get("correctAnswer")
        if isinstance(correct_answer, list):
            correct_answer = json.dumps(correct_answer, ensure_ascii=False)

        return {
            "resourceId": f"question_{data['questionId']}",
            "questionId": data["questionId"],
            "type": data["type"],
            "lessonId": lesson_record_id,
            "question": data["question"],
            "options": _json_or_none(data.get("options")),
            "correctAnswer": correct_answer or None,
            "explanation": data.get("explanation") or None,
            "vocabulary": _json_or_none(data.get("vocabulary")),
        }
