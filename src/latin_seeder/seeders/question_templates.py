"""Seeder for vocabulary question templates (vocab-question-templates.json).

Templates become questions in church_latin_quiz_questions, attached to the
quiz of their lesson. ``vocab-matching`` templates are expanded into a
concrete matching question using a random sample of the lesson's vocabulary;
other template types keep their instruction as the question text until the
web app generates them on the fly.

The quiz-questions collection is owned by the quiz questions seeder, so this
seeder never clears it in reset mode.
"""

import json
import random
from pathlib import Path
from typing import Any

from .. import schema
from ..backend import Backend
from ..errors import RecordRejected
from ..fixtures import QUESTION_TEMPLATES_FILE, VocabQuestionTemplateData
from ..log import log_verbose
from ..models import SeedOptions
from .base import Seeder, resolve_lesson

# Template questions sort after authored questions
TEMPLATE_QUESTION_INDEX = 999


def question_type_for(template_type: str) -> str:
    """Map a template type ("vocab-matching") to a quiz question type."""
    if "matching" in template_type:
        return "matching"
    if "translation" in template_type:
        return "translation"
    if "recitation" in template_type:
        return "recitation"
    return "multiple-choice"


class QuestionTemplatesSeeder(Seeder):
    name = "Question Templates"
    collection_name = schema.QUIZ_QUESTIONS
    fixture = QUESTION_TEMPLATES_FILE
    required_fields = ("id", "lessonId", "type", "wordCount", "instruction")
    label = "template"
    resets_collection = False

    def __init__(
        self,
        backend: Backend | None = None,
        data_dir: Path | None = None,
        rng: random.Random | None = None,
    ):
        super().__init__(backend, data_dir)
        self.rng = rng or random.Random()

    def build_record(
        self, data: VocabQuestionTemplateData, options: SeedOptions
    ) -> dict[str, Any] | None:
        try:
            word_count = int(data["wordCount"])
        except (TypeError, ValueError):
            word_count = 0
        if word_count < 1:
            raise RecordRejected(
                f"Invalid word count for template {data['id']}: {data['wordCount']!r}"
            )

        lesson_record_id = resolve_lesson(self.backend, data["lessonId"])

        quiz = self.backend.find_first(schema.QUIZZES, lessonId=lesson_record_id)
        if quiz is None:
            raise RecordRejected(f"Failed to find quiz for lesson {data['lessonId']}")

        record: dict[str, Any] = {
            "resourceId": f"template_{data['id']}",
            "questionId": data["id"],
            "type": question_type_for(data["type"]),
            "lessonId": lesson_record_id,
            "quizId": quiz.id,
            "question": data["instruction"],
            "isTemplateQuestion": True,
            "templateId": data["id"],
            "questionIndex": TEMPLATE_QUESTION_INDEX,
        }

        if data["type"] != "vocab-matching":
            return record

        words = self.backend.list_all(schema.VOCABULARY, lessonId=lesson_record_id)
        if not words:
            log_verbose(f"[SKIP] No vocabulary found for template {data['id']}", options)
            return None

        selected = self.rng.sample(words, min(word_count, len(words)))
        latin_words = ", ".join(w.word for w in selected)

        record["question"] = (
            f"Match {len(selected)} vocabulary words to their meanings: {latin_words}"
        )
        record["options"] = json.dumps([w.meaning for w in selected], ensure_ascii=False)
        record["correctAnswer"] = json.dumps(
            [f"{w.word} - {w.meaning}" for w in selected], ensure_ascii=False
        )
        return record
