"""Build the course data bundle from the seed fixtures.

The bundle is a static JSON snapshot of the course (modules, lessons with
their content, vocabulary and quiz questions, vocabulary question templates)
that the web app can ship as an offline fallback. It is generated from the
same fixture files the seeders read, so both stay in sync.

Output format:
{
  "modules": [{"id": 1, "title": "...", "description": "...", "days": [1, 2]}],
  "lessons": [{"id": 1, "title": "...", "module": 1, "day": 1,
               "content": [...], "materials": [...], "practice": [...],
               "vocabulary": ["word - meaning"], "quiz": [...]}],
  "vocabQuestionTemplates": [{"id": "...", "lessonId": 1, "type": "...",
                              "format": "auto-generated", "wordCount": 5,
                              "instruction": "..."}],
  "generatedAt": "2024-01-01T00:00:00+00:00"
}
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .data import extract_number, read_csv_data, read_json_data, write_json_data
from .errors import FixtureError
from .fixtures import (
    LESSON_CONTENT_FILE,
    LESSONS_FILE,
    MODULES_FILE,
    QUESTION_TEMPLATES_FILE,
    QUIZ_QUESTIONS_FILE,
    VOCABULARY_FILE,
)
from .log import log_success, log_verbose
from .models import SeedOptions
from .paths import fixture_path


def _number(identifier: Any) -> int:
    """Numeric part of an identifier, 0 if there is none."""
    number = extract_number(identifier)
    return number if number is not None else 0


def _objects(rows: list[Any]) -> list[dict[str, Any]]:
    """Keep only object rows; the seeders report the others."""
    return [row for row in rows if isinstance(row, dict)]


def _optional_json(path: Path) -> list[dict[str, Any]]:
    return read_json_data(path) if path.exists() else []


def _optional_csv(path: Path) -> list[dict[str, str]]:
    return read_csv_data(path) if path.exists() else []


def _quiz_question(index: int, question: dict[str, Any]) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": index,
        "questionId": question.get("questionId"),
        "type": question.get("type"),
        "question": question.get("question"),
        "correctAnswer": question.get("correctAnswer"),
    }
    for key in ("options", "explanation"):
        if question.get(key) is not None:
            entry[key] = question[key]
    return entry


def build_course_data(data_dir: Path | None = None) -> dict[str, Any]:
    """Assemble the course bundle from fixture files.

    modules.json and lessons.json are required; the other fixtures are
    optional and contribute nothing when absent.

    Raises:
        FixtureError: If a required fixture is missing or malformed.
    """
    modules = _objects(read_json_data(fixture_path(MODULES_FILE, data_dir)))
    lessons = _objects(read_json_data(fixture_path(LESSONS_FILE, data_dir)))
    contents = _objects(_optional_json(fixture_path(LESSON_CONTENT_FILE, data_dir)))
    questions = _objects(_optional_json(fixture_path(QUIZ_QUESTIONS_FILE, data_dir)))
    templates = _objects(_optional_json(fixture_path(QUESTION_TEMPLATES_FILE, data_dir)))
    vocabulary = _optional_csv(fixture_path(VOCABULARY_FILE, data_dir))

    content_by_lesson = {
        c["lessonId"]: c for c in contents if isinstance(c.get("lessonId"), str)
    }

    module_entries = []
    for module in modules:
        days = [
            lesson["day"]
            for lesson in lessons
            if lesson.get("moduleId") == module.get("id") and lesson.get("day") is not None
        ]
        try:
            days.sort()
        except TypeError as e:
            raise FixtureError(
                f"Inconsistent day values in {LESSONS_FILE} for module {module.get('id')}: {days}"
            ) from e
        module_entries.append({
            "id": _number(module.get("id")),
            "title": module.get("name"),
            "description": module.get("description"),
            "days": days,
        })

    lesson_entries = []
    for lesson in lessons:
        lesson_id = lesson.get("id")
        content = content_by_lesson.get(lesson_id, {})
        lesson_questions = [q for q in questions if q.get("lessonId") == lesson_id]
        lesson_entries.append({
            "id": _number(lesson_id),
            "title": lesson.get("title"),
            "module": _number(lesson.get("moduleId")),
            "day": lesson.get("day"),
            "content": content.get("content", []),
            "materials": content.get("materials", []),
            "practice": content.get("practice", []),
            "vocabulary": [
                f"{v['word']} - {v['meaning']}"
                for v in vocabulary
                if v.get("lessonId") == lesson_id and v.get("word") and v.get("meaning")
            ],
            "quiz": [_quiz_question(i, q) for i, q in enumerate(lesson_questions, start=1)],
        })
    lesson_entries.sort(key=lambda entry: entry["id"])

    template_entries = [
        {
            "id": t.get("id"),
            "lessonId": _number(t.get("lessonId")),
            "type": t.get("type"),
            "format": "auto-generated",
            "wordCount": t.get("wordCount"),
            "instruction": t.get("instruction"),
        }
        for t in templates
    ]

    return {
        "modules": module_entries,
        "lessons": lesson_entries,
        "vocabQuestionTemplates": template_entries,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
    }


def generate_course_data(
    output_path: Path,
    options: SeedOptions,
    data_dir: Path | None = None,
) -> dict[str, Any]:
    """Generate the course bundle and write it (unless dry run).

    Returns:
        Dict with generation stats: modules, lessons, templates, output, written
    """
    log_verbose("Starting course data generation", options)
    course = build_course_data(data_dir)

    if options.dry_run:
        log_verbose(f"[DRY RUN] Would write course data to {output_path}", options)
    else:
        write_json_data(output_path, course)
        log_success(f"Generated {output_path.name}")
        log_verbose(f"Output: {output_path}", options)

    return {
        "modules": len(course["modules"]),
        "lessons": len(course["lessons"]),
        "templates": len(course["vocabQuestionTemplates"]),
        "output": str(output_path),
        "written": not options.dry_run,
    }
