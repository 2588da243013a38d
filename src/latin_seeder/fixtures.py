"""Fixture record shapes and the fixture files that hold them.

Each fixture file is the intended state of one backend collection. The
TypedDicts below document the keys a fixture row may carry; rows are loaded
as plain dicts and checked against the required field lists at seed time.
"""

from typing import TypedDict


class ModuleData(TypedDict):
    """Row of modules.json (id like "M01")."""
    id: str
    name: str
    description: str


class LessonData(TypedDict):
    """Row of lessons.json (id like "L001", moduleId like "M01")."""
    id: str
    title: str
    moduleId: str
    day: int


class LessonContentData(TypedDict):
    """Row of lesson-content.json."""
    lessonId: str
    content: list[str]
    materials: list[str]
    practice: list[str]


class QuizData(TypedDict, total=False):
    """Row of quizzes.json."""
    id: str
    lessonId: str
    title: str
    description: str


class QuizQuestionData(TypedDict, total=False):
    """Row of quiz-questions.json."""
    questionId: str
    type: str
    lessonId: str
    question: str
    options: list[str]
    correctAnswerIndex: int
    correctAnswer: str | list[str]
    explanation: str
    vocabulary: list[str]


class VocabularyData(TypedDict, total=False):
    """Row of vocabulary.csv."""
    word: str
    meaning: str
    lessonId: str
    partOfSpeech: str
    frequency: str
    caseInfo: str
    conjugationInfo: str
    liturgicalContext: str


class VocabQuestionTemplateData(TypedDict, total=False):
    """Row of vocab-question-templates.json."""
    id: str
    lessonId: str
    type: str  # vocab-translation | vocab-matching | vocab-multiple-choice
    wordCount: int
    instruction: str
    format: str


# Fixture file names (relative to the seed data directory)
MODULES_FILE = "modules.json"
LESSONS_FILE = "lessons.json"
LESSON_CONTENT_FILE = "lesson-content.json"
QUIZZES_FILE = "quizzes.json"
QUIZ_QUESTIONS_FILE = "quiz-questions.json"
VOCABULARY_FILE = "vocabulary.csv"
QUESTION_TEMPLATES_FILE = "vocab-question-templates.json"

# Columns read from vocabulary.csv
VOCABULARY_COLUMNS = (
    "word",
    "meaning",
    "lessonId",
    "partOfSpeech",
    "frequency",
    "caseInfo",
    "conjugationInfo",
    "liturgicalContext",
)
