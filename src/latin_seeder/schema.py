"""PocketBase collection reference.

Collections are created and migrated on the PocketBase side; the seeder only
reads and writes records. Every course collection has a unique text field
``resourceId`` holding the synthetic key the seeder matches fixtures on.

Course collections and the fields the seeder writes:

- church_latin_modules: resourceId, moduleNumber, name, description
- church_latin_lessons: resourceId, lessonNumber, name, moduleId (relation),
  displayOrder
- church_latin_lesson_content: resourceId, lessonId (relation), content,
  materials, practice
- church_latin_quizzes: resourceId, lessonId (relation), title, description
- church_latin_quiz_questions: resourceId, questionId, type, lessonId
  (relation), question, options (json), correctAnswer, explanation,
  vocabulary (json); template questions add quizId, isTemplateQuestion,
  templateId, questionIndex
- church_latin_vocabulary: resourceId, word, meaning, lessonId (relation),
  partOfSpeech (select), frequency (select), caseInfo, conjugationInfo,
  liturgicalContext

User collections (progress, review items, review events) are written by the
web app and are never touched here.
"""

MODULES = "church_latin_modules"
LESSONS = "church_latin_lessons"
LESSON_CONTENT = "church_latin_lesson_content"
QUIZZES = "church_latin_quizzes"
QUIZ_QUESTIONS = "church_latin_quiz_questions"
VOCABULARY = "church_latin_vocabulary"

# In seeding order (relations point backwards in this list)
COURSE_COLLECTIONS = (
    MODULES,
    LESSONS,
    LESSON_CONTENT,
    QUIZZES,
    QUIZ_QUESTIONS,
    VOCABULARY,
)

# Select field values accepted by church_latin_vocabulary
PARTS_OF_SPEECH = (
    "noun",
    "verb",
    "adjective",
    "adverb",
    "preposition",
    "conjunction",
    "pronoun",
    "article",
)
FREQUENCIES = ("high", "medium", "low", "unknown")
