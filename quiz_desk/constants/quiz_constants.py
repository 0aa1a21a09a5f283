"""Quiz-related constants shared across UI and core layers."""

DEFAULT_SECONDS_PER_QUESTION: int = 20
RESULTS_CSV_PATH: str = "results.csv"
DEFAULT_QUESTIONS_PATH: str = "quiz_questions.txt"
DEFAULT_EXPORT_FILENAME: str = "results_export.csv"
TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"
CSV_HEADER: tuple[str, ...] = (
    "timestamp",
    "name",
    "email",
    "score_percent",
    "correct",
    "total_questions",
    "answers",
)
