"""Quiz-related constants shared across UI and core layers."""

QUESTION_TIME_SECONDS: int = 15
MAX_QUIZ_QUESTIONS: int = 10
TICK_INTERVAL_MS: int = 1000
TIME_WARNING_WINDOW_SECONDS: int = 5
QUESTION_DELIMITER: str = "|"
DEFAULT_QUESTION_FILE_NAME: str = "quiz.txt"
