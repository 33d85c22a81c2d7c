"""Application entry point for TimedQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from timed_quiz.ui.quiz_main_window import QuizMainWindow
from timed_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting TimedQuiz…")

    app = QApplication(sys.argv)
    window = QuizMainWindow()
    logger.info("Questions will be read from %s", window.controller.question_source)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
