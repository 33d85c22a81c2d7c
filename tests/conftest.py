from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from timed_quiz.core.models import QuestionRecord
from timed_quiz.core.quiz_controller import QuizController
from timed_quiz.core.services.countdown import ManualCountdownScheduler
from timed_quiz.core.settings import QuizSettings


class RecordingView:
    """Test double for ``QuizView`` that records every callback."""

    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.questions: list[tuple[int, int, str]] = []
        self.timer_values: list[int] = []
        self.scores: list[int] = []
        self.summaries: list[tuple[int, list[QuestionRecord]]] = []
        self.load_errors: list[str] = []
        self.input_enabled: bool | None = None

    def render_question(self, index: int, total: int, prompt_text: str) -> None:
        self.questions.append((index, total, prompt_text))
        self.events.append(("question", index, total, prompt_text))

    def render_timer(self, seconds_left: int) -> None:
        self.timer_values.append(seconds_left)
        self.events.append(("timer", seconds_left))

    def render_score(self, score: int) -> None:
        self.scores.append(score)
        self.events.append(("score", score))

    def render_summary(self, score: int, missed: Sequence[QuestionRecord]) -> None:
        self.summaries.append((score, list(missed)))
        self.events.append(("summary", score))

    def set_input_enabled(self, enabled: bool) -> None:
        self.input_enabled = enabled
        self.events.append(("input", enabled))

    def report_load_error(self, message: str) -> None:
        self.load_errors.append(message)
        self.events.append(("load_error", message))


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def scheduler() -> ManualCountdownScheduler:
    return ManualCountdownScheduler()


@pytest.fixture
def write_questions(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str, name: str = "quiz.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_controller(view: RecordingView, scheduler: ManualCountdownScheduler):
    def _make(source: Path, **settings) -> QuizController:
        return QuizController(
            view=view,
            scheduler=scheduler,
            question_source=source,
            settings=QuizSettings(**settings),
        )

    return _make


@pytest.fixture(scope="session")
def qt_app():
    """One offscreen ``QApplication`` shared by every Qt test."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
