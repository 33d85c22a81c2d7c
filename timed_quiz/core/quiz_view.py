"""Display callbacks the quiz controller drives."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from timed_quiz.core.models import QuestionRecord


class QuizView(Protocol):
    """Presentation layer contract.

    Any front-end (Qt window, terminal, test double) implements these
    methods and forwards user intents to ``QuizController.start`` and
    ``QuizController.submit_answer``. Views render snapshots only and never
    mutate session state.
    """

    def render_question(self, index: int, total: int, prompt_text: str) -> None:
        """Show question ``index`` (zero-based) of ``total``."""

    def render_timer(self, seconds_left: int) -> None: ...

    def render_score(self, score: int) -> None: ...

    def render_summary(self, score: int, missed: Sequence[QuestionRecord]) -> None:
        """Show the final score and the missed questions in the order they were missed."""

    def set_input_enabled(self, enabled: bool) -> None:
        """Enable answer input while a quiz runs; Start is available otherwise."""

    def report_load_error(self, message: str) -> None: ...
