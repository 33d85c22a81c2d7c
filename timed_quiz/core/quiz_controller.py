"""Quiz session controller shared by every front-end."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from timed_quiz.core.models import QuizPhase, QuizSummary, SessionState
from timed_quiz.core.question_loader import (
    QuestionSourceUnavailable,
    default_question_source,
    load_question_bank,
)
from timed_quiz.core.quiz_view import QuizView
from timed_quiz.core.services import quiz_session
from timed_quiz.core.services.countdown import CountdownHandle, CountdownScheduler
from timed_quiz.core.settings import QuizSettings

logger = logging.getLogger(__name__)


class QuizController:
    """Owns the session state and the per-question countdown.

    The view forwards two intents, :meth:`start` and :meth:`submit_answer`;
    everything else flows back through :class:`QuizView` callbacks. All calls
    happen on one thread (the Qt event loop or a manual scheduler), and the
    active countdown is always cancelled before a question is resolved, so a
    submission arriving on the same tick as the timeout wins.
    """

    def __init__(
        self,
        view: QuizView,
        scheduler: CountdownScheduler,
        question_source: Path | None = None,
        settings: QuizSettings | None = None,
    ) -> None:
        self._view = view
        self._scheduler = scheduler
        self._question_source = question_source or default_question_source()
        self._settings = settings or QuizSettings()

        self._phase = QuizPhase.IDLE
        self._state: SessionState | None = None
        self._countdown: CountdownHandle | None = None
        self._summary: QuizSummary | None = None

        self._rng = random.Random()
        self._rng.seed(self._settings.shuffle_seed)

    # --- Read-only snapshots ---

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def state(self) -> SessionState | None:
        return self._state

    @property
    def summary(self) -> QuizSummary | None:
        return self._summary

    @property
    def settings(self) -> QuizSettings:
        return self._settings

    @property
    def question_source(self) -> Path:
        return self._question_source

    def is_running(self) -> bool:
        return self._phase in (QuizPhase.IN_PROGRESS, QuizPhase.QUESTION_TRANSITION)

    # --- Configuration ---

    def set_question_source(self, file_path: Path) -> None:
        if self.is_running():
            raise RuntimeError("Cannot change the question source while a quiz is running.")
        self._question_source = file_path

    def apply_settings(self, settings: QuizSettings) -> None:
        if self.is_running():
            raise RuntimeError("Cannot change settings while a quiz is running.")
        if settings.shuffle_seed != self._settings.shuffle_seed:
            self.set_shuffle_seed(settings.shuffle_seed)
        self._settings = settings

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    # --- User intents ---

    def start(self) -> bool:
        """Load the questions and begin a new quiz. Returns False when nothing started."""
        if self.is_running():
            logger.warning("Ignoring start request while a quiz is in progress.")
            return False

        try:
            bank = load_question_bank(self._question_source)
        except QuestionSourceUnavailable as exc:
            logger.warning("Unable to start quiz: %s", exc)
            self._phase = QuizPhase.IDLE
            self._state = None
            self._summary = None
            self._view.set_input_enabled(False)
            self._view.report_load_error(str(exc))
            return False

        if self._settings.shuffle_seed is not None:
            self._rng.seed(self._settings.shuffle_seed)
        quiz_set = bank.draw_quiz_set(self._rng, self._settings.max_questions)
        self._state = quiz_session.begin_session(quiz_set)
        self._summary = None
        self._phase = QuizPhase.IN_PROGRESS
        logger.info("Starting quiz with %d of %d questions", len(quiz_set), len(bank))

        self._view.render_score(0)
        self._view.set_input_enabled(True)
        self._present_current_question(self._state)
        return True

    def submit_answer(self, text: str) -> bool:
        """Score ``text`` against the current question. Returns False if no quiz is running."""
        if self._phase is not QuizPhase.IN_PROGRESS or self._state is None:
            logger.warning("Ignoring answer submitted outside of a running quiz.")
            return False

        self._cancel_countdown()
        self._state, _ = quiz_session.apply_answer(self._state, text)
        self._finish_question(self._state)
        return True

    def on_timer_expire(self) -> None:
        if self._phase is not QuizPhase.IN_PROGRESS or self._state is None:
            return
        logger.debug("Time expired on question %d", self._state.current_index + 1)
        self._cancel_countdown()
        self._state = quiz_session.apply_timeout(self._state)
        self._finish_question(self._state)

    # --- Internal flow ---

    def _finish_question(self, state: SessionState) -> None:
        self._phase = QuizPhase.QUESTION_TRANSITION
        self._view.render_score(state.score)
        if state.is_finished:
            self._end_quiz(state)
            return
        self._phase = QuizPhase.IN_PROGRESS
        self._present_current_question(state)

    def _present_current_question(self, state: SessionState) -> None:
        question = state.current_question
        if question is None:
            self._end_quiz(state)
            return

        self._cancel_countdown()
        self._view.render_question(state.current_index, state.total, question.prompt)
        question_time = self._settings.question_time_seconds
        self._view.render_timer(question_time)
        self._countdown = self._scheduler.arm(
            question_time,
            on_tick=self._handle_tick,
            on_expire=self.on_timer_expire,
        )

    def _handle_tick(self, seconds_left: int) -> None:
        self._view.render_timer(seconds_left)

    def _end_quiz(self, state: SessionState) -> None:
        self._cancel_countdown()
        self._phase = QuizPhase.ENDED
        self._summary = QuizSummary(
            score=state.score,
            total=state.total,
            missed=state.missed,
        )
        logger.info("Quiz finished with score %d/%d", state.score, state.total)
        self._view.set_input_enabled(False)
        self._view.render_summary(self._summary.score, list(self._summary.missed))

    def _cancel_countdown(self) -> None:
        if self._countdown is not None:
            self._scheduler.cancel(self._countdown)
            self._countdown = None
