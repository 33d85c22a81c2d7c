"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class QuizPhase(Enum):
    """Lifecycle phase of the quiz session controller."""

    IDLE = auto()
    IN_PROGRESS = auto()
    QUESTION_TRANSITION = auto()
    ENDED = auto()


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    """One prompt with its correct answer."""

    prompt: str
    answer: str


@dataclass(frozen=True, slots=True)
class SessionState:
    """Progress of one quiz run.

    Instances are immutable; every transition in
    :mod:`timed_quiz.core.services.quiz_session` returns a new value.
    """

    quiz_set: tuple[QuestionRecord, ...]
    current_index: int = 0
    score: int = 0
    missed: tuple[QuestionRecord, ...] = ()

    @property
    def total(self) -> int:
        return len(self.quiz_set)

    @property
    def is_finished(self) -> bool:
        return self.current_index >= len(self.quiz_set)

    @property
    def current_question(self) -> QuestionRecord | None:
        if self.is_finished:
            return None
        return self.quiz_set[self.current_index]

    @property
    def presented_count(self) -> int:
        return self.score + len(self.missed)


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """Snapshot emitted when a quiz ends."""

    score: int
    total: int
    missed: tuple[QuestionRecord, ...]
