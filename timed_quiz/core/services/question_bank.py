"""Service holding the questions loaded for one quiz start."""

from __future__ import annotations

import random
from collections.abc import Iterable

from timed_quiz.constants.quiz_constants import MAX_QUIZ_QUESTIONS
from timed_quiz.core.models import QuestionRecord


class QuestionBank:
    """Ordered collection of every question read from the source."""

    def __init__(self, records: Iterable[QuestionRecord]) -> None:
        self._records: list[QuestionRecord] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def get_questions(self) -> list[QuestionRecord]:
        """Return a copy of the questions in their current order."""
        return list(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def draw_quiz_set(
        self,
        rng: random.Random,
        limit: int = MAX_QUIZ_QUESTIONS,
    ) -> tuple[QuestionRecord, ...]:
        """Shuffle the bank in place and return its first ``limit`` questions."""
        if limit <= 0:
            raise ValueError("Quiz length must be a positive integer.")
        rng.shuffle(self._records)
        return tuple(self._records[:limit])
