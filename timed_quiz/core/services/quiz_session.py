"""Pure transitions over :class:`SessionState`.

The controller keeps exactly one ``SessionState`` and replaces it with the
value returned here, so the timer path and the submission path never share
mutable fields.
"""

from __future__ import annotations

from dataclasses import replace

from timed_quiz.core.models import QuestionRecord, SessionState


def begin_session(quiz_set: tuple[QuestionRecord, ...]) -> SessionState:
    if not quiz_set:
        raise ValueError("A quiz needs at least one question.")
    return SessionState(quiz_set=quiz_set)


def is_correct_answer(question: QuestionRecord, text: str) -> bool:
    """Case-insensitive comparison of a typed answer against the stored one."""
    return text.strip().casefold() == question.answer.casefold()


def apply_answer(state: SessionState, text: str) -> tuple[SessionState, bool]:
    """Score ``text`` against the current question and advance.

    Returns the new state and whether the answer was correct.
    """
    question = _require_current_question(state)
    if is_correct_answer(question, text):
        return _advance(state, score=state.score + 1), True
    return _advance(state, missed=state.missed + (question,)), False


def apply_timeout(state: SessionState) -> SessionState:
    """Record the current question as missed and advance."""
    question = _require_current_question(state)
    return _advance(state, missed=state.missed + (question,))


def _advance(state: SessionState, **changes) -> SessionState:
    return replace(state, current_index=state.current_index + 1, **changes)


def _require_current_question(state: SessionState) -> QuestionRecord:
    question = state.current_question
    if question is None:
        raise IndexError(
            f"No question at index {state.current_index}; the quiz has {state.total} questions."
        )
    return question
