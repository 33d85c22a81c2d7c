"""User-adjustable quiz settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from timed_quiz.constants.quiz_constants import MAX_QUIZ_QUESTIONS, QUESTION_TIME_SECONDS


class QuizSettings(BaseModel):
    """Settings edited through the settings dialog and applied to the controller."""

    model_config = ConfigDict(frozen=True)

    question_time_seconds: int = Field(default=QUESTION_TIME_SECONDS, ge=1, le=300)
    max_questions: int = Field(default=MAX_QUIZ_QUESTIONS, ge=1, le=100)
    shuffle_seed: int | None = None
    ui_font_size: int = Field(default=11, ge=8, le=24)
    question_font_size: int = Field(default=16, ge=10, le=32)
    dark_mode: bool = False

    def updated(self, **changes) -> QuizSettings:
        """Return a validated copy with ``changes`` applied."""
        return QuizSettings.model_validate({**self.model_dump(), **changes})
