import pytest
from pydantic import ValidationError

from timed_quiz.constants.quiz_constants import MAX_QUIZ_QUESTIONS, QUESTION_TIME_SECONDS
from timed_quiz.core.settings import QuizSettings


def test_defaults_match_quiz_constants():
    settings = QuizSettings()
    assert settings.question_time_seconds == QUESTION_TIME_SECONDS == 15
    assert settings.max_questions == MAX_QUIZ_QUESTIONS == 10
    assert settings.shuffle_seed is None
    assert settings.dark_mode is False


def test_updated_returns_validated_copy():
    settings = QuizSettings()
    changed = settings.updated(question_time_seconds=30, shuffle_seed=5)

    assert changed.question_time_seconds == 30
    assert changed.shuffle_seed == 5
    assert settings.question_time_seconds == 15


@pytest.mark.parametrize(
    "changes",
    [
        {"question_time_seconds": 0},
        {"max_questions": 0},
        {"ui_font_size": 100},
        {"question_font_size": "huge"},
    ],
)
def test_invalid_values_are_rejected(changes):
    with pytest.raises(ValidationError):
        QuizSettings().updated(**changes)


def test_settings_are_immutable():
    settings = QuizSettings()
    with pytest.raises(ValidationError):
        settings.max_questions = 3
