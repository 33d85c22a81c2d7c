import pytest

pytest.importorskip("PySide6.QtWidgets")

from timed_quiz.core.models import QuestionRecord, QuizPhase  # noqa: E402
from timed_quiz.core.settings import QuizSettings  # noqa: E402
from timed_quiz.ui.quiz_main_window import QuizMainWindow  # noqa: E402


@pytest.fixture
def window(qt_app, write_questions):
    source = write_questions("Capital of France?|Paris\nLegs on a spider?|8\n")
    main_window = QuizMainWindow(question_source=source, settings=QuizSettings(shuffle_seed=1))
    yield main_window
    main_window.close()
    main_window.deleteLater()


def _assert_idle_controls(window) -> None:
    assert not window.answer_field.isEnabled()
    assert not window.submit_button.isEnabled()
    assert window.start_button.isEnabled()
    assert window.import_button.isEnabled()
    assert window.settings_button.isEnabled()


def test_answer_controls_disabled_before_start(window):
    _assert_idle_controls(window)


def test_start_enables_answer_controls(window):
    assert window.controller.start()

    assert window.answer_field.isEnabled()
    assert window.submit_button.isEnabled()
    assert not window.start_button.isEnabled()
    assert not window.import_button.isEnabled()
    assert not window.settings_button.isEnabled()
    assert "Question 1 of 2" in window.question_label.text()


def test_answer_controls_disabled_after_quiz_ends(window):
    window.controller.start()
    while window.controller.phase is QuizPhase.IN_PROGRESS:
        window.answer_field.setText(window.controller.state.current_question.answer.upper())
        window.submit_button.click()

    assert window.controller.phase is QuizPhase.ENDED
    _assert_idle_controls(window)
    assert "Quiz Over! Final Score: 2" in window.question_label.text()
    assert window.score_label.text() == "Score: 2"
    assert window.timer_label.text() == ""


def test_render_question_clears_answer_field(window):
    window.answer_field.setText("leftover")

    window.render_question(1, 3, "Next prompt?")

    assert window.answer_field.text() == ""
    assert "Question 2 of 3" in window.question_label.text()
    assert "Next prompt?" in window.question_label.text()


def test_render_summary_clears_timer_and_lists_missed(window):
    window.render_timer(4)
    assert window.timer_label.text() == "Time: 4"

    window.render_summary(1, [QuestionRecord(prompt="Legs on a spider?", answer="8")])

    assert window.timer_label.text() == ""
    text = window.question_label.text()
    assert "Quiz Over! Final Score: 1" in text
    assert "Legs on a spider? (Answer: 8)" in text
