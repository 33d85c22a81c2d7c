import random

import pytest

from timed_quiz.core.models import QuestionRecord
from timed_quiz.core.services.question_bank import QuestionBank


def _records(count: int) -> list[QuestionRecord]:
    return [QuestionRecord(prompt=f"Q{i}", answer=f"A{i}") for i in range(count)]


@pytest.mark.parametrize("size, expected", [(1, 1), (3, 3), (10, 10), (25, 10)])
def test_draw_quiz_set_length_is_capped_at_ten(size, expected):
    bank = QuestionBank(_records(size))
    quiz_set = bank.draw_quiz_set(random.Random(1))
    assert len(quiz_set) == expected
    assert len(set(quiz_set)) == expected


def test_draw_quiz_set_shuffles_bank_in_place():
    records = _records(20)
    bank = QuestionBank(records)

    quiz_set = bank.draw_quiz_set(random.Random(7))

    shuffled = bank.get_questions()
    assert sorted(shuffled, key=lambda q: q.prompt) == sorted(records, key=lambda q: q.prompt)
    assert shuffled != records
    assert quiz_set == tuple(shuffled[:10])


def test_draw_quiz_set_is_reproducible_with_seed():
    first = QuestionBank(_records(15)).draw_quiz_set(random.Random(42))
    second = QuestionBank(_records(15)).draw_quiz_set(random.Random(42))
    assert first == second


def test_draw_quiz_set_respects_custom_limit():
    bank = QuestionBank(_records(8))
    assert len(bank.draw_quiz_set(random.Random(), limit=3)) == 3


def test_draw_quiz_set_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        QuestionBank(_records(2)).draw_quiz_set(random.Random(), limit=0)


def test_get_questions_returns_copy():
    bank = QuestionBank(_records(2))
    bank.get_questions().clear()
    assert len(bank) == 2
    assert not bank.is_empty()
