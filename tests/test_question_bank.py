from __future__ import annotations

import pytest

from quiz_desk.core.errors import ValidationError
from quiz_desk.core.models import Question
from quiz_desk.core.services.question_bank import QuestionBank, default_question_bank


def test_empty_bank_is_rejected():
    with pytest.raises(ValidationError):
        QuestionBank([])


@pytest.mark.parametrize(
    "question",
    [
        Question("   ", ("a", "b"), 0),
        Question("Only one?", ("a",), 0),
        Question("Blank choice?", ("a", " "), 0),
        Question("Index too high?", ("a", "b"), 2),
        Question("Negative index?", ("a", "b"), -1),
    ],
)
def test_invalid_questions_are_rejected(question):
    with pytest.raises(ValidationError):
        QuestionBank([question])


def test_questions_are_normalized_and_ordered():
    bank = QuestionBank([Question("  First? ", (" a ", "b"), 1), Question("Second?", ("c", "d", "e"), 2)])
    assert len(bank) == 2
    assert bank[0] == Question("First?", ("a", "b"), 1)
    assert [q.text for q in bank] == ["First?", "Second?"]


def test_out_of_range_index_raises_index_error():
    bank = QuestionBank([Question("Q?", ("a", "b"), 0)])
    with pytest.raises(IndexError):
        bank[1]


def test_default_bank_matches_sample_quiz():
    bank = default_question_bank()
    assert len(bank) == 5
    assert [q.correct_index for q in bank] == [1, 1, 1, 0, 2]
    assert bank[3].choices[0] == "<h1>"
