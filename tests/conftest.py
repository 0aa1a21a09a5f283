from __future__ import annotations

from datetime import datetime

import pytest

from quiz_desk.core.models import Question, ResultRecord
from quiz_desk.core.services.question_bank import QuestionBank


@pytest.fixture
def five_question_bank() -> QuestionBank:
    """Bank whose correct indices are 1, 1, 1, 0, 2."""
    return QuestionBank(
        [
            Question(f"Question {number}?", ("A", "B", "C", "D"), correct)
            for number, correct in enumerate([1, 1, 1, 0, 2], start=1)
        ]
    )


@pytest.fixture
def sample_record() -> ResultRecord:
    return ResultRecord(
        timestamp=datetime(2024, 1, 1, 10, 0, 0),
        name="Jane Doe",
        email="jane@example.com",
        score_percent=80,
        correct_count=4,
        total_questions=5,
        answers=((1, 1), (2, 0), (3, None), (4, 1), (5, 3)),
    )
