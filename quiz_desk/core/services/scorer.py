"""Scoring of completed quiz attempts."""

from __future__ import annotations

from collections.abc import Mapping

from quiz_desk.core.errors import ValidationError
from quiz_desk.core.models import QuestionOutcome, ResultOutcome
from quiz_desk.core.services.question_bank import QuestionBank


def percent_half_up(correct: int, total: int) -> int:
    """Return ``100 * correct / total`` rounded half-up to an integer.

    Python's ``round`` uses banker's rounding (12.5 -> 12); scores are rounded
    half-up instead (12.5 -> 13), computed on integers to avoid float error.
    """
    if total <= 0:
        raise ValidationError("Cannot score a quiz without questions.")
    return (200 * correct + total) // (2 * total)


def score(bank: QuestionBank, answers: Mapping[int, int]) -> ResultOutcome:
    """Compare recorded answers against the bank; unanswered counts as wrong."""
    outcomes: list[QuestionOutcome] = []
    for index, question in enumerate(bank):
        chosen = answers.get(index)
        outcomes.append(
            QuestionOutcome(
                number=index + 1,
                chosen_index=chosen,
                correct_index=question.correct_index,
                is_correct=chosen == question.correct_index,
            )
        )

    correct_count = sum(1 for outcome in outcomes if outcome.is_correct)
    total = len(outcomes)
    return ResultOutcome(
        questions=tuple(outcomes),
        correct_count=correct_count,
        total_questions=total,
        score_percent=percent_half_up(correct_count, total),
    )
