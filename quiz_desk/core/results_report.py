"""Plain-text review of a scored attempt, as shown in the results dialog."""

from __future__ import annotations

from quiz_desk.core.models import ResultOutcome, User
from quiz_desk.core.services.question_bank import QuestionBank

NO_ANSWER_TEXT = "<no answer>"


def format_outcome_report(user: User, bank: QuestionBank, outcome: ResultOutcome) -> str:
    lines = [f"Results for {user.name} ({user.email})", ""]
    for entry, question in zip(outcome.questions, bank):
        chosen_text = (
            question.choices[entry.chosen_index]
            if entry.chosen_index is not None
            else NO_ANSWER_TEXT
        )
        lines.append(f"Q{entry.number}: {'Correct' if entry.is_correct else 'Incorrect'}")
        lines.append(f"  Your answer: {chosen_text}")
        lines.append(f"  Correct answer: {question.choices[question.correct_index]}")
        lines.append("")
    lines.append(
        f"Score: {outcome.correct_count} / {outcome.total_questions}  ({outcome.score_percent}%)"
    )
    return "\n".join(lines) + "\n"
