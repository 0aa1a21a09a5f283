"""Service holding the fixed, ordered set of quiz questions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from quiz_desk.core.errors import ValidationError
from quiz_desk.core.models import Question


class QuestionBank:
    """Immutable ordered collection of validated questions."""

    def __init__(self, questions: Iterable[Question]) -> None:
        prepared = tuple(self._prepare_question(q) for q in questions)
        if not prepared:
            raise ValidationError("Quiz must contain at least one question.")
        self._questions = prepared

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")
        return self._questions[index]

    def get_questions(self) -> tuple[Question, ...]:
        return self._questions

    @staticmethod
    def _prepare_question(question: Question) -> Question:
        """Validate and normalize a question before storage."""
        cleaned_text = question.text.strip()
        if not cleaned_text:
            raise ValidationError("Question text must not be empty.")

        choices = tuple(choice.strip() for choice in question.choices)
        if len(choices) < 2:
            raise ValidationError("Each question must have at least two choices.")
        if any(not choice for choice in choices):
            raise ValidationError("Choice text cannot be empty.")

        if not 0 <= question.correct_index < len(choices):
            raise ValidationError(
                f"Correct choice index must be between 0 and {len(choices) - 1}."
            )

        return Question(text=cleaned_text, choices=choices, correct_index=question.correct_index)


def default_question_bank() -> QuestionBank:
    """Return the built-in sample quiz used when no question file is present."""
    return QuestionBank(
        [
            Question(
                "Which data structure uses FIFO order?",
                ("Stack", "Queue", "Tree", "Graph"),
                1,
            ),
            Question(
                "Which keyword is used to inherit a class in Java?",
                ("implements", "extends", "inherits", "uses"),
                1,
            ),
            Question(
                "What is the time complexity of binary search (sorted array)?",
                ("O(n)", "O(log n)", "O(n log n)", "O(1)"),
                1,
            ),
            Question(
                "Which HTML tag is used for the largest heading?",
                ("<h1>", "<head>", "<header>", "<h6>"),
                0,
            ),
            Question(
                "Which of these is NOT a primitive type in Java?",
                ("int", "boolean", "String", "double"),
                2,
            ),
        ]
    )
