"""Utilities for importing a question bank from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text (supports Markdown). Additional lines until the next
       marker are treated as part of the question.
    A: First choice
    B: Second choice
    C: Third choice  (two or more lettered choices, contiguous from A)
    CORRECT: B

Example:

    Q: Which data structure uses FIFO order?
    A: Stack
    B: Queue
    C: Tree
    D: Graph
    CORRECT: B
"""

from __future__ import annotations

from pathlib import Path
import string

from quiz_desk.core.errors import ValidationError
from quiz_desk.core.models import Question
from quiz_desk.core.services.question_bank import QuestionBank


class QuizImportError(ValidationError):
    """Raised when a question file cannot be parsed."""


_CHOICE_LETTERS = string.ascii_uppercase


def load_question_bank(file_path: Path) -> QuestionBank:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return QuestionBank(questions)


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block) for block in blocks if block]


def _parse_block(block: str) -> Question:
    question_lines: list[str] = []
    choices: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _CHOICE_LETTERS and line[1] == ":":
            letter = line[0].upper()
            if letter in choices:
                raise QuizImportError(f"Choice {letter} is defined twice.")
            choices[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section is not None:
            choices[current_section] = f"{choices[current_section]} {line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")

    expected_letters = _CHOICE_LETTERS[: len(choices)]
    if len(choices) < 2 or set(choices) != set(expected_letters):
        raise QuizImportError(
            "Each question must define at least two choices lettered consecutively from A."
        )
    choice_list = tuple(choices[letter].strip() for letter in expected_letters)
    if any(not choice for choice in choice_list):
        raise QuizImportError("Choice text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError("Each question needs a CORRECT: line.")
    if correct_letter not in expected_letters:
        raise QuizImportError(f"CORRECT must be one of {', '.join(expected_letters)}.")

    return Question(
        text=question_text,
        choices=choice_list,
        correct_index=expected_letters.index(correct_letter),
    )
