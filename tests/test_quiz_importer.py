from __future__ import annotations

import pytest

from quiz_desk.core.errors import ValidationError
from quiz_desk.core.models import Question
from quiz_desk.core.quiz_importer import QuizImportError, load_question_bank, parse_quiz_text

QUIZ_TEXT = """\
Q: Which data structure uses FIFO order?
A: Stack
B: Queue
C: Tree
D: Graph
CORRECT: B

Q: Is Python
dynamically typed?
A: Yes
B: No
correct: a
---
Q: Pick the third
A: one
B: two
C: three
  and a bit
CORRECT: C
"""


def test_parses_blocks_with_varying_choice_counts():
    questions = parse_quiz_text(QUIZ_TEXT)
    assert questions == [
        Question("Which data structure uses FIFO order?", ("Stack", "Queue", "Tree", "Graph"), 1),
        Question("Is Python\ndynamically typed?", ("Yes", "No"), 0),
        Question("Pick the third", ("one", "two", "three and a bit"), 2),
    ]


def test_load_question_bank_from_file(tmp_path):
    path = tmp_path / "quiz_questions.txt"
    path.write_text(QUIZ_TEXT, encoding="utf-8")
    bank = load_question_bank(path)
    assert len(bank) == 3
    assert bank[2].correct_index == 2


def test_empty_file_is_rejected(tmp_path):
    path = tmp_path / "quiz_questions.txt"
    path.write_text("\n\n---\n", encoding="utf-8")
    with pytest.raises(QuizImportError):
        load_question_bank(path)


@pytest.mark.parametrize(
    "block",
    [
        "A: one\nB: two\nCORRECT: A",
        "Q: Only one choice\nA: one\nCORRECT: A",
        "Q: Gap in letters\nA: one\nC: three\nCORRECT: A",
        "Q: Missing correct\nA: one\nB: two",
        "Q: Correct out of range\nA: one\nB: two\nCORRECT: C",
        "Q: Duplicate\nA: one\nA: again\nB: two\nCORRECT: A",
        "stray text\nQ: Q?\nA: one\nB: two\nCORRECT: A",
    ],
)
def test_invalid_blocks_raise_import_error(block):
    with pytest.raises(QuizImportError):
        parse_quiz_text(block)


def test_import_error_is_a_validation_error():
    assert issubclass(QuizImportError, ValidationError)
