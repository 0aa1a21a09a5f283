"""Encoding of result records to and from the CSV result log.

Row layout (one record per CSV row)::

    timestamp,name,email,score_percent,correct,total_questions,answers
    2024-01-01 10:00:00,Jane Doe,jane@example.com,80,4,5,q1:1|q2:0|q3:-|q4:1|q5:3

The ``answers`` column lists every question as ``q<number>:<choice>`` joined
by ``|``, with ``-`` marking an unanswered question. Fields containing a comma,
a double quote or a line break are quoted and inner quotes doubled, which is
exactly the ``csv.QUOTE_MINIMAL`` behaviour of the standard library, so a
record can span several physical lines and still round-trip.
"""

from __future__ import annotations

import csv
from datetime import datetime
import io

from quiz_desk.constants.quiz_constants import CSV_HEADER, TIMESTAMP_FORMAT
from quiz_desk.core.errors import MalformedRecordError
from quiz_desk.core.models import ResultRecord

_UNANSWERED = "-"
_ANSWER_SEPARATOR = "|"


def encode_answers(answers: tuple[tuple[int, int | None], ...]) -> str:
    return _ANSWER_SEPARATOR.join(
        f"q{number}:{_UNANSWERED if chosen is None else chosen}" for number, chosen in answers
    )


def decode_answers(text: str) -> tuple[tuple[int, int | None], ...]:
    if not text:
        return ()
    decoded: list[tuple[int, int | None]] = []
    for item in text.split(_ANSWER_SEPARATOR):
        label, sep, value = item.partition(":")
        if not sep or not label.startswith("q"):
            raise MalformedRecordError(f"Unrecognised answer entry '{item}'.")
        try:
            number = int(label[1:])
            chosen = None if value == _UNANSWERED else int(value)
        except ValueError as exc:
            raise MalformedRecordError(f"Unrecognised answer entry '{item}'.") from exc
        decoded.append((number, chosen))
    return tuple(decoded)


def encode_fields(fields: list[str]) -> str:
    """Serialize one row of raw fields, terminated by a newline."""
    buffer = io.StringIO(newline="")
    # Both CR and LF must be in the terminator so either one forces quoting.
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow(fields)
    return buffer.getvalue()[: -len("\r\n")] + "\n"


def header_line() -> str:
    return encode_fields(list(CSV_HEADER))


def encode(record: ResultRecord) -> str:
    """Serialize a record to a newline-terminated CSV row."""
    return encode_fields(
        [
            record.timestamp.strftime(TIMESTAMP_FORMAT),
            record.name,
            record.email,
            str(record.score_percent),
            str(record.correct_count),
            str(record.total_questions),
            encode_answers(record.answers),
        ]
    )


def decode(line: str) -> ResultRecord:
    """Parse a single CSV row back into a record."""
    try:
        rows = list(csv.reader(io.StringIO(line, newline="")))
    except csv.Error as exc:
        raise MalformedRecordError(str(exc)) from exc
    if len(rows) != 1:
        raise MalformedRecordError("Expected exactly one CSV row.")
    return decode_fields(rows[0])


def decode_fields(fields: list[str]) -> ResultRecord:
    """Build a record from already-split CSV fields.

    Extra trailing fields are ignored; fewer than seven is malformed.
    """
    if len(fields) < len(CSV_HEADER):
        raise MalformedRecordError(
            f"Expected {len(CSV_HEADER)} fields but found {len(fields)}."
        )
    raw_timestamp, name, email, raw_score, raw_correct, raw_total, raw_answers = fields[: len(CSV_HEADER)]

    try:
        timestamp = datetime.strptime(raw_timestamp, TIMESTAMP_FORMAT)
        score_percent = int(raw_score)
        correct_count = int(raw_correct)
        total_questions = int(raw_total)
    except ValueError as exc:
        raise MalformedRecordError(str(exc)) from exc

    answers = decode_answers(raw_answers)
    if len(answers) != total_questions:
        raise MalformedRecordError(
            f"Record lists {len(answers)} answers for {total_questions} questions."
        )
    if not 0 <= correct_count <= total_questions:
        raise MalformedRecordError("Correct count is outside the number of questions.")
    if not 0 <= score_percent <= 100:
        raise MalformedRecordError("Score percentage must be between 0 and 100.")

    return ResultRecord(
        timestamp=timestamp,
        name=name,
        email=email,
        score_percent=score_percent,
        correct_count=correct_count,
        total_questions=total_questions,
        answers=answers,
    )
