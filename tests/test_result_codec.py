from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from quiz_desk.core import result_codec
from quiz_desk.core.errors import MalformedRecordError


def test_encode_matches_log_format(sample_record):
    assert result_codec.encode(sample_record) == (
        "2024-01-01 10:00:00,Jane Doe,jane@example.com,80,4,5,q1:1|q2:0|q3:-|q4:1|q5:3\n"
    )


def test_header_line():
    assert result_codec.header_line() == (
        "timestamp,name,email,score_percent,correct,total_questions,answers\n"
    )


def test_decode_plain_line(sample_record):
    line = "2024-01-01 10:00:00,Jane Doe,jane@example.com,80,4,5,q1:1|q2:0|q3:-|q4:1|q5:3"
    assert result_codec.decode(line) == sample_record


@pytest.mark.parametrize(
    "name,email",
    [
        ("Doe, Jane", "jane@example.com"),
        ('Jane "JD" Doe', "jane@example.com"),
        ("Jane\nDoe", "multi\r\nline@example.com"),
        ('"', ","),
        ("", "trailing,comma,"),
    ],
)
def test_round_trip_with_special_characters(sample_record, name, email):
    record = replace(sample_record, name=name, email=email)
    assert result_codec.decode(result_codec.encode(record)) == record


def test_special_fields_are_quoted_with_doubled_quotes(sample_record):
    record = replace(sample_record, name='Jane "JD", Doe')
    assert '"Jane ""JD"", Doe"' in result_codec.encode(record)


def test_extra_trailing_fields_are_ignored(sample_record):
    line = result_codec.encode(sample_record).rstrip("\n") + ",extra"
    assert result_codec.decode(line) == sample_record


@pytest.mark.parametrize(
    "line",
    [
        "",
        "2024-01-01 10:00:00,Jane Doe",
        "2024-01-01 10:00:00,Jane,jane@example.com,80,4,5",
        "yesterday,Jane,jane@example.com,80,4,5,q1:1|q2:0|q3:-|q4:1|q5:3",
        "2024-01-01 10:00:00,Jane,jane@example.com,eighty,4,5,q1:1|q2:0|q3:-|q4:1|q5:3",
        "2024-01-01 10:00:00,Jane,jane@example.com,80,4,5,q1:1|q2:0",
        "2024-01-01 10:00:00,Jane,jane@example.com,80,4,5,q1:1|q2:x|q3:-|q4:1|q5:3",
        "2024-01-01 10:00:00,Jane,jane@example.com,80,9,5,q1:1|q2:0|q3:-|q4:1|q5:3",
        "2024-01-01 10:00:00,Jane,jane@example.com,180,4,5,q1:1|q2:0|q3:-|q4:1|q5:3",
    ],
)
def test_malformed_lines_raise(line):
    with pytest.raises(MalformedRecordError):
        result_codec.decode(line)


def test_answers_sub_encoding_round_trip():
    answers = ((1, None), (2, 3), (3, 0))
    encoded = result_codec.encode_answers(answers)
    assert encoded == "q1:-|q2:3|q3:0"
    assert result_codec.decode_answers(encoded) == answers


def test_sub_second_timestamp_is_truncated_and_round_trips(sample_record):
    record = replace(sample_record, timestamp=datetime(2024, 1, 1, 10, 0, 0, 987654))
    assert record.timestamp == datetime(2024, 1, 1, 10, 0, 0)
    assert result_codec.decode(result_codec.encode(record)) == record
