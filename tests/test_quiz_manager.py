from __future__ import annotations

from datetime import datetime

import pytest

from quiz_desk.core.errors import PersistenceError, PreconditionError, ValidationError
from quiz_desk.core.models import SessionState
from quiz_desk.core.quiz_manager import QuizManager
from quiz_desk.core.services.result_log import ResultLog


@pytest.fixture
def manager(tmp_path, five_question_bank) -> QuizManager:
    return QuizManager(
        bank=five_question_bank,
        result_log=ResultLog(tmp_path / "results.csv"),
        seconds_per_question=20,
    )


def _answer_all(manager: QuizManager, answers: list[int | None]) -> SessionState:
    state = SessionState.IN_PROGRESS
    for choice in answers:
        if choice is not None:
            manager.select_answer(choice)
        state = manager.advance()
    return state


def test_full_attempt_is_scored_and_saved(manager):
    manager.start_session("Jane Doe", "jane@example.com")
    assert _answer_all(manager, [1, 1, 1, 0, 1]) is SessionState.COMPLETED

    outcome = manager.final_outcome()
    assert outcome.correct_count == 4
    assert outcome.score_percent == 80

    report = manager.complete_and_save(timestamp=datetime(2024, 1, 1, 10, 0, 0, 123456))
    assert report.saved
    assert report.outcome == outcome
    assert report.record.timestamp == datetime(2024, 1, 1, 10, 0, 0)
    assert report.record.answers == ((1, 1), (2, 1), (3, 1), (4, 0), (5, 1))

    assert manager.load_results() == [report.record]
    assert manager.get_state() is SessionState.AWAITING_START


def test_unanswered_questions_are_saved_as_dashes(manager, tmp_path):
    manager.start_session("Jane", "jane@example.com")
    _answer_all(manager, [None, 0, None, None, None])
    manager.complete_and_save(timestamp=datetime(2024, 1, 1, 10, 0, 0))
    text = (tmp_path / "results.csv").read_text(encoding="utf-8")
    assert text.splitlines()[1] == "2024-01-01 10:00:00,Jane,jane@example.com,0,0,5,q1:-|q2:0|q3:-|q4:-|q5:-"


def test_start_session_trims_and_validates_identity(manager):
    with pytest.raises(ValidationError):
        manager.start_session("  ", "jane@example.com")
    assert manager.get_state() is SessionState.AWAITING_START

    session = manager.start_session("  Jane ", " jane@example.com ")
    assert session.user.name == "Jane"
    assert session.user.email == "jane@example.com"


def test_failed_restart_keeps_running_session(manager):
    manager.start_session("Jane", "jane@example.com")
    manager.select_answer(2)
    with pytest.raises(ValidationError):
        manager.start_session("", "")
    assert manager.get_state() is SessionState.IN_PROGRESS
    assert manager.current_question().selected_index == 2


def test_final_outcome_requires_completion(manager):
    manager.start_session("Jane", "jane@example.com")
    with pytest.raises(PreconditionError):
        manager.final_outcome()
    with pytest.raises(PreconditionError):
        manager.complete_and_save()


def test_tick_and_pause_are_forwarded(manager):
    manager.start_session("Jane", "jane@example.com")
    manager.tick()
    assert manager.get_seconds_remaining() == 19
    assert manager.toggle_pause() is True
    assert manager.is_paused()
    manager.tick()
    assert manager.get_seconds_remaining() == 19


def test_timeouts_complete_the_attempt(manager):
    manager.set_seconds_per_question(1)
    manager.start_session("Jane", "jane@example.com")
    states = [manager.tick() for _ in range(5)]
    assert states[-1] is SessionState.COMPLETED
    assert manager.final_outcome().correct_count == 0


def test_seconds_per_question_applies_to_next_session(manager):
    manager.start_session("Jane", "jane@example.com")
    manager.set_seconds_per_question(45)
    assert manager.get_seconds_remaining() == 20
    manager.start_session("Jane", "jane@example.com")
    assert manager.get_seconds_remaining() == 45


def test_invalid_seconds_per_question_is_rejected(manager):
    with pytest.raises(ValidationError):
        manager.set_seconds_per_question(0)


def test_abandon_discards_attempt_without_saving(manager, tmp_path):
    manager.start_session("Jane", "jane@example.com")
    manager.select_answer(1)
    manager.abandon_session()
    assert manager.get_state() is SessionState.AWAITING_START
    assert not (tmp_path / "results.csv").exists()


def test_persistence_failure_keeps_outcome(tmp_path, five_question_bank):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    manager = QuizManager(
        bank=five_question_bank,
        result_log=ResultLog(blocker / "results.csv"),
        seconds_per_question=20,
    )
    manager.start_session("Jane", "jane@example.com")
    _answer_all(manager, [1, 1, 1, 0, 2])

    report = manager.complete_and_save()
    assert not report.saved
    assert isinstance(report.error, PersistenceError)
    assert report.outcome.score_percent == 100


def test_result_log_passthroughs(manager, tmp_path):
    manager.start_session("Jane", "jane@example.com")
    _answer_all(manager, [1, None, None, None, None])
    manager.complete_and_save()
    assert manager.has_results()

    destination = manager.export_results(tmp_path / "export.csv")
    assert destination.read_bytes() == (tmp_path / "results.csv").read_bytes()

    manager.clear_results()
    assert not manager.has_results()
    assert manager.load_results() == []
