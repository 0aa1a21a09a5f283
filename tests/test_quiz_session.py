from __future__ import annotations

import pytest

from quiz_desk.core.errors import PreconditionError, ValidationError
from quiz_desk.core.models import SessionState, User
from quiz_desk.core.services.quiz_session import QuizSession


def _started(bank, seconds: int = 3) -> QuizSession:
    session = QuizSession(bank, seconds)
    session.start(User("Jane", "jane@example.com"))
    return session


def test_start_arms_timer_and_resets_state(five_question_bank):
    session = _started(five_question_bank, seconds=20)
    assert session.state is SessionState.IN_PROGRESS
    assert session.current_index == 0
    assert session.seconds_remaining == 20
    assert session.paused is False
    assert session.get_answers() == {}
    assert session.user == User("Jane", "jane@example.com")


@pytest.mark.parametrize("name,email", [("", "a@b.c"), ("Jane", ""), ("   ", "a@b.c")])
def test_start_rejects_missing_identity_without_state_change(five_question_bank, name, email):
    session = QuizSession(five_question_bank, 20)
    with pytest.raises(ValidationError):
        session.start(User(name, email))
    assert session.state is SessionState.AWAITING_START
    assert session.user is None


def test_restart_clears_previous_attempt(five_question_bank):
    session = _started(five_question_bank)
    session.select_answer(2)
    session.advance()
    session.start(User("Bob", "bob@example.com"))
    assert session.current_index == 0
    assert session.get_answers() == {}


def test_reselecting_keeps_last_choice(five_question_bank):
    session = _started(five_question_bank)
    session.select_answer(0)
    session.select_answer(3)
    assert session.get_answers() == {0: 3}
    assert session.current_question().selected_index == 3


def test_select_answer_rejects_out_of_range_choice(five_question_bank):
    session = _started(five_question_bank)
    with pytest.raises(PreconditionError):
        session.select_answer(4)
    with pytest.raises(PreconditionError):
        session.select_answer(-1)
    assert session.get_answers() == {}


def test_operations_outside_progress_are_precondition_errors(five_question_bank):
    session = QuizSession(five_question_bank, 5)
    with pytest.raises(PreconditionError):
        session.select_answer(0)
    with pytest.raises(PreconditionError):
        session.advance()
    with pytest.raises(PreconditionError):
        session.toggle_pause()
    with pytest.raises(PreconditionError):
        session.current_question()


def test_advance_without_answer_leaves_question_unanswered(five_question_bank):
    session = _started(five_question_bank)
    assert session.advance() is SessionState.IN_PROGRESS
    assert session.current_index == 1
    assert 0 not in session.get_answers()


def test_advance_rearms_timer_and_clears_pause(five_question_bank):
    session = _started(five_question_bank, seconds=10)
    session.tick()
    session.toggle_pause()
    session.advance()
    assert session.seconds_remaining == 10
    assert session.paused is False


def test_advance_on_last_question_completes(five_question_bank):
    session = _started(five_question_bank)
    for _ in range(len(five_question_bank) - 1):
        session.advance()
        assert 0 <= session.current_index < len(five_question_bank)
    assert session.advance() is SessionState.COMPLETED
    assert session.is_completed()
    assert session.seconds_remaining == 0
    with pytest.raises(PreconditionError):
        session.select_answer(0)


def test_tick_counts_down(five_question_bank):
    session = _started(five_question_bank, seconds=5)
    assert session.tick() is SessionState.IN_PROGRESS
    assert session.seconds_remaining == 4


def test_tick_while_paused_preserves_remaining_seconds(five_question_bank):
    session = _started(five_question_bank, seconds=5)
    session.tick()
    assert session.toggle_pause() is True
    for _ in range(10):
        session.tick()
    assert session.seconds_remaining == 4
    assert session.current_index == 0
    assert session.toggle_pause() is False
    session.tick()
    assert session.seconds_remaining == 3


def test_timeout_advances_with_selected_answer(five_question_bank):
    session = _started(five_question_bank, seconds=2)
    session.select_answer(1)
    session.tick()
    assert session.current_index == 0
    session.tick()
    assert session.current_index == 1
    assert session.seconds_remaining == 2
    assert session.get_answers() == {0: 1}


def test_timeout_on_last_question_completes(five_question_bank):
    session = _started(five_question_bank, seconds=1)
    for _ in range(len(five_question_bank)):
        session.tick()
    assert session.state is SessionState.COMPLETED
    assert session.get_answers() == {}
    # Further ticks are ignored once completed.
    assert session.tick() is SessionState.COMPLETED
    assert session.seconds_remaining == 0


def test_tick_before_start_is_ignored(five_question_bank):
    session = QuizSession(five_question_bank, 5)
    assert session.tick() is SessionState.AWAITING_START
    assert session.seconds_remaining == 0


def test_abandon_returns_to_awaiting_start(five_question_bank):
    session = _started(five_question_bank)
    session.select_answer(1)
    session.abandon()
    assert session.state is SessionState.AWAITING_START
    assert session.get_answers() == {}
    assert session.tick() is SessionState.AWAITING_START


def test_current_question_view(five_question_bank):
    session = _started(five_question_bank)
    session.advance()
    view = session.current_question()
    assert view.number == 2
    assert view.total == 5
    assert view.text == "Question 2?"
    assert view.choices == ("A", "B", "C", "D")
    assert view.selected_index is None


def test_non_positive_timer_is_rejected(five_question_bank):
    with pytest.raises(ValidationError):
        QuizSession(five_question_bank, 0)
