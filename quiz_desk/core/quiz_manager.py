"""Business logic shared between the Qt shell and the quiz services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
from pathlib import Path
from threading import Lock

from quiz_desk.core.errors import PersistenceError, PreconditionError, ValidationError
from quiz_desk.core.models import (
    CurrentQuestionView,
    ResultOutcome,
    ResultRecord,
    SessionState,
    User,
)
from quiz_desk.core.services.question_bank import QuestionBank
from quiz_desk.core.services.quiz_session import QuizSession
from quiz_desk.core.services.result_log import ResultLog
from quiz_desk.core.services.scorer import score

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SaveReport:
    """Outcome of finishing an attempt; ``error`` is set when saving failed."""

    user: User
    outcome: ResultOutcome
    record: ResultRecord
    error: PersistenceError | None = None

    @property
    def saved(self) -> bool:
        return self.error is None


class QuizManager:
    """Facade over the question bank, the active session and the result log."""

    def __init__(
        self,
        bank: QuestionBank,
        result_log: ResultLog,
        seconds_per_question: int,
    ) -> None:
        self._lock = Lock()
        self._bank = bank
        self._result_log = result_log
        self._seconds_per_question = seconds_per_question
        self._session = QuizSession(bank, seconds_per_question)

    # --- Configuration ---

    def get_question_bank(self) -> QuestionBank:
        return self._bank

    def get_seconds_per_question(self) -> int:
        with self._lock:
            return self._seconds_per_question

    def set_seconds_per_question(self, seconds: int) -> None:
        """Change the countdown length; takes effect from the next session."""
        if seconds <= 0:
            raise ValidationError("Time per question must be a positive number of seconds.")
        with self._lock:
            self._seconds_per_question = seconds

    def get_result_log_path(self) -> Path:
        return self._result_log.path

    # --- Session Delegation ---

    def start_session(self, name: str, email: str) -> QuizSession:
        with self._lock:
            session = QuizSession(self._bank, self._seconds_per_question)
            session.start(User(name=name, email=email))
            self._session = session
            logger.info("Quiz started for %s <%s>", session.user.name, session.user.email)
            return session

    def get_session(self) -> QuizSession:
        with self._lock:
            return self._session

    def get_state(self) -> SessionState:
        with self._lock:
            return self._session.state

    def current_question(self) -> CurrentQuestionView:
        with self._lock:
            return self._session.current_question()

    def select_answer(self, choice_index: int) -> None:
        with self._lock:
            self._session.select_answer(choice_index)

    def advance(self) -> SessionState:
        with self._lock:
            return self._session.advance()

    def tick(self) -> SessionState:
        with self._lock:
            return self._session.tick()

    def toggle_pause(self) -> bool:
        with self._lock:
            return self._session.toggle_pause()

    def get_seconds_remaining(self) -> int:
        with self._lock:
            return self._session.seconds_remaining

    def is_paused(self) -> bool:
        with self._lock:
            return self._session.paused

    def final_outcome(self) -> ResultOutcome:
        with self._lock:
            return self._final_outcome_locked()

    def complete_and_save(self, timestamp: datetime | None = None) -> SaveReport:
        """Score the completed attempt, append it to the result log and discard it.

        A persistence failure is reported in the returned :class:`SaveReport`
        rather than raised, so the outcome is never lost.
        """
        with self._lock:
            outcome = self._final_outcome_locked()
            user = self._session.user
            record = ResultRecord.from_outcome(user, outcome, timestamp)
            report = SaveReport(user=user, outcome=outcome, record=record)
            try:
                self._result_log.append(record)
            except PersistenceError as exc:
                logger.exception("Could not persist result for %s", user.email)
                report.error = exc
            logger.info(
                "Quiz completed by %s: %d / %d (%d%%)",
                user.email,
                outcome.correct_count,
                outcome.total_questions,
                outcome.score_percent,
            )
            # The attempt is over once its record exists.
            self._session = QuizSession(self._bank, self._seconds_per_question)
            return report

    def abandon_session(self) -> None:
        with self._lock:
            if self._session.is_in_progress():
                logger.info("Quiz abandoned by %s", self._session.user.email)
            self._session.abandon()

    def _final_outcome_locked(self) -> ResultOutcome:
        if not self._session.is_completed():
            raise PreconditionError("The quiz has not been completed yet.")
        return score(self._bank, self._session.get_answers())

    # --- Result Log Delegation ---

    def load_results(self) -> list[ResultRecord]:
        return self._result_log.load_all()

    def clear_results(self) -> None:
        self._result_log.clear_all()

    def export_results(self, destination: Path) -> Path:
        return self._result_log.export_copy(destination)

    def has_results(self) -> bool:
        return self._result_log.exists()
