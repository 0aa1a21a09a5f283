"""Service implementing the timed quiz attempt state machine."""

from __future__ import annotations

from quiz_desk.core.errors import PreconditionError, ValidationError
from quiz_desk.core.models import CurrentQuestionView, SessionState, User
from quiz_desk.core.services.question_bank import QuestionBank


class QuizSession:
    """Tracks navigation, answers and the countdown of one quiz attempt.

    The session is unaware of how time passes: the owner calls :meth:`tick`
    once per second from whatever scheduler it uses.
    """

    def __init__(self, bank: QuestionBank, per_question_seconds: int) -> None:
        if per_question_seconds <= 0:
            raise ValidationError("Time per question must be a positive number of seconds.")
        self._bank = bank
        self._per_question_seconds = per_question_seconds
        self._state = SessionState.AWAITING_START
        self._user: User | None = None
        self._current_index: int = 0
        self._answers: dict[int, int] = {}
        self._seconds_remaining: int = 0
        self._paused: bool = False

    # --- Read-only state ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def bank(self) -> QuestionBank:
        return self._bank

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def seconds_remaining(self) -> int:
        return self._seconds_remaining

    @property
    def per_question_seconds(self) -> int:
        return self._per_question_seconds

    @property
    def paused(self) -> bool:
        return self._paused

    def is_in_progress(self) -> bool:
        return self._state is SessionState.IN_PROGRESS

    def is_completed(self) -> bool:
        return self._state is SessionState.COMPLETED

    def get_answers(self) -> dict[int, int]:
        return dict(self._answers)

    def current_question(self) -> CurrentQuestionView:
        self._require_in_progress("show a question")
        question = self._bank[self._current_index]
        return CurrentQuestionView(
            number=self._current_index + 1,
            total=len(self._bank),
            text=question.text,
            choices=question.choices,
            selected_index=self._answers.get(self._current_index),
        )

    # --- Transitions ---

    def start(self, user: User) -> None:
        """Begin a fresh attempt; rejected input leaves the session untouched."""
        name = user.name.strip()
        email = user.email.strip()
        if not name or not email:
            raise ValidationError("Please enter your name and email.")

        self._user = User(name=name, email=email)
        self._current_index = 0
        self._answers = {}
        self._paused = False
        self._seconds_remaining = self._per_question_seconds
        self._state = SessionState.IN_PROGRESS

    def select_answer(self, choice_index: int) -> None:
        self._require_in_progress("select an answer")
        choice_count = len(self._bank[self._current_index].choices)
        if not 0 <= choice_index < choice_count:
            raise PreconditionError(
                f"Choice index {choice_index} out of range for a question with {choice_count} choices."
            )
        self._answers[self._current_index] = choice_index

    def advance(self) -> SessionState:
        """Move to the next question, completing the attempt after the last one."""
        self._require_in_progress("advance")
        if self._current_index >= len(self._bank) - 1:
            self._state = SessionState.COMPLETED
            self._seconds_remaining = 0
            self._paused = False
        else:
            self._current_index += 1
            self._seconds_remaining = self._per_question_seconds
            self._paused = False
        return self._state

    def tick(self) -> SessionState:
        """Count down one second; reaching zero advances exactly like :meth:`advance`."""
        if self._state is not SessionState.IN_PROGRESS or self._paused:
            return self._state
        self._seconds_remaining -= 1
        if self._seconds_remaining == 0:
            return self.advance()
        return self._state

    def toggle_pause(self) -> bool:
        self._require_in_progress("pause or resume")
        self._paused = not self._paused
        return self._paused

    def abandon(self) -> None:
        """Drop the attempt without scoring it."""
        self._state = SessionState.AWAITING_START
        self._user = None
        self._current_index = 0
        self._answers = {}
        self._seconds_remaining = 0
        self._paused = False

    def _require_in_progress(self, action: str) -> None:
        if self._state is not SessionState.IN_PROGRESS:
            raise PreconditionError(f"Cannot {action} while the quiz is {self._state.name.lower()}.")
