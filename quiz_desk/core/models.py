"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct choice."""

    text: str
    choices: tuple[str, ...]
    correct_index: int


@dataclass(frozen=True, slots=True)
class User:
    """Identity supplied on the login screen."""

    name: str
    email: str


class SessionState(Enum):
    """Lifecycle of a quiz attempt."""

    AWAITING_START = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class CurrentQuestionView:
    """Read-only snapshot handed to the presentation layer."""

    number: int  # 1-based
    total: int
    text: str
    choices: tuple[str, ...]
    selected_index: int | None


@dataclass(frozen=True, slots=True)
class QuestionOutcome:
    """Correctness of a single question within a scored attempt."""

    number: int  # 1-based
    chosen_index: int | None
    correct_index: int
    is_correct: bool


@dataclass(frozen=True, slots=True)
class ResultOutcome:
    """Aggregate score of a completed attempt."""

    questions: tuple[QuestionOutcome, ...]
    correct_count: int
    total_questions: int
    score_percent: int


@dataclass(frozen=True, slots=True)
class ResultRecord:
    """Persisted summary of one completed attempt."""

    timestamp: datetime
    name: str
    email: str
    score_percent: int
    correct_count: int
    total_questions: int
    answers: tuple[tuple[int, int | None], ...]  # (question number, chosen index)

    def __post_init__(self) -> None:
        # The log stores whole seconds only.
        if self.timestamp.microsecond:
            object.__setattr__(self, "timestamp", self.timestamp.replace(microsecond=0))

    @classmethod
    def from_outcome(
        cls,
        user: User,
        outcome: ResultOutcome,
        timestamp: datetime | None = None,
    ) -> "ResultRecord":
        return cls(
            timestamp=timestamp or datetime.now(),
            name=user.name,
            email=user.email,
            score_percent=outcome.score_percent,
            correct_count=outcome.correct_count,
            total_questions=outcome.total_questions,
            answers=tuple((q.number, q.chosen_index) for q in outcome.questions),
        )
