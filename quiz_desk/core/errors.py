"""Exception hierarchy shared by the quiz core and the Qt shell."""

from __future__ import annotations


class QuizDeskError(Exception):
    """Base class for all errors raised by the quiz core."""


class ValidationError(QuizDeskError):
    """Raised for rejected user input or an unusable question bank."""


class PreconditionError(QuizDeskError):
    """Raised when a session operation is invoked in the wrong state."""


class PersistenceError(QuizDeskError):
    """Raised when the result log cannot be read, written, copied or removed."""


class MalformedRecordError(QuizDeskError):
    """Raised when a persisted result record cannot be decoded."""
