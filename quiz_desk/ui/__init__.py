"""Qt UI components for the quiz application."""

from .admin_dialog import AdminDialog
from .dialog_helpers import (
    confirm_abandon_quiz,
    confirm_clear_results,
    show_error,
    show_info,
    show_warning,
)
from .main_window import QuizMainWindow
from .results_dialog import ResultsDialog

__all__ = [
    "AdminDialog",
    "QuizMainWindow",
    "ResultsDialog",
    "confirm_abandon_quiz",
    "confirm_clear_results",
    "show_error",
    "show_info",
    "show_warning",
]
