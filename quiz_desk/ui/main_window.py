"""Qt main window switching between the login screen and the running quiz."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from quiz_desk.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from quiz_desk.constants.ui_constants import (
    MENU_ABOUT,
    MENU_ADMIN_VIEW,
    MENU_APP,
    MENU_EXIT,
    MENU_HELP,
    MENU_SETTINGS,
    MISSING_INFO_TITLE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from quiz_desk.core.errors import PreconditionError, ValidationError
from quiz_desk.core.quiz_manager import QuizManager
from quiz_desk.core.results_report import format_outcome_report
from quiz_desk.styling.styles import Styles
from quiz_desk.ui.admin_dialog import AdminDialog
from quiz_desk.ui.components.login_panel import LoginPanel
from quiz_desk.ui.components.quiz_panel import QuizPanel
from quiz_desk.ui.dialog_helpers import confirm_abandon_quiz, show_error, show_info, show_warning
from quiz_desk.ui.results_dialog import ResultsDialog
from quiz_desk.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class WindowMode(Enum):
    """Screen currently shown in the main window."""

    LOGIN = auto()
    QUIZ = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window wiring the panels and dialogs to the quiz manager."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.quiz_manager = quiz_manager
        self._mode = WindowMode.LOGIN
        self._ui_font_size: int = 10
        self._quiz_font_size: int = 12

        self._build_menu()
        self._build_ui()
        self._apply_styles()

    def _build_menu(self) -> None:
        app_menu = self.menuBar().addMenu(MENU_APP)

        self.admin_action = QAction(MENU_ADMIN_VIEW, self)
        self.admin_action.triggered.connect(self._handle_admin_view)
        app_menu.addAction(self.admin_action)

        self.settings_action = QAction(MENU_SETTINGS, self)
        self.settings_action.triggered.connect(self._handle_settings)
        app_menu.addAction(self.settings_action)

        app_menu.addSeparator()

        help_action = QAction(MENU_HELP, self)
        help_action.triggered.connect(self._handle_help)
        app_menu.addAction(help_action)

        about_action = QAction(MENU_ABOUT, self)
        about_action.triggered.connect(self._handle_about)
        app_menu.addAction(about_action)

        app_menu.addSeparator()

        exit_action = QAction(MENU_EXIT, self)
        exit_action.triggered.connect(self.close)
        app_menu.addAction(exit_action)

    def _build_ui(self) -> None:
        self.mode_stack = QStackedWidget(self)
        self.setCentralWidget(self.mode_stack)

        self.login_panel = LoginPanel(
            self.quiz_manager.get_seconds_per_question(),
            on_start=self._handle_start_quiz,
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            self.quiz_manager,
            on_completed=self._handle_quiz_completed,
            parent=self,
        )
        self.mode_stack.addWidget(self.login_panel)
        self.mode_stack.addWidget(self.quiz_panel)
        self._set_mode(WindowMode.LOGIN)

    def _set_mode(self, mode: WindowMode) -> None:
        self._mode = mode
        index_map = {
            WindowMode.LOGIN: 0,
            WindowMode.QUIZ: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

        # No admin or settings dialogs over a running countdown.
        idle = mode == WindowMode.LOGIN
        self.admin_action.setEnabled(idle)
        self.settings_action.setEnabled(idle)

    # --- Quiz flow ---

    def _handle_start_quiz(self, name: str, email: str) -> None:
        try:
            self.quiz_manager.start_session(name, email)
        except ValidationError as exc:
            show_warning(self, MISSING_INFO_TITLE, str(exc))
            return
        self._set_mode(WindowMode.QUIZ)
        self.quiz_panel.start_session()

    def _handle_quiz_completed(self) -> None:
        try:
            report = self.quiz_manager.complete_and_save()
        except PreconditionError as exc:
            logger.warning("Ignoring completion request: %s", exc)
            return

        if report.error is not None:
            show_error(self, "IO Error", str(report.error))

        dialog = ResultsDialog(
            format_outcome_report(report.user, self.quiz_manager.get_question_bank(), report.outcome),
            self,
        )
        dialog.exec()
        self._return_to_login()
        if dialog.open_admin_requested():
            self._handle_admin_view()

    def _return_to_login(self) -> None:
        self.quiz_panel.stop_session()
        self.login_panel.reset_state()
        self._set_mode(WindowMode.LOGIN)

    # --- Menu handlers ---

    def _handle_admin_view(self) -> None:
        AdminDialog(self.quiz_manager, self).exec()

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._quiz_font_size,
            self.quiz_manager.get_seconds_per_question(),
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._quiz_font_size = dialog.get_quiz_font_size()
            seconds = dialog.get_seconds_per_question()
            self.quiz_manager.set_seconds_per_question(seconds)
            self.login_panel.set_seconds_per_question(seconds)
            self._apply_styles()

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Results file: {self.quiz_manager.get_result_log_path().resolve()}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        if self._mode == WindowMode.QUIZ:
            if not confirm_abandon_quiz(self):
                event.ignore()
                return
            self.quiz_manager.abandon_session()
            self.quiz_panel.stop_session()
        event.accept()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        ui_style = f"font-size: {self._ui_font_size}pt;"
        self.menuBar().setStyleSheet(ui_style)
        self.login_panel.setStyleSheet(ui_style)
        self.quiz_panel.apply_font_size(self._quiz_font_size)
