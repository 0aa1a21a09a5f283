"""Component presenting the running quiz: question, choices and countdown."""

from __future__ import annotations

from collections.abc import Callable
import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication,
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from quiz_desk.constants.ui_constants import (
    QUIZ_FINISH_BUTTON,
    QUIZ_HEADER_TEMPLATE,
    QUIZ_INDEX_TEMPLATE,
    QUIZ_NEXT_BUTTON,
    QUIZ_PAUSE_BUTTON,
    QUIZ_PAUSED_LABEL,
    QUIZ_RESUME_BUTTON,
    QUIZ_TIME_LEFT_TEMPLATE,
    TIMER_INTERVAL_MS,
)
from quiz_desk.core.errors import PreconditionError
from quiz_desk.core.markdown_renderer import renderer
from quiz_desk.core.models import SessionState
from quiz_desk.core.quiz_manager import QuizManager
from quiz_desk.styling.styles import Styles

logger = logging.getLogger(__name__)


class QuizPanel(QWidget):
    """UI component forwarding user events and timer ticks into the quiz manager."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_completed: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_completed = on_completed
        self._font_size: int = 12
        self._choice_buttons: list[QRadioButton] = []
        self._displayed_index: int | None = None

        self._build_ui()
        self._configure_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.header_label = QLabel("", self)
        self.header_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.header_label)
        header_row.addStretch()
        self.index_label = QLabel("", self)
        header_row.addWidget(self.index_label)
        layout.addLayout(header_row)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        self.choice_group = QButtonGroup(self)
        self.choice_group.setExclusive(True)
        self.choice_group.idClicked.connect(self._handle_choice_clicked)
        self.choices_layout = QVBoxLayout()
        layout.addLayout(self.choices_layout)
        layout.addStretch()

        bottom_row = QHBoxLayout()
        self.pause_button = QPushButton(QUIZ_PAUSE_BUTTON, self)
        self.pause_button.clicked.connect(self._handle_pause_clicked)
        bottom_row.addWidget(self.pause_button)

        self.next_button = QPushButton(QUIZ_NEXT_BUTTON, self)
        self.next_button.setDefault(True)
        self.next_button.clicked.connect(self._handle_next_clicked)
        bottom_row.addWidget(self.next_button)
        bottom_row.addStretch()

        self.timer_progress = QProgressBar(self)
        self.timer_progress.setMinimumWidth(300)
        self.timer_progress.setTextVisible(True)
        self.timer_progress.setFormat("%vs")
        bottom_row.addWidget(self.timer_progress)

        self.time_left_label = QLabel("", self)
        bottom_row.addWidget(self.time_left_label)
        layout.addLayout(bottom_row)

    def _configure_timer(self) -> None:
        self.question_timer = QTimer(self)
        self.question_timer.setInterval(TIMER_INTERVAL_MS)
        self.question_timer.timeout.connect(self._handle_tick)

    # --- Session lifecycle ---

    def start_session(self) -> None:
        session = self.quiz_manager.get_session()
        self.header_label.setText(QUIZ_HEADER_TEMPLATE.format(name=session.user.name))
        self.timer_progress.setRange(0, session.per_question_seconds)
        self._displayed_index = None
        self._refresh_view()
        self.question_timer.start()

    def stop_session(self) -> None:
        self.question_timer.stop()
        self._displayed_index = None

    # --- Event handlers ---

    def _handle_choice_clicked(self, choice_index: int) -> None:
        try:
            self.quiz_manager.select_answer(choice_index)
        except PreconditionError as exc:
            logger.warning("Ignoring answer selection: %s", exc)

    def _handle_next_clicked(self) -> None:
        try:
            state = self.quiz_manager.advance()
        except PreconditionError as exc:
            logger.warning("Ignoring advance request: %s", exc)
            return
        self._after_transition(state)

    def _handle_pause_clicked(self) -> None:
        try:
            paused = self.quiz_manager.toggle_pause()
        except PreconditionError as exc:
            logger.warning("Ignoring pause request: %s", exc)
            return
        self.pause_button.setText(QUIZ_RESUME_BUTTON if paused else QUIZ_PAUSE_BUTTON)
        self._update_timer_view()

    def _handle_tick(self) -> None:
        previous_index = self._displayed_index
        state = self.quiz_manager.tick()
        timed_out = state is SessionState.COMPLETED or (
            state is SessionState.IN_PROGRESS
            and self.quiz_manager.get_session().current_index != previous_index
        )
        if timed_out:
            QApplication.beep()
        self._after_transition(state)

    def _after_transition(self, state: SessionState) -> None:
        if state is SessionState.COMPLETED:
            self.stop_session()
            self.on_completed()
        elif state is SessionState.IN_PROGRESS:
            self._refresh_view()
        else:
            self.stop_session()

    # --- Rendering ---

    def _refresh_view(self) -> None:
        view = self.quiz_manager.current_question()
        if view.number - 1 != self._displayed_index:
            self._display_question(view.number, view.total, view.text, view.choices, view.selected_index)
            self._displayed_index = view.number - 1
        self._update_timer_view()

    def _display_question(
        self,
        number: int,
        total: int,
        text: str,
        choices: tuple[str, ...],
        selected_index: int | None,
    ) -> None:
        self.question_label.setText(renderer.render_question(number, text))
        self.index_label.setText(QUIZ_INDEX_TEMPLATE.format(number=number, total=total))
        self.next_button.setText(QUIZ_FINISH_BUTTON if number == total else QUIZ_NEXT_BUTTON)
        self.pause_button.setText(QUIZ_PAUSE_BUTTON)
        self._rebuild_choice_buttons(choices)
        if selected_index is not None:
            self._choice_buttons[selected_index].setChecked(True)

    def _rebuild_choice_buttons(self, choices: tuple[str, ...]) -> None:
        for button in self._choice_buttons:
            self.choice_group.removeButton(button)
            self.choices_layout.removeWidget(button)
            button.deleteLater()
        self._choice_buttons = []

        for idx, choice in enumerate(choices):
            button = QRadioButton(choice, self)
            button.setStyleSheet(f"font-size: {self._font_size}pt;")
            self.choice_group.addButton(button, idx)
            self.choices_layout.addWidget(button)
            self._choice_buttons.append(button)

    def _update_timer_view(self) -> None:
        seconds = self.quiz_manager.get_seconds_remaining()
        self.timer_progress.setValue(seconds)
        if self.quiz_manager.is_paused():
            self.time_left_label.setText(f"{QUIZ_PAUSED_LABEL} ({seconds}s)")
        else:
            self.time_left_label.setText(QUIZ_TIME_LEFT_TEMPLATE.format(seconds=seconds))

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        label_style = f"font-size: {font_size}pt;"
        self.question_label.setStyleSheet(label_style)
        self.time_left_label.setStyleSheet(label_style)
        self.index_label.setStyleSheet(label_style)
        for button in self._choice_buttons:
            button.setStyleSheet(label_style)
