"""Component collecting the user's name and email before a quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_desk.constants.ui_constants import (
    LOGIN_EMAIL_LABEL,
    LOGIN_NAME_LABEL,
    LOGIN_NOTE_TEMPLATE,
    LOGIN_START_BUTTON,
    LOGIN_TITLE,
)
from quiz_desk.styling.styles import Styles


class LoginPanel(QWidget):
    """Welcome screen; hands the entered identity to ``on_start``."""

    def __init__(
        self,
        seconds_per_question: int,
        on_start: Callable[[str, str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._build_ui()
        self.set_seconds_per_question(seconds_per_question)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(20, 20, 20, 20)
        self.setLayout(layout)

        title = QLabel(LOGIN_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_title_style())
        layout.addWidget(title)
        layout.addStretch()

        form = QFormLayout()
        form.setFormAlignment(Qt.AlignHCenter)
        self.name_edit = QLineEdit(self)
        self.name_edit.setMinimumWidth(320)
        self.email_edit = QLineEdit(self)
        self.email_edit.setMinimumWidth(320)
        form.addRow(LOGIN_NAME_LABEL, self.name_edit)
        form.addRow(LOGIN_EMAIL_LABEL, self.email_edit)
        layout.addLayout(form)

        self.start_button = QPushButton(LOGIN_START_BUTTON, self)
        self.start_button.setMinimumSize(160, 36)
        self.start_button.clicked.connect(self._handle_start)
        self.email_edit.returnPressed.connect(self._handle_start)
        layout.addWidget(self.start_button, alignment=Qt.AlignHCenter)
        layout.addStretch()

        self.note_label = QLabel("", self)
        self.note_label.setAlignment(Qt.AlignCenter)
        self.note_label.setStyleSheet(Styles.get_note_style())
        layout.addWidget(self.note_label)

    def set_seconds_per_question(self, seconds: int) -> None:
        self.note_label.setText(LOGIN_NOTE_TEMPLATE.format(seconds=seconds))

    def reset_state(self) -> None:
        self.name_edit.clear()
        self.email_edit.clear()
        self.name_edit.setFocus()

    def _handle_start(self) -> None:
        self.on_start(self.name_edit.text(), self.email_edit.text())
