"""Settings dialog for configuring QuizDesk preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

MIN_SECONDS_PER_QUESTION = 5
MAX_SECONDS_PER_QUESTION = 600


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        quiz_font_size: int = 12,
        seconds_per_question: int = 20,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._quiz_font_size = quiz_font_size
        self._seconds_per_question = max(
            MIN_SECONDS_PER_QUESTION, min(MAX_SECONDS_PER_QUESTION, seconds_per_question)
        )

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, menus):")
        ui_font_label.setToolTip("Font size for buttons, menus, and controls")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        quiz_font_row = QHBoxLayout()
        quiz_font_label = QLabel("Quiz Font Size (questions, choices):")
        self.quiz_font_spinbox = QSpinBox()
        self.quiz_font_spinbox.setRange(10, 32)
        self.quiz_font_spinbox.setValue(self._quiz_font_size)
        self.quiz_font_spinbox.setSuffix(" pt")
        quiz_font_row.addWidget(quiz_font_label)
        quiz_font_row.addStretch()
        quiz_font_row.addWidget(self.quiz_font_spinbox)
        font_layout.addLayout(quiz_font_row)

        layout.addWidget(font_group)

        timer_group = QGroupBox("Timer")
        timer_layout = QVBoxLayout()
        timer_group.setLayout(timer_layout)

        seconds_row = QHBoxLayout()
        seconds_label = QLabel("Seconds per question:")
        seconds_label.setToolTip("Applies from the next quiz that is started.")
        self.seconds_spinbox = QSpinBox()
        self.seconds_spinbox.setRange(MIN_SECONDS_PER_QUESTION, MAX_SECONDS_PER_QUESTION)
        self.seconds_spinbox.setValue(self._seconds_per_question)
        self.seconds_spinbox.setSuffix(" s")
        seconds_row.addWidget(seconds_label)
        seconds_row.addStretch()
        seconds_row.addWidget(self.seconds_spinbox)
        timer_layout.addLayout(seconds_row)

        layout.addWidget(timer_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_quiz_font_size(self) -> int:
        return self.quiz_font_spinbox.value()

    def get_seconds_per_question(self) -> int:
        """Get the countdown length used for new quizzes."""
        return self.seconds_spinbox.value()
