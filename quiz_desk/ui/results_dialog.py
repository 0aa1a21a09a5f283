"""Dialog showing the review of a finished attempt."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_desk.constants.ui_constants import (
    RESULTS_ADMIN_BUTTON,
    RESULTS_CLOSE_BUTTON,
    RESULTS_DIALOG_TITLE,
)


class ResultsDialog(QDialog):
    """Read-only report with a choice between closing and opening the admin view."""

    def __init__(self, report_text: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(RESULTS_DIALOG_TITLE)
        self.setModal(True)
        self.resize(640, 420)
        self._open_admin_requested = False

        layout = QVBoxLayout()
        self.setLayout(layout)

        self.report_view = QPlainTextEdit(self)
        self.report_view.setReadOnly(True)
        self.report_view.setPlainText(report_text)
        layout.addWidget(self.report_view)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.close_button = QPushButton(RESULTS_CLOSE_BUTTON, self)
        self.close_button.setDefault(True)
        self.close_button.clicked.connect(self.accept)
        button_row.addWidget(self.close_button)

        self.admin_button = QPushButton(RESULTS_ADMIN_BUTTON, self)
        self.admin_button.clicked.connect(self._handle_admin)
        button_row.addWidget(self.admin_button)
        layout.addLayout(button_row)

    def open_admin_requested(self) -> bool:
        return self._open_admin_requested

    def _handle_admin(self) -> None:
        self._open_admin_requested = True
        self.accept()
