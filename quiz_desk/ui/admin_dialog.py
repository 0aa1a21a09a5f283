"""Admin dialog for browsing, exporting and clearing saved results."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QDialog,
    QFileDialog,
    QHBoxLayout,
    QHeaderView,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from quiz_desk.constants.quiz_constants import DEFAULT_EXPORT_FILENAME, TIMESTAMP_FORMAT
from quiz_desk.constants.ui_constants import (
    ADMIN_CLEAR_BUTTON,
    ADMIN_CLOSE_BUTTON,
    ADMIN_COLUMNS,
    ADMIN_DIALOG_TITLE,
    ADMIN_EXPORT_BUTTON,
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
)
from quiz_desk.core.errors import PersistenceError
from quiz_desk.core.models import ResultRecord
from quiz_desk.core.quiz_manager import QuizManager
from quiz_desk.core.result_codec import encode_answers
from quiz_desk.ui.dialog_helpers import confirm_clear_results, show_error, show_info

logger = logging.getLogger(__name__)


class _NumericItem(QTableWidgetItem):
    """Table cell that sorts by its integer value instead of its text."""

    def __init__(self, value: int) -> None:
        super().__init__(str(value))
        self.setData(Qt.UserRole, value)

    def __lt__(self, other: QTableWidgetItem) -> bool:
        return self.data(Qt.UserRole) < other.data(Qt.UserRole)


class AdminDialog(QDialog):
    """Table of every saved attempt with export and clear actions."""

    def __init__(self, quiz_manager: QuizManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.setWindowTitle(ADMIN_DIALOG_TITLE)
        self.setModal(True)
        self.resize(820, 520)
        self._last_export_path: Path | None = None

        self._build_ui()
        self.reload()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.table = QTableWidget(0, len(ADMIN_COLUMNS), self)
        self.table.setHorizontalHeaderLabels(list(ADMIN_COLUMNS))
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Interactive)
        self.table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self.table)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.clear_button = QPushButton(ADMIN_CLEAR_BUTTON, self)
        self.clear_button.clicked.connect(self._handle_clear)
        button_row.addWidget(self.clear_button)

        self.export_button = QPushButton(ADMIN_EXPORT_BUTTON, self)
        self.export_button.clicked.connect(self._handle_export)
        button_row.addWidget(self.export_button)

        self.close_button = QPushButton(ADMIN_CLOSE_BUTTON, self)
        self.close_button.clicked.connect(self.accept)
        button_row.addWidget(self.close_button)
        layout.addLayout(button_row)

    def reload(self) -> None:
        try:
            records = self.quiz_manager.load_results()
        except PersistenceError as exc:
            logger.exception("Loading results failed")
            show_error(self, "IO Error", str(exc))
            records = []
        self._populate(records)

    def _populate(self, records: list[ResultRecord]) -> None:
        self.table.setSortingEnabled(False)
        self.table.setRowCount(len(records))
        for row, record in enumerate(records):
            cells = [
                QTableWidgetItem(record.timestamp.strftime(TIMESTAMP_FORMAT)),
                QTableWidgetItem(record.name),
                QTableWidgetItem(record.email),
                _NumericItem(record.score_percent),
                _NumericItem(record.correct_count),
                _NumericItem(record.total_questions),
                QTableWidgetItem(encode_answers(record.answers)),
            ]
            for column, item in enumerate(cells):
                self.table.setItem(row, column, item)
        self.table.setSortingEnabled(True)
        self.export_button.setEnabled(self.quiz_manager.has_results())

    def _handle_export(self) -> None:
        default_path = self._last_export_path or (Path.cwd() / DEFAULT_EXPORT_FILENAME)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            EXPORT_DIALOG_TITLE,
            str(default_path),
            EXPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            exported = self.quiz_manager.export_results(Path(file_path))
        except PersistenceError as exc:
            logger.exception("Export failed")
            show_error(self, "Error", str(exc))
            return

        self._last_export_path = exported
        show_info(self, "Export", f"Exported to: {exported.resolve()}")

    def _handle_clear(self) -> None:
        if not confirm_clear_results(self):
            return
        try:
            self.quiz_manager.clear_results()
        except PersistenceError as exc:
            logger.exception("Clearing results failed")
            show_error(self, "Error", str(exc))
            return
        self._populate([])
        show_info(self, "Results", "Results cleared.")
