"""Application entry point for QuizDesk."""

from __future__ import annotations

import argparse
from logging import Logger
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quiz_desk.constants.quiz_constants import (
    DEFAULT_QUESTIONS_PATH,
    DEFAULT_SECONDS_PER_QUESTION,
    RESULTS_CSV_PATH,
)
from quiz_desk.core.errors import ValidationError
from quiz_desk.core.quiz_importer import load_question_bank
from quiz_desk.core.quiz_manager import QuizManager
from quiz_desk.core.services.question_bank import QuestionBank, default_question_bank
from quiz_desk.core.services.result_log import ResultLog
from quiz_desk.ui.main_window import QuizMainWindow
from quiz_desk.utils.logging_config import configure_logging


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Timed multiple-choice quiz with a saved result log.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--results", type=Path, default=Path(RESULTS_CSV_PATH), help="CSV file receiving results")
    parser.add_argument(
        "--questions",
        type=Path,
        default=Path(DEFAULT_QUESTIONS_PATH),
        help="Question file; the built-in questions are used when it is missing",
    )
    parser.add_argument(
        "--seconds",
        type=_positive_int,
        default=DEFAULT_SECONDS_PER_QUESTION,
        help="Seconds allowed per question",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file")
    return parser


def _load_question_bank(questions_path: Path, logger: Logger) -> QuestionBank:
    """Import the question file if present, falling back to the built-in quiz."""
    if not questions_path.exists():
        return default_question_bank()
    try:
        bank = load_question_bank(questions_path)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        logger.warning("Could not load %s (%s); using the built-in questions.", questions_path, exc)
        return default_question_bank()
    logger.info("Loaded %d questions from %s", len(bank), questions_path)
    return bank


def main() -> None:
    """Parse options, initialize logging and launch the Qt UI."""
    args = build_arg_parser().parse_args()
    logger = configure_logging(args.log_level, args.log_file)
    logger.info("Starting QuizDesk…")

    quiz_manager = QuizManager(
        bank=_load_question_bank(args.questions, logger),
        result_log=ResultLog(args.results),
        seconds_per_question=args.seconds,
    )
    logger.info("Results are saved to %s", args.results.resolve())

    app = QApplication(sys.argv[:1])
    window = QuizMainWindow(quiz_manager=quiz_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
