"""Static metadata describing QuizDesk."""

APP_NAME = "QuizDesk"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizDesk is a single-user desktop quiz built with Qt. "
    "Answer each timed question, review your score, and browse or export saved results."
)

HELP_TEXT = (
    "Place a quiz_questions.txt file next to the application (or pass --questions) "
    "to replace the built-in questions. Format:\n\n"
    "Q: Which data structure uses FIFO order?\n"
    "A: Stack\nB: Queue\nC: Tree\nD: Graph\n"
    "CORRECT: B\n\n"
    "Separate questions with a blank line or ---."
)
