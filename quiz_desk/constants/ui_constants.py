"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Online Quiz Application"
WINDOW_WIDTH: int = 820
WINDOW_HEIGHT: int = 520
TIMER_INTERVAL_MS: int = 1000

LOGIN_TITLE: str = "Welcome to the Quiz"
LOGIN_NAME_LABEL: str = "Full name:"
LOGIN_EMAIL_LABEL: str = "Email:"
LOGIN_START_BUTTON: str = "Start Quiz"
LOGIN_NOTE_TEMPLATE: str = (
    "Note: Each question has a {seconds} second timer. You can pause/resume per question."
)

QUIZ_HEADER_TEMPLATE: str = "Quiz - Good luck, {name}"
QUIZ_INDEX_TEMPLATE: str = "Question {number} / {total}"
QUIZ_PAUSE_BUTTON: str = "Pause"
QUIZ_RESUME_BUTTON: str = "Resume"
QUIZ_NEXT_BUTTON: str = "Next"
QUIZ_FINISH_BUTTON: str = "Finish"
QUIZ_TIME_LEFT_TEMPLATE: str = "Time left: {seconds}s"
QUIZ_PAUSED_LABEL: str = "Paused"

MENU_APP: str = "App"
MENU_ADMIN_VIEW: str = "Admin: View Results"
MENU_SETTINGS: str = "Settings"
MENU_HELP: str = "Help"
MENU_ABOUT: str = "About"
MENU_EXIT: str = "Exit"

RESULTS_DIALOG_TITLE: str = "Quiz Results"
RESULTS_CLOSE_BUTTON: str = "Close"
RESULTS_ADMIN_BUTTON: str = "View/Export Results (Admin)"

ADMIN_DIALOG_TITLE: str = "Admin - Saved Results"
ADMIN_COLUMNS: tuple[str, ...] = ("Timestamp", "Name", "Email", "Score%", "Correct", "Total", "Answers")
ADMIN_EXPORT_BUTTON: str = "Export CSV"
ADMIN_CLEAR_BUTTON: str = "Clear All Results"
ADMIN_CLOSE_BUTTON: str = "Close"
EXPORT_DIALOG_TITLE: str = "Export results"
EXPORT_FILE_FILTER: str = "CSV files (*.csv);;All files (*.*)"

MISSING_INFO_TITLE: str = "Missing info"
CLEAR_CONFIRM_MESSAGE: str = "Delete ALL saved results? This cannot be undone."
