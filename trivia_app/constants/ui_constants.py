"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TriviaQt"
NAME_PLACEHOLDER: str = "Enter Your Name..."
DEFAULT_QUESTION_FILE: str = "trivia_questions.json"

MODE_BUTTON_IMPORT: str = "Import Questions"
MODE_BUTTON_ABOUT: str = "About TriviaQt"
MODE_BUTTON_HELP: str = "Help"

SETUP_TITLE: str = "Quiz Trivia"
SETUP_START_BUTTON: str = "Start Quiz"
SETUP_POOL_TEMPLATE: str = "{count} question(s) loaded"
SETUP_MISSING_FIELDS: str = "Please enter your name and select a difficulty and category."
SETUP_NO_POOL_MESSAGE: str = "Please import a question file first."

QUIZ_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
QUIZ_SCORE_TEMPLATE: str = "Score: {score}"
QUIZ_TIMER_TEMPLATE: str = "{seconds}s remaining"
QUIZ_TIME_UP: str = "Time's up"
QUIZ_RESTART_BUTTON: str = "Restart"

NO_QUESTIONS_MESSAGE: str = "No questions available. Please try a different category or difficulty."
BACK_HOME_BUTTON: str = "Back to Home"
RESULTS_RESTART_BUTTON: str = "Start New Quiz"

IMPORT_DIALOG_TITLE: str = "Select question file"
IMPORT_FILE_FILTER: str = "Question files (*.json);;All files (*.*)"

ANSWER_BUTTON_TEMPLATE: str = "{ordinal}. {answer}"
