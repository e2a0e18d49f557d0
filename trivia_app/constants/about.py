"""Static metadata describing TriviaQt."""

APP_NAME = "TriviaQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "TriviaQt is a timed multiple-choice trivia game built with Qt. "
    "Pick a category and difficulty, then answer ten questions against the clock."
)

HELP_TEXT = (
    "Each question gives you 15 seconds. Click an answer or press its number key (1-4). "
    "Use the arrow keys to move between questions once the current one is answered.\n\n"
    "Question sets are loaded from a JSON file in the trivia service format:\n\n"
    '{"response_code": 0, "results": [{"category": "Science & Nature", '
    '"difficulty": "easy", "question": "...", "correct_answer": "...", '
    '"incorrect_answers": ["...", "...", "..."]}]}\n\n'
    "A file named trivia_questions.json in the working directory is loaded on start-up."
)
