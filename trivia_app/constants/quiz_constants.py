"""Quiz-related constants shared across UI and core layers."""

QUESTION_TIME_SECONDS: int = 15
TICK_INTERVAL_MS: int = 1000
ADVANCE_DELAY_MS: int = 1000
DEFAULT_QUESTION_COUNT: int = 10

NO_ANSWER_TEXT: str = "No answer"
GUEST_NAME: str = "Guest"
NOT_SELECTED_TEXT: str = "Not selected"

TICKING_SOUND_PATH: str | None = "trivia_app/data/sounds/tick.wav"
CORRECT_SOUND_PATH: str | None = "trivia_app/data/sounds/correct.wav"
INCORRECT_SOUND_PATH: str | None = "trivia_app/data/sounds/incorrect.wav"

# Vibration patterns in milliseconds, alternating on/off.
CORRECT_VIBRATION_PATTERN_MS: tuple[int, ...] = (200,)
INCORRECT_VIBRATION_PATTERN_MS: tuple[int, ...] = (100, 50, 100, 50, 100)

# The countdown label turns red for the last seconds of a question.
TICKING_WINDOW_SECONDS: int = 5
