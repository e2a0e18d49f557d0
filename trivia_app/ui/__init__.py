"""Qt UI components for the trivia application."""

from .dialog_helpers import confirm_restart, show_error, show_info
from .trivia_main_window import TriviaMainWindow

__all__ = [
    "TriviaMainWindow",
    "confirm_restart",
    "show_error",
    "show_info",
]
