"""Application entry point for TriviaQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_app.ui.trivia_main_window import TriviaMainWindow
from trivia_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting TriviaQt")

    app = QApplication(sys.argv)
    window = TriviaMainWindow()
    window.resize(900, 700)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
