"""Component for the end-of-quiz summary and the empty question-set state."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import QLabel, QPushButton, QTextBrowser, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import (
    BACK_HOME_BUTTON,
    NO_QUESTIONS_MESSAGE,
    RESULTS_RESTART_BUTTON,
)
from trivia_app.core.models import SessionConfig, SessionSummary
from trivia_app.core.results_renderer import renderer
from trivia_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component listing every answer once a session ends."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel("", self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.message_label = QLabel("", self)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self.results_view = QTextBrowser(self)
        self.results_view.setOpenExternalLinks(False)
        layout.addWidget(self.results_view, stretch=1)

        self.restart_button = QPushButton(RESULTS_RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def show_summary(self, summary: SessionSummary) -> None:
        self.heading_label.setVisible(False)
        self.message_label.setVisible(False)
        self.results_view.setVisible(True)
        self.results_view.setHtml(renderer.render_fragment(summary))
        self.restart_button.setText(RESULTS_RESTART_BUTTON)

    def show_no_questions(self, config: SessionConfig) -> None:
        self.heading_label.setText(f"Welcome, {config.display_name}")
        self.heading_label.setVisible(True)
        self.message_label.setText(NO_QUESTIONS_MESSAGE)
        self.message_label.setVisible(True)
        self.results_view.clear()
        self.results_view.setVisible(False)
        self.restart_button.setText(BACK_HOME_BUTTON)
