"""Component showing the current question, answers and countdown."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.quiz_constants import TICKING_WINDOW_SECONDS
from trivia_app.constants.ui_constants import (
    ANSWER_BUTTON_TEMPLATE,
    QUIZ_PROGRESS_TEMPLATE,
    QUIZ_RESTART_BUTTON,
    QUIZ_SCORE_TEMPLATE,
    QUIZ_TIME_UP,
    QUIZ_TIMER_TEMPLATE,
)
from trivia_app.core.models import SessionPhase, SessionSnapshot
from trivia_app.core.services.session_engine import SessionEngine
from trivia_app.styling.styles import AnswerHighlight, Styles


class QuizPanel(QWidget):
    """UI component for answering questions against the clock."""

    def __init__(
        self,
        engine: SessionEngine,
        on_restart: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.engine = engine
        self.on_restart = on_restart
        self._answer_buttons: list[QPushButton] = []
        self._displayed_answers: tuple[str, ...] = ()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.welcome_label = QLabel("", self)
        self.welcome_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.welcome_label)

        info_row = QHBoxLayout()
        self.difficulty_label = QLabel("", self)
        info_row.addWidget(self.difficulty_label)
        self.category_label = QLabel("", self)
        info_row.addWidget(self.category_label)
        info_row.addStretch()
        self.progress_label = QLabel("", self)
        info_row.addWidget(self.progress_label)
        self.score_label = QLabel("", self)
        info_row.addWidget(self.score_label)
        layout.addLayout(info_row)

        timer_row = QHBoxLayout()
        self.time_limit_label = QLabel("", self)
        timer_row.addWidget(self.time_limit_label)
        self.time_limit_progress = QProgressBar(self)
        self.time_limit_progress.setTextVisible(False)
        timer_row.addWidget(self.time_limit_progress, stretch=1)
        layout.addLayout(timer_row)

        self.question_group = QGroupBox(self)
        question_layout = QVBoxLayout()
        self.question_group.setLayout(question_layout)

        self.question_category_label = QLabel("", self.question_group)
        question_layout.addWidget(self.question_category_label)

        self.question_label = QLabel("", self.question_group)
        self.question_label.setWordWrap(True)
        self.question_label.setTextFormat(Qt.PlainText)
        self.question_label.setStyleSheet("font-size: 15pt; font-weight: 500;")
        question_layout.addWidget(self.question_label)

        self.answers_layout = QVBoxLayout()
        question_layout.addLayout(self.answers_layout)
        layout.addWidget(self.question_group, stretch=1)

        self.restart_button = QPushButton(QUIZ_RESTART_BUTTON, self)
        self.restart_button.setFocusPolicy(Qt.NoFocus)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button, alignment=Qt.AlignRight)

    def render(self, snapshot: SessionSnapshot) -> None:
        """Refresh every widget from an engine snapshot."""
        config = snapshot.config
        self.welcome_label.setText(f"Welcome, {config.display_name}")
        self.difficulty_label.setText(f"Difficulty: {config.difficulty_label}")
        self.category_label.setText(f"Category: {config.category_label}")
        self.progress_label.setText(
            QUIZ_PROGRESS_TEMPLATE.format(
                number=snapshot.question_number, total=snapshot.question_count
            )
        )
        self.score_label.setText(QUIZ_SCORE_TEMPLATE.format(score=snapshot.score))
        self.question_category_label.setText(f"Category: {snapshot.question_category}")
        self.question_label.setText(snapshot.question_text)

        if snapshot.answers != self._displayed_answers:
            self._rebuild_answer_buttons(snapshot.answers)
        self._update_answer_highlights(snapshot)
        self._update_time_limit_indicator(snapshot, config.question_time_seconds)

    def _rebuild_answer_buttons(self, answers: tuple[str, ...]) -> None:
        while self.answers_layout.count():
            item = self.answers_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self._answer_buttons = []
        for ordinal, answer in enumerate(answers, start=1):
            button = QPushButton(
                ANSWER_BUTTON_TEMPLATE.format(ordinal=ordinal, answer=answer),
                self.question_group,
            )
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(lambda *_args, value=answer: self.engine.select_answer(value))
            self.answers_layout.addWidget(button)
            self._answer_buttons.append(button)
        self._displayed_answers = answers

    def _update_answer_highlights(self, snapshot: SessionSnapshot) -> None:
        accepting = snapshot.phase is SessionPhase.AWAITING_ANSWER
        for answer, button in zip(self._displayed_answers, self._answer_buttons):
            highlight = AnswerHighlight.NEUTRAL
            if snapshot.selected_answer == answer:
                highlight = (
                    AnswerHighlight.CORRECT
                    if answer == snapshot.correct_answer
                    else AnswerHighlight.INCORRECT
                )
            button.setEnabled(accepting)
            button.setStyleSheet(Styles.get_answer_button_style(highlight))

    def _update_time_limit_indicator(self, snapshot: SessionSnapshot, total_seconds: int) -> None:
        counting = snapshot.phase is SessionPhase.AWAITING_ANSWER
        self.time_limit_label.setVisible(counting or snapshot.remaining_seconds == 0)
        self.time_limit_progress.setVisible(counting)
        self.time_limit_progress.setRange(0, total_seconds)
        self.time_limit_progress.setValue(snapshot.remaining_seconds)

        if snapshot.remaining_seconds > 0:
            self.time_limit_label.setText(
                QUIZ_TIMER_TEMPLATE.format(seconds=snapshot.remaining_seconds)
            )
        else:
            self.time_limit_label.setText(QUIZ_TIME_UP)
        urgent = counting and snapshot.remaining_seconds <= TICKING_WINDOW_SECONDS
        self.time_limit_label.setStyleSheet(Styles.get_timer_label_style(urgent))
