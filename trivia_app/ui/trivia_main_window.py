"""Qt main window switching between setup, quiz and results modes."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from trivia_app.constants.quiz_constants import DEFAULT_QUESTION_COUNT
from trivia_app.constants.ui_constants import (
    DEFAULT_QUESTION_FILE,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    MODE_BUTTON_ABOUT,
    MODE_BUTTON_HELP,
    MODE_BUTTON_IMPORT,
    SETUP_NO_POOL_MESSAGE,
    WINDOW_TITLE,
)
from trivia_app.core.models import (
    Difficulty,
    SessionConfig,
    SessionPhase,
    SessionSnapshot,
    category_id_for_label,
)
from trivia_app.core.question_importer import QuestionImportError, load_question_set_from_file
from trivia_app.core.services.question_bank import QuestionBank, QuestionBankExhaustedError
from trivia_app.core.services.session_engine import SessionEngine, SessionInputError
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.quiz_panel import QuizPanel
from trivia_app.ui.components.results_panel import ResultsPanel
from trivia_app.ui.components.setup_panel import SetupPanel
from trivia_app.ui.dialog_helpers import confirm_restart, show_error, show_info
from trivia_app.ui.keyboard_adapter import KeyboardAdapter
from trivia_app.ui.qt_scheduler import QtScheduler
from trivia_app.ui.sound_feedback import SoundFeedback

logger = logging.getLogger(__name__)


class WindowMode(Enum):
    """High-level UI mode of the main window."""

    SETUP = auto()
    QUIZ = auto()
    RESULTS = auto()


class TriviaMainWindow(QMainWindow):
    """Main Qt window wiring the question bank, session engine and panels."""

    def __init__(self, question_bank: QuestionBank | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.question_bank = question_bank or QuestionBank()
        self.scheduler = QtScheduler(self)
        self.engine = SessionEngine(self.scheduler, feedback=SoundFeedback(self))
        self.keyboard_adapter = KeyboardAdapter(self.engine, self)
        self._mode = WindowMode.SETUP

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

        self.engine.add_state_listener(self._handle_state_changed)
        self.engine.add_restart_listener(self._return_to_setup)
        self._auto_load_default_questions()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.setup_panel = SetupPanel(on_start=self._handle_start_quiz, parent=self)
        self.quiz_panel = QuizPanel(self.engine, on_restart=self._handle_restart_request, parent=self)
        self.results_panel = ResultsPanel(on_restart=self.engine.restart, parent=self)

        self.mode_stack.addWidget(self.setup_panel)
        self.mode_stack.addWidget(self.quiz_panel)
        self.mode_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(WindowMode.SETUP)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.import_button = QPushButton(MODE_BUTTON_IMPORT, self)
        self.import_button.clicked.connect(self._handle_import_questions)
        button_row.addWidget(self.import_button)

        button_row.addStretch()

        self.about_button = QPushButton(MODE_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(MODE_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: WindowMode) -> None:
        self._mode = mode
        self.import_button.setEnabled(mode == WindowMode.SETUP)

        # Key bindings only exist while a question is on screen.
        if mode == WindowMode.QUIZ:
            self.keyboard_adapter.attach()
        else:
            self.keyboard_adapter.detach()

        index_map = {
            WindowMode.SETUP: 0,
            WindowMode.QUIZ: 1,
            WindowMode.RESULTS: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_start_quiz(self, name: str, difficulty_label: str, category_label: str) -> None:
        if not self.question_bank.has_questions():
            self.setup_panel.show_error(SETUP_NO_POOL_MESSAGE)
            return

        try:
            difficulty = Difficulty.from_label(difficulty_label)
            category_id = category_id_for_label(category_label)
        except ValueError as exc:
            self.setup_panel.show_error(str(exc))
            return

        try:
            questions = self.question_bank.draw(category_id, difficulty, DEFAULT_QUESTION_COUNT)
        except QuestionBankExhaustedError as exc:
            self.setup_panel.show_error(str(exc))
            return

        config = SessionConfig(
            participant_name=name,
            difficulty=difficulty,
            category=category_label,
        )
        try:
            self.engine.initialize(questions, config)
        except SessionInputError as exc:
            show_error(self, "Quiz rejected", str(exc))

    def _handle_state_changed(self, snapshot: SessionSnapshot) -> None:
        if snapshot.phase is SessionPhase.NO_QUESTIONS:
            self.results_panel.show_no_questions(snapshot.config)
            self._set_mode(WindowMode.RESULTS)
        elif snapshot.phase is SessionPhase.COMPLETED:
            summary = self.engine.summary()
            if summary is not None:
                self.results_panel.show_summary(summary)
            self._set_mode(WindowMode.RESULTS)
        elif snapshot.phase.in_progress:
            self.quiz_panel.render(snapshot)
            if self._mode != WindowMode.QUIZ:
                self._set_mode(WindowMode.QUIZ)

    def _handle_restart_request(self) -> None:
        if self.engine.get_phase().in_progress and not confirm_restart(self):
            return
        self.engine.restart()

    def _return_to_setup(self) -> None:
        self.setup_panel.clear_error()
        self._set_mode(WindowMode.SETUP)

    def _handle_import_questions(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.home()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return
        self._load_questions(Path(file_path), announce=True)

    def _load_questions(self, file_path: Path, announce: bool) -> bool:
        try:
            imported = load_question_set_from_file(file_path)
        except (OSError, QuestionImportError) as exc:
            logger.warning("Could not import %s: %s", file_path, exc)
            if announce:
                show_error(self, "Import failed", str(exc))
            return False

        self.question_bank.load_questions(imported.questions)
        self.setup_panel.set_pool_size(self.question_bank.get_question_count())
        if announce:
            show_info(
                self,
                "Questions imported",
                f"Successfully imported {len(imported.questions)} questions.",
            )
        return True

    def _auto_load_default_questions(self) -> None:
        default_path = Path(DEFAULT_QUESTION_FILE)
        if default_path.exists():
            self._load_questions(default_path, announce=False)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.keyboard_adapter.detach()
        self.engine.shutdown()
        self.scheduler.cancel_all()
        super().closeEvent(event)
