"""Component for entering the player name and choosing a question set."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.catalog_constants import CATEGORY_OPTIONS, DIFFICULTY_OPTIONS
from trivia_app.constants.ui_constants import (
    NAME_PLACEHOLDER,
    SETUP_MISSING_FIELDS,
    SETUP_POOL_TEMPLATE,
    SETUP_START_BUTTON,
    SETUP_TITLE,
)
from trivia_app.styling.styles import Styles

StartHandler = Callable[[str, str, str], None]


class SetupPanel(QWidget):
    """UI component collecting name, difficulty and category."""

    def __init__(self, on_start: StartHandler, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(SETUP_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        layout.addWidget(self.title_label)

        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        form = QFormLayout()
        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(NAME_PLACEHOLDER)
        self.name_input.returnPressed.connect(self._handle_start_click)
        form.addRow("Name:", self.name_input)

        self.difficulty_combo = QComboBox(self)
        self.difficulty_combo.addItems(DIFFICULTY_OPTIONS)
        form.addRow("Difficulty:", self.difficulty_combo)

        self.category_combo = QComboBox(self)
        self.category_combo.addItems(CATEGORY_OPTIONS)
        form.addRow("Category:", self.category_combo)
        layout.addLayout(form)

        self.pool_label = QLabel(SETUP_POOL_TEMPLATE.format(count=0), self)
        layout.addWidget(self.pool_label)

        self.start_button = QPushButton(SETUP_START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button)
        layout.addStretch()

    def _handle_start_click(self) -> None:
        name = self.name_input.text().strip()
        if not name:
            self.show_error(SETUP_MISSING_FIELDS)
            return
        self.clear_error()
        self.on_start(
            name,
            self.difficulty_combo.currentText(),
            self.category_combo.currentText(),
        )

    def set_pool_size(self, count: int) -> None:
        self.pool_label.setText(SETUP_POOL_TEMPLATE.format(count=count))

    def show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.setVisible(True)

    def clear_error(self) -> None:
        self.error_label.setText("")
        self.error_label.setVisible(False)
