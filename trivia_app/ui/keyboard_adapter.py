"""Application-wide key listener that feeds the keyboard map while a quiz runs."""

from __future__ import annotations

from PySide6.QtCore import QCoreApplication, QEvent, QObject, Qt
from PySide6.QtWidgets import QApplication

from trivia_app.core.keyboard_map import (
    KEY_ARROW_LEFT,
    KEY_ARROW_RIGHT,
    KEY_ENTER,
    dispatch_key,
    is_bound_key,
)
from trivia_app.core.services.session_engine import SessionEngine

_QT_KEY_NAMES = {
    Qt.Key_Right: KEY_ARROW_RIGHT,
    Qt.Key_Left: KEY_ARROW_LEFT,
    Qt.Key_Return: KEY_ENTER,
    Qt.Key_Enter: KEY_ENTER,
}


def key_name_for(key: int, text: str = "") -> str | None:
    """Translate a Qt key code (and its text) into a keyboard map key name."""
    name = _QT_KEY_NAMES.get(key)
    if name is not None:
        return name
    if len(text) == 1 and text.isascii() and text.isdigit():
        return text
    return None


class KeyboardAdapter(QObject):
    """Event filter installed on the application only while a session is active."""

    def __init__(self, engine: SessionEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._attached = False

    def attach(self) -> None:
        app = QCoreApplication.instance()
        if self._attached or app is None:
            return
        app.installEventFilter(self)
        self._attached = True

    def detach(self) -> None:
        app = QCoreApplication.instance()
        if not self._attached or app is None:
            return
        app.removeEventFilter(self)
        self._attached = False

    def is_attached(self) -> bool:
        return self._attached

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() != QEvent.KeyPress or event.isAutoRepeat():
            return False
        # Dialogs opened over the quiz keep their own keys.
        if QApplication.activeModalWidget() is not None:
            return False
        name = key_name_for(event.key(), event.text())
        if name is None or not is_bound_key(name):
            return False
        dispatch_key(self._engine, name)
        return True
