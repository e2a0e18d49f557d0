"""Key-to-operation table translating keyboard input into engine calls."""

from __future__ import annotations

from typing import Callable

from trivia_app.core.services.session_engine import SessionEngine

KEY_ARROW_RIGHT = "ArrowRight"
KEY_ARROW_LEFT = "ArrowLeft"
KEY_ENTER = "Enter"
_DIGITS = "0123456789"

KeyHandler = Callable[[SessionEngine], bool]

KEY_BINDINGS: dict[str, KeyHandler] = {
    KEY_ARROW_RIGHT: SessionEngine.navigate_forward,
    KEY_ARROW_LEFT: SessionEngine.navigate_backward,
    KEY_ENTER: SessionEngine.resubmit_selection,
}


def dispatch_key(engine: SessionEngine, key: str) -> bool:
    """Apply the operation bound to ``key``.

    Digit keys select the answer at that position. Returns True when the key
    was bound and the engine accepted the operation; unknown keys and
    ignored operations return False.
    """
    if len(key) == 1 and key in _DIGITS:
        return engine.select_by_ordinal(int(key))

    handler = KEY_BINDINGS.get(key)
    if handler is None:
        return False
    return handler(engine)


def is_bound_key(key: str) -> bool:
    return key in KEY_BINDINGS or (len(key) == 1 and key in _DIGITS)
