"""Side-effect hooks fired by the session engine (sounds, haptics)."""

from __future__ import annotations

from trivia_app.constants.quiz_constants import (
    CORRECT_VIBRATION_PATTERN_MS,
    INCORRECT_VIBRATION_PATTERN_MS,
)


class SessionFeedback:
    """No-op feedback sink. Subclasses decide which cues they can honour."""

    def on_tick(self, remaining_seconds: int) -> None:
        """Called once per countdown tick."""

    def on_answer(self, is_correct: bool) -> None:
        """Called once when a question is resolved."""

    def vibrate(self, pattern_ms: tuple[int, ...]) -> None:
        """Request a device vibration pattern (on/off durations in ms)."""


def vibration_pattern_for(is_correct: bool) -> tuple[int, ...]:
    return CORRECT_VIBRATION_PATTERN_MS if is_correct else INCORRECT_VIBRATION_PATTERN_MS
