"""Audible cues for the countdown and for answer correctness."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from trivia_app.constants.quiz_constants import (
    CORRECT_SOUND_PATH,
    INCORRECT_SOUND_PATH,
    TICKING_SOUND_PATH,
)
from trivia_app.core.services.feedback import SessionFeedback

logger = logging.getLogger(__name__)


class SoundFeedback(SessionFeedback):
    """Plays short sound effects; vibration requests are only logged on desktop."""

    def __init__(self, parent: QObject | None = None, volume: float = 0.6) -> None:
        self._parent = parent
        self._volume = volume
        self._tick_effect = self._load_effect(TICKING_SOUND_PATH)
        self._correct_effect = self._load_effect(CORRECT_SOUND_PATH)
        self._incorrect_effect = self._load_effect(INCORRECT_SOUND_PATH)

    def on_tick(self, remaining_seconds: int) -> None:
        self._play(self._tick_effect)

    def on_answer(self, is_correct: bool) -> None:
        self._play(self._correct_effect if is_correct else self._incorrect_effect)

    def vibrate(self, pattern_ms: tuple[int, ...]) -> None:
        logger.debug("Vibration pattern %s requested; no haptics available", pattern_ms)

    def _load_effect(self, path_setting: str | None) -> QSoundEffect | None:
        if not path_setting:
            return None
        sound_path = Path(path_setting)
        if not sound_path.is_absolute():
            # trivia_app/ui/sound_feedback.py -> project root
            project_root = Path(__file__).resolve().parents[2]
            sound_path = project_root / sound_path
        if not sound_path.exists():
            logger.warning("Sound file %s not found; cue disabled", sound_path)
            return None
        effect = QSoundEffect(self._parent)
        effect.setSource(QUrl.fromLocalFile(str(sound_path)))
        effect.setVolume(self._volume)
        return effect

    @staticmethod
    def _play(effect: QSoundEffect | None) -> None:
        if effect is None:
            return
        if effect.isPlaying():
            effect.stop()
        effect.play()
