"""Domain models for the trivia application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from trivia_app.constants.catalog_constants import CATEGORY_IDS, CATEGORY_LABELS
from trivia_app.constants.quiz_constants import (
    GUEST_NAME,
    NOT_SELECTED_TEXT,
    QUESTION_TIME_SECONDS,
)


class Difficulty(Enum):
    """Difficulty levels offered to the player, mapped to the service levels."""

    BEGINNER = "easy"
    INTERMEDIATE = "medium"
    EXPERT = "hard"

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def service_level(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> Difficulty:
        """Look up a difficulty by its case-insensitive player-facing label."""
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid difficulty: {label}") from None


def category_id_for_label(label: str) -> int:
    """Return the catalog id for a case-insensitive category label."""
    category_id = CATEGORY_IDS.get(label.strip().lower())
    if category_id is None:
        raise ValueError(f"Invalid category: {label}")
    return category_id


def category_label_for_id(category_id: int) -> str:
    return CATEGORY_LABELS.get(category_id, str(category_id))


@dataclass(frozen=True, slots=True)
class TriviaQuestion:
    """Multiple-choice trivia question with already-decoded text."""

    text: str
    correct_answer: str
    incorrect_answers: tuple[str, ...]
    category_id: int
    difficulty: str | None = None


@dataclass(frozen=True, slots=True)
class AnsweredRecord:
    """Outcome of one question, created once and never edited."""

    question_text: str
    selected_answer: str
    correct_answer: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Participant selections handed to the engine when a session starts."""

    participant_name: str = ""
    difficulty: Difficulty | None = None
    category: str | None = None
    question_time_seconds: int = QUESTION_TIME_SECONDS

    @property
    def display_name(self) -> str:
        return self.participant_name.strip() or GUEST_NAME

    @property
    def difficulty_label(self) -> str:
        return self.difficulty.label if self.difficulty else NOT_SELECTED_TEXT

    @property
    def category_label(self) -> str:
        return self.category or NOT_SELECTED_TEXT


class SessionPhase(Enum):
    """Externally visible state of the session engine."""

    IDLE = auto()
    NO_QUESTIONS = auto()
    AWAITING_ANSWER = auto()
    LOCKED = auto()
    REVIEWING = auto()
    COMPLETED = auto()

    @property
    def in_progress(self) -> bool:
        return self in (SessionPhase.AWAITING_ANSWER, SessionPhase.LOCKED, SessionPhase.REVIEWING)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only projection of the session handed to the presentation layer."""

    phase: SessionPhase
    config: SessionConfig
    question_index: int = 0
    question_count: int = 0
    question_text: str = ""
    question_category: str = ""
    answers: tuple[str, ...] = ()
    selected_answer: str | None = None
    correct_answer: str | None = None
    remaining_seconds: int = 0
    score: int = 0
    answered: tuple[AnsweredRecord, ...] = ()
    input_locked: bool = False

    @property
    def completed(self) -> bool:
        return self.phase is SessionPhase.COMPLETED

    @property
    def question_number(self) -> int:
        return self.question_index + 1


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Final result of a completed session."""

    participant_name: str
    difficulty_label: str
    category_label: str
    score: int
    question_count: int
    records: tuple[AnsweredRecord, ...]

    @property
    def percentage(self) -> float:
        if not self.question_count:
            return 0.0
        return (self.score / self.question_count) * 100
