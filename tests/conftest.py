"""
Pytest configuration and shared fixtures for TriviaQt tests.
"""

from __future__ import annotations

import os
import random
from typing import Callable

import pytest

from trivia_app.core.models import Difficulty, SessionConfig, TriviaQuestion
from trivia_app.core.services.feedback import SessionFeedback
from trivia_app.core.services.session_engine import SessionEngine

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeTimer:
    """Timer handle driven by FakeScheduler's virtual clock."""

    def __init__(self, due_ms: int, interval_ms: int | None, callback: Callable[[], None]):
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def is_active(self) -> bool:
        return not self.cancelled and not self.fired


class FakeScheduler:
    """Manual scheduler: nothing fires until the test advances virtual time."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now_ms + delay_ms, None, callback)
        self.timers.append(timer)
        return timer

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now_ms + interval_ms, interval_ms, callback)
        self.timers.append(timer)
        return timer

    def active_timers(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if timer.is_active()]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [timer for timer in self.active_timers() if timer.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due_ms)
            self.now_ms = timer.due_ms
            if timer.interval_ms is None:
                timer.fired = True
            else:
                timer.due_ms += timer.interval_ms
            timer.callback()
        self.now_ms = target


class RecordingFeedback(SessionFeedback):
    """Feedback sink remembering every cue it was asked to give."""

    def __init__(self) -> None:
        self.ticks: list[int] = []
        self.answers: list[bool] = []
        self.vibrations: list[tuple[int, ...]] = []

    def on_tick(self, remaining_seconds: int) -> None:
        self.ticks.append(remaining_seconds)

    def on_answer(self, is_correct: bool) -> None:
        self.answers.append(is_correct)

    def vibrate(self, pattern_ms: tuple[int, ...]) -> None:
        self.vibrations.append(pattern_ms)


def make_question(
    text: str,
    correct: str,
    incorrect: tuple[str, ...] = ("Wrong A", "Wrong B", "Wrong C"),
    category_id: int = 9,
    difficulty: str | None = "easy",
) -> TriviaQuestion:
    return TriviaQuestion(
        text=text,
        correct_answer=correct,
        incorrect_answers=incorrect,
        category_id=category_id,
        difficulty=difficulty,
    )


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def feedback() -> RecordingFeedback:
    return RecordingFeedback()


@pytest.fixture
def engine(scheduler: FakeScheduler, feedback: RecordingFeedback) -> SessionEngine:
    return SessionEngine(scheduler, feedback=feedback, rng=random.Random(7))


@pytest.fixture
def config() -> SessionConfig:
    return SessionConfig(
        participant_name="Ada",
        difficulty=Difficulty.BEGINNER,
        category="General",
    )


@pytest.fixture
def capital_question() -> TriviaQuestion:
    return make_question(
        "What is the capital of France?", "Paris", ("Rome", "Berlin")
    )


@pytest.fixture
def questions() -> list[TriviaQuestion]:
    return [
        make_question("What is the capital of France?", "Paris", ("Rome", "Berlin", "Madrid")),
        make_question("Which planet is known as the Red Planet?", "Mars", ("Venus", "Jupiter", "Saturn")),
        make_question("What is H2O commonly called?", "Water", ("Salt", "Hydrogen", "Oxygen")),
        make_question("How many legs does a spider have?", "8", ("6", "10", "12")),
    ]
