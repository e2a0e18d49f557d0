"""Service driving a single timed trivia session."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
import logging
import random
from typing import Callable, Sequence

from trivia_app.constants.quiz_constants import (
    ADVANCE_DELAY_MS,
    NO_ANSWER_TEXT,
    TICK_INTERVAL_MS,
)
from trivia_app.core.answer_shuffle import build_answer_set
from trivia_app.core.models import (
    AnsweredRecord,
    SessionConfig,
    SessionPhase,
    SessionSnapshot,
    SessionSummary,
    TriviaQuestion,
    category_label_for_id,
)
from trivia_app.core.scheduling import Scheduler, TimerHandle
from trivia_app.core.services.feedback import SessionFeedback, vibration_pattern_for

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionSnapshot], None]
RestartListener = Callable[[], None]


class SessionInputError(ValueError):
    """Raised when a session cannot start from the supplied questions or config."""


@dataclass(slots=True)
class _SessionState:
    """Mutable state of one attempt. Replaced wholesale on restart."""

    generation: int
    config: SessionConfig
    questions: tuple[TriviaQuestion, ...]
    answer_set: tuple[str, ...]
    current_index: int = 0
    score: int = 0
    answered: list[AnsweredRecord] = field(default_factory=list)
    selected_answer: str | None = None
    input_locked: bool = False
    remaining_seconds: int = 0
    completed: bool = False

    @property
    def current_question(self) -> TriviaQuestion:
        return self.questions[self.current_index]

    @property
    def current_resolved(self) -> bool:
        return self.current_index < len(self.answered)


class SessionEngine:
    """Owns question progression, the countdown, scoring and the answer log.

    All operations are synchronous. Timer callbacks capture the generation of
    the session that scheduled them and do nothing once a newer session (or
    a restart) has replaced it.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        feedback: SessionFeedback | None = None,
        rng: random.Random | None = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        advance_delay_ms: int = ADVANCE_DELAY_MS,
    ) -> None:
        self._scheduler = scheduler
        self._feedback = feedback or SessionFeedback()
        self._shuffle_rng = rng or random.Random()
        self._tick_interval_ms = tick_interval_ms
        self._advance_delay_ms = advance_delay_ms

        self._state: _SessionState | None = None
        self._empty_config: SessionConfig | None = None
        self._generation: int = 0
        self._tick_handle: TimerHandle | None = None
        self._advance_handle: TimerHandle | None = None

        self._state_listeners: list[StateListener] = []
        self._restart_listeners: list[RestartListener] = []

    # --- Listeners ---

    def add_state_listener(self, listener: StateListener) -> None:
        self._state_listeners.append(listener)

    def add_restart_listener(self, listener: RestartListener) -> None:
        self._restart_listeners.append(listener)

    # --- Lifecycle ---

    def initialize(
        self,
        questions: Sequence[TriviaQuestion] | None,
        config: SessionConfig | None = None,
    ) -> SessionSnapshot:
        """Start a new attempt, replacing any session that is still running.

        An empty or missing question list puts the engine in the
        ``NO_QUESTIONS`` phase. Malformed questions or a non-positive
        question time raise ``SessionInputError`` and leave the current
        session untouched.
        """
        config = config or SessionConfig()
        if config.question_time_seconds <= 0:
            raise SessionInputError("Question time must be a positive number of seconds.")

        prepared = tuple(questions or ())
        for position, question in enumerate(prepared, start=1):
            self._validate_question(position, question)

        self._cancel_timers()
        self._generation += 1

        if not prepared:
            logger.info("No questions available for %s; showing empty state", config.display_name)
            self._state = None
            self._empty_config = config
            return self._publish()

        self._empty_config = None
        self._state = _SessionState(
            generation=self._generation,
            config=config,
            questions=prepared,
            answer_set=build_answer_set(self._shuffle_rng, prepared[0]),
            remaining_seconds=config.question_time_seconds,
        )
        logger.info(
            "Session %d started for %s with %d question(s)",
            self._generation,
            config.display_name,
            len(prepared),
        )
        self._start_tick_timer()
        return self._publish()

    def restart(self) -> None:
        """Discard the session and ask listeners to return to question selection."""
        self._cancel_timers()
        self._generation += 1
        self._state = None
        self._empty_config = None
        logger.info("Session discarded; returning to question selection")
        self._publish()
        for listener in list(self._restart_listeners):
            listener()

    def shutdown(self) -> None:
        """Stop all timers without notifying anyone (used when the window closes)."""
        self._cancel_timers()
        self._generation += 1

    # --- Operations ---

    def tick(self) -> bool:
        """Advance the countdown by one second. Returns False when ignored."""
        state = self._state
        if state is None or self._phase_of(state) is not SessionPhase.AWAITING_ANSWER:
            return False
        if state.remaining_seconds <= 0:
            return False

        state.remaining_seconds -= 1
        self._feedback.on_tick(state.remaining_seconds)
        if state.remaining_seconds == 0:
            logger.debug("Time expired on question %d", state.current_index + 1)
            self._resolve(state, None)
        else:
            self._publish()
        return True

    def select_answer(self, answer: str) -> bool:
        """Resolve the current question with ``answer``. Returns False when ignored."""
        state = self._state
        if state is None or self._phase_of(state) is not SessionPhase.AWAITING_ANSWER:
            logger.debug("Ignored answer %r: input not accepted", answer)
            return False
        self._resolve(state, answer)
        return True

    def select_by_ordinal(self, ordinal: int) -> bool:
        """Select the answer shown at 1-based position ``ordinal``."""
        state = self._state
        if state is None or not 1 <= ordinal <= len(state.answer_set):
            return False
        return self.select_answer(state.answer_set[ordinal - 1])

    def resubmit_selection(self) -> bool:
        state = self._state
        if state is None or state.selected_answer is None:
            return False
        return self.select_answer(state.selected_answer)

    def navigate_forward(self) -> bool:
        """Skip the advance delay, or step forward from a reviewed question."""
        state = self._state
        if state is None or state.completed or not state.current_resolved:
            return False
        if state.current_index + 1 >= len(state.questions):
            return False
        self._move_to(state, state.current_index + 1)
        return True

    def navigate_backward(self) -> bool:
        """Revisit the previous question. Recorded answers stay as they are.

        Ignored while an answer is locked in and waiting for the advance delay.
        """
        state = self._state
        if state is None or state.completed or state.input_locked:
            return False
        if state.current_index <= 0:
            return False
        self._move_to(state, state.current_index - 1)
        return True

    # --- Queries ---

    def get_phase(self) -> SessionPhase:
        if self._state is None:
            return SessionPhase.NO_QUESTIONS if self._empty_config else SessionPhase.IDLE
        return self._phase_of(self._state)

    def is_completed(self) -> bool:
        return self._state is not None and self._state.completed

    def get_generation(self) -> int:
        return self._generation

    def get_current_question(self) -> TriviaQuestion | None:
        if self._state is None:
            return None
        return self._state.current_question

    def get_answer_set(self) -> tuple[str, ...]:
        return self._state.answer_set if self._state else ()

    def get_score(self) -> int:
        return self._state.score if self._state else 0

    def get_answered(self) -> list[AnsweredRecord]:
        return list(self._state.answered) if self._state else []

    def get_remaining_seconds(self) -> int:
        return self._state.remaining_seconds if self._state else 0

    def snapshot(self) -> SessionSnapshot:
        state = self._state
        if state is None:
            return SessionSnapshot(
                phase=self.get_phase(),
                config=self._empty_config or SessionConfig(),
            )

        question = state.current_question
        return SessionSnapshot(
            phase=self._phase_of(state),
            config=state.config,
            question_index=state.current_index,
            question_count=len(state.questions),
            question_text=question.text,
            question_category=category_label_for_id(question.category_id),
            answers=state.answer_set,
            selected_answer=state.selected_answer,
            correct_answer=question.correct_answer if state.selected_answer is not None else None,
            remaining_seconds=state.remaining_seconds,
            score=state.score,
            answered=tuple(state.answered),
            input_locked=state.input_locked,
        )

    def summary(self) -> SessionSummary | None:
        """Return the final result, or None while the session is not completed."""
        state = self._state
        if state is None or not state.completed:
            return None
        return SessionSummary(
            participant_name=state.config.display_name,
            difficulty_label=state.config.difficulty_label,
            category_label=state.config.category_label,
            score=state.score,
            question_count=len(state.questions),
            records=tuple(state.answered),
        )

    # --- Internals ---

    @staticmethod
    def _validate_question(position: int, question: object) -> None:
        if not isinstance(question, TriviaQuestion):
            raise SessionInputError(f"Question {position} is not a trivia question.")
        if not isinstance(question.correct_answer, str) or not question.correct_answer.strip():
            raise SessionInputError(f"Question {position} has no correct answer.")
        if not isinstance(question.text, str):
            raise SessionInputError(f"Question {position} has no question text.")

    @staticmethod
    def _phase_of(state: _SessionState) -> SessionPhase:
        if state.completed:
            return SessionPhase.COMPLETED
        if state.input_locked:
            return SessionPhase.LOCKED
        if state.current_resolved:
            return SessionPhase.REVIEWING
        return SessionPhase.AWAITING_ANSWER

    def _resolve(self, state: _SessionState, answer: str | None) -> None:
        question = state.current_question
        is_correct = answer is not None and answer == question.correct_answer
        selected = answer if answer is not None else NO_ANSWER_TEXT

        state.selected_answer = selected
        state.input_locked = True
        state.answered.append(
            AnsweredRecord(
                question_text=question.text,
                selected_answer=selected,
                correct_answer=question.correct_answer,
                is_correct=is_correct,
            )
        )
        if is_correct:
            state.score += 1
        self._cancel_tick_timer()

        logger.debug(
            "Question %d resolved: %r (%s)",
            state.current_index + 1,
            selected,
            "correct" if is_correct else "incorrect",
        )
        self._feedback.on_answer(is_correct)
        self._feedback.vibrate(vibration_pattern_for(is_correct))

        self._advance_handle = self._scheduler.call_later(
            self._advance_delay_ms,
            partial(self._on_advance_timer, state.generation),
        )
        self._publish()

    def _advance(self, state: _SessionState) -> None:
        if state.current_index + 1 < len(state.questions):
            self._move_to(state, state.current_index + 1)
            return

        self._cancel_timers()
        state.completed = True
        state.input_locked = False
        logger.info(
            "Session %d completed: %d/%d correct",
            state.generation,
            state.score,
            len(state.questions),
        )
        self._publish()

    def _move_to(self, state: _SessionState, index: int) -> None:
        self._cancel_timers()
        state.current_index = index
        state.selected_answer = None
        state.input_locked = False
        state.remaining_seconds = state.config.question_time_seconds
        state.answer_set = build_answer_set(self._shuffle_rng, state.current_question)
        if not state.current_resolved:
            self._start_tick_timer()
        self._publish()

    def _on_tick_timer(self, generation: int) -> None:
        if generation != self._generation:
            return
        self.tick()

    def _on_advance_timer(self, generation: int) -> None:
        state = self._state
        if generation != self._generation or state is None:
            return
        self._advance_handle = None
        if state.input_locked:
            self._advance(state)

    def _start_tick_timer(self) -> None:
        self._cancel_tick_timer()
        self._tick_handle = self._scheduler.call_every(
            self._tick_interval_ms,
            partial(self._on_tick_timer, self._generation),
        )

    def _cancel_tick_timer(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _cancel_timers(self) -> None:
        self._cancel_tick_timer()
        if self._advance_handle is not None:
            self._advance_handle.cancel()
            self._advance_handle = None

    def _publish(self) -> SessionSnapshot:
        snapshot = self.snapshot()
        for listener in list(self._state_listeners):
            listener(snapshot)
        return snapshot
