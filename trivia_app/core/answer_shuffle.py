"""Helpers for building the shuffled answer list shown for a question."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from trivia_app.core.models import TriviaQuestion

T = TypeVar("T")


def shuffle(rng: random.Random, items: Sequence[T]) -> list[T]:
    """Return a uniformly shuffled copy of ``items`` using the given random source."""
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled


def build_answer_set(rng: random.Random, question: TriviaQuestion) -> tuple[str, ...]:
    """Combine incorrect answers with the correct one and shuffle them."""
    candidates = [*question.incorrect_answers, question.correct_answer]
    return tuple(shuffle(rng, candidates))
