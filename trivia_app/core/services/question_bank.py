"""Service holding the imported question pool and drawing question sets from it."""

from __future__ import annotations

import logging
import random

from trivia_app.constants.quiz_constants import DEFAULT_QUESTION_COUNT
from trivia_app.core.answer_shuffle import shuffle
from trivia_app.core.models import Difficulty, TriviaQuestion

logger = logging.getLogger(__name__)


class QuestionBankExhaustedError(Exception):
    """Raised when every matching question has already been served.

    The bank forgets what it served for that selection before raising, so the
    next draw starts over.
    """


class QuestionBank:
    """Manages the question pool and remembers which questions were served."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._questions: list[TriviaQuestion] = []
        self._served: set[TriviaQuestion] = set()
        self._rng = rng or random.Random()

    def load_questions(self, questions: list[TriviaQuestion]) -> None:
        """Replace the pool. Duplicate questions are kept once."""
        unique: dict[TriviaQuestion, None] = dict.fromkeys(questions)
        self._questions = list(unique)
        self._served.clear()
        logger.info("Question bank loaded with %d question(s)", len(self._questions))

    def get_question_count(self) -> int:
        return len(self._questions)

    def has_questions(self) -> bool:
        return bool(self._questions)

    def clear(self) -> None:
        self._questions = []
        self._served.clear()

    def reset_served(self) -> None:
        self._served.clear()

    def count_matching(self, category_id: int, difficulty: Difficulty) -> int:
        return len(self._matching(category_id, difficulty))

    def draw(
        self,
        category_id: int,
        difficulty: Difficulty,
        amount: int = DEFAULT_QUESTION_COUNT,
    ) -> list[TriviaQuestion]:
        """Return up to ``amount`` unseen questions for the selection.

        An empty list means nothing in the pool matches. When matching
        questions exist but all were served already, the served memory for
        them is dropped and ``QuestionBankExhaustedError`` is raised.
        """
        if amount <= 0:
            raise ValueError("Amount must be a positive integer.")

        matching = self._matching(category_id, difficulty)
        if not matching:
            logger.info(
                "No questions for category %s at %s level",
                category_id,
                difficulty.service_level,
            )
            return []

        unseen = [question for question in matching if question not in self._served]
        if not unseen:
            self._served.difference_update(matching)
            raise QuestionBankExhaustedError(
                "Session token was exhausted. Please try again."
            )

        drawn = shuffle(self._rng, unseen)[:amount]
        self._served.update(drawn)
        logger.info(
            "Drew %d question(s) for category %s at %s level",
            len(drawn),
            category_id,
            difficulty.service_level,
        )
        return drawn

    def _matching(self, category_id: int, difficulty: Difficulty) -> list[TriviaQuestion]:
        return [
            question
            for question in self._questions
            if question.category_id == category_id
            and (question.difficulty is None or question.difficulty == difficulty.service_level)
        ]
