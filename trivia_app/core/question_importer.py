"""Utilities for importing question sets saved from the trivia service.

File format (JSON, exactly what the service returns):

    {
      "response_code": 0,
      "results": [
        {
          "category": "Science &amp; Nature",
          "type": "multiple",
          "difficulty": "easy",
          "question": "What is the chemical symbol for gold?",
          "correct_answer": "Au",
          "incorrect_answers": ["Ag", "Gd", "Go"]
        }
      ]
    }

A bare list of result objects is accepted as well. ``category`` may be the
service's category name or its numeric id.

Architecture note:
    Text arrives HTML-escaped. Decoding happens exactly once, here, so the
    engine only ever compares and displays decoded strings.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from trivia_app.constants.catalog_constants import CATEGORY_IDS, SERVICE_CATEGORY_NAMES
from trivia_app.core.models import TriviaQuestion
from trivia_app.core.text_decoding import decode_all, decode_entities

logger = logging.getLogger(__name__)

_RESPONSE_MESSAGES: dict[int, str] = {
    1: "No questions available for the requested category and difficulty.",
    2: "The question request contained an invalid parameter.",
    3: "The session token was not found.",
    4: "Session token was exhausted. Please try again.",
    5: "Too many requests; wait a few seconds and try again.",
}


class QuestionImportError(Exception):
    """Raised when a question set cannot be parsed."""


class ServiceQuestion(BaseModel):
    """One result entry as delivered by the trivia service."""

    category: int | str
    type: str = "multiple"
    difficulty: str | None = None
    question: str
    correct_answer: str = Field(min_length=1)
    incorrect_answers: list[str] = Field(default_factory=list)

    @field_validator("correct_answer")
    @classmethod
    def _require_visible_answer(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("correct_answer must not be blank")
        return value


class ServiceResponse(BaseModel):
    response_code: int = 0
    results: list[ServiceQuestion] = Field(default_factory=list)


@dataclass(slots=True)
class ImportedQuestionSet:
    """Container for imported questions and where they came from."""

    source_path: Path | None
    questions: list[TriviaQuestion]


def load_question_set_from_file(file_path: Path) -> ImportedQuestionSet:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuestionImportError(f"Question file is not UTF-8 text: {exc.reason}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuestionImportError(f"Question file is not valid JSON: {exc.msg}") from exc

    questions = parse_question_payload(payload)
    if not questions:
        raise QuestionImportError("Question file did not contain any questions.")
    logger.info("Imported %d question(s) from %s", len(questions), file_path)
    return ImportedQuestionSet(source_path=file_path, questions=questions)


def parse_question_payload(payload: Any) -> list[TriviaQuestion]:
    """Validate a service payload and convert it into decoded questions."""
    if isinstance(payload, list):
        payload = {"response_code": 0, "results": payload}

    try:
        response = ServiceResponse.model_validate(payload)
    except ValidationError as exc:
        raise QuestionImportError(_describe_validation_error(exc)) from exc

    if response.response_code != 0:
        message = _RESPONSE_MESSAGES.get(
            response.response_code, f"API Error: {response.response_code}"
        )
        raise QuestionImportError(message)

    return [_to_question(entry) for entry in response.results]


def resolve_category_id(category: int | str) -> int:
    """Map a service category name, catalog label or numeric id to an id."""
    if isinstance(category, int):
        return category
    cleaned = decode_entities(category).strip()
    if cleaned.isdigit():
        return int(cleaned)
    lowered = cleaned.lower()
    if lowered in SERVICE_CATEGORY_NAMES:
        return SERVICE_CATEGORY_NAMES[lowered]
    if lowered in CATEGORY_IDS:
        return CATEGORY_IDS[lowered]
    raise QuestionImportError(f"Unknown category: '{cleaned}'.")


def _to_question(entry: ServiceQuestion) -> TriviaQuestion:
    return TriviaQuestion(
        text=decode_entities(entry.question).strip(),
        correct_answer=decode_entities(entry.correct_answer),
        incorrect_answers=decode_all(entry.incorrect_answers),
        category_id=resolve_category_id(entry.category),
        difficulty=entry.difficulty.lower() if entry.difficulty else None,
    )


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid question data at '{location}': {first.get('msg', 'invalid value')}"
