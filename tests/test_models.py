"""
Tests for catalog lookups and session configuration defaults.
"""

import pytest

from trivia_app.core.models import (
    Difficulty,
    SessionConfig,
    SessionPhase,
    category_id_for_label,
    category_label_for_id,
)


@pytest.mark.parametrize(
    "label,expected",
    [
        ("beginner", Difficulty.BEGINNER),
        ("Intermediate", Difficulty.INTERMEDIATE),
        (" EXPERT ", Difficulty.EXPERT),
    ],
)
def test_difficulty_from_label(label, expected):
    assert Difficulty.from_label(label) is expected


def test_difficulty_service_levels():
    assert [d.service_level for d in Difficulty] == ["easy", "medium", "hard"]
    assert Difficulty.INTERMEDIATE.label == "Intermediate"


def test_unknown_difficulty():
    with pytest.raises(ValueError, match="Invalid difficulty"):
        Difficulty.from_label("legendary")


@pytest.mark.parametrize(
    "label,expected",
    [("General", 9), ("science", 17), ("HISTORY", 23), ("Sports", 21)],
)
def test_category_lookup_is_case_insensitive(label, expected):
    assert category_id_for_label(label) == expected


def test_unknown_category():
    with pytest.raises(ValueError, match="Invalid category"):
        category_id_for_label("Cooking")


def test_category_label_falls_back_to_id():
    assert category_label_for_id(17) == "Science"
    assert category_label_for_id(31) == "31"


def test_session_config_display_defaults():
    config = SessionConfig(participant_name="   ")
    assert config.display_name == "Guest"
    assert config.difficulty_label == "Not selected"
    assert config.category_label == "Not selected"
    assert config.question_time_seconds == 15


def test_phase_in_progress():
    assert SessionPhase.LOCKED.in_progress
    assert SessionPhase.REVIEWING.in_progress
    assert not SessionPhase.COMPLETED.in_progress
    assert not SessionPhase.NO_QUESTIONS.in_progress
