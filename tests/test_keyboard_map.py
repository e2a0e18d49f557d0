"""
Tests for the key-to-operation mapping table.
"""

import pytest

from trivia_app.core.keyboard_map import (
    KEY_ARROW_LEFT,
    KEY_ARROW_RIGHT,
    KEY_ENTER,
    dispatch_key,
    is_bound_key,
)
from trivia_app.core.models import SessionPhase


def test_digit_selects_answer_by_position(engine, questions, config):
    engine.initialize(questions, config)
    expected = engine.get_answer_set()[1]

    assert dispatch_key(engine, "2") is True
    assert engine.get_answered()[0].selected_answer == expected


@pytest.mark.parametrize("key", ["0", "5", "9"])
def test_digit_out_of_range_is_ignored(engine, questions, config, key):
    engine.initialize(questions, config)
    assert dispatch_key(engine, key) is False
    assert engine.get_answered() == []


@pytest.mark.parametrize("key", ["a", "Escape", "ArrowUp", " ", "", "12"])
def test_unbound_keys_are_ignored(engine, questions, config, key):
    engine.initialize(questions, config)
    assert is_bound_key(key) is False
    assert dispatch_key(engine, key) is False


def test_arrow_right_skips_delay(engine, questions, config):
    engine.initialize(questions, config)
    dispatch_key(engine, "1")

    assert dispatch_key(engine, KEY_ARROW_RIGHT) is True
    assert engine.snapshot().question_index == 1


def test_arrow_left_revisits_previous_question(engine, scheduler, questions, config):
    engine.initialize(questions, config)
    dispatch_key(engine, "1")
    scheduler.advance(1000)

    assert dispatch_key(engine, KEY_ARROW_LEFT) is True
    assert engine.get_phase() is SessionPhase.REVIEWING


def test_enter_without_selection_is_ignored(engine, questions, config):
    engine.initialize(questions, config)
    assert dispatch_key(engine, KEY_ENTER) is False


def test_enter_after_selection_does_not_double_count(engine, questions, config):
    engine.initialize(questions, config)
    dispatch_key(engine, "1")

    assert dispatch_key(engine, KEY_ENTER) is False
    assert len(engine.get_answered()) == 1


def test_keys_before_session_are_ignored(engine):
    for key in ("1", KEY_ARROW_LEFT, KEY_ARROW_RIGHT, KEY_ENTER):
        assert dispatch_key(engine, key) is False
