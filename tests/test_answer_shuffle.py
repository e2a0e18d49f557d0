"""
Tests for answer shuffling and HTML entity decoding.
"""

import random

import pytest

from conftest import make_question
from trivia_app.core.answer_shuffle import build_answer_set, shuffle
from trivia_app.core.text_decoding import decode_all, decode_entities


def test_shuffle_returns_new_permutation():
    items = ["a", "b", "c", "d"]
    result = shuffle(random.Random(3), items)

    assert sorted(result) == items
    assert items == ["a", "b", "c", "d"]


def test_shuffle_is_deterministic_with_seeded_source():
    items = list(range(10))
    assert shuffle(random.Random(42), items) == shuffle(random.Random(42), items)


@pytest.mark.parametrize("seed", range(20))
def test_answer_set_membership(seed):
    question = make_question("Q?", "Right", ("W1", "W2", "W3"))
    answers = build_answer_set(random.Random(seed), question)

    assert len(answers) == 4
    assert set(answers) == {"Right", "W1", "W2", "W3"}
    assert answers.count("Right") == 1


def test_every_position_reachable():
    question = make_question("Q?", "Right", ("W1", "W2", "W3"))
    rng = random.Random(0)
    positions = {build_answer_set(rng, question).index("Right") for _ in range(200)}
    assert positions == {0, 1, 2, 3}


DECODE_CASES = [
    ("Who wrote &quot;Hamlet&quot;?", 'Who wrote "Hamlet"?'),
    ("Don&#039;t panic", "Don't panic"),
    ("Science &amp; Nature", "Science & Nature"),
    ("Pok&eacute;mon", "Pokémon"),
    ("&lt;b&gt;", "<b>"),
    ("No entities here", "No entities here"),
]


@pytest.mark.parametrize("raw,expected", DECODE_CASES)
def test_decode_entities(raw, expected):
    assert decode_entities(raw) == expected


@pytest.mark.parametrize("raw,expected", DECODE_CASES[:4])
def test_decoding_twice_is_harmless_for_trivia_text(raw, expected):
    assert decode_entities(decode_entities(raw)) == expected


def test_decode_all_returns_tuple():
    assert decode_all(["A&amp;B", "C"]) == ("A&B", "C")
