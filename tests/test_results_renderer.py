"""
Tests for the end-of-quiz summary rendering.
"""

from trivia_app.core.models import AnsweredRecord, SessionSummary
from trivia_app.core.results_renderer import escape_markdown, renderer, summary_to_markdown


def make_summary():
    return SessionSummary(
        participant_name="Ada",
        difficulty_label="Expert",
        category_label="Science",
        score=1,
        question_count=2,
        records=(
            AnsweredRecord("What is 2 * 3?", "6", "6", True),
            AnsweredRecord("Symbol for <gold>?", "No answer", "Au", False),
        ),
    )


def test_markdown_lists_header_and_every_record():
    markdown = summary_to_markdown(make_summary())

    assert "Quiz Results, Ada" in markdown
    assert "**Score:** 1 / 2" in markdown
    assert "**Question 1:**" in markdown
    assert "**Question 2:**" in markdown
    assert markdown.count("**Result:** Correct") == 1
    assert markdown.count("**Result:** Incorrect") == 1


def test_html_fragment_escapes_question_markup():
    html = renderer.render_fragment(make_summary())

    assert "<h2>" in html
    assert "&lt;gold&gt;" in html
    assert "<gold>" not in html
    assert "What is 2 * 3?" in html
    assert "Your Answer:</strong> No answer" in html


def test_escape_markdown():
    assert escape_markdown("*bold* & [link]") == "\\*bold\\* \\& \\[link\\]"
    assert escape_markdown("plain words") == "plain words"


def test_summary_percentage():
    assert make_summary().percentage == 50.0
    empty = SessionSummary("Guest", "Not selected", "Not selected", 0, 0, ())
    assert empty.percentage == 0.0
