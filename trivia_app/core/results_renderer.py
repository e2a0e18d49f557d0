"""Markdown rendering of the end-of-quiz summary.

Architecture note:
    The summary is first written as markdown and then converted with
    markdown-it, so the same text can be logged, copied to the clipboard or
    shown as HTML inside a ``QTextBrowser``. Question text comes from an
    external service, so raw HTML in it is never interpreted.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from trivia_app.core.models import SessionSummary

_MARKDOWN_SPECIAL = "\\`*_{}[]<>()#+-.!|&"


def escape_markdown(text: str) -> str:
    return "".join(f"\\{char}" if char in _MARKDOWN_SPECIAL else char for char in text)


def summary_to_markdown(summary: SessionSummary) -> str:
    lines = [
        f"## Quiz Results, {escape_markdown(summary.participant_name)}",
        "",
        f"**Difficulty:** {escape_markdown(summary.difficulty_label)}  ",
        f"**Category:** {escape_markdown(summary.category_label)}  ",
        f"**Score:** {summary.score} / {summary.question_count}",
        "",
        "### Your Answers",
    ]
    for number, record in enumerate(summary.records, start=1):
        result = "Correct" if record.is_correct else "Incorrect"
        lines.extend(
            [
                "",
                f"**Question {number}:** {escape_markdown(record.question_text)}  ",
                f"**Your Answer:** {escape_markdown(record.selected_answer)}  ",
                f"**Correct Answer:** {escape_markdown(record.correct_answer)}  ",
                f"**Result:** {result}",
            ]
        )
    return "\n".join(lines)


@dataclass(slots=True)
class ResultsRenderer:
    """Converts session summaries into HTML fragments."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": False})

    def render_fragment(self, summary: SessionSummary) -> str:
        return self._markdown.render(summary_to_markdown(summary))


renderer = ResultsRenderer()
# Shared instance; the Qt UI renders from the main thread only.
