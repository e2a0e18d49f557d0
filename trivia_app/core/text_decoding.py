"""HTML entity decoding for text delivered by the trivia service."""

from __future__ import annotations

import html


def decode_entities(text: str) -> str:
    """Decode HTML entities such as ``&quot;`` and ``&#039;`` into characters.

    Decoding runs once when a question enters the application, so every
    comparison, record and display works on the decoded form. Text without
    entities is returned unchanged, which makes a second pass harmless for
    the characters trivia payloads use.
    """
    if "&" not in text:
        return text
    return html.unescape(text)


def decode_all(values: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    return tuple(decode_entities(value) for value in values)
