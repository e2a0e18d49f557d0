"""Color palette for TriviaQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#18181B",      # Zinc 900
        dark="#FFFFFF"
    )

    TEXT_MUTED = ThemeColors(
        light="#52525B",      # Zinc 600
        dark="#A1A1AA"        # Zinc 400
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FAFAFA",
        dark="#18181B"        # Zinc 900
    )

    BACKGROUND_CARD = ThemeColors(
        light="#F4F4F5",
        dark="#27272A"        # Zinc 800
    )

    ANSWER_BG = ThemeColors(
        light="#E4E4E7",
        dark="#3F3F46"        # Zinc 700
    )

    ANSWER_HOVER_BG = ThemeColors(
        light="#C7D2FE",
        dark="#4F46E5"        # Indigo 600
    )

    ACCENT_PRIMARY = ThemeColors(
        light="#A855F7",      # Purple 500
        dark="#A855F7"
    )

    ACCENT_SECONDARY = ThemeColors(
        light="#EC4899",      # Pink 500
        dark="#EC4899"
    )

    SUCCESS = ThemeColors(
        light="#15803D",
        dark="#4ADE80"        # Green 400
    )

    SUCCESS_BG = ThemeColors(
        light="#DCFCE7",
        dark="#14532D"
    )

    ERROR = ThemeColors(
        light="#B91C1C",
        dark="#F87171"        # Red 400
    )

    ERROR_BG = ThemeColors(
        light="#FEE2E2",
        dark="#7F1D1D"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D4D4D8",
        dark="#52525B"
    )
