"""Centralized styles and font definitions for the application."""

from enum import Enum, auto

from .color_palette import ColorPalette, Theme


class AnswerHighlight(Enum):
    """Visual state of an answer button."""
    NEUTRAL = auto()
    CORRECT = auto()
    INCORRECT = auto()


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Poppins', 'Segoe UI', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: #FFFFFF;
                border: none;
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: 600;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.ACCENT_SECONDARY.get(theme)};
            }}
            QLineEdit, QComboBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QProgressBar {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: none;
                border-radius: 4px;
                height: 8px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_title_style(theme: Theme = Theme.DARK) -> str:
        return f"font-size: 28pt; font-weight: bold; color: {ColorPalette.ACCENT_PRIMARY.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.DARK) -> str:
        return (
            f"color: {ColorPalette.ERROR.get(theme)}; "
            f"background-color: {ColorPalette.ERROR_BG.get(theme)}; "
            "padding: 6px; border-radius: 4px;"
        )

    @staticmethod
    def get_answer_button_style(
        highlight: AnswerHighlight = AnswerHighlight.NEUTRAL,
        theme: Theme = Theme.DARK,
    ) -> str:
        if highlight is AnswerHighlight.CORRECT:
            border = ColorPalette.SUCCESS.get(theme)
            background = ColorPalette.SUCCESS_BG.get(theme)
        elif highlight is AnswerHighlight.INCORRECT:
            border = ColorPalette.ERROR.get(theme)
            background = ColorPalette.ERROR_BG.get(theme)
        else:
            border = ColorPalette.BORDER_PRIMARY.get(theme)
            background = ColorPalette.ANSWER_BG.get(theme)
        return f"""
            QPushButton {{
                text-align: left;
                background-color: {background};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {border};
                border-radius: 8px;
                padding: 12px 16px;
                font-weight: 500;
            }}
            QPushButton:hover:enabled {{
                background-color: {ColorPalette.ANSWER_HOVER_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_timer_label_style(urgent: bool, theme: Theme = Theme.DARK) -> str:
        base_style = "padding: 2px 6px; border-radius: 4px; font-weight: bold;"
        if not urgent:
            return base_style
        return base_style + f" color: #FFFFFF; background-color: {ColorPalette.ERROR.get(theme)};"
