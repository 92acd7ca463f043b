"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow, QDialog {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: #FFFFFF;
                border: none;
                border-radius: 8px;
                padding: 8px 16px;
                font-weight: 600;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.GLOW.get(theme)};
                color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 8px;
            }}
            QProgressBar {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: none;
                border-radius: 5px;
                max-height: 10px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.GLOW.get(theme)};
                border-radius: 5px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_timer_style(warning: bool, blink_state: bool = False, theme: Theme = Theme.DARK) -> str:
        base = "font-size: 24pt; font-weight: bold; padding: 2px 8px; border-radius: 6px;"
        if not warning:
            return base + f" color: {ColorPalette.GLOW.get(theme)};"
        background = ColorPalette.ERROR.get(theme) if blink_state else ColorPalette.WARNING.get(theme)
        return base + f" color: #FFFFFF; background-color: {background};"

    @staticmethod
    def get_feedback_title_style(is_correct: bool, theme: Theme = Theme.DARK) -> str:
        color = ColorPalette.SUCCESS.get(theme) if is_correct else ColorPalette.ERROR.get(theme)
        return f"font-size: 22pt; font-weight: bold; color: {color};"

    @staticmethod
    def get_option_style(selected: bool, theme: Theme = Theme.DARK) -> str:
        if selected:
            return (
                f"text-align: left; padding: 10px; border: 2px solid {ColorPalette.GLOW.get(theme)};"
                f" background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};"
                f" color: {ColorPalette.TEXT_PRIMARY.get(theme)}; font-weight: bold;"
            )
        return (
            f"text-align: left; padding: 10px; border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};"
            f" background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};"
            f" color: {ColorPalette.TEXT_SECONDARY.get(theme)}; font-weight: normal;"
        )
