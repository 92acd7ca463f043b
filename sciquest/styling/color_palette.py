"""Color palette for SciQuest supporting light and dark themes."""

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
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#1E1033",      # Ink
        dark="#F5F7FF"        # Near white
    )

    TEXT_SECONDARY = ThemeColors(
        light="#5B4B73",
        dark="#9CA3AF"        # Gray 400
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#F7F4FC",
        dark="#1A1033"        # Deep purple
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#ECE6F7",
        dark="#2D1B54"        # Mid purple
    )

    BORDER_PRIMARY = ThemeColors(
        light="#C9B8E8",
        dark="#5B3F99"        # Light purple
    )

    ACCENT_PRIMARY = ThemeColors(
        light="#7C3AED",
        dark="#8B5CF6"
    )

    GLOW = ThemeColors(
        light="#0E7490",
        dark="#67E8F9"        # Cyan glow
    )

    SUCCESS = ThemeColors(
        light="#15803D",
        dark="#4ADE80"
    )

    ERROR = ThemeColors(
        light="#B91C1C",
        dark="#EF4444"
    )

    WARNING = ThemeColors(
        light="#B45309",
        dark="#FACC15"
    )

    CELL_IDLE = ThemeColors(
        light="#DDD3F0",
        dark="#3B2470"
    )

    CELL_SELECTED = ThemeColors(
        light="#22D3EE",
        dark="#67E8F9"
    )
