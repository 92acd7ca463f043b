"""Styling module for SciQuest application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
