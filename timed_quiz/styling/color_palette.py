"""Color palette for TimedQuiz supporting light and dark themes."""

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

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#1B1B1B",      # Near black
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#5F6368",      # Slate gray
        dark="#B0B0B0"        # Silver
    )

    TEXT_DISABLED = ThemeColors(
        light="#BDBDBD",
        dark="#5A5A5A"
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FAFAFA",
        dark="#1E1E1E"
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#EFEFEF",
        dark="#2D2D2D"
    )

    # Status colors
    SUCCESS = ThemeColors(
        light="#107C10",      # Green
        dark="#6FCF6F"        # Light Green
    )

    WARNING = ThemeColors(
        light="#B91C1C",      # Deep red
        dark="#EF4444"        # Red
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",
        dark="#555555"
    )

    BORDER_FOCUS = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"        # Lighter Blue
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#0078D4",
        dark="#4A9EFF"
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F0F0F0",
        dark="#3A3A3A"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E1E1E1",
        dark="#505050"
    )
