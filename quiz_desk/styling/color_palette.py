"""Color palette for QuizDesk supporting light and dark themes."""

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

    TEXT_PRIMARY = ThemeColors(light="#1B1B1B", dark="#F5F5F5")
    TEXT_MUTED = ThemeColors(light="#5F5F5F", dark="#A8A8A8")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_INPUT = ThemeColors(light="#FAFAFA", dark="#2D2D2D")

    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")

    BUTTON_BG = ThemeColors(light="#F0F0F0", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E2E2E2", dark="#505050")
    BUTTON_DEFAULT_BG = ThemeColors(light="#0078D4", dark="#4A9EFF")
    BUTTON_DEFAULT_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")

    TIMER_CHUNK = ThemeColors(light="#00B294", dark="#00D9B5")
