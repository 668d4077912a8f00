"""Theme definitions for emoji-banner.

A theme can replace the user's emoji with a fixed palette and the
intensity-based fill rule. Available themes:
- default: no override, the user's emoji and fill mode are used
- github: contribution-graph look, five levels from empty to dense green

Palette index 0 is the background level; indices 1-4 are foreground
intensity levels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import UnknownThemeError


@dataclass(frozen=True)
class ThemeDef:
    """Palette and background for one theme."""
    palette: tuple[str, ...] = ()
    background: Optional[str] = None

    @property
    def overrides_palette(self) -> bool:
        return bool(self.palette)


# =============================================================================
# Theme Definitions
# =============================================================================

THEMES: dict[str, ThemeDef] = {
    "default": ThemeDef(),

    # GitHub - levels 0 (none) to 4 (busiest day)
    "github": ThemeDef(
        palette=(
            "⬜",  # 0 - background
            "🌱",  # 1
            "🌿",  # 2
            "🟢",  # 3
            "🟩",  # 4
        ),
        background="⬜",
    ),
}

DEFAULT_THEME = "default"

# Plain space; the renderer pads it to the cell width.
DEFAULT_BACKGROUND = " "


def get_available_themes() -> list[str]:
    """Get list of available theme names."""
    return list(THEMES.keys())


def get_theme(theme_name: str) -> ThemeDef:
    """Look up a theme, raising UnknownThemeError for unknown names."""
    try:
        return THEMES[theme_name]
    except KeyError:
        raise UnknownThemeError(theme_name, get_available_themes()) from None


def get_theme_palette(theme_name: str) -> tuple[str, ...]:
    """Fixed palette of a theme; empty when the theme keeps user emoji."""
    return get_theme(theme_name).palette


def get_theme_background(theme_name: str) -> Optional[str]:
    """Background emoji a theme prefers, if any."""
    return get_theme(theme_name).background


def get_default_background() -> str:
    return DEFAULT_BACKGROUND
