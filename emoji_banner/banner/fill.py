"""
Fill strategies - decide which emoji occupies each foreground cell.

Two palette variants are resolved once per render:
- UserPalette: the user's emoji, picked by FillMode
- ThemePalette: a theme's fixed palette, picked by clustered intensity

Both draw from the SeededRandom handed to them, so the whole render is
reproducible for a fixed seed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Union

from ..core.rng import SeededRandom
from ..core.themes import get_theme
from .models import FillConfig, FillMode

# Theme intensity levels. Level 0 is the background; foreground uses 1-4.
INTENSITY_LEVELS = 5
SPATIAL_WEIGHT = 0.3
SPATIAL_FREQUENCY = 0.5


def _gradient_index(position: int, total: int, count: int) -> int:
    progress = position / (total - 1) if total > 1 else 0.0
    return min(int(math.floor(progress * (count - 1))), count - 1)


_Selector = Callable[[Sequence[str], int, int, int, int, SeededRandom], int]

_SELECTORS: dict[FillMode, _Selector] = {
    FillMode.RANDOM: lambda e, r, c, tr, tc, rng: rng.next_int(len(e)),
    FillMode.ROW: lambda e, r, c, tr, tc, rng: r % len(e),
    FillMode.COLUMN: lambda e, r, c, tr, tc, rng: c % len(e),
    FillMode.ROW_GRADIENT: lambda e, r, c, tr, tc, rng: _gradient_index(r, tr, len(e)),
    FillMode.COLUMN_GRADIENT: lambda e, r, c, tr, tc, rng: _gradient_index(c, tc, len(e)),
}


def select_emoji(
    emojis: Sequence[str],
    row: int,
    col: int,
    total_rows: int,
    total_cols: int,
    mode: Union[FillMode, str],
    random: SeededRandom,
) -> str:
    """
    Pick the emoji for one foreground cell.

    A single candidate is always returned as-is. Unknown modes fall back to
    the first candidate.
    """
    if len(emojis) == 1:
        return emojis[0]

    selector = _SELECTORS.get(FillMode.parse(mode))
    if selector is None:
        return emojis[0]
    return emojis[selector(emojis, row, col, total_rows, total_cols, random)]


def theme_intensity(
    row: int,
    col: int,
    total_rows: int,
    total_cols: int,
    random: SeededRandom,
) -> int:
    """
    Contribution-graph style intensity level (1-4) for a foreground cell.

    A random draw plus a smooth sin/cos term, so neighbouring cells tend to
    share a level instead of looking like uniform noise.
    """
    base = random.next()
    spatial = math.sin(row * SPATIAL_FREQUENCY) * math.cos(col * SPATIAL_FREQUENCY) * SPATIAL_WEIGHT
    combined = base + spatial

    if combined < 0.25:
        return 1
    if combined < 0.5:
        return 2
    if combined < 0.75:
        return 3
    return 4


# =============================================================================
# Palette variants
# =============================================================================

@dataclass(frozen=True)
class UserPalette:
    """User-supplied candidates picked by fill mode."""
    emojis: tuple[str, ...]
    mode: Union[FillMode, str] = FillMode.RANDOM

    @property
    def samples(self) -> tuple[str, ...]:
        return self.emojis

    def pick(self, row: int, col: int, total_rows: int, total_cols: int, random: SeededRandom) -> str:
        return select_emoji(self.emojis, row, col, total_rows, total_cols, self.mode, random)


@dataclass(frozen=True)
class ThemePalette:
    """Fixed theme palette picked by intensity level."""
    palette: tuple[str, ...]

    def __post_init__(self):
        if len(self.palette) < INTENSITY_LEVELS:
            raise ValueError(f"theme palette needs {INTENSITY_LEVELS} levels, got {len(self.palette)}")

    @property
    def samples(self) -> tuple[str, ...]:
        return self.palette

    def pick(self, row: int, col: int, total_rows: int, total_cols: int, random: SeededRandom) -> str:
        return self.palette[theme_intensity(row, col, total_rows, total_cols, random)]


Palette = Union[UserPalette, ThemePalette]


def resolve_palette(config: FillConfig) -> Palette:
    """Theme palette when the theme defines one, otherwise the user's emoji."""
    theme = get_theme(config.theme)
    if theme.overrides_palette:
        return ThemePalette(theme.palette)
    return UserPalette(config.emojis, config.mode)
