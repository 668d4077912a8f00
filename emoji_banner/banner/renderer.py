"""
Banner renderer - turns a bitmap into aligned rows of emoji.

Every cell is padded to one uniform display width, anchored to the widest
foreground candidate (never less than 2). A background or border glyph that
does not fit a cell is replaced by blank padding of the cell width.
"""

from __future__ import annotations

from typing import Callable

from ..core.rng import SeededRandom
from ..core.themes import get_default_background, get_theme_background
from ..core.width import display_width, fit_to_width
from .bitmap import as_bitmap, bitmap_dimensions
from .fill import resolve_palette
from .models import BannerResult, Bitmap, FillConfig

MIN_CELL_WIDTH = 2


def cell_width_for(samples: tuple[str, ...]) -> int:
    """Uniform cell width for a set of foreground emoji."""
    return max(max((display_width(s) for s in samples), default=0), MIN_CELL_WIDTH)


def resolve_background(config: FillConfig) -> str:
    """Explicit background, else the theme's, else the generic default."""
    return config.background or get_theme_background(config.theme) or get_default_background()


def render(bitmap: Bitmap, config: FillConfig) -> BannerResult:
    """Render a bitmap to emoji text."""
    bitmap = as_bitmap(bitmap)
    palette = resolve_palette(config)
    background = resolve_background(config)

    cell_width = cell_width_for(palette.samples)
    padded_background = fit_to_width(background, cell_width)

    width, height = bitmap_dimensions(bitmap)

    # One generator per render; draws advance across the whole grid
    random = SeededRandom(config.seed)

    lines: list[str] = []
    for row in range(height):
        cells: list[str] = []
        for col in range(width):
            if bitmap[row, col]:
                emoji = palette.pick(row, col, height, width, random)
                cells.append(fit_to_width(emoji, cell_width))
            else:
                cells.append(padded_background)
        lines.append("".join(cells))

    if config.border:
        lines = add_border(lines, fit_to_width(config.border, cell_width), width)

    return BannerResult(
        text="\n".join(lines),
        background_emoji=background,
        bitmap=bitmap,
        width=width,
        height=height,
        border_emoji=config.border,
    )


def add_border(lines: list[str], border_cell: str, columns: int) -> list[str]:
    """Surround rendered rows with a one-cell frame."""
    edge = border_cell * (columns + 2)
    return [edge] + [border_cell + line + border_cell for line in lines] + [edge]


def render_custom(bitmap: Bitmap, selector: Callable[[int, int, bool], str]) -> str:
    """Render with a caller-supplied ``selector(row, col, is_foreground)``."""
    bitmap = as_bitmap(bitmap)
    width, height = bitmap_dimensions(bitmap)
    return "\n".join(
        "".join(selector(row, col, bool(bitmap[row, col])) for col in range(width))
        for row in range(height)
    )
