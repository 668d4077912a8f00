"""
Bitmap compositing - merges rasterized lines into one trimmed bitmap.

Lines are right-padded to a common width and stacked with ``line_spacing``
blank rows between them. Trimming then drops fully blank rows at the top and
bottom. Columns are never trimmed, so horizontal alignment from the
rasterizer is kept.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import numpy as np

from ..fonts.registry import DEFAULT_FONT_NAME, FontRegistry, PixelFont, get_default_registry
from .models import EMPTY_BITMAP, Bitmap, freeze
from .raster import rasterize_line
from .text import prepare_text


def trim_bitmap(bitmap: Bitmap) -> Bitmap:
    """Remove leading/trailing all-background rows. All-background -> EMPTY_BITMAP."""
    if bitmap.size == 0:
        return EMPTY_BITMAP

    filled = np.flatnonzero(bitmap.any(axis=1))
    if filled.size == 0:
        return EMPTY_BITMAP

    start, end = filled[0], filled[-1] + 1
    return freeze(np.array(bitmap[start:end], dtype=bool))


def compose(lines: Sequence[Bitmap], line_spacing: int) -> Bitmap:
    """
    Stack line bitmaps top to bottom.

    Every line is padded on the right to the widest line, and
    ``line_spacing`` blank rows go between consecutive lines.
    """
    if not lines:
        return EMPTY_BITMAP

    width = max(line.shape[1] for line in lines)
    blocks: list[np.ndarray] = []
    for index, line in enumerate(lines):
        pad = width - line.shape[1]
        blocks.append(np.pad(line, ((0, 0), (0, pad)), constant_values=False) if pad else line)
        if index < len(lines) - 1 and line_spacing > 0:
            blocks.append(np.zeros((line_spacing, width), dtype=bool))

    return trim_bitmap(np.vstack(blocks).astype(bool, copy=False))


def text_to_bitmap(
    text: str,
    font: Union[PixelFont, str, None] = None,
    *,
    vertical: bool = False,
    registry: Optional[FontRegistry] = None,
) -> Bitmap:
    """
    Rasterize ``text`` with ``font``.

    Args:
        text: Raw user text (escapes are decoded)
        font: PixelFont, or a font name looked up in ``registry``
        vertical: Stack characters one per line
        registry: Font registry for name lookups (bundled fonts by default)
    """
    prepared = prepare_text(text, vertical)

    if not isinstance(font, PixelFont):
        registry = registry or get_default_registry()
        font = registry.get(font or DEFAULT_FONT_NAME)

    lines = prepared.split("\n")
    return compose([rasterize_line(line, font) for line in lines], font.line_spacing)


def as_bitmap(bitmap: Any) -> Bitmap:
    """Coerce an ndarray or nested lists of booleans to a bool array."""
    return np.asarray(bitmap, dtype=bool)


def bitmap_dimensions(bitmap: Bitmap) -> tuple[int, int]:
    """(width, height) of a bitmap; any grid without cells is (0, 0)."""
    bitmap = as_bitmap(bitmap)
    if bitmap.ndim != 2 or bitmap.size == 0:
        return 0, 0
    height, width = bitmap.shape
    return width, height


def validate_bitmap(bitmap: Any) -> bool:
    """True when ``bitmap`` is a rectangular 2-D grid of booleans."""
    if isinstance(bitmap, np.ndarray):
        return bitmap.ndim == 2 and bitmap.dtype == bool
    if not isinstance(bitmap, (list, tuple)):
        return False
    if len(bitmap) == 0:
        return True
    width = len(bitmap[0]) if isinstance(bitmap[0], (list, tuple)) else -1
    return all(
        isinstance(row, (list, tuple)) and len(row) == width and all(isinstance(c, bool) for c in row)
        for row in bitmap
    )
