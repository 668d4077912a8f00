"""
Glyph lookup and single-line rasterization.

A line becomes a (font.height, width) bool array: each character's pattern
is converted column by column, with ``letter_spacing`` background columns
between characters.
"""

from __future__ import annotations

import numpy as np

from ..fonts.registry import GLYPH_MARKER, PixelFont
from .models import Bitmap

FALLBACK_CHARS = ("?", " ")


def resolve_pattern(char: str, font: PixelFont) -> tuple[str, ...]:
    """
    Pattern rows for ``char``.

    Lookup order: exact, uppercase, ``?``, space, then the empty pattern.
    """
    # An explicitly empty glyph is a zero-width match, not a miss
    for candidate in (char, char.upper(), *FALLBACK_CHARS):
        if candidate in font.glyphs:
            return font.glyphs[candidate]

    return ()


def pattern_width(pattern: tuple[str, ...]) -> int:
    return max((len(row) for row in pattern), default=0)


def rasterize_glyph(pattern: tuple[str, ...], height: int) -> Bitmap:
    """Pattern rows -> (height, pattern_width) bool array. Missing rows are background."""
    width = pattern_width(pattern)
    glyph = np.zeros((height, width), dtype=bool)
    for y, row in enumerate(pattern[:height]):
        for x, mark in enumerate(row):
            if mark == GLYPH_MARKER:
                glyph[y, x] = True
    return glyph


def rasterize_line(line: str, font: PixelFont) -> Bitmap:
    """Render one line of text. Always returns exactly ``font.height`` rows."""
    if not line:
        return np.zeros((font.height, 0), dtype=bool)

    spacer = np.zeros((font.height, font.letter_spacing), dtype=bool)
    parts: list[np.ndarray] = []
    for index, char in enumerate(line):
        parts.append(rasterize_glyph(resolve_pattern(char, font), font.height))
        if index < len(line) - 1 and font.letter_spacing > 0:
            parts.append(spacer)

    return np.hstack(parts)
