"""Display width of emoji, CJK and custom-alias tokens.

A banner is a grid of cells, and every cell has to occupy the same number of
terminal columns for the rows to line up. This module answers "how many
columns does this token take?":

- custom alias tokens (``:partyparrot:``, ``parrot``) count as 2, since chat
  clients render them as an image
- pictographic / emoji / CJK graphemes count as 2, as does anything
  ``wcwidth`` measures at two columns or more (flags, fullwidth forms)
- the ideographic space U+3000 counts as 2
- everything else counts as 1

Text is measured per grapheme cluster. Segmentation is pluggable:
UnicodeSegmenter uses the ``regex`` module's ``\\X`` matcher, and
CodePointSegmenter splits on code points. The latter is an approximation;
ZWJ sequences, flags and keycaps are measured as several graphemes.
"""

from __future__ import annotations

from typing import Protocol

import regex
from wcwidth import wcswidth

EMOJI_PATTERN = regex.compile(
    r"[\U0001F300-\U0001FAFF\U00002600-\U000026FF\U00002700-\U000027BF\U0000FE0F]"
)
PICTOGRAPHIC_PATTERN = regex.compile(r"\p{Extended_Pictographic}")
WIDE_CHAR_PATTERN = regex.compile(
    r"[\U00003000-\U0000303F\U00003040-\U000030FF\U00003400-\U00004DBF"
    r"\U00004E00-\U00009FFF\U0000F900-\U0000FAFF]"
)
CUSTOM_ALIAS_PATTERN = regex.compile(r"^:?[a-zA-Z0-9_-]{1,64}:?$")

IDEOGRAPHIC_SPACE = "\U00003000"


class GraphemeSegmenter(Protocol):
    """Splits text into user-perceived characters."""

    def split(self, text: str) -> list[str]:
        ...


class UnicodeSegmenter:
    """Extended grapheme clusters (UAX #29) via ``regex``."""

    _cluster = regex.compile(r"\X")

    def split(self, text: str) -> list[str]:
        return self._cluster.findall(text)


class CodePointSegmenter:
    """One segment per code point. Mis-measures multi-code-point clusters."""

    def split(self, text: str) -> list[str]:
        return list(text)


DEFAULT_SEGMENTER: GraphemeSegmenter = UnicodeSegmenter()


def _looks_wide(text: str) -> bool:
    return bool(
        PICTOGRAPHIC_PATTERN.search(text)
        or EMOJI_PATTERN.search(text)
        or WIDE_CHAR_PATTERN.search(text)
    )


def is_custom_alias(token: str) -> bool:
    """True for Slack-style alias tokens such as ``:parrot:`` or ``parrot``."""
    trimmed = token.strip()
    if not trimmed:
        return False
    if _looks_wide(trimmed):
        return False
    return bool(CUSTOM_ALIAS_PATTERN.match(trimmed)) and not any(c.isspace() for c in trimmed)


def grapheme_width(grapheme: str) -> int:
    """Width of a single grapheme cluster: 1 or 2."""
    if not grapheme:
        return 0
    if grapheme == IDEOGRAPHIC_SPACE:
        return 2
    if _looks_wide(grapheme):
        return 2
    if wcswidth(grapheme) >= 2:
        return 2
    return 1


def display_width(text: str, segmenter: GraphemeSegmenter | None = None) -> int:
    """
    Number of terminal columns ``text`` occupies.

    A whole-token custom alias is 2 wide. Otherwise the widths of the
    grapheme clusters are summed.
    """
    if is_custom_alias(text):
        return 2
    segmenter = segmenter or DEFAULT_SEGMENTER
    return sum(grapheme_width(g) for g in segmenter.split(text))


def pad_to_width(text: str, target: int, segmenter: GraphemeSegmenter | None = None) -> str:
    """Append spaces until ``text`` is ``target`` columns wide."""
    width = display_width(text, segmenter)
    if width >= target:
        return text
    return text + " " * (target - width)


def fit_to_width(text: str, target: int, segmenter: GraphemeSegmenter | None = None) -> str:
    """
    Make ``text`` exactly ``target`` columns wide.

    Narrow text is padded with spaces. Text that is too wide is replaced by
    blank padding so the grid keeps its shape.
    """
    width = display_width(text, segmenter)
    if width == target:
        return text
    if width < target:
        return text + " " * (target - width)
    return " " * target
