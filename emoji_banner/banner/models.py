"""Data model shared by the banner pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..core.errors import InvalidOptionError
from ..core.rng import DEFAULT_SEED
from ..core.themes import DEFAULT_THEME

# 2-D bool array, shape (rows, columns). True = glyph pixel.
Bitmap = np.ndarray


def freeze(bitmap: np.ndarray) -> np.ndarray:
    """Mark a bitmap read-only and return it."""
    bitmap.setflags(write=False)
    return bitmap


# All-background sentinel
EMPTY_BITMAP: Bitmap = freeze(np.zeros((0, 0), dtype=bool))


class FillMode(str, Enum):
    """Which candidate emoji fills a foreground cell."""
    RANDOM = "random"
    ROW = "row"
    COLUMN = "column"
    ROW_GRADIENT = "row-gradient"
    COLUMN_GRADIENT = "column-gradient"

    @classmethod
    def parse(cls, value: Union["FillMode", str, None]) -> Optional["FillMode"]:
        """Coerce a string to a FillMode; None when it is not a known mode."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        return [m.value for m in cls]


@dataclass(frozen=True)
class FillConfig:
    """How bitmap cells become emoji."""
    emojis: tuple[str, ...]
    background: Optional[str] = None
    border: Optional[str] = None
    mode: Union[FillMode, str] = FillMode.RANDOM
    theme: str = DEFAULT_THEME
    seed: int = DEFAULT_SEED

    def __post_init__(self):
        emojis = tuple(self.emojis)
        if not emojis:
            raise InvalidOptionError("At least one foreground emoji is required")
        object.__setattr__(self, "emojis", emojis)


@dataclass(frozen=True)
class BannerResult:
    """Rendered banner plus what was used to build it."""
    text: str
    background_emoji: str
    bitmap: Bitmap
    width: int
    height: int
    border_emoji: Optional[str] = None

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n") if self.text else []
