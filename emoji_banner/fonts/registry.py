"""
Font registry - discovers, validates and caches YAML pixel font definitions.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml

from ..core.errors import FontError, UnknownFontError

logger = logging.getLogger(__name__)

BUNDLED_FONTS_DIR = Path(__file__).parent
DEFAULT_FONT_NAME = "standard"

# Pattern marker for a foreground pixel; any other character is background.
GLYPH_MARKER = "#"


@dataclass(frozen=True)
class PixelFont:
    """
    Fixed-height bitmap font.

    Every glyph is a sequence of at most ``height`` pattern rows. Rows may be
    shorter than the glyph's widest row and missing rows are background.
    """
    name: str
    height: int
    letter_spacing: int = 1
    line_spacing: int = 1
    glyphs: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __contains__(self, char: str) -> bool:
        return char in self.glyphs

    @classmethod
    def from_dict(cls, data: dict, default_name: str = "") -> "PixelFont":
        """
        Build a font from a parsed YAML document.

        Expected keys:
        - name: Font name (defaults to the file stem)
        - height: Rows per glyph
        - letter_spacing: Background columns between characters
        - line_spacing: Background rows between lines
        - glyphs: Mapping of single character -> list of pattern rows
        """
        if not isinstance(data, dict):
            raise FontError("font definition must be a mapping")

        name = str(data.get("name") or default_name)
        if not name:
            raise FontError("font has no name")

        try:
            height = int(data["height"])
            letter_spacing = int(data.get("letter_spacing", 1))
            line_spacing = int(data.get("line_spacing", 1))
        except KeyError:
            raise FontError(f"font {name!r} is missing 'height'") from None
        except (TypeError, ValueError) as e:
            raise FontError(f"font {name!r} has a non-integer metric: {e}") from None

        if height < 1:
            raise FontError(f"font {name!r} height must be positive")
        if letter_spacing < 0 or line_spacing < 0:
            raise FontError(f"font {name!r} spacing must not be negative")

        raw_glyphs = data.get("glyphs")
        if not isinstance(raw_glyphs, dict) or not raw_glyphs:
            raise FontError(f"font {name!r} defines no glyphs")

        glyphs: dict[str, tuple[str, ...]] = {}
        for key, rows in raw_glyphs.items():
            # YAML turns unquoted digits into ints
            char = str(key)
            if len(char) != 1:
                raise FontError(f"font {name!r}: glyph key {char!r} is not a single character")
            if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
                raise FontError(f"font {name!r}: glyph {char!r} must be a list of strings")
            if len(rows) > height:
                raise FontError(
                    f"font {name!r}: glyph {char!r} has {len(rows)} rows, font height is {height}"
                )
            glyphs[char] = tuple(rows)

        return cls(
            name=name,
            height=height,
            letter_spacing=letter_spacing,
            line_spacing=line_spacing,
            glyphs=MappingProxyType(glyphs),
        )


class FontRegistry:
    """
    Central registry for pixel fonts.

    Discovers and loads YAML files from font directories. A font is
    registered under its ``name`` key, or the file stem when absent. Later
    directories override earlier ones, so user fonts can replace bundled
    fonts of the same name.

    Usage:
        registry = FontRegistry()
        registry.load_all()

        font = registry.get('standard')
        names = registry.list_names()
    """

    def __init__(self, paths: Optional[list[str | Path]] = None):
        """
        Initialize registry with font directory paths.

        Args:
            paths: Directories to search for fonts.
                   Defaults to the bundled fonts directory.
        """
        if paths is None:
            paths = [BUNDLED_FONTS_DIR]

        self.paths = [Path(p).expanduser() for p in paths]
        self._fonts: dict[str, PixelFont] = {}
        self._lock = threading.RLock()
        self._loaded = False

    def load_all(self) -> None:
        """Discover and load all YAML files from font paths."""
        with self._lock:
            self._fonts.clear()
            for base_path in self.paths:
                if not base_path.exists():
                    logger.debug("Font directory %s does not exist, skipping", base_path)
                    continue
                files = sorted(base_path.rglob("*.yaml")) + sorted(base_path.rglob("*.yml"))
                for font_file in files:
                    self._load_file(font_file)
            self._loaded = True

    def _load_file(self, file_path: Path) -> Optional[PixelFont]:
        """Load a single YAML font file and register it."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

            if not data:
                return None

            font = PixelFont.from_dict(data, default_name=file_path.stem)
            self._fonts[font.name] = font
            logger.debug("Loaded font %s (%d glyphs) from %s", font.name, len(font.glyphs), file_path)
            return font
        except (yaml.YAMLError, OSError, FontError) as e:
            # Log but don't fail the whole registry on one bad file
            logger.warning("Failed to load font %s: %s", file_path, e)
            return None

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load_all()

    def register(self, font: PixelFont) -> None:
        """Register an in-memory font (overrides a font of the same name)."""
        with self._lock:
            self._ensure_loaded()
            self._fonts[font.name] = font

    def get(self, name: str) -> PixelFont:
        """
        Retrieve a font by name.

        Raises:
            UnknownFontError: if no font of that name is registered
        """
        with self._lock:
            self._ensure_loaded()
            font = self._fonts.get(name)
            if font is None:
                raise UnknownFontError(name, sorted(self._fonts))
            return font

    def list_names(self) -> list[str]:
        """List all registered font names, sorted."""
        with self._lock:
            self._ensure_loaded()
            return sorted(self._fonts)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            self._ensure_loaded()
            return name in self._fonts

    def __len__(self) -> int:
        with self._lock:
            self._ensure_loaded()
            return len(self._fonts)


# Global instance
_registry: Optional[FontRegistry] = None
_registry_lock = threading.Lock()


def get_default_registry() -> FontRegistry:
    """Registry of the bundled fonts, created on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = FontRegistry()
                _registry.load_all()
    return _registry


def get_font(name: str = DEFAULT_FONT_NAME) -> PixelFont:
    """Get a bundled font by name."""
    return get_default_registry().get(name)


def list_font_names() -> list[str]:
    """Names of the bundled fonts."""
    return get_default_registry().list_names()


def font_summary(font: PixelFont) -> dict[str, Any]:
    """Short description of a font for ``--list-fonts`` output."""
    return {
        "name": font.name,
        "height": font.height,
        "letter_spacing": font.letter_spacing,
        "line_spacing": font.line_spacing,
        "glyphs": len(font.glyphs),
    }
