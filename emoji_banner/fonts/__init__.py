"""
Pixel fonts.

Fonts are data: YAML files mapping characters to fixed-height pattern rows.
The bundled fonts live next to this module; extra directories can be added
through the ``fonts.paths`` config setting.
"""

from .registry import (
    BUNDLED_FONTS_DIR,
    DEFAULT_FONT_NAME,
    FontRegistry,
    PixelFont,
    get_default_registry,
    get_font,
    list_font_names,
)

__all__ = [
    "BUNDLED_FONTS_DIR",
    "DEFAULT_FONT_NAME",
    "FontRegistry",
    "PixelFont",
    "get_default_registry",
    "get_font",
    "list_font_names",
]
