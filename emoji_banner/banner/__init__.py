"""Banner pipeline - text normalization, rasterization, fill and rendering."""

from .models import EMPTY_BITMAP, BannerResult, Bitmap, FillConfig, FillMode
from .text import MAX_TEXT_LENGTH, prepare_text
from .raster import rasterize_line, resolve_pattern
from .bitmap import as_bitmap, bitmap_dimensions, compose, text_to_bitmap, trim_bitmap, validate_bitmap
from .fill import ThemePalette, UserPalette, resolve_palette, select_emoji, theme_intensity
from .renderer import render, render_custom
from .generator import DEFAULT_EMOJI, generate_banner

__all__ = [
    # Model
    "EMPTY_BITMAP",
    "BannerResult",
    "Bitmap",
    "FillConfig",
    "FillMode",
    # Text
    "MAX_TEXT_LENGTH",
    "prepare_text",
    # Rasterization
    "rasterize_line",
    "resolve_pattern",
    "as_bitmap",
    "bitmap_dimensions",
    "compose",
    "text_to_bitmap",
    "trim_bitmap",
    "validate_bitmap",
    # Fill
    "ThemePalette",
    "UserPalette",
    "resolve_palette",
    "select_emoji",
    "theme_intensity",
    # Rendering
    "render",
    "render_custom",
    "DEFAULT_EMOJI",
    "generate_banner",
]
