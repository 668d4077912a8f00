"""Core building blocks - width model, seeded randomness, themes, emoji aliases, errors."""

from .errors import (
    BannerError,
    ClipboardError,
    ConfigurationConflictError,
    EmptyInputError,
    FontError,
    InputFileError,
    InvalidOptionError,
    UnknownFontError,
    UnknownThemeError,
)
from .rng import DEFAULT_SEED, SeededRandom
from .width import (
    CodePointSegmenter,
    GraphemeSegmenter,
    UnicodeSegmenter,
    display_width,
    fit_to_width,
    pad_to_width,
)
from .themes import (
    DEFAULT_THEME,
    THEMES,
    ThemeDef,
    get_available_themes,
    get_default_background,
    get_theme_background,
    get_theme_palette,
)
from .emoji import parse_emojis, resolve_emoji

__all__ = [
    # Errors
    "BannerError",
    "ClipboardError",
    "ConfigurationConflictError",
    "EmptyInputError",
    "FontError",
    "InputFileError",
    "InvalidOptionError",
    "UnknownFontError",
    "UnknownThemeError",
    # Randomness
    "DEFAULT_SEED",
    "SeededRandom",
    # Width
    "GraphemeSegmenter",
    "UnicodeSegmenter",
    "CodePointSegmenter",
    "display_width",
    "fit_to_width",
    "pad_to_width",
    # Themes
    "DEFAULT_THEME",
    "THEMES",
    "ThemeDef",
    "get_available_themes",
    "get_default_background",
    "get_theme_background",
    "get_theme_palette",
    # Emoji
    "parse_emojis",
    "resolve_emoji",
]
