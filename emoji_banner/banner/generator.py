"""
Banner facade - text in, rendered emoji banner out.

Usage:
    result = generate_banner("HI", emojis=["fire"], background="black_large_square")
    print(result.text)
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.emoji import parse_emojis, resolve_emoji
from ..core.errors import ConfigurationConflictError, InvalidOptionError
from ..core.rng import DEFAULT_SEED
from ..core.themes import DEFAULT_THEME, get_theme_background
from ..fonts.registry import DEFAULT_FONT_NAME, FontRegistry, PixelFont
from .bitmap import text_to_bitmap
from .models import BannerResult, FillConfig, FillMode
from .renderer import render

DEFAULT_EMOJI = "🔥"


def resolve_border(border: Union[bool, str, None], background: Optional[str]) -> Optional[str]:
    """
    Border emoji for a banner.

    ``True`` reuses the background; a string names the border emoji. Either
    way a background is required.
    """
    if not border:
        return None
    if not background:
        raise ConfigurationConflictError(
            "Border requires a background emoji. Specify --background <emoji>."
        )
    if isinstance(border, str):
        return resolve_emoji(border)
    return background


def generate_banner(
    text: str,
    *,
    emojis: Union[str, Sequence[str]] = (DEFAULT_EMOJI,),
    background: Optional[str] = None,
    border: Union[bool, str, None] = None,
    mode: Union[FillMode, str] = FillMode.RANDOM,
    theme: str = DEFAULT_THEME,
    font: Union[PixelFont, str] = DEFAULT_FONT_NAME,
    vertical: bool = False,
    seed: int = DEFAULT_SEED,
    registry: Optional[FontRegistry] = None,
) -> BannerResult:
    """
    Generate an emoji banner.

    Args:
        text: Text to render; ``\\n`` escapes start a new line
        emojis: Foreground emoji or aliases, as a list or comma-separated string
        background: Background emoji or alias
        border: True to frame with the background, or a border emoji
        mode: Fill mode for multiple foreground emoji
        theme: Theme name; ``github`` replaces the foreground palette
        font: Font name or PixelFont
        vertical: Stack characters one per line
        seed: Seed for the random fill and theme intensities
        registry: Font registry for name lookups

    Raises:
        EmptyInputError: text is empty after normalization
        UnknownFontError / UnknownThemeError: unknown font or theme name
        ConfigurationConflictError: border without a background
    """
    if isinstance(emojis, str):
        foreground = parse_emojis(emojis)
    else:
        foreground = [e for e in (resolve_emoji(token) for token in emojis) if e]
        if not foreground:
            raise InvalidOptionError("Emoji is required. Use --emoji option.")

    background_emoji = resolve_emoji(background) if background else get_theme_background(theme)
    border_emoji = resolve_border(border, background_emoji)

    bitmap = text_to_bitmap(text, font, vertical=vertical, registry=registry)

    config = FillConfig(
        emojis=tuple(foreground),
        background=background_emoji,
        border=border_emoji,
        mode=mode,
        theme=theme,
        seed=seed,
    )
    return render(bitmap, config)
