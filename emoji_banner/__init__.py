"""
emoji-banner - render text as emoji pixel art for terminals and chat.

Usage:
    from emoji_banner import generate_banner

    result = generate_banner("HI", emojis="fire", background="black_large_square")
    print(result.text)
"""

__version__ = "1.0.0"

from .banner import BannerResult, FillConfig, FillMode, generate_banner, render, text_to_bitmap
from .core import BannerError
from .fonts import FontRegistry, PixelFont

__all__ = [
    "__version__",
    "BannerError",
    "BannerResult",
    "FillConfig",
    "FillMode",
    "FontRegistry",
    "PixelFont",
    "generate_banner",
    "render",
    "text_to_bitmap",
]
