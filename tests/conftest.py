"""Shared test fixtures."""

import pytest
import yaml

from emoji_banner.fonts.registry import BUNDLED_FONTS_DIR, FontRegistry, PixelFont


@pytest.fixture
def registry():
    """Registry with only the bundled fonts."""
    reg = FontRegistry([BUNDLED_FONTS_DIR])
    reg.load_all()
    return reg


@pytest.fixture
def tiny_font():
    """3-row in-memory font with a handful of glyphs."""
    return PixelFont(
        name="tiny",
        height=3,
        letter_spacing=1,
        line_spacing=1,
        glyphs={
            "A": ("###", "# #", "# #"),
            "B": ("## ", "###", "## "),
            "?": ("##", " #", " #"),
            ".": ("  ", "  ", " #"),
            " ": ("  ", "  ", "  "),
        },
    )


@pytest.fixture
def font_dir(tmp_path):
    """Directory holding one valid user font named ``blocky``."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    font = {
        "name": "blocky",
        "height": 2,
        "letter_spacing": 0,
        "line_spacing": 0,
        "glyphs": {"X": ["##", "##"], "?": ["#", " "]},
    }
    (directory / "blocky.yaml").write_text(yaml.safe_dump(font), encoding="utf-8")
    return directory
