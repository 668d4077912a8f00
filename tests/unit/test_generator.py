"""End-to-end tests for generate_banner."""

import pytest

from emoji_banner.banner.generator import generate_banner, resolve_border
from emoji_banner.core.errors import (
    ConfigurationConflictError,
    EmptyInputError,
    InvalidOptionError,
    UnknownFontError,
    UnknownThemeError,
)


class TestGenerateBanner:
    """Tests for the banner facade."""

    def test_hi_scenario(self, registry):
        result = generate_banner(
            "HI", emojis="fire", background="black_large_square", registry=registry,
        )
        assert result.width == 9
        assert result.height == 7
        assert len(result.lines) == 7
        assert result.lines[0] == "🔥⬛⬛⬛🔥⬛🔥🔥🔥"
        assert result.lines[1] == "🔥⬛⬛⬛🔥⬛⬛🔥⬛"
        assert result.lines[3] == "🔥🔥🔥🔥🔥⬛⬛🔥⬛"
        assert result.background_emoji == "⬛"

    def test_default_emoji_and_background(self):
        result = generate_banner("I")
        assert result.lines[0] == "🔥🔥🔥"
        assert result.lines[1] == "  🔥  "

    def test_emoji_list(self):
        result = generate_banner("I", emojis=["star", ":gem:"], mode="row")
        assert result.lines[0] == "⭐⭐⭐"
        assert result.lines[1] == "  💎  "

    def test_comma_separated_emoji(self):
        result = generate_banner("I", emojis="fire,star", mode="row")
        assert result.lines[1] == "  ⭐  "

    def test_deterministic(self):
        a = generate_banner("HELLO", emojis="fire,star,gem", seed=5)
        b = generate_banner("HELLO", emojis="fire,star,gem", seed=5)
        assert a.text == b.text

    def test_mini_font(self, registry):
        result = generate_banner("HI", font="mini", registry=registry)
        assert (result.width, result.height) == (7, 5)

    def test_vertical(self):
        result = generate_banner("HI", vertical=True)
        assert (result.width, result.height) == (5, 15)

    def test_border_uses_background(self):
        result = generate_banner("I", background="black_large_square", border=True)
        assert result.border_emoji == "⬛"
        assert len(result.lines) == 9
        assert result.lines[0] == "⬛" * 5

    def test_border_emoji_alias(self):
        result = generate_banner("I", background="black_large_square", border="star")
        assert result.border_emoji == "⭐"
        assert result.lines[0] == "⭐" * 5

    def test_border_with_github_theme(self):
        result = generate_banner("I", theme="github", border=True)
        assert result.border_emoji == "⬜"
        assert result.background_emoji == "⬜"

    def test_border_without_background(self):
        with pytest.raises(ConfigurationConflictError, match="Border requires a background"):
            generate_banner("HI", border=True)

    def test_empty_text(self):
        with pytest.raises(EmptyInputError):
            generate_banner("")

    def test_no_emoji(self):
        with pytest.raises(InvalidOptionError):
            generate_banner("HI", emojis=[])

    def test_blank_emoji_string(self):
        with pytest.raises(InvalidOptionError):
            generate_banner("HI", emojis=" , ")

    def test_unknown_font(self, registry):
        with pytest.raises(UnknownFontError):
            generate_banner("HI", font="gothic", registry=registry)

    def test_unknown_theme(self):
        with pytest.raises(UnknownThemeError):
            generate_banner("HI", theme="neon")

    def test_unknown_mode_degrades_to_first(self):
        result = generate_banner("I", emojis="fire,star", mode="sparkle")
        assert "⭐" not in result.text


class TestResolveBorder:
    """Tests for resolve_border."""

    def test_no_border(self):
        assert resolve_border(None, None) is None
        assert resolve_border(False, "⬛") is None

    def test_true_uses_background(self):
        assert resolve_border(True, "⬛") == "⬛"

    def test_string_is_resolved(self):
        assert resolve_border(":fire:", "⬛") == "🔥"
