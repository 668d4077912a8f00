"""Tests for text normalization."""

import pytest

from emoji_banner.banner.text import (
    MAX_TEXT_LENGTH,
    decode_escapes,
    normalize_newlines,
    prepare_text,
    sanitize_text,
    verticalize,
)
from emoji_banner.core.errors import EmptyInputError


class TestDecodeEscapes:
    """Tests for backslash escape decoding."""

    def test_newline_escape(self):
        assert decode_escapes("A\\nB") == "A\nB"

    def test_backslash_escape(self):
        assert decode_escapes("A\\\\B") == "A\\B"

    def test_escaped_backslash_before_n(self):
        """``\\\\n`` is a backslash followed by a literal n."""
        assert decode_escapes("\\\\n") == "\\n"

    def test_other_escapes_kept(self):
        assert decode_escapes("A\\tB") == "A\\tB"

    def test_trailing_backslash_kept(self):
        assert decode_escapes("AB\\") == "AB\\"

    def test_no_escapes(self):
        assert decode_escapes("plain") == "plain"


class TestNormalization:
    """Tests for newline and vertical normalization."""

    def test_crlf(self):
        assert normalize_newlines("A\r\nB\rC") == "A\nB\nC"

    def test_vertical_single_line(self):
        assert verticalize("AB") == "A\nB"

    def test_vertical_multi_line(self):
        """Original lines are separated by a blank line."""
        assert verticalize("AB\nC") == "A\nB\n\nC"

    def test_sanitize_keeps_newlines(self):
        assert sanitize_text("A\x07\nB\x1b") == "A\nB"

    def test_sanitize_removes_tab_and_delete(self):
        assert sanitize_text("A\tB\x7f") == "AB"


class TestPrepareText:
    """Tests for the full prepare_text pipeline."""

    def test_escape_then_lines(self):
        assert prepare_text("HI\\nTHERE") == "HI\nTHERE"

    def test_vertical(self):
        assert prepare_text("AB", vertical=True) == "A\nB"

    def test_vertical_with_escape(self):
        assert prepare_text("A\\nB", vertical=True) == "A\n\nB"

    def test_length_cap(self):
        assert len(prepare_text("A" * 150)) == MAX_TEXT_LENGTH == 100

    def test_empty(self):
        with pytest.raises(EmptyInputError, match="required"):
            prepare_text("")

    def test_none(self):
        with pytest.raises(EmptyInputError):
            prepare_text(None)

    def test_only_control_characters(self):
        with pytest.raises(EmptyInputError, match="empty after sanitization"):
            prepare_text("\x07\x08")

    def test_empty_input_is_value_error(self):
        with pytest.raises(ValueError):
            prepare_text("")
