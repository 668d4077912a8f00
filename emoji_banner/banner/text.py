"""
Text normalization ahead of rasterization.

Order of operations:
1. decode literal escapes (``\\n`` and ``\\\\``)
2. normalize CR/CRLF line endings to LF
3. optionally stack characters vertically
4. strip control characters other than LF
5. cap the length
"""

from __future__ import annotations

import re

from ..core.errors import EmptyInputError

MAX_TEXT_LENGTH = 100

CONTROL_CHARS = re.compile(r"[\x00-\x09\x0b-\x1f\x7f]")


def decode_escapes(text: str) -> str:
    """
    Interpret backslash escapes for newlines and backslashes.

    ``\\n`` becomes a line break and ``\\\\`` a single backslash. Any other
    escape is kept as typed, backslash included, and a trailing lone
    backslash is kept.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue

        if i + 1 >= n:
            out.append("\\")
            i += 1
            continue

        nxt = text[i + 1]
        if nxt == "n":
            out.append("\n")
        elif nxt == "\\":
            out.append("\\")
        else:
            out.append("\\" + nxt)
        i += 2

    return "".join(out)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def verticalize(text: str) -> str:
    """One character per line; original lines are separated by a blank line."""
    lines = ["\n".join(line) for line in text.split("\n")]
    return "\n\n".join(lines)


def normalize_text_input(text: str, vertical: bool = False) -> str:
    normalized = normalize_newlines(decode_escapes(text))
    if vertical:
        return verticalize(normalized)
    return normalized


def sanitize_text(text: str) -> str:
    """Remove control characters, keeping line feeds."""
    return CONTROL_CHARS.sub("", text)


def prepare_text(text: str | None, vertical: bool = False) -> str:
    """
    Full normalization pipeline for raw user text.

    Raises:
        EmptyInputError: when text is missing, or empty after sanitizing
    """
    if not text or not isinstance(text, str):
        raise EmptyInputError("Text input is required")

    sanitized = sanitize_text(normalize_text_input(text, vertical))
    if not sanitized:
        raise EmptyInputError("Text input is empty after sanitization")

    return sanitized[:MAX_TEXT_LENGTH]
