"""Emoji alias lookup and comma-separated emoji parsing."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml

from .errors import InvalidOptionError

ALIASES_FILE = Path(__file__).parent / "emoji_aliases.yaml"


@lru_cache(maxsize=None)
def load_aliases(path: Path = ALIASES_FILE) -> dict[str, str]:
    """Load the alias table (cached). Keys are lower-cased names without colons."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return {str(name).lower(): str(value) for name, value in data.items()}


def _alias_name(token: str) -> str:
    name = token
    if name.startswith(":"):
        name = name[1:]
    if name.endswith(":"):
        name = name[:-1]
    return name.lower()


def resolve_emoji(token: str) -> str:
    """
    Resolve an emoji or alias to the emoji character(s).

    ``fire``, ``:fire:`` and ``🔥`` all resolve to ``🔥``. Unknown aliases are
    returned unchanged; chat clients render them as custom emoji.
    """
    trimmed = token.strip()
    if not trimmed:
        return trimmed
    return load_aliases().get(_alias_name(trimmed), trimmed)


def parse_emojis(value: str) -> list[str]:
    """Split a comma-separated emoji list and resolve every entry."""
    emojis = [resolve_emoji(part) for part in value.split(",")]
    emojis = [e for e in emojis if e]
    if not emojis:
        raise InvalidOptionError("Emoji is required. Use --emoji option.")
    return emojis
