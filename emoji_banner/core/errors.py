"""Error types shared across emoji-banner.

Every failure is raised immediately; nothing in the rendering path retries
or returns a partial banner.
"""

from __future__ import annotations


class BannerError(Exception):
    """Base class for all emoji-banner errors."""


class EmptyInputError(BannerError, ValueError):
    """Text is missing, or empty once escapes and control characters are gone."""


class InvalidOptionError(BannerError, ValueError):
    """A user-facing option (mode, format, theme, emoji list) is not valid."""


class ConfigurationConflictError(BannerError):
    """Options that cannot be combined, e.g. a border without a background."""


class UnknownFontError(BannerError, LookupError):
    """Requested font name is not registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        msg = f"Unknown font: {name}"
        if self.available:
            msg += f". Available fonts: {', '.join(self.available)}"
        super().__init__(msg)


class UnknownThemeError(BannerError, LookupError):
    """Requested theme name is not defined."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        msg = f"Unknown theme: {name}"
        if self.available:
            msg += f". Available themes: {', '.join(self.available)}"
        super().__init__(msg)


class FontError(BannerError):
    """A font definition file is malformed."""


class InputFileError(BannerError):
    """Text input file could not be read."""


class ClipboardError(BannerError):
    """Copying to the system clipboard failed."""
