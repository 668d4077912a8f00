"""User configuration with clean, readable structure."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from .banner.generator import DEFAULT_EMOJI
from .banner.models import FillMode
from .core.rng import DEFAULT_SEED
from .core.themes import DEFAULT_THEME, get_available_themes
from .fonts.registry import DEFAULT_FONT_NAME

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EMOJI_BANNER_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "emoji-banner" / "config.json"

OUTPUT_FORMATS = ("text", "slack")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def config_path() -> Path:
    """Config file location, honouring the EMOJI_BANNER_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def _known_fields(cls) -> set[str]:
    return {f.name for f in cls.__dataclass_fields__.values()}


@dataclass
class DefaultsConfig:
    """Defaults for options the command line leaves unset."""
    emoji: str = DEFAULT_EMOJI
    background: Optional[str] = None
    mode: str = FillMode.RANDOM.value
    theme: str = DEFAULT_THEME
    font: str = DEFAULT_FONT_NAME
    format: str = "text"
    seed: int = DEFAULT_SEED

    @classmethod
    def from_dict(cls, d: dict) -> "DefaultsConfig":
        if not isinstance(d, dict):
            return cls()

        defaults = cls(**{k: v for k, v in d.items() if k in _known_fields(cls)})

        # Invalid values fall back to defaults
        if FillMode.parse(defaults.mode) is None:
            logger.warning("Ignoring invalid mode %r in config", defaults.mode)
            defaults.mode = FillMode.RANDOM.value
        if defaults.theme not in get_available_themes():
            logger.warning("Ignoring invalid theme %r in config", defaults.theme)
            defaults.theme = DEFAULT_THEME
        if defaults.format not in OUTPUT_FORMATS:
            logger.warning("Ignoring invalid format %r in config", defaults.format)
            defaults.format = "text"
        if not isinstance(defaults.emoji, str) or not defaults.emoji.strip():
            defaults.emoji = DEFAULT_EMOJI
        if defaults.background is not None and not isinstance(defaults.background, str):
            defaults.background = None
        if not isinstance(defaults.font, str) or not defaults.font:
            defaults.font = DEFAULT_FONT_NAME
        if isinstance(defaults.seed, bool) or not isinstance(defaults.seed, int):
            defaults.seed = DEFAULT_SEED
        return defaults


@dataclass
class FontsConfig:
    """Extra font directories, searched after the bundled fonts."""
    paths: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> "FontsConfig":
        if not isinstance(d, dict):
            return cls()
        paths = d.get("paths", [])
        if not isinstance(paths, list):
            return cls()
        return cls(paths=[str(p) for p in paths])


@dataclass
class LoggingConfig:
    """Log level for the command line tool."""
    level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict) -> "LoggingConfig":
        if not isinstance(d, dict):
            return cls()
        level = str(d.get("level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            level = "WARNING"
        return cls(level=level)


@dataclass
class BannerConfig:
    """Main configuration combining all sections."""
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    fonts: FontsConfig = field(default_factory=FontsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict:
        return {
            "defaults": asdict(self.defaults),
            "fonts": asdict(self.fonts),
            "logging": asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "BannerConfig":
        if not isinstance(d, dict):
            return cls()
        return cls(
            defaults=DefaultsConfig.from_dict(d.get("defaults", {})),
            fonts=FontsConfig.from_dict(d.get("fonts", {})),
            logging=LoggingConfig.from_dict(d.get("logging", {})),
        )

    def save(self, path: Optional[Path] = None):
        path = Path(path) if path else config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        temp.replace(path)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "BannerConfig":
        path = Path(path) if path else config_path()
        try:
            if path.exists():
                return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError, TypeError) as e:
            logger.warning("Could not read config %s: %s", path, e)
        return cls()
