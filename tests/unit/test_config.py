"""Tests for user configuration."""

import json

from emoji_banner.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    BannerConfig,
    DefaultsConfig,
    FontsConfig,
    LoggingConfig,
    config_path,
)


class TestDefaultsConfig:
    """Tests for DefaultsConfig."""

    def test_default_values(self):
        defaults = DefaultsConfig()
        assert defaults.emoji == "🔥"
        assert defaults.background is None
        assert defaults.mode == "random"
        assert defaults.theme == "default"
        assert defaults.font == "standard"
        assert defaults.format == "text"
        assert defaults.seed == 42

    def test_from_dict(self):
        defaults = DefaultsConfig.from_dict({"emoji": "star", "mode": "row", "theme": "github", "seed": 7})
        assert defaults.emoji == "star"
        assert defaults.mode == "row"
        assert defaults.theme == "github"
        assert defaults.seed == 7

    def test_unknown_keys_ignored(self):
        defaults = DefaultsConfig.from_dict({"sparkles": True})
        assert defaults == DefaultsConfig()

    def test_invalid_values_fall_back(self):
        defaults = DefaultsConfig.from_dict(
            {"mode": "sparkle", "theme": "neon", "format": "html", "seed": "abc", "emoji": ""}
        )
        assert defaults == DefaultsConfig()

    def test_not_a_dict(self):
        assert DefaultsConfig.from_dict("fire") == DefaultsConfig()


class TestSections:
    """Tests for FontsConfig and LoggingConfig."""

    def test_font_paths(self):
        assert FontsConfig.from_dict({"paths": ["~/fonts", 3]}).paths == ["~/fonts", "3"]

    def test_font_paths_invalid(self):
        assert FontsConfig.from_dict({"paths": "~/fonts"}).paths == []

    def test_log_level_normalized(self):
        assert LoggingConfig.from_dict({"level": "debug"}).level == "DEBUG"

    def test_log_level_invalid(self):
        assert LoggingConfig.from_dict({"level": "LOUD"}).level == "WARNING"


class TestBannerConfig:
    """Tests for BannerConfig load/save."""

    def test_to_dict_sections(self):
        d = BannerConfig().to_dict()
        assert set(d) == {"defaults", "fonts", "logging"}
        assert d["defaults"]["seed"] == 42

    def test_from_dict_round_trip(self):
        config = BannerConfig.from_dict({"defaults": {"emoji": "gem"}, "fonts": {"paths": ["/x"]}})
        assert BannerConfig.from_dict(config.to_dict()) == config

    def test_load_missing_file(self, tmp_path):
        assert BannerConfig.load(tmp_path / "missing.json") == BannerConfig()

    def test_load_corrupt_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert BannerConfig.load(path) == BannerConfig()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = BannerConfig(defaults=DefaultsConfig(emoji="⭐", background="⬛"))
        config.save(path)
        assert not path.with_suffix(".tmp").exists()
        assert json.loads(path.read_text(encoding="utf-8"))["defaults"]["emoji"] == "⭐"
        assert BannerConfig.load(path) == config

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "env.json"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert config_path() == path

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert config_path() == DEFAULT_CONFIG_PATH
