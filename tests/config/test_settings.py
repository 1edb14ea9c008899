"""Tests for TearstackSettings — unified settings with TOML source."""

from pathlib import Path

import pytest

from tearstack.config.discovery import ConfigError
from tearstack.config.settings import TearstackSettings, get_settings


class TestTearstackSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = TearstackSettings.load(start=tmp_path)
        assert settings.skip_optional is False
        assert settings.strict is False
        assert settings.config_path is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TearstackSettings.load(start=tmp_path)
        with pytest.raises(Exception):
            settings.skip_optional = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "tearstack.toml"
        toml.write_text("skip_optional = true\n")
        settings = TearstackSettings.load(start=tmp_path)
        assert settings.skip_optional is True
        assert settings.strict is False  # default preserved
        assert settings.config_path == toml

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("strict = true\n")
        settings = TearstackSettings.load(config_path=custom, start=tmp_path)
        assert settings.strict is True
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tearstack.toml").write_text("[section\n")
        with pytest.raises(ConfigError):
            TearstackSettings.load(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "tearstack.toml").write_text("skip_optional = true\n")
        monkeypatch.setenv("TEARSTACK_SKIP_OPTIONAL", "false")
        settings = TearstackSettings.load(start=tmp_path)
        assert settings.skip_optional is False

    def test_overrides_beat_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEARSTACK_STRICT", "true")
        settings = TearstackSettings.load(start=tmp_path, strict=False)
        assert settings.strict is False

    def test_none_overrides_are_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "tearstack.toml").write_text("strict = true\n")
        settings = TearstackSettings.load(start=tmp_path, strict=None)
        assert settings.strict is True


class TestGetSettings:
    def test_resolved_once(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("TEARSTACK_SKIP_OPTIONAL", "true")
        assert get_settings() is first
        assert get_settings().skip_optional is False

    def test_cache_clear_re_resolves(self, monkeypatch: pytest.MonkeyPatch) -> None:
        get_settings()
        monkeypatch.setenv("TEARSTACK_SKIP_OPTIONAL", "true")
        get_settings.cache_clear()
        assert get_settings().skip_optional is True

    def test_discovers_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "tearstack.toml").write_text("skip_optional = true\n")
        assert get_settings().skip_optional is True
