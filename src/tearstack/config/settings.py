"""Unified settings — overrides, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides (e.g. pytest command-line options)
  2. Env vars     — ``TEARSTACK_*`` prefix
  3. TOML file    — ``tearstack.toml`` discovered via walk-up
  4. Code defaults — baked into the settings class

The skip policy is a test-run preference, not a per-call setting: it is
resolved once per process by :func:`get_settings` and cached. Callers that
need a different value pass it to ``TearDownStack.run()`` explicitly.
"""

from __future__ import annotations

import functools
import threading
from pathlib import Path
from typing import Any, Literal

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tearstack.config.discovery import find_config, read_config


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``tearstack.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TearstackSettings(BaseSettings):
    """Process-wide tear-down preferences.

    Attributes:
        skip_optional: Skip optional tear-downs by default. Required
            tear-downs always run.
        strict: Re-raise contained failures as a group after each drain.
        log_format: ``"console"`` or ``"json"`` to route notifications
            through :func:`~tearstack.config.logging.configure_logging`.
            ``None`` leaves structlog as the host configured it.
        log_verbose: Include DEBUG events when ``log_format`` is set.
        config_path: The TOML file the values were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TEARSTACK_",
    }

    config_path: Path | None = None

    skip_optional: bool = False
    strict: bool = False
    log_format: Literal["console", "json"] | None = None
    log_verbose: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> TearstackSettings:
        """Construct settings for the current process.

        Discovers ``tearstack.toml`` via walk-up from *start* (or uses an
        explicit *config_path*) and applies *overrides* as highest-priority
        values. ``None`` overrides are ignored so optional CLI flags can be
        forwarded unconditionally.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        explicit = {k: v for k, v in overrides.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **explicit)
        finally:
            _tls.toml_path = None


@functools.cache
def get_settings() -> TearstackSettings:
    """Resolve settings once per process. ``get_settings.cache_clear()`` resets."""
    return TearstackSettings.load()
