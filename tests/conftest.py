"""Shared pytest fixtures and test helpers for tearstack tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from tearstack.config.settings import get_settings

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Resolve settings from a clean environment with no config file."""
    for name in (
        "TEARSTACK_CONFIG",
        "TEARSTACK_SKIP_OPTIONAL",
        "TEARSTACK_STRICT",
        "TEARSTACK_LOG_FORMAT",
        "TEARSTACK_LOG_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RecordingLogger:
    """Injectable notification logger that keeps every call."""

    def __init__(self) -> None:
        self.records: list[tuple[str, dict[str, Any]]] = []

    def info(self, event: str, *args: Any, **kw: Any) -> None:
        self.records.append((event, kw))

    @property
    def events(self) -> list[str]:
        return [event for event, _ in self.records]


class Tidy:
    """Self-cleaning object: appends its description to *messages* when called."""

    def __init__(self, messages: list[str], desc: str) -> None:
        self.messages = messages
        self.desc = desc

    def __call__(self) -> None:
        self.messages.append(self.desc)


class Failing:
    """Records "whoops", then raises before it can record anything else."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages

    def __call__(self) -> None:
        self.messages.append("whoops")
        msg = "Don't worry, this exception is expected."
        raise RuntimeError(msg)
