"""pytest plugin — a per-test ``teardown_stack`` fixture.

Registered through the ``pytest11`` entry point. The fixture finalizer
drains the stack once per test, whether setup, the test body, or other
fixtures failed.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from tearstack.config.logging import configure_logging
from tearstack.config.settings import TearstackSettings, get_settings
from tearstack.plugins.manager import PluginManager
from tearstack.services.stack import TearDownStack

settings_key = pytest.StashKey[TearstackSettings]()
plugin_manager_key = pytest.StashKey[PluginManager]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("tearstack", "tear-down stack")
    group.addoption(
        "--skip-optional-teardown",
        action="store_true",
        default=None,
        help="Skip optional tear-downs; required tear-downs still run.",
    )
    group.addoption(
        "--strict-teardown",
        action="store_true",
        default=None,
        help="Fail the test when a tear-down action raises.",
    )
    group.addoption(
        "--teardown-log",
        choices=("console", "json"),
        default=None,
        help="Render tear-down notifications on stderr in this format.",
    )
    group.addoption(
        "--teardown-log-verbose",
        action="store_true",
        default=None,
        help="Include DEBUG events in the tear-down log output.",
    )


def pytest_configure(config: pytest.Config) -> None:
    options = {
        "skip_optional": config.getoption("skip_optional_teardown"),
        "strict": config.getoption("strict_teardown"),
        "log_format": config.getoption("teardown_log"),
        "log_verbose": config.getoption("teardown_log_verbose"),
    }
    overrides = {k: v for k, v in options.items() if v is not None}
    settings = get_settings().model_copy(update=overrides)
    config.stash[settings_key] = settings

    if settings.log_format is not None:
        configure_logging(verbose=settings.log_verbose, log_json=settings.log_format == "json")

    pm = PluginManager()
    pm.discover_and_load()
    config.stash[plugin_manager_key] = pm


@pytest.fixture
def teardown_stack(request: pytest.FixtureRequest) -> Generator[TearDownStack]:
    """Per-test stack; everything registered on it runs after the test."""
    settings = request.config.stash[settings_key]
    stack = TearDownStack(
        skip_optional=settings.skip_optional,
        strict=settings.strict,
        plugin_manager=request.config.stash[plugin_manager_key],
    )
    try:
        yield stack
    finally:
        stack.run()
