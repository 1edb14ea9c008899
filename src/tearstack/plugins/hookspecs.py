"""Pluggy hook specifications for observing tear-down drains.

Hooks are called synchronously, in drain order, from inside
``TearDownStack.run()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from tearstack.services.result import DrainReport

hookspec = pluggy.HookspecMarker("tearstack")
hookimpl = pluggy.HookimplMarker("tearstack")


class TearstackHookSpec:
    """Hook specifications for the tearstack plugin system."""

    @hookspec
    def tearstack_entry_skipped(self, action: str) -> None:
        """Called when an optional action is skipped under the skip policy."""

    @hookspec
    def tearstack_entry_failed(self, action: str, error: BaseException) -> None:
        """Called after an action raised; the failure has been contained."""

    @hookspec
    def tearstack_drained(self, report: DrainReport) -> None:
        """Called once per non-empty drain, after every entry was visited."""
