"""The Action capability and the Entry that wraps it.

An Action is any zero-argument callable. Ad hoc closures, reusable cleanup
objects, and self-cleaning resources that define ``__call__`` all qualify;
there is no base class to inherit from.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

Action = Callable[[], Any]


@runtime_checkable
class TearDown(Protocol):
    """Performs a single tear-down operation. May raise for any reason."""

    def __call__(self) -> Any: ...


def describe_action(action: object) -> str:
    """Human-readable name used to attribute notifications to *action*.

    Never raises: objects whose attribute lookup fails are named by type.
    """
    try:
        if isinstance(action, functools.partial):
            return describe_action(action.func)
        name = getattr(action, "__qualname__", None) or getattr(action, "__name__", None)
        if isinstance(name, str):
            module = getattr(action, "__module__", None)
            return f"{module}.{name}" if isinstance(module, str) and module else name
    except Exception:
        return type(action).__qualname__
    return type(action).__qualname__


@dataclass(frozen=True)
class Entry:
    """An Action tagged as required or optional.

    Required entries execute even when the skip policy asks for optional
    tear-downs to be skipped.
    """

    action: Action
    required: bool = False

    @property
    def name(self) -> str:
        return describe_action(self.action)

    def __call__(self) -> Any:
        return self.action()
