"""Framework-neutral integration shapes.

- Guarded setup: setup runs inside the same protected region as the body,
  so a setup failure still reaches the drain.
- Scoped region: a context manager whose exit always drains.

Both drain through the stack's own context manager, so in strict mode an
exception from the body wins over a strict-mode tear-down error.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any

from tearstack.services.stack import TearDownStack


def run_guarded(
    stack: TearDownStack,
    setup: Callable[[], Any] | None,
    body: Callable[[], Any],
) -> Any:
    """Run *setup* then *body*, draining *stack* exactly once afterwards.

    Returns whatever *body* returns. Exceptions from *setup* or *body*
    propagate after the drain.
    """
    with stack:
        if setup is not None:
            setup()
        return body()


@contextmanager
def teardown_scope(**stack_kwargs: Any) -> Generator[TearDownStack]:
    """Yield a fresh :class:`TearDownStack` that is drained on exit.

    Keyword arguments are passed to the stack constructor.
    """
    with TearDownStack(**stack_kwargs) as stack:
        yield stack
