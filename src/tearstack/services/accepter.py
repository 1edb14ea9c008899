"""TearDownAccepter — the registration-facing capability.

Anything that owns a :class:`~tearstack.services.stack.TearDownStack` can
expose the capability by delegating to it; :class:`TearDownAccepterMixin`
does exactly that for hosts with a ``teardown_stack`` attribute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tearstack.domain.action import Action
    from tearstack.services.stack import TearDownStack


@runtime_checkable
class TearDownAccepter(Protocol):
    """Something that tear-down actions can be registered with."""

    def add_teardown(self, action: Action, /, *args: Any, **kwargs: Any) -> Action:
        """Register an optional action, skipped when the skip policy is on."""
        ...

    def add_required_teardown(self, action: Action, /, *args: Any, **kwargs: Any) -> Action:
        """Register an action that always runs, whatever the skip policy.

        Use this for cleanup that must happen regardless of user
        preference, for example closing file handles.
        """
        ...


class TearDownAccepterMixin:
    """Implements :class:`TearDownAccepter` by delegating to ``teardown_stack``."""

    teardown_stack: TearDownStack

    def add_teardown(self, action: Action, /, *args: Any, **kwargs: Any) -> Action:
        return self.teardown_stack.add_teardown(action, *args, **kwargs)

    def add_required_teardown(self, action: Action, /, *args: Any, **kwargs: Any) -> Action:
        return self.teardown_stack.add_required_teardown(action, *args, **kwargs)
