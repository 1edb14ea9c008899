"""unittest integration by composition.

``unittest.TestCase.addCleanup`` callbacks run after ``tearDown`` and also
when ``setUp`` raises, which is the guarded-setup shape: scheduling the
drain as a cleanup gives exactly one drain per test.
"""

from __future__ import annotations

import unittest
from typing import Any, ClassVar

from tearstack.services.accepter import TearDownAccepterMixin
from tearstack.services.stack import TearDownStack

_STACK_ATTR = "_tearstack_stack"


def install(testcase: unittest.TestCase, **stack_kwargs: Any) -> TearDownStack:
    """Attach a fresh stack to *testcase* and schedule its drain.

    Call from ``setUp`` (or the test itself); the returned stack is drained
    once when the test finishes, pass or fail.
    """
    stack = TearDownStack(**stack_kwargs)
    testcase.addCleanup(stack.run)
    return stack


class TearDownMixin(TearDownAccepterMixin):
    """Gives a ``unittest.TestCase`` ``add_teardown``/``add_required_teardown``.

    The stack is created on first use, so tests that never register a
    tear-down pay nothing.

    Usage::

        class ServerTest(TearDownMixin, unittest.TestCase):
            def setUp(self):
                self.server = start_server()
                self.add_required_teardown(self.server.stop)
    """

    teardown_stack_options: ClassVar[dict[str, Any]] = {}

    @property
    def teardown_stack(self) -> TearDownStack:  # type: ignore[override]
        state = self.__dict__
        stack = state.get(_STACK_ATTR)
        if stack is None:
            stack = install(self, **self.teardown_stack_options)  # type: ignore[arg-type]
            state[_STACK_ATTR] = stack
            self.addCleanup(state.pop, _STACK_ATTR, None)  # type: ignore[attr-defined]
        return stack
