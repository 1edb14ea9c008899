"""Lifecycle integration — glue that drains a stack once per test.

INVARIANT: ``run()`` is invoked exactly once after each test unit, even
when setup or the test body fails.
"""

from tearstack.integration.lifecycle import run_guarded, teardown_scope
from tearstack.integration.testcase import TearDownMixin, install

__all__ = ["TearDownMixin", "install", "run_guarded", "teardown_scope"]
