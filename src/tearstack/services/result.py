"""DrainReport — the outcome of one ``TearDownStack.run()`` call.

INVARIANT: ``visited`` equals the number of entries the stack held when the
drain started, whatever the failures.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tearstack.domain.errors import ActionFailure


class DrainReport(BaseModel):
    """Per-drain record of what ran, what was skipped, and what failed.

    Attributes:
        executed: Names of actions that were invoked, in execution order.
            Failed actions are included; they were executed.
        skipped: Names of optional actions skipped under the skip policy.
        failures: Failures contained during the drain, in execution order.
    """

    model_config = {"frozen": True}

    executed: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failures: list[ActionFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def visited(self) -> int:
        return len(self.executed) + len(self.skipped)
