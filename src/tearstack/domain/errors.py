"""Failure records produced while draining a tear-down stack."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel


class ActionFailure(BaseModel):
    """One contained failure raised by a single tear-down action.

    Attributes:
        action: Name of the action that failed.
        message: ``str()`` of the raised exception.
        error: The exception itself, kept for strict-mode re-raising.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    action: str
    message: str
    error: BaseException

    @classmethod
    def capture(cls, action: str, error: BaseException) -> ActionFailure:
        return cls(action=action, message=describe_error(error), error=error)


def describe_error(error: BaseException) -> str:
    """``str(error)``, or a placeholder when the exception cannot render itself."""
    try:
        return str(error)
    except Exception:
        return f"<unprintable {type(error).__name__}>"


class TearDownFailedError(ExceptionGroup):
    """Raised after a strict-mode drain in which at least one action failed.

    The drain always completes before this is raised, so every entry has
    been visited.
    """

    @classmethod
    def from_failures(cls, failures: Sequence[ActionFailure]) -> TearDownFailedError:
        noun = "action" if len(failures) == 1 else "actions"
        msg = f"{len(failures)} tear-down {noun} failed"
        return cls(msg, [f.error for f in failures])
