"""TearDownStack — the ordered registry of tear-down actions and its drain.

Actions are registered as resources are acquired and executed in reverse
order of registration when the test concludes, so the most recently
acquired resource is released first.

INVARIANT: No single action's failure prevents any other action from
running. Each action executes inside its own ``try`` block; failures are
logged at INFO with the cause attached and never propagate out of
``run()`` unless strict mode was requested. The bookkeeping around each
action never aborts the drain either.

Not thread-safe: one stack belongs to the single thread running one test.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Protocol

import structlog

from tearstack.config.settings import get_settings
from tearstack.domain.action import Action, Entry
from tearstack.domain.errors import ActionFailure, TearDownFailedError
from tearstack.services.result import DrainReport

if TYPE_CHECKING:
    from types import TracebackType

    from tearstack.plugins.manager import PluginManager

SKIPPED_EVENT = "skipping optional TearDown"
FAILED_EVENT = "exception thrown during tearDown: {message}"

_fallback_log = structlog.get_logger(__name__)


class NotificationLogger(Protocol):
    """The slice of a structlog logger that the drain writes to."""

    def info(self, event: str, *args: Any, **kw: Any) -> Any: ...


def _bind(action: Action, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Action:
    if args or kwargs:
        return functools.partial(action, *args, **kwargs)
    return action


class TearDownStack:
    """Ordered, failure-isolated registry of tear-down actions.

    Parameters:
        skip_optional: Default skip flag for this stack. ``None`` takes the
            process-wide policy from :func:`get_settings` at construction.
        strict: Re-raise contained failures as :class:`TearDownFailedError`
            once the drain has finished. ``None`` takes the settings value.
        logger: Notification channel. Defaults to the ``tearstack.stack``
            structlog logger.
        plugin_manager: Observers to notify of skips, failures, and drains.

    Usage::

        stack = TearDownStack()
        conn = open_connection()
        stack.add_required_teardown(conn.close)
        tmp = make_tempdir()
        stack.add_teardown(shutil.rmtree, tmp)
        ...
        stack.run()  # rmtree(tmp), then conn.close()
    """

    def __init__(
        self,
        *,
        skip_optional: bool | None = None,
        strict: bool | None = None,
        logger: NotificationLogger | None = None,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self._entries: list[Entry] = []
        if skip_optional is None or strict is None:
            settings = get_settings()
            skip_optional = settings.skip_optional if skip_optional is None else skip_optional
            strict = settings.strict if strict is None else strict
        self._skip_optional = skip_optional
        self._strict = strict
        self._log = logger if logger is not None else structlog.get_logger("tearstack.stack")
        self._pm = plugin_manager

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, action: Action, *, required: bool = False) -> Entry:
        """Push *action* on top of the stack. Stores only; never raises."""
        entry = Entry(action=action, required=required)
        self._entries.append(entry)
        return entry

    def add_teardown(self, action: Action, /, *args: Any, **kwargs: Any) -> Action:
        """Register an optional action, skipped when the skip policy is on.

        Extra arguments are bound to *action*. Returns *action* unchanged,
        so this also works as a decorator.
        """
        self.register(_bind(action, args, kwargs), required=False)
        return action

    def add_required_teardown(self, action: Action, /, *args: Any, **kwargs: Any) -> Action:
        """Register an action that always runs, whatever the skip policy."""
        self.register(_bind(action, args, kwargs), required=True)
        return action

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Pending entries in registration order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        """Iterate pending entries in execution order."""
        return reversed(self.entries)

    # ------------------------------------------------------------------
    # Drain
    # ------------------------------------------------------------------

    def run(self, skip_optional: bool | None = None, *, strict: bool | None = None) -> DrainReport:
        """Execute every pending entry, last registered first, then empty the stack.

        Args:
            skip_optional: Skip optional entries for this drain. Falls back
                to the stack's default.
            strict: Raise :class:`TearDownFailedError` after the drain if
                any action failed. Falls back to the stack's default.

        Returns:
            A :class:`DrainReport`. Calling ``run()`` again returns an empty
            report and emits nothing.
        """
        skip = self._skip_optional if skip_optional is None else skip_optional

        # Detach first: the stack is empty afterwards even if a
        # BaseException escapes an action.
        entries, self._entries = self._entries, []

        executed: list[str] = []
        skipped: list[str] = []
        failures: list[ActionFailure] = []

        for entry in reversed(entries):
            name = entry.name
            if skip and not entry.required:
                self._emit(SKIPPED_EVENT, action=name)
                self._notify("tearstack_entry_skipped", action=name)
                skipped.append(name)
                continue

            executed.append(name)
            try:
                entry()
            except Exception as exc:
                failure = ActionFailure.capture(name, exc)
                failures.append(failure)
                self._emit(
                    FAILED_EVENT.format(message=failure.message),
                    action=name,
                    error_type=type(exc).__name__,
                    exc_info=exc,
                )
                self._notify("tearstack_entry_failed", action=name, error=exc)

        report = DrainReport(executed=executed, skipped=skipped, failures=failures)
        if entries:
            self._notify("tearstack_drained", report=report)

        if failures and (self._strict if strict is None else strict):
            raise TearDownFailedError.from_failures(failures)
        return report

    # ------------------------------------------------------------------
    # Scoped use
    # ------------------------------------------------------------------

    def __enter__(self) -> TearDownStack:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # A failing body keeps its own exception; strict mode only raises
        # on a clean exit.
        self.run(strict=False if exc is not None else None)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _emit(self, event: str, **kw: Any) -> None:
        try:
            self._log.info(event, **kw)
        except Exception as err:
            _fallback_log.debug(
                "notification logger failed",
                event=event,
                error_type=type(err).__name__,
            )

    def _notify(self, hook_name: str, **payload: Any) -> None:
        if self._pm is None:
            return
        self._pm.notify(hook_name, **payload)
