"""structlog configuration for tear-down notifications.

Two output modes:
- Console (default): human-readable lines on stderr
- JSON (log_json=True): one JSON object per notification on stderr

Only the ``tearstack`` logger hierarchy is touched; the host's root logger
and its handlers are left alone. The handler resolves ``sys.stderr`` at
emit time, so under pytest the notifications land in each test's captured
stderr section.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "tearstack"


class StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler bound to the current ``sys.stderr`` rather than the one at creation."""

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route tearstack's structlog events through stdlib ``logging``.

    Args:
        verbose: Also show DEBUG events, such as observer failures.
            When False, the INFO tear-down notifications and above.
        log_json: Use the JSON renderer instead of the console renderer.

    Returns:
        The installed handler. Calling again replaces it rather than
        adding a second one.
    """
    level = logging.DEBUG if verbose else logging.INFO

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = StderrHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in logger.handlers if isinstance(h, StderrHandler)]:
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler
