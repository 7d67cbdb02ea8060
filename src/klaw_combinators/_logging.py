"""structlog setup for klaw-combinators.

The library only emits debug events (``step.failed``, ``sink.append``,
``merge.applied``) and stays silent until an application opts in with
``configure_logging()`` or ``init(log_level=...)``. Once configured, structlog
events and plain stdlib records share one stderr handler rendered as JSON or
console text.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

_hooks: list[Callable[[dict[str, Any]], None]] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Hand each registered hook its own copy of the event."""
    for hook in list(_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001
            # A broken hook must not stop the event from being rendered.
            continue
    return event_dict


def _pre_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        level: Root logger level name, case-insensitive. Unknown names fall
            back to INFO.
        json_output: Render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Logger for library and demo code.

    Until ``configure_logging()`` has run, events go to the stdlib logger of
    the same name (silent under the default WARNING level) rather than to
    structlog's default stdout printer.
    """
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=['event']),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Call ``hook`` with a copy of every event logged after configuration."""
    _hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    _hooks.clear()
