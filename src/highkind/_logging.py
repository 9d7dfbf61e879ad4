"""Logging for highkind.

The library logs through stdlib loggers under the ``highkind`` namespace,
wrapped by structlog so entries carry key/value context. Nothing is written
anywhere until the host opts in: the namespace carries a ``NullHandler`` and
entries below the effective stdlib level are dropped before any processor or
hook runs. ``configure_logging`` is the opt-in; it installs one stderr handler
whose ``ProcessorFormatter`` renders both highkind and foreign records.
"""

from __future__ import annotations

import contextlib
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

LIBRARY_LOGGER = 'highkind'

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of every emitted log entry.

    Args:
        hook: Callable that receives the entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        # a failing hook must not break the log call that triggered it
        with contextlib.suppress(Exception):
            hook(event_dict.copy())
    return event_dict


def _entry_processors() -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def get_logger(name: str = LIBRARY_LOGGER) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    The level check runs first, so a disabled level costs one ``isEnabledFor``
    and never reaches the hooks.

    Args:
        name: Stdlib logger name, usually the caller's ``__name__``.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_entry_processors(),
            _run_hooks,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send log records to stderr, rendered by structlog.

    Replaces the root logger's handlers with a single stderr handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_entry_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
