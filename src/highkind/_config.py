"""Library configuration: HighKindConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from highkind._logging import configure_logging, get_logger
from highkind.errors import InvalidArgumentError

__all__ = [
    'HighKindConfig',
    'get_config',
    'init',
    'reset',
]

DEFAULT_SHOW_LIMIT = 10

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class HighKindConfig:
    """Configuration for highkind.

    Attributes:
        show_limit: How many leading elements of an infinite Stream are rendered.
        check_narrow: Verify the concrete family on every narrow instead of
            trusting the caller.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    show_limit: int = DEFAULT_SHOW_LIMIT
    check_narrow: bool = False
    log_level: str | None = None


# Global configuration (set by init() or built lazily from the environment)
_config: HighKindConfig | None = None


def _detect_show_limit() -> int:
    """Read HIGHKIND_SHOW_LIMIT, falling back to the default on bad input."""
    raw = os.environ.get('HIGHKIND_SHOW_LIMIT', '').strip()
    if not raw:
        return DEFAULT_SHOW_LIMIT
    try:
        value = int(raw)
    except ValueError:
        logging.warning("Invalid HIGHKIND_SHOW_LIMIT value '%s', defaulting to %d", raw, DEFAULT_SHOW_LIMIT)
        return DEFAULT_SHOW_LIMIT
    if value < 0:
        logging.warning("Negative HIGHKIND_SHOW_LIMIT value '%s', defaulting to %d", raw, DEFAULT_SHOW_LIMIT)
        return DEFAULT_SHOW_LIMIT
    return value


def _detect_check_narrow() -> bool:
    """Read HIGHKIND_CHECK_NARROW as a boolean flag."""
    raw = os.environ.get('HIGHKIND_CHECK_NARROW', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw not in _FALSY:
        logging.warning("Unknown HIGHKIND_CHECK_NARROW value '%s', defaulting to off", raw)
    return False


def _detect_log_level() -> str | None:
    raw = os.environ.get('HIGHKIND_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    show_limit: int | None = None,
    check_narrow: bool | None = None,
    log_level: str | None = None,
) -> HighKindConfig:
    """Initialize highkind with the specified configuration.

    Arguments left as None are detected from the environment
    (HIGHKIND_SHOW_LIMIT, HIGHKIND_CHECK_NARROW, HIGHKIND_LOG_LEVEL).

    Args:
        show_limit: Leading Stream elements to render. Must be >= 0.
        check_narrow: Verify narrowing casts at runtime.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The HighKindConfig that was set.

    Raises:
        InvalidArgumentError: If show_limit is negative.

    Example:
        ```python
        from highkind import init

        init(check_narrow=True, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    if show_limit is None:
        resolved_limit = _detect_show_limit()
    elif show_limit < 0:
        raise InvalidArgumentError('show_limit', f'must be >= 0, got {show_limit}')
    else:
        resolved_limit = show_limit

    _config = HighKindConfig(
        show_limit=resolved_limit,
        check_narrow=_detect_check_narrow() if check_narrow is None else check_narrow,
        log_level=_detect_log_level() if log_level is None else log_level,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level)
        get_logger(__name__).info(
            'highkind configured',
            show_limit=_config.show_limit,
            check_narrow=_config.check_narrow,
        )
    return _config


def get_config() -> HighKindConfig:
    """Get the current configuration, building it from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
