"""Library configuration: OptionalConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from pyoptional._logging import configure_logging

__all__ = [
    'LOG_LEVEL_ENV_VAR',
    'OptionalConfig',
    'get_config',
    'init',
    'logging_enabled',
]

LOG_LEVEL_ENV_VAR = 'PYOPTIONAL_LOG_LEVEL'

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class OptionalConfig:
    """Configuration for pyoptional.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log records as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: OptionalConfig | None = None


def _normalize_level(raw: str, source: str) -> str | None:
    """Uppercase a level name, or return None if it is empty or unknown.

    Unknown names are reported with a warning naming where they came from.
    """
    level = raw.strip().upper()
    if not level:
        return None
    if level not in _LEVELS:
        logging.warning("Unknown %s value '%s', logging stays disabled", source, level)
        return None
    return level


def _detect_log_level() -> str | None:
    """Read the log level from the PYOPTIONAL_LOG_LEVEL environment variable.

    Returns None (silent) when the variable is unset, empty or not a known level.
    """
    return _normalize_level(os.environ.get(LOG_LEVEL_ENV_VAR, ''), LOG_LEVEL_ENV_VAR)


def init(log_level: str | None = None, *, json_output: bool = True) -> OptionalConfig:
    """Initialize pyoptional with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            PYOPTIONAL_LOG_LEVEL if None; silent if neither is set.
            Unknown level names are ignored with a warning.
        json_output: Emit JSON logs (True) or colored console logs (False).

    Returns:
        The OptionalConfig that was set.

    Example:
        ```python
        import pyoptional

        # Contract violations are logged at DEBUG level
        pyoptional.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = _normalize_level(log_level, 'log_level') if log_level is not None else _detect_log_level()

    _config = OptionalConfig(log_level=resolved_level, json_output=json_output)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_output)

    return _config


def get_config() -> OptionalConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'pyoptional not initialized. Call pyoptional.init() first.'
        raise RuntimeError(msg)
    return _config


def logging_enabled() -> bool:
    """Return True if init() was called with a log level."""
    return _config is not None and _config.log_level is not None
