"""Runtime configuration: SeqConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fnseq.errors import InvalidArgumentError
from fnseq.runtime._logging import configure_logging

__all__ = [
    'SeqConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class SeqConfig:
    """Configuration for fnseq.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log records as JSON (True) or as console text (False).
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: SeqConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FNSEQ_LOG_LEVEL, or None when unset or unknown."""
    env_level = os.environ.get('FNSEQ_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown FNSEQ_LOG_LEVEL value '%s', logging stays disabled", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read the log format from FNSEQ_LOG_FORMAT ("json" or "console").

    Defaults to JSON.
    """
    env_format = os.environ.get('FNSEQ_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown FNSEQ_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> SeqConfig:
    """Initialize fnseq with the given configuration.

    Unset arguments fall back to the FNSEQ_LOG_LEVEL and FNSEQ_LOG_FORMAT
    environment variables. Sequence operations work without calling this;
    it only controls logging.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: JSON (True) or console (False) log rendering.

    Returns:
        The SeqConfig that was set.

    Raises:
        InvalidArgumentError: If log_level is not a known logging level.

    Example:
        ```python
        from fnseq.runtime import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is not None:
        resolved_level = log_level.upper()
        if resolved_level not in _LEVELS:
            msg = f'init: unknown log level {log_level!r}, expected one of {", ".join(_LEVELS)}'
            raise InvalidArgumentError('log_level', msg)
    else:
        resolved_level = _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = SeqConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> SeqConfig:
    """Get the current configuration.

    Returns:
        The current SeqConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'fnseq not initialized. Call fnseq.runtime.init() first.'
        raise RuntimeError(msg)
    return _config
