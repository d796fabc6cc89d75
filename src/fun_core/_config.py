"""Library configuration: FunConfig and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fun_core._logging import configure_logging, get_logger

__all__ = [
    'DEFAULT_MEMOIZE_MAXSIZE',
    'FunConfig',
    'config_from_env',
    'get_config',
    'init',
    'reset',
]

DEFAULT_MEMOIZE_MAXSIZE = 256

logger = get_logger(__name__)


@dataclass(frozen=True)
class FunConfig:
    """Configuration for fun-core.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON instead of console output.
        memoize_maxsize: Default bound for `memoize` caches. None = unbounded.
    """

    log_level: str | None = None
    json_logs: bool = False
    memoize_maxsize: int | None = DEFAULT_MEMOIZE_MAXSIZE


# Global configuration (set by init())
_config: FunConfig | None = None


def _detect_maxsize() -> int | None:
    """Read FUN_CORE_MEMOIZE_MAXSIZE, falling back to the default on bad input."""
    raw = os.environ.get('FUN_CORE_MEMOIZE_MAXSIZE', '').strip().lower()
    if not raw:
        return DEFAULT_MEMOIZE_MAXSIZE
    if raw == 'none':
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning('config.invalid_maxsize', value=raw, fallback=DEFAULT_MEMOIZE_MAXSIZE)
        return DEFAULT_MEMOIZE_MAXSIZE
    if value <= 0:
        logger.warning('config.invalid_maxsize', value=raw, fallback=DEFAULT_MEMOIZE_MAXSIZE)
        return DEFAULT_MEMOIZE_MAXSIZE
    return value


def config_from_env() -> FunConfig:
    """Build a FunConfig from FUN_CORE_* environment variables."""
    return FunConfig(
        log_level=os.environ.get('FUN_CORE_LOG_LEVEL') or None,
        json_logs=os.environ.get('FUN_CORE_JSON_LOGS', '').lower() in ('1', 'true', 'yes'),
        memoize_maxsize=_detect_maxsize(),
    )


def init(config: FunConfig | None = None) -> FunConfig:
    """Initialize fun-core.

    Args:
        config: Explicit configuration. Read from the environment if None.

    Returns:
        The active configuration.
    """
    global _config
    _config = config if config is not None else config_from_env()
    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)
    logger.info(
        'config.initialized',
        log_level=_config.log_level,
        memoize_maxsize=_config.memoize_maxsize,
    )
    return _config


def get_config() -> FunConfig:
    """Return the active configuration, building it from the environment if unset."""
    global _config
    if _config is None:
        _config = config_from_env()
    return _config


def reset() -> None:
    """Forget the active configuration."""
    global _config
    _config = None
