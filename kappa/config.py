from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_JOIN_SEPARATOR = ", "
_DEFAULT_LOG_LEVEL = "WARNING"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw


def get_join_separator() -> str:
    # read on every call so tests and callers can switch it without reloading
    return str_from_env('KAPPA_JOIN_SEPARATOR', _DEFAULT_JOIN_SEPARATOR)


def get_log_level() -> int:
    name = str_from_env('KAPPA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> logging.Logger:
    """Set the `kappa` logger level from KAPPA_LOG_LEVEL. Handlers are left to the caller."""
    logger = logging.getLogger('kappa')
    logger.setLevel(get_log_level())
    return logger
