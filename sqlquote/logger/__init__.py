"""Logging helpers."""

from .logger import (
    LOG_LEVEL,
    get_log_level_from_env,
    log_critical,
    log_debug,
    log_error,
    log_info,
    log_warn,
    log_warning,
)

__all__ = [
    "LOG_LEVEL",
    "get_log_level_from_env",
    "log_critical",
    "log_debug",
    "log_error",
    "log_info",
    "log_warn",
    "log_warning",
]
