"""
sqlquote.logger.logger

Logger used by the DuckDB helpers. Writes to stderr through a single stream handler.
Each record is prefixed with the calling module path and function name so that
executed statements can be traced back to the helper that issued them.

Level is read from the LOG_LEVEL environment variable on every call.
"""

import inspect
import logging
import os
from enum import IntEnum
from pathlib import Path

LOGGER_NAME = "sqlquote"


class LOG_LEVEL(IntEnum):
    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    CRITICAL = 50


def get_log_level_from_env(default: LOG_LEVEL = LOG_LEVEL.INFO) -> LOG_LEVEL:
    """
    Read log level from environment variable LOG_LEVEL.
    Supports names (DEBUG, INFO, etc.) or integers.
    Prints a warning if an invalid value is provided.
    """
    raw = os.getenv("LOG_LEVEL")
    if raw is None:
        return default

    raw = raw.strip()

    if raw.isdigit():
        try:
            return LOG_LEVEL(int(raw))
        except ValueError:
            print(f"[WARN] Unknown numeric log level: {raw}. Falling back to default: {default.name}")
            return default

    try:
        return LOG_LEVEL[raw.upper()]
    except KeyError:
        print(f"[WARN] Unknown log level: {raw}. Falling back to default: {default.name}")
        return default


def _get_caller_path(depth: int, levels: int = 2) -> str:
    frame = inspect.stack()[depth]
    short_path = "/".join(Path(frame.filename).parts[-levels:])
    return f"{short_path}:{frame.function}"


def _setup_logger(level: LOG_LEVEL | int | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    # always reset level to whatever the caller passed
    logger.setLevel(level if level is not None else get_log_level_from_env())
    return logger


def _log(level: LOG_LEVEL, message: str | None, stacklevel: int):
    # stack: _get_caller_path <- _log <- log_xxx <- caller (stacklevel 1)
    logger = _setup_logger()
    if not logger.isEnabledFor(level):
        return
    msg = f" - {message}" if message else ""
    logger.log(level, f"{_get_caller_path(2 + stacklevel)}{msg}")


# Public logging API. `stacklevel` selects the frame reported as caller, as in `logging`.
def log_debug(msg: str | None = None, stacklevel: int = 1):
    _log(LOG_LEVEL.DEBUG, msg, stacklevel)


def log_info(msg: str | None = None, stacklevel: int = 1):
    _log(LOG_LEVEL.INFO, msg, stacklevel)


def log_warn(msg: str | None = None, stacklevel: int = 1):
    _log(LOG_LEVEL.WARN, msg, stacklevel)


def log_warning(msg: str | None = None, stacklevel: int = 1):
    _log(LOG_LEVEL.WARN, msg, stacklevel)


def log_error(msg: str | None = None, stacklevel: int = 1):
    _log(LOG_LEVEL.ERROR, msg, stacklevel)


def log_critical(msg: str | None = None, stacklevel: int = 1):
    _log(LOG_LEVEL.CRITICAL, msg, stacklevel)
