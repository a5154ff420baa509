"""Logging for shell detection and rc file edits.

Nothing is written anywhere unless WHAT_THE_PATH_LOG_FILE names a file.
Records about an rc file carry it as ``rcfile``, so the log shows which
file each edit touched.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

# Global logger instance (singleton)
_logger: Optional[logging.Logger] = None

LOGGER_NAME = "what_the_path"
LOG_FILE_ENV = "WHAT_THE_PATH_LOG_FILE"
LOG_LEVEL_ENV = "WHAT_THE_PATH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(rcfile)s] %(message)s"


class _RcFileDefault(logging.Filter):
    """Fill in ``rcfile`` for records that are not about a specific file."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "rcfile"):
            record.rcfile = "-"
        return True


class RcFileLogger(logging.LoggerAdapter):
    """Tags every record with the rc file being acted on."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**kwargs.get("extra", {}), **self.extra}
        return msg, kwargs


def get_logger() -> logging.Logger:
    """Get or create the package logger."""
    global _logger
    if _logger is None:
        _logger = _setup_logger()
    return _logger


def rcfile_logger(rcfile: Union[str, Path]) -> RcFileLogger:
    """Return a logger whose records name ``rcfile``."""
    return RcFileLogger(get_logger(), {"rcfile": str(rcfile)})


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper())
    return level if isinstance(level, int) else logging.DEBUG


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.addFilter(_RcFileDefault())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)


def _setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_env())

    # Handlers configured by the embedding application take precedence
    if logger.handlers:
        return logger

    log_file = os.environ.get(LOG_FILE_ENV)
    if not log_file:
        return logger

    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        _attach(logger, logging.StreamHandler())
        logger.warning(f"Cannot open log file {log_file}, logging to stderr: {e}")
        return logger

    _attach(logger, handler)
    return logger
