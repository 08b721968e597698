"""Application logging with console and size-rotated file output."""

from __future__ import annotations

import enum
import logging
import logging.handlers
import sys
from dataclasses import dataclass

__all__ = [
    "LogLevel",
    "LoggingConfig",
    "initialize_logging",
    "get_logger",
    "set_log_level",
    "log_level_to_string",
]

DEFAULT_LOGGER_NAME = "fenris"

_PATTERN = "[%(asctime)s.%(msecs)03d] [%(name)s] [%(level_label)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(enum.IntEnum):
    """Severity levels, usable wherever the logging module expects a level."""

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    OFF = logging.CRITICAL + 10


_LEVEL_NAMES = {
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.CRITICAL: "critical",
    LogLevel.OFF: "off",
}

_RECORD_LABELS = (
    (logging.CRITICAL, "critical"),
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
    (logging.DEBUG, "debug"),
)


@dataclass
class LoggingConfig:
    """Where log output goes and how much of it is kept."""

    level: LogLevel = LogLevel.INFO
    console_logging: bool = True
    file_logging: bool = False
    log_file_path: str = "fenris.log"
    max_file_size: int = 1048576
    max_files: int = 3


class _Formatter(logging.Formatter):
    """Formatter that labels records with lower-case level names."""

    def format(self, record: logging.LogRecord) -> str:
        record.level_label = _record_level_label(record.levelno)
        return super().format(record)


def _record_level_label(levelno: int) -> str:
    for threshold, label in _RECORD_LABELS:
        if levelno >= threshold:
            return label
    return "trace"


_loggers: dict[str, logging.Logger] = {}
_default_logger: logging.Logger = logging.getLogger()


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    try:
        if config.console_logging:
            handlers.append(logging.StreamHandler(sys.stdout))
        if config.file_logging:
            handlers.append(
                logging.handlers.RotatingFileHandler(
                    config.log_file_path,
                    maxBytes=config.max_file_size,
                    backupCount=config.max_files,
                    encoding="utf-8",
                )
            )
    except Exception:
        for handler in handlers:
            handler.close()
        raise
    formatter = _Formatter(_PATTERN, datefmt=_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(config.level)
        handler.setFormatter(formatter)
    return handlers


def initialize_logging(
    config: LoggingConfig, logger_name: str = DEFAULT_LOGGER_NAME
) -> logging.Logger:
    """Configure and register the logger ``logger_name`` and return it.

    Initializing a name again replaces its previous outputs. The logger named
    ``fenris`` becomes the default logger. Raises ``OSError`` when the log
    file cannot be opened.
    """
    global _default_logger

    handlers = _build_handlers(config)

    logger = logging.getLogger(logger_name)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    if not handlers:
        handlers.append(logging.NullHandler())
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(config.level)
    logger.propagate = False

    _loggers[logger_name] = logger
    if logger_name == DEFAULT_LOGGER_NAME:
        _default_logger = logger
    return logger


def get_logger(logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return the registered logger ``logger_name``, or the default logger."""
    return _loggers.get(logger_name, _default_logger)


def set_log_level(level: LogLevel) -> None:
    """Set the level of every registered logger and of the default logger."""
    for logger in _loggers.values():
        logger.setLevel(level)
    _default_logger.setLevel(level)


def log_level_to_string(level: LogLevel) -> str:
    """Return the lower-case name of ``level``; unknown levels read as ``info``."""
    return _LEVEL_NAMES.get(level, "info")