# Standard library imports
from collections.abc import MutableMapping
from functools import lru_cache
import logging
import sys
from typing import Any

# Local application imports
from smartmunic.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LevelColourFormatter(logging.Formatter):
    """
    Console formatter that tints each record by severity.
    """

    LEVEL_COLOURS = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[38;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }
    RESET = "\x1b[0m"

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT)
        self._formatters = {
            level: logging.Formatter(f"{colour}{LOG_FORMAT}{self.RESET}")
            for level, colour in self.LEVEL_COLOURS.items()
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)


def _default_level() -> int:
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL)
    return logging.DEBUG if settings.DEBUG_MODE else logging.INFO


def _build_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # Colour codes only make sense on an interactive terminal
    if settings.LOG_COLORS and sys.stdout.isatty():
        handler.setFormatter(LevelColourFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


@lru_cache
def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Return a stdout logger for ``name``, configured once per name.

    The level comes from LOG_LEVEL when set, otherwise DEBUG with DEBUG_MODE
    on and INFO without it. In production, records at WARNING and above are
    also forwarded to Sentry by the LoggingIntegration registered in
    ``smartmunic.core.monitoring.sentry``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = level if level is not None else _default_level()
    logger.setLevel(level)
    logger.addHandler(_build_handler(level))
    logger.propagate = False
    return logger


class ContextLoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """
    Suffixes every message with ``[key=value ...]`` context, e.g. an issue
    reference or a Celery task id.
    """

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None):
        super().__init__(logger, context or {})

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        if not self.extra:
            return msg, kwargs
        context = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"{msg} [{context}]", kwargs


def get_contextual_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    return ContextLoggerAdapter(get_logger(name), context)
