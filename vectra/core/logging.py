"""
Logging for the vectra package.

Library modules only ask for loggers and log at DEBUG. Nothing is printed
until an application calls setup_logging(), which attaches handlers to the
``vectra`` logger alone and leaves the root logger untouched.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Settings, get_settings

PACKAGE_LOGGER = "vectra"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record; ``extra_data`` keys are merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        entry.update(getattr(record, "extra_data", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``<time> - <logger> - <LEVEL> - <message>``"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def _build_handlers(config: Settings, formatter: logging.Formatter) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        path = Path(config.LOG_FILE)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    Route the ``vectra`` logger tree to stdout and, optionally, a file.

    Calling it again replaces the handlers from the previous call.

    Args:
        config: Settings providing LOG_LEVEL, LOG_FORMAT and LOG_FILE
            (defaults to get_settings())

    Returns:
        The package logger
    """
    config = config or get_settings()
    level = getattr(logging, config.LOG_LEVEL.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    formatter = StructuredFormatter() if config.LOG_FORMAT == "json" else TextFormatter()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(config, formatter):
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Attaches fixed context, plus any per-call ``extra_data``, to each record."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        context = {**self.extra, **kwargs.pop("extra_data", {})}
        kwargs.setdefault("extra", {})["extra_data"] = context
        return msg, kwargs


def get_context_logger(name: str, **context: Any) -> LoggerAdapter:
    """Logger whose records always carry ``context``."""
    return LoggerAdapter(get_logger(name), context)
