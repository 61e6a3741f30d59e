"""Ambient infrastructure: configuration, logging, errors, timing."""

from .config import Settings, get_settings, settings
from .errors import (
    CoefficientTypeError,
    InvalidExponentError,
    UnitError,
    VectraError,
    ZeroVectorError,
)
from .logging import get_context_logger, get_logger, setup_logging
from .timing import time_it, timer

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "VectraError",
    "InvalidExponentError",
    "CoefficientTypeError",
    "ZeroVectorError",
    "UnitError",
    "get_logger",
    "get_context_logger",
    "setup_logging",
    "time_it",
    "timer",
]
