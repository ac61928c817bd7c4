"""Structured logging facade.

Wraps an existing stdlib logger and emits each call as a single structured
record with immutable, sorted context fields.
"""

from slogger.config import LoggingConfig
from slogger.context import ContextCarrier
from slogger.exceptions import InvalidArgumentError, SloggerError
from slogger.levels import Level
from slogger.logger import StructuredLogger
from slogger.manager import LoggerManager
from slogger.sink import get_default_sink, reset_default_sink, set_default_sink

__version__ = "0.1.0"

__all__ = [
    "ContextCarrier",
    "InvalidArgumentError",
    "Level",
    "LoggerManager",
    "LoggingConfig",
    "SloggerError",
    "StructuredLogger",
    "get_default_sink",
    "reset_default_sink",
    "set_default_sink",
]
