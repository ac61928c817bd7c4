"""Logger manager for structured logging.

This module provides a LoggerManager class that builds one sink logger from
configuration and hands out lightweight structured facades over named gate
loggers.
"""

import logging
from typing import Dict, Optional, Union

from slogger.config import LoggingConfig
from slogger.levels import parse_level
from slogger.logger import StructuredLogger
from slogger.sink import install_sink_handler, set_default_sink

logger = logging.getLogger(__name__)


class LoggerManager:
    """Manager owning the shared sink for structured loggers.

    Example:
        >>> from slogger.config import LoggingConfig
        >>> manager = LoggerManager(LoggingConfig(format="json"))
        >>> manager.configure()
        >>>
        >>> log = manager.get_logger("svc.orders")
        >>> log.with_context("order_id", "o-123").info("Order accepted")
    """

    def __init__(self, config: Optional[LoggingConfig] = None) -> None:
        """Initialize the logger manager.

        Args:
            config: Sink configuration. If None, loads from environment.
        """
        self.config = config or LoggingConfig.from_env()
        self._handler: Optional[logging.Handler] = None
        self._sink: Optional[logging.Logger] = None
        self._loggers: Dict[str, StructuredLogger] = {}
        self._configured = False

    def configure(self, install_default: bool = False) -> None:
        """Build the sink logger and its handler.

        Should be called once during application initialization. Calling it
        again is a no-op.

        Args:
            install_default: Also make this sink the process-wide default
                used by facades created without an explicit sink.

        Raises:
            ValueError: If configuration is invalid.
        """
        if self._configured:
            return

        self.config.validate()

        # Replaces a structured handler already on this sink, e.g. one left
        # by the lazily built default sink
        self._sink, self._handler = install_sink_handler(self.config)

        if install_default:
            set_default_sink(self._sink)

        self._configured = True
        logger.debug("Structured sink %s configured", self.config.sink_name)

    def shutdown(self) -> None:
        """Remove the sink handler and forget handed-out facades."""
        if not self._configured:
            return

        if self._sink and self._handler:
            self._sink.removeHandler(self._handler)
            self._handler.close()
        self._handler = None

        self._loggers.clear()
        self._configured = False

    @property
    def sink(self) -> logging.Logger:
        """The configured sink logger.

        Raises:
            RuntimeError: If the manager has not been configured.
        """
        if not self._configured or self._sink is None:
            raise RuntimeError("LoggerManager is not configured")
        return self._sink

    def get_logger(self, name: Union[str, logging.Logger]) -> StructuredLogger:
        """Get a structured logger over a gate logger.

        Args:
            name: Gate logger name, or an existing stdlib logger.

        Returns:
            StructuredLogger with an empty context writing to this
            manager's sink. Facades for the same name are cached.
        """
        if isinstance(name, logging.Logger):
            return StructuredLogger(name, self.sink)

        if name not in self._loggers:
            self._loggers[name] = StructuredLogger(logging.getLogger(name), self.sink)

        return self._loggers[name]

    def set_level(self, name: str, level: str) -> None:
        """Set the level of a gate logger.

        Facades consult the gate on every call, so the change applies to
        loggers already handed out.

        Args:
            name: Gate logger name.
            level: Level name (TRACE, DEBUG, INFO, WARN, ERROR).
        """
        logging.getLogger(name).setLevel(parse_level(level))

    def get_level(self, name: str) -> str:
        """Get the effective level name of a gate logger."""
        return logging.getLevelName(logging.getLogger(name).getEffectiveLevel())

    def add_extra_field(self, key: str, value: str) -> None:
        """Add a static field to all JSON log entries.

        Note:
            Only works with StructuredFormatter.
        """
        formatter = self._handler.formatter if self._handler else None
        if hasattr(formatter, "extra_fields"):
            formatter.extra_fields[key] = value

    def remove_extra_field(self, key: str) -> None:
        """Remove a static field from JSON log entries."""
        formatter = self._handler.formatter if self._handler else None
        if hasattr(formatter, "extra_fields"):
            formatter.extra_fields.pop(key, None)

    @property
    def is_configured(self) -> bool:
        """Check if the logger manager has been configured."""
        return self._configured

    @property
    def registered_loggers(self) -> list:
        """Get list of gate logger names with cached facades."""
        return list(self._loggers.keys())
