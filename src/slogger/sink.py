"""Default sink logger.

The sink is a dedicated stdlib logger that accepts every level, does not
propagate to parent loggers and owns a single structured handler. One sink
is shared by all :class:`~slogger.logger.StructuredLogger` facades that are
not given one explicitly.
"""

import logging
import sys
import threading
from typing import Optional, Tuple

from slogger.config import LoggingConfig
from slogger.formatter import StructuredFormatter, TextFormatter
from slogger.interfaces import SinkLogger
from slogger.levels import parse_level

# Shared instance
_default_sink: Optional[SinkLogger] = None
_lock = threading.Lock()


def build_formatter(config: LoggingConfig) -> logging.Formatter:
    """Create the formatter selected by ``config.format``."""
    if config.format == "json":
        return StructuredFormatter(include_trace_context=config.trace_correlation)
    return TextFormatter(include_trace_context=config.trace_correlation)


def build_handler(config: LoggingConfig) -> logging.Handler:
    """Create the sink handler with its formatter attached."""
    if config.output_file:
        handler: logging.Handler = logging.FileHandler(config.output_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(config))
    return handler


def sink_handler_name(sink_name: str) -> str:
    """Name given to the structured handler installed on ``sink_name``."""
    return f"slogger:{sink_name}"


def install_sink_handler(config: LoggingConfig) -> Tuple[logging.Logger, logging.Handler]:
    """Install the structured handler on the sink logger.

    A structured handler left on the same logger by an earlier call is
    removed and closed, so each sink writes every record once. Handlers
    installed by anything else are left alone.

    Args:
        config: Validated sink configuration.

    Returns:
        The sink logger and the handler now attached to it.
    """
    sink = logging.getLogger(config.sink_name)
    handler = build_handler(config)
    handler.set_name(sink_handler_name(config.sink_name))

    for existing in list(sink.handlers):
        if existing.get_name() == handler.get_name():
            sink.removeHandler(existing)
            existing.close()

    sink.addHandler(handler)
    sink.setLevel(parse_level(config.level))
    sink.propagate = False
    return sink, handler


def build_sink_logger(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Configure the sink logger named by ``config.sink_name``.

    Args:
        config: Sink configuration. If None, loads from environment.

    Returns:
        The configured sink logger.

    Raises:
        ValueError: If configuration is invalid.
    """
    config = config or LoggingConfig.from_env()
    config.validate()

    sink, _ = install_sink_handler(config)
    return sink


def get_default_sink() -> SinkLogger:
    """Get the process-wide sink, building it from the environment on first use.

    Returns:
        Shared sink logger.
    """
    global _default_sink

    if _default_sink is None:
        with _lock:
            if _default_sink is None:
                _default_sink = build_sink_logger()

    return _default_sink


def set_default_sink(sink: SinkLogger) -> None:
    """Replace the process-wide sink.

    Facades created afterwards without an explicit sink use ``sink``;
    existing facades keep the sink they were created with.
    """
    global _default_sink

    with _lock:
        _default_sink = sink


def reset_default_sink() -> None:
    """Forget the process-wide sink (for testing).

    Warning:
        Handlers already attached to the previous sink are left in place.
    """
    global _default_sink

    with _lock:
        _default_sink = None
