"""Structured logger configuration module.

This module configures the shared sink logger that renders structured
records. Gate loggers are the application's own loggers and are configured
by the application.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_SINK_NAME = "slogger.structured"


@dataclass
class LoggingConfig:
    """Configuration for the structured sink logger.

    Example:
        >>> # Create from environment variables
        >>> config = LoggingConfig.from_env()
        >>>
        >>> # Create programmatically
        >>> config = LoggingConfig(level="INFO", format="text")
        >>> config.validate()
    """

    level: str = "TRACE"
    format: str = "json"  # or "text"
    trace_correlation: bool = True
    output_file: Optional[str] = None
    sink_name: str = DEFAULT_SINK_NAME

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables.

        Environment Variables:
            SLOG_LOG_LEVEL: Sink threshold - TRACE, DEBUG, INFO, WARN, ERROR
                (default: TRACE, gating is left to the gate loggers)
            SLOG_LOG_FORMAT: Output format - json or text (default: json)
            SLOG_LOG_TRACE_CORRELATION: Include trace IDs in logs (default: true)
            SLOG_LOG_FILE: Log file path (optional, defaults to stderr)
            SLOG_SINK_NAME: Name of the sink logger (default: slogger.structured)

        Returns:
            LoggingConfig populated from the environment.
        """
        return cls(
            level=os.getenv("SLOG_LOG_LEVEL", "TRACE").upper(),
            format=os.getenv("SLOG_LOG_FORMAT", "json").lower(),
            trace_correlation=os.getenv("SLOG_LOG_TRACE_CORRELATION", "true").lower()
            == "true",
            output_file=os.getenv("SLOG_LOG_FILE"),
            sink_name=os.getenv("SLOG_SINK_NAME", DEFAULT_SINK_NAME),
        )

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If configuration is invalid.
        """
        valid_levels = ("TRACE", "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL")
        if self.level not in valid_levels:
            raise ValueError(
                f"Invalid log level: {self.level}. Must be one of {valid_levels}"
            )
        if self.format not in ("json", "text"):
            raise ValueError(
                f"Invalid log format: {self.format}. Must be 'json' or 'text'"
            )
        if not self.sink_name:
            raise ValueError("Sink name must not be empty")
