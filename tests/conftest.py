"""
Pytest configuration and fixtures for slogger tests.

This module provides mocks for the gate and sink collaborators and keeps the
process-wide default sink isolated between tests.
"""

import logging
from typing import Generator
from unittest.mock import MagicMock

import pytest

from slogger.config import LoggingConfig
from slogger.logger import StructuredLogger
from slogger.sink import reset_default_sink


# ============================================================================
# Collaborator Mocks
# ============================================================================

@pytest.fixture
def gate_logger() -> MagicMock:
    """
    Mock gate logger with every level disabled.

    Tests enable levels by setting ``isEnabledFor.return_value`` or
    ``isEnabledFor.side_effect``.

    Returns:
        MagicMock: A gate logger named "ParentLoggerName"
    """
    gate = MagicMock()
    gate.name = "ParentLoggerName"
    gate.isEnabledFor.return_value = False
    return gate


@pytest.fixture
def sink_logger() -> MagicMock:
    """
    Mock sink logger recording ``log(level, record)`` calls.

    Returns:
        MagicMock: A sink logger
    """
    return MagicMock()


@pytest.fixture
def slogger(gate_logger: MagicMock, sink_logger: MagicMock) -> StructuredLogger:
    """
    StructuredLogger wired to the mocked gate and sink.

    Returns:
        StructuredLogger: Facade with an empty context
    """
    return StructuredLogger(gate_logger, sink_logger)


@pytest.fixture
def dummy_item() -> dict:
    """Nested context value."""
    return {"name": "foo", "count": 42}


# ============================================================================
# Default Sink Isolation
# ============================================================================

@pytest.fixture
def clean_default_sink() -> Generator[None, None, None]:
    """
    Reset the process-wide default sink before and after the test.

    Yields:
        None (side effect: default sink is unset)
    """
    reset_default_sink()
    yield
    reset_default_sink()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def logging_config(tmp_path) -> LoggingConfig:
    """
    Sink configuration writing JSON to a temporary file.

    Returns:
        LoggingConfig: JSON format, no trace correlation
    """
    return LoggingConfig(
        level="TRACE",
        format="json",
        trace_correlation=False,
        output_file=str(tmp_path / "structured.log"),
        sink_name="slogger.test.sink",
    )


@pytest.fixture
def env_logging_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """
    Set environment variables for sink configuration.

    Args:
        monkeypatch: pytest monkeypatch fixture.
    """
    monkeypatch.setenv("SLOG_LOG_LEVEL", "debug")
    monkeypatch.setenv("SLOG_LOG_FORMAT", "TEXT")
    monkeypatch.setenv("SLOG_LOG_TRACE_CORRELATION", "false")
    monkeypatch.setenv("SLOG_LOG_FILE", str(tmp_path / "env.log"))
    monkeypatch.setenv("SLOG_SINK_NAME", "slogger.test.env")


@pytest.fixture
def stdlib_gate() -> Generator[logging.Logger, None, None]:
    """
    Real stdlib logger usable as a gate, restored after the test.

    Yields:
        logging.Logger: Logger named "svc.orders" at INFO
    """
    gate = logging.getLogger("svc.orders")
    previous = gate.level
    gate.setLevel(logging.INFO)
    yield gate
    gate.setLevel(previous)
