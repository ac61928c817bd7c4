"""Structured logger facade.

:class:`StructuredLogger` wraps an existing leveled logger (the *gate*) and
emits every enabled call as one structured record on a shared *sink* logger.
Context fields are attached with :meth:`StructuredLogger.with_context`, which
returns a new logger and leaves the original untouched.

Record layout::

    {
        "<context key>": <value>,
        ...
        "message": "<message passed to the level method>",
        "parentLoggerName": "<gate logger name>",
    }

Keys are sorted. Context fields are merged after ``message`` and
``parentLoggerName``, so a context field with either of those names replaces
the framework value. Avoid those two names as context keys.
"""

from typing import Any, Dict, Optional

from slogger.context import ContextCarrier
from slogger.exceptions import InvalidArgumentError
from slogger.interfaces import MESSAGE_KEY, PARENT_LOGGER_KEY, GateLogger, SinkLogger
from slogger.levels import Level
from slogger.sink import get_default_sink


class StructuredLogger:
    """Immutable structured logging facade over a gate logger.

    Example:
        >>> import logging
        >>> logger = StructuredLogger(logging.getLogger("svc.orders"))
        >>> order_logger = logger.with_context("order_id", "o-123")
        >>> order_logger.info("Order accepted")
    """

    __slots__ = ("_gate", "_sink", "_context")

    def __init__(
        self,
        gate_logger: GateLogger,
        sink: Optional[SinkLogger] = None,
        context: Optional[ContextCarrier] = None,
    ) -> None:
        """Initialize the facade.

        Args:
            gate_logger: Logger deciding level enablement and providing the
                ``parentLoggerName``. Required.
            sink: Logger receiving assembled records. Defaults to the
                process-wide sink from :func:`slogger.sink.get_default_sink`.
            context: Initial context. Defaults to an empty carrier.

        Raises:
            InvalidArgumentError: If ``gate_logger`` is None.
            ValueError: If ``sink`` is omitted and the default sink has not
                been built yet, when the ``SLOG_*`` environment holds an
                invalid sink configuration.
        """
        if gate_logger is None:
            raise InvalidArgumentError("gate_logger", "cannot be None")

        if sink is None:
            sink = get_default_sink()

        self._gate = gate_logger
        self._sink = sink
        self._context = context if context is not None else ContextCarrier.empty()

    @property
    def name(self) -> str:
        """Name of the wrapped gate logger."""
        return self._gate.name

    @property
    def context(self) -> ContextCarrier:
        """Context fields attached to this logger."""
        return self._context

    @property
    def sink(self) -> SinkLogger:
        """Sink logger receiving assembled records."""
        return self._sink

    def with_context(self, key: str, value: Any) -> "StructuredLogger":
        """Return a new logger with ``key`` added to the context.

        Args:
            key: Field name. Replaces any existing field with the same name.
            value: Field value. Stored by reference; only the sink reads it.

        Returns:
            New StructuredLogger sharing this logger's gate and sink.
        """
        return StructuredLogger(self._gate, self._sink, self._context.fork(key, value))

    def is_enabled_for(self, level: int) -> bool:
        """Check whether the gate logger accepts ``level``."""
        return self._gate.isEnabledFor(level)

    def trace(self, message: str) -> None:
        if self._gate.isEnabledFor(Level.TRACE):
            self._log(Level.TRACE, message)

    def debug(self, message: str) -> None:
        if self._gate.isEnabledFor(Level.DEBUG):
            self._log(Level.DEBUG, message)

    def info(self, message: str) -> None:
        if self._gate.isEnabledFor(Level.INFO):
            self._log(Level.INFO, message)

    def warn(self, message: str) -> None:
        if self._gate.isEnabledFor(Level.WARN):
            self._log(Level.WARN, message)

    warning = warn

    def error(self, message: str) -> None:
        if self._gate.isEnabledFor(Level.ERROR):
            self._log(Level.ERROR, message)

    def _log(self, level: Level, message: str) -> None:
        self._sink.log(level, self._build_record(message))

    def _build_record(self, message: str) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            MESSAGE_KEY: message,
            PARENT_LOGGER_KEY: self._gate.name,
        }
        # Context is merged last and wins on collision.
        record.update(self._context.entries())
        return {key: record[key] for key in sorted(record)}

    def __repr__(self) -> str:
        return f"StructuredLogger(name={self.name!r}, context={list(self._context)!r})"
