"""Formatters for the structured sink logger.

Structured records reach the sink as the ``msg`` of a stdlib
:class:`logging.LogRecord`. :class:`StructuredFormatter` renders them as a
nested JSON object under ``message``; :class:`TextFormatter` renders them as
``key=value`` pairs after the message text.
"""

import json
import logging
import traceback
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from opentelemetry import trace
from opentelemetry.trace import INVALID_SPAN_ID, INVALID_TRACE_ID

from slogger.interfaces import MESSAGE_KEY, PARENT_LOGGER_KEY

# Attributes set by LogRecord itself; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def _split_structured(record: logging.LogRecord) -> Tuple[str, str, Dict[str, Any]]:
    """Return origin name, message text and remaining fields of a record."""
    if not isinstance(record.msg, Mapping):
        return record.name, record.getMessage(), {}
    fields = dict(record.msg)
    origin = fields.pop(PARENT_LOGGER_KEY, record.name)
    text = str(fields.pop(MESSAGE_KEY, ""))
    return origin, text, fields


def _current_trace_ids() -> Optional[Tuple[str, str]]:
    ctx = trace.get_current_span().get_span_context()
    if ctx.trace_id == INVALID_TRACE_ID or ctx.span_id == INVALID_SPAN_ID:
        return None
    return format(ctx.trace_id, "032x"), format(ctx.span_id, "016x")


class StructuredFormatter(logging.Formatter):
    """One compact JSON line per record.

    A structured record keeps its sorted fields as a nested object::

        {"timestamp":"2024-01-15T10:30:45.123456+00:00","level":"INFO",
         "logger":"slogger.structured",
         "message":{"item1":{"count":42,"name":"foo"},"message":"Order accepted",
                    "parentLoggerName":"svc.orders"},
         "trace_id":"...","span_id":"..."}

    Trace IDs appear only inside an active OpenTelemetry span. Static
    ``extra_fields`` and stdlib ``extra=`` attributes are added at top level.
    """

    def __init__(
        self,
        include_trace_context: bool = True,
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__()
        self.include_trace_context = include_trace_context
        self.extra_fields = extra_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            self._to_entry(record), default=self._json_default, separators=(",", ":")
        )

    def _to_entry(self, record: logging.LogRecord) -> Dict[str, Any]:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="microseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": dict(record.msg)
            if isinstance(record.msg, Mapping)
            else record.getMessage(),
        }

        if self.include_trace_context:
            ids = _current_trace_ids()
            if ids:
                entry["trace_id"], entry["span_id"] = ids

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            entry["exception"] = {
                "type": getattr(exc_type, "__name__", None),
                "message": None if exc_value is None else str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb)
                if exc_tb
                else None,
            }

        entry.update(self.extra_fields)
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        return entry

    @staticmethod
    def _json_default(obj: Any) -> Any:
        # Plain objects keep their public attributes; anything else is str()
        if isinstance(obj, (set, frozenset, tuple)):
            return list(obj)
        attrs = getattr(obj, "__dict__", None)
        if attrs:
            return {k: v for k, v in attrs.items() if not k.startswith("_")}
        return str(obj)


class TextFormatter(logging.Formatter):
    """Single-line text output for humans.

    Structured records are shown under their originating logger name::

        2024-01-15T10:30:45.123Z INFO     [svc.orders] Order accepted item1={'name': 'foo'}
    """

    def __init__(self, include_trace_context: bool = True) -> None:
        super().__init__()
        self.include_trace_context = include_trace_context

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        origin, text, fields = _split_structured(record)

        line = [
            created.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            record.levelname.ljust(8),
            f"[{origin}]",
        ]
        if self.include_trace_context:
            ids = _current_trace_ids()
            if ids:
                line.append(f"[trace={ids[0][:16]}]")
        line.append(text)
        line.extend(f"{key}={value!r}" for key, value in fields.items())

        output = " ".join(line)
        if record.exc_info:
            output = f"{output}\n{self.formatException(record.exc_info)}"
        return output
