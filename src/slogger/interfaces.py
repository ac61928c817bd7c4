"""Collaborator interfaces consumed by the structured logger.

Both protocols are satisfied by a plain :class:`logging.Logger`, which is the
expected binding: the application's own named logger is the gate, and a
dedicated structured logger (see :mod:`slogger.sink`) is the sink.
"""

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class GateLogger(Protocol):
    """Owns level enablement and logger identity."""

    name: str

    def isEnabledFor(self, level: int) -> bool: ...


@runtime_checkable
class SinkLogger(Protocol):
    """Receives assembled records and renders or transports them."""

    def log(self, level: int, msg: Mapping[str, Any]) -> None: ...


# Framework fields of every assembled record
MESSAGE_KEY = "message"
PARENT_LOGGER_KEY = "parentLoggerName"
