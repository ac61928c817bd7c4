"""Log levels recognized by the structured logger.

Levels share their integer values with the standard :mod:`logging` module so
that any stdlib logger can act as gate or sink. ``TRACE`` has no stdlib
counterpart and is registered here under the name ``"TRACE"``.
"""

import logging
from enum import IntEnum

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class Level(IntEnum):
    """Severity levels, least to most severe."""

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def parse_level(level: str) -> int:
    """Parse a level name to its integer value.

    Accepts the names of :class:`Level` members as well as stdlib names
    such as ``WARNING`` and ``CRITICAL``.

    Args:
        level: Level name, case-insensitive.

    Returns:
        Integer level value.

    Raises:
        ValueError: If the name is not a known level.
    """
    name = level.upper()
    if name in Level.__members__:
        return int(Level[name])
    value = logging.getLevelName(name)
    if isinstance(value, int):
        return value
    raise ValueError(f"Unknown log level: {level}")
