"""Immutable context carrier.

A :class:`ContextCarrier` holds the structured fields accumulated by a chain
of ``with_context`` calls. Forking never mutates an existing carrier, so a
carrier can be shared freely between threads and between loggers.
"""

from bisect import insort
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Tuple

from slogger.exceptions import InvalidArgumentError


class ContextCarrier(Mapping):
    """Read-only mapping of field name to value, ordered by field name.

    Values are stored by reference and never inspected. Ordering is
    lexicographic by key regardless of the order fields were added in.

    Example:
        >>> base = ContextCarrier.empty()
        >>> ctx = base.fork("b", 2).fork("a", 1)
        >>> ctx.entries()
        (('a', 1), ('b', 2))
        >>> len(base)
        0
    """

    __slots__ = ("_fields",)

    _EMPTY: Optional["ContextCarrier"] = None

    def __init__(self, fields: Optional[Dict[str, Any]] = None) -> None:
        """Create a carrier.

        Args:
            fields: Initial fields. Copied and sorted by key.
        """
        fields = fields or {}
        for key in fields:
            _check_key(key)
        self._fields: Dict[str, Any] = {key: fields[key] for key in sorted(fields)}

    @classmethod
    def empty(cls) -> "ContextCarrier":
        """Return the carrier with no fields."""
        if cls._EMPTY is None:
            cls._EMPTY = cls()
        return cls._EMPTY

    def fork(self, key: str, value: Any) -> "ContextCarrier":
        """Return a new carrier with ``key`` set to ``value``.

        Args:
            key: Field name.
            value: Field value, stored by reference.

        Returns:
            New carrier. ``self`` is left unchanged.

        Raises:
            InvalidArgumentError: If ``key`` is None or not a string.
        """
        _check_key(key)

        keys = list(self._fields)
        if key not in self._fields:
            insort(keys, key)

        forked = ContextCarrier.__new__(ContextCarrier)
        forked._fields = {
            k: value if k == key else self._fields[k] for k in keys
        }
        return forked

    def entries(self) -> Tuple[Tuple[str, Any], ...]:
        """Return ``(key, value)`` pairs in key order."""
        return tuple(self._fields.items())

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"ContextCarrier({self._fields!r})"


def _check_key(key: Any) -> None:
    if key is None:
        raise InvalidArgumentError("key", "cannot be None")
    if not isinstance(key, str):
        raise InvalidArgumentError("key", f"must be a string, got {type(key).__name__}")
