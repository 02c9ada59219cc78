"""Storage holding at most one value per type."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar("T")


class Storage:
    """Maps each type to the single value of that type stored last."""

    def __init__(self) -> None:
        self._values: Dict[type, Any] = {}

    def store(self, data: Any) -> None:
        """Store a value under its own type, replacing any earlier one."""
        self._values[type(data)] = data

    def get(self, kind: Type[T]) -> T:
        """Value stored for ``kind``; raise KeyError if there is none."""
        try:
            return self._values[kind]
        except KeyError:
            raise KeyError(f"no value of type {kind.__name__} in storage") from None

    def try_get(self, kind: Type[T]) -> Optional[T]:
        """Value stored for ``kind``, or None."""
        return self._values.get(kind)

    def __contains__(self, kind: type) -> bool:
        return kind in self._values