"""Per-key bookkeeping records stored in a cache's internal map."""

from __future__ import annotations

import time
from typing import Any, Generic, TypeVar

__all__ = ["DEFAULT_CAPACITY", "Information", "TimedInformation", "now"]

V = TypeVar("V")

#: The default capacity for all caches.
DEFAULT_CAPACITY = 128


def now() -> float:
    """Return the current reading of the monotonic clock used for timestamps."""
    return time.monotonic()


class Information(Generic[V]):
    """A cached value together with its position in the usage order.

    ``order`` is an opaque handle the owning cache uses to locate the key in
    its order queue. Equality looks only at the value: two caches holding the
    same keys and values compare equal regardless of their internal handles.
    """

    __slots__ = ("value", "order")

    def __init__(self, value: V, order: Any = None) -> None:
        self.value = value
        self.order = order

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Information):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, order={self.order!r})"


class TimedInformation(Information[V]):
    """Information that also remembers when its key was inserted."""

    __slots__ = ("_insertion_time",)

    def __init__(
        self,
        value: V,
        insertion_time: float | None = None,
        order: Any = None,
    ) -> None:
        super().__init__(value, order)
        self._insertion_time = now() if insertion_time is None else insertion_time

    @property
    def insertion_time(self) -> float:
        """The monotonic time at which the key was inserted."""
        return self._insertion_time

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Information):
            return NotImplemented
        if self.value != other.value:
            return False
        if isinstance(other, TimedInformation):
            return self.insertion_time == other.insertion_time
        return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self.value!r}, "
            f"insertion_time={self.insertion_time!r}, order={self.order!r})"
        )