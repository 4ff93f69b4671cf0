"""Hit, miss and access callbacks for a cache."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Tuple, TypeVar

__all__ = ["CallbackManager"]

K = TypeVar("K")
V = TypeVar("V")

HitCallback = Callable[[Any, Any], Any]
MissCallback = Callable[[Any], Any]
AccessCallback = Callable[[Any, bool], Any]


class CallbackManager(Generic[K, V]):
    """Stores and calls hit, miss and access callbacks.

    Hit callbacks receive the key and value, miss callbacks the key, and
    access callbacks the key and whether the access was a hit.
    """

    def __init__(self) -> None:
        self._hit_callbacks: List[HitCallback] = []
        self._miss_callbacks: List[MissCallback] = []
        self._access_callbacks: List[AccessCallback] = []

    def hit(self, key: K, value: V) -> None:
        """Notify hit callbacks, then access callbacks, of a hit."""
        for callback in self._hit_callbacks:
            callback(key, value)
        for callback in self._access_callbacks:
            callback(key, True)

    def miss(self, key: K) -> None:
        """Notify miss callbacks, then access callbacks, of a miss."""
        for callback in self._miss_callbacks:
            callback(key)
        for callback in self._access_callbacks:
            callback(key, False)

    def hit_callback(self, callback: HitCallback) -> None:
        """Register a hit callback."""
        self._hit_callbacks.append(callback)

    def miss_callback(self, callback: MissCallback) -> None:
        """Register a miss callback."""
        self._miss_callbacks.append(callback)

    def access_callback(self, callback: AccessCallback) -> None:
        """Register an access callback."""
        self._access_callbacks.append(callback)

    def clear_hit_callbacks(self) -> None:
        """Remove all hit callbacks."""
        self._hit_callbacks.clear()

    def clear_miss_callbacks(self) -> None:
        """Remove all miss callbacks."""
        self._miss_callbacks.clear()

    def clear_access_callbacks(self) -> None:
        """Remove all access callbacks."""
        self._access_callbacks.clear()

    def clear(self) -> None:
        """Remove every callback."""
        self.clear_hit_callbacks()
        self.clear_miss_callbacks()
        self.clear_access_callbacks()

    def hit_callbacks(self) -> Tuple[HitCallback, ...]:
        """The registered hit callbacks, in registration order."""
        return tuple(self._hit_callbacks)

    def miss_callbacks(self) -> Tuple[MissCallback, ...]:
        """The registered miss callbacks, in registration order."""
        return tuple(self._miss_callbacks)

    def access_callbacks(self) -> Tuple[AccessCallback, ...]:
        """The registered access callbacks, in registration order."""
        return tuple(self._access_callbacks)