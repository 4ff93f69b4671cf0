"""A memo of the most recently accessed key and its information."""

from __future__ import annotations

import operator
from typing import Any, Callable

__all__ = ["InvalidAccess", "LastAccessed"]

_UNSET: Any = object()


class InvalidAccess(RuntimeError):
    """Raised when reading from a LastAccessed that holds nothing."""

    def __init__(self, message: str = "No key was accessed last") -> None:
        super().__init__(message)


class LastAccessed:
    """Remembers the last accessed key and information.

    It lets a ``contains(key)`` followed by a lookup of the same key avoid a
    second map lookup. It compares equal to a key when it is valid and its key
    equals that key under ``key_equal``.
    """

    __slots__ = ("_key", "_information", "_is_valid", "_key_equal")

    def __init__(
        self,
        key: Any = _UNSET,
        information: Any = None,
        key_equal: Callable[[Any, Any], bool] = operator.eq,
    ) -> None:
        self._key_equal = key_equal
        if key is _UNSET:
            self._key = None
            self._information = None
            self._is_valid = False
        else:
            self._key = key
            self._information = information
            self._is_valid = True

    def assign(self, key: Any, information: Any) -> None:
        """Remember a new key and information."""
        self._key = key
        self._information = information
        self._is_valid = True

    def _require_valid(self) -> None:
        if not self._is_valid:
            raise InvalidAccess()

    def key(self) -> Any:
        """The last accessed key."""
        self._require_valid()
        return self._key

    def information(self) -> Any:
        """The last accessed information."""
        self._require_valid()
        return self._information

    def value(self) -> Any:
        """The value stored in the last accessed information."""
        self._require_valid()
        return self._information.value

    def order(self) -> Any:
        """The order handle stored in the last accessed information."""
        self._require_valid()
        return self._information.order

    def is_valid(self) -> bool:
        """True if a key and information are held."""
        return self._is_valid

    def __bool__(self) -> bool:
        return self._is_valid

    def invalidate(self) -> None:
        """Forget the held key and information."""
        self._is_valid = False
        self._key = None
        self._information = None

    def key_equal(self) -> Callable[[Any, Any], bool]:
        """The function used to compare keys."""
        return self._key_equal

    def __eq__(self, other: object) -> bool:
        if not self._is_valid:
            return False
        if isinstance(other, LastAccessed):
            if not other._is_valid:
                return False
            return bool(self._key_equal(other._key, self._key))
        return bool(self._key_equal(other, self._key))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._is_valid:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._key!r}, {self._information!r})"