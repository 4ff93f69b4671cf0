"""The outcome of inserting a key into a cache."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["InsertionResult"]

I = TypeVar("I")


@dataclass(frozen=True)
class InsertionResult(Generic[I]):
    """Whether a key was newly inserted, and where it now lives.

    Unpacks like a pair: ``inserted, position = result``.
    """

    first: bool
    second: I

    def was_inserted(self) -> bool:
        """True if the key was newly inserted, False if it was only updated."""
        return self.first

    def iterator(self) -> I:
        """The position of the inserted or updated key."""
        return self.second

    def __bool__(self) -> bool:
        return self.was_inserted()

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second