"""Hit and miss counters for a single key."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["KeyStatistics"]


@dataclass
class KeyStatistics:
    """The number of hits and misses recorded for one key."""

    hits: int = 0
    misses: int = 0

    def accesses(self) -> int:
        """The total number of accesses, hits plus misses."""
        return self.hits + self.misses

    def reset(self) -> None:
        """Set both counters back to zero."""
        self.hits = 0
        self.misses = 0