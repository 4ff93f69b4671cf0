"""Cache-wide and per-key hit/miss statistics."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator
from typing import Any, Dict

from lrukit.key_statistics import KeyStatistics

__all__ = ["Statistics", "UnmonitoredKey"]


class UnmonitoredKey(LookupError):
    """Raised when statistics are requested for a key that is not monitored."""

    def __init__(self, message: str = "Requested statistics for unmonitored key") -> None:
        super().__init__(message)


class Statistics:
    """Counts hits and misses of a cache, overall and for monitored keys.

    Only lookups count as accesses; insertions and erasures never do. Keys may
    be passed individually, or as a single list, set or iterator of keys.
    """

    def __init__(self, *args: Any) -> None:
        self._total_accesses = 0
        self._total_hits = 0
        self._key_map: Dict[Hashable, KeyStatistics] = {}

        if len(args) == 1 and isinstance(args[0], (list, set, frozenset, Iterator)):
            keys = args[0]
        else:
            keys = args
        for key in keys:
            self.monitor(key)

    def total_accesses(self) -> int:
        """The total number of accesses (hits plus misses)."""
        return self._total_accesses

    def total_hits(self) -> int:
        """The total number of hits."""
        return self._total_hits

    def total_misses(self) -> int:
        """The total number of misses."""
        return self._total_accesses - self._total_hits

    def hit_rate(self) -> float:
        """The fraction of accesses that were hits; NaN if nothing was accessed."""
        if self._total_accesses == 0:
            return math.nan
        return self._total_hits / self._total_accesses

    def miss_rate(self) -> float:
        """The fraction of accesses that were misses; NaN if nothing was accessed."""
        return 1 - self.hit_rate()

    def hits_for(self, key: Hashable) -> int:
        """The number of hits for a monitored key."""
        return self.stats_for(key).hits

    def misses_for(self, key: Hashable) -> int:
        """The number of misses for a monitored key."""
        return self.stats_for(key).misses

    def accesses_for(self, key: Hashable) -> int:
        """The number of accesses for a monitored key."""
        return self.stats_for(key).accesses()

    def stats_for(self, key: Hashable) -> KeyStatistics:
        """The statistics record of a monitored key."""
        try:
            return self._key_map[key]
        except KeyError:
            raise UnmonitoredKey() from None

    def __getitem__(self, key: Hashable) -> KeyStatistics:
        return self.stats_for(key)

    def monitor(self, key: Hashable) -> None:
        """Start monitoring a key; existing statistics are kept."""
        self._key_map.setdefault(key, KeyStatistics())

    def unmonitor(self, key: Hashable) -> None:
        """Stop monitoring a key."""
        try:
            del self._key_map[key]
        except KeyError:
            raise UnmonitoredKey() from None

    def unmonitor_all(self) -> None:
        """Stop monitoring every key."""
        self._key_map.clear()

    def reset_key(self, key: Hashable) -> None:
        """Zero the statistics of a key but keep monitoring it."""
        self.stats_for(key).reset()

    def reset_all(self) -> None:
        """Zero the statistics of every monitored key."""
        for stats in self._key_map.values():
            stats.reset()

    def is_monitoring(self, key: Hashable) -> bool:
        """True if the key is being monitored."""
        return key in self._key_map

    def number_of_monitored_keys(self) -> int:
        """How many keys are being monitored."""
        return len(self._key_map)

    def is_monitoring_keys(self) -> bool:
        """True if any key is being monitored."""
        return bool(self._key_map)

    def _register_hit(self, key: Hashable) -> None:
        self._total_accesses += 1
        self._total_hits += 1
        stats = self._key_map.get(key)
        if stats is not None:
            stats.hits += 1

    def _register_miss(self, key: Hashable) -> None:
        self._total_accesses += 1
        stats = self._key_map.get(key)
        if stats is not None:
            stats.misses += 1