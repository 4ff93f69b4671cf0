"""Building blocks for least-recently-used caches: entry records, tuple hashing,
insertion results, hit statistics, callbacks and last-access tracking."""

__version__ = "0.1.0"