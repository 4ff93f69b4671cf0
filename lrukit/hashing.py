"""Hash combination for tuple keys."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Hashable

__all__ = ["combine_hash", "hash_tuple"]

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B9


def combine_hash(current: int, seed: int) -> int:
    """Mix one element hash into a running seed, wrapping at 64 bits."""
    current &= _MASK
    seed &= _MASK
    return (current + _GOLDEN + ((seed << 6) & _MASK) + (seed >> 2)) & _MASK


def hash_tuple(values: Iterable[Hashable]) -> int:
    """Hash every element and combine the hashes, last element first.

    The empty tuple hashes to zero.
    """
    seed = 0
    for value in reversed(tuple(values)):
        seed = combine_hash(hash(value), seed)
    return seed