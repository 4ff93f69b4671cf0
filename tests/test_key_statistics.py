from lrukit.key_statistics import KeyStatistics


def test_defaults_are_zero():
    stats = KeyStatistics()
    assert stats.hits == 0
    assert stats.misses == 0
    assert stats.accesses() == 0


def test_initial_values():
    stats = KeyStatistics(3, 4)
    assert stats.hits == 3
    assert stats.misses == 4


def test_accesses_is_sum():
    stats = KeyStatistics(hits=3, misses=4)
    assert stats.accesses() == stats.hits + stats.misses


def test_accesses_tracks_updates():
    stats = KeyStatistics()
    stats.hits += 2
    stats.misses += 1
    assert stats.accesses() == stats.hits + stats.misses
    assert stats.hits == 2


def test_reset_clears_counters():
    stats = KeyStatistics(5, 6)
    stats.reset()
    assert stats == KeyStatistics()
    assert stats.accesses() == 0


def test_equality():
    assert KeyStatistics(1, 2) == KeyStatistics(1, 2)
    assert KeyStatistics(1, 2) != KeyStatistics(2, 1)