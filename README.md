# lrukit

Building blocks for least-recently-used caches.

`lrukit` contains the parts that an LRU cache is built from. You can use each
part by itself.

- `lrukit.information`
  - `Information` is the record kept for a cached key. It holds a `value` and
    an opaque `order` handle. Two records are equal when their values are
    equal. The handle is not compared.
  - `TimedInformation` also stores an `insertion_time`. If you do not pass
    one, it is taken from `now()`. Two timed records are equal only when both
    the value and the insertion time match.
  - `now()` returns `time.monotonic()`.
  - `DEFAULT_CAPACITY` is 128.
- `lrukit.hashing`
  - `combine_hash(current, seed)` mixes one hash into a running seed, wrapping
    at 64 bits.
  - `hash_tuple(values)` hashes every element and combines the hashes, starting
    from the last element. An empty sequence hashes to 0.
- `lrukit.insertion_result`
  - `InsertionResult(first, second)` is a frozen dataclass that reports an
    insertion.
  - `was_inserted()` and `bool(result)` are true when the key was new.
    `iterator()` gives the position.
  - The result unpacks like a pair.
- `lrukit.key_statistics`
  - `KeyStatistics` holds `hits` and `misses` counters for one key.
  - It also has `accesses()` and `reset()`.
- `lrukit.statistics`
  - `Statistics` keeps overall counts: `total_accesses()`, `total_hits()`,
    `total_misses()`, `hit_rate()` and `miss_rate()`.
    - Both rates are NaN before any access.
  - It also keeps a `KeyStatistics` record for each monitored key.
    - You can pass keys to the constructor one by one, or as a single list,
      set or iterator.
    - `monitor()` keeps any statistics the key already has.
    - `unmonitor()`, `stats_for()`, `hits_for()`, `misses_for()`,
      `accesses_for()`, `reset_key()` and `statistics[key]` raise
      `UnmonitoredKey` (a `LookupError`) for a key that is not monitored.
- `lrukit.callbacks`
  - `CallbackManager` stores hit callbacks `(key, value)`, miss callbacks
    `(key)` and access callbacks `(key, was_hit)`.
  - `hit()` calls the hit callbacks and then the access callbacks. `miss()`
    calls the miss callbacks and then the access callbacks.
  - The callbacks can be listed (as tuples) and cleared, either by kind or all
    at once.
- `lrukit.last_accessed`
  - `LastAccessed` remembers the key and information that were looked up last.
    It compares equal to a key under its `key_equal` function, which is
    `operator.eq` by default.
  - `key()`, `information()`, `value()` and `order()` raise `InvalidAccess`
    while it holds nothing.

## What this package does not do

`lrukit` does not include a ready-made cache container, an eviction policy,
expiry handling or a memoizing function decorator. It provides the records,
counters and helpers that such a cache would use.

The counters in `Statistics` start at zero. No public method records a hit or
a miss. Only the code that owns the object advances them.

## Installation

```
pip install .
```

Python 3.10 or newer is required. There are no runtime dependencies.

## Examples

Monitoring keys:

```python
from lrukit.statistics import Statistics

stats = Statistics("alpha", "beta")
stats.is_monitoring("alpha")      # True
stats.number_of_monitored_keys()  # 2
stats["alpha"].accesses()         # 0
stats.total_accesses()            # 0
```

Reacting to hits and misses:

```python
from lrukit.callbacks import CallbackManager

seen = []
callbacks = CallbackManager()
callbacks.hit_callback(lambda key, value: seen.append(("hit", key, value)))
callbacks.miss_callback(lambda key: seen.append(("miss", key)))
callbacks.access_callback(lambda key, was_hit: seen.append(("access", key, was_hit)))

callbacks.hit("one", 1)
callbacks.miss("two")
# seen == [("hit", "one", 1), ("access", "one", True),
#          ("miss", "two"), ("access", "two", False)]
```

Remembering the last lookup:

```python
from lrukit.information import Information
from lrukit.last_accessed import LastAccessed

last = LastAccessed("forty-two", Information(42))
last == "forty-two"   # True
last.value()          # 42
last.invalidate()
bool(last)            # False
```

Recording an insertion:

```python
from lrukit.insertion_result import InsertionResult

result = InsertionResult(True, "one")
result.was_inserted()        # True
inserted, position = result  # unpacks like a pair
```

Hashing a tuple key:

```python
from lrukit.hashing import hash_tuple

hash_tuple(())         # 0
hash_tuple((1, "a"))   # a 64-bit integer
```

## Running the tests

```
pip install .[test]
pytest
```