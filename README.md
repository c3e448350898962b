# flmeters

Small meters for tracking model quality and timing during training, plus two
utilities for coordinating work between processes: a file-backed key/value
store and a least-recently-used cache.

## Installation

```
pip install flmeters
```

Install with the test extra to run the test suite:

```
pip install "flmeters[test]"
pytest
```

## Meters

Each meter accumulates state with `add`, reports with `value`, and starts
over with `reset`.

### AverageValueMeter

Tracks the running mean and unbiased variance of a stream of values.

```python
from flmeters.average_value import AverageValueMeter

meter = AverageValueMeter()
for sample in (2.0, 3.0, 4.0):
    meter.add(sample, 1)
mean, variance, count = meter.value()   # 3.0, 1.0, 3.0

meter.add_values([2.0, 3.0, 4.0])       # add every element of an array
meter.value()                           # [3.0, 0.8, 6.0]
```

`add(val, n)` adds `val` repeated `n` times (`n` defaults to 1). With no
values the mean is 0.0; with fewer than two values the variance is 0.0.

### CountMeter

Keeps a total per category.

```python
from flmeters.count import CountMeter

meter = CountMeter(3)
meter.add(0, 10)
meter.add(1, 11)
meter.add(0, 12)
meter.value()   # [22, 11, 0]
```

A category outside `[0, num)` raises `IndexError`.

### EditDistanceMeter

Measures the Levenshtein distance between predictions and targets, split
into deletions, insertions and substitutions.

```python
from flmeters.edit_distance import EditDistanceMeter, levenshtein_distance

meter = EditDistanceMeter()
meter.add([1, 2, 3, 4, 5], [1, 1, 3, 3, 5, 6])
error, total, deletion, insertion, substitution = meter.value()
# error == 50.0, total == 6.0 (rates are percent of the target length)

state = levenshtein_distance("kitten", "sitting")
state.ndel, state.nins, state.nsub
state.sum()     # total number of edits
```

`add` accepts any sequences; NumPy arrays must be one-dimensional, otherwise
`ValueError` is raised. Counts can also be added directly with
`add_counts(n, ndel, nins, nsub)` or `add_error_state(state, n)`, where
`state` is an `ErrorState`. When the distance admits several edit scripts,
deletion is preferred over insertion, and insertion over substitution.

### FrameErrorMeter

Element-wise mismatch rate between two equally shaped one-dimensional
sequences, in percent. Pass `accuracy=True` to report `100 - error` instead.

```python
from flmeters.frame_error import FrameErrorMeter

meter = FrameErrorMeter(False)
meter.add([1, 2, 3, 4, 5], [1, 1, 3, 3, 5])
meter.value()   # 40.0
```

Inputs of different shapes, or with more than one dimension, raise
`ValueError`.

### MSEMeter

Running mean, over calls to `add`, of the summed squared error of each pair.

```python
from flmeters.mse import MSEMeter

meter = MSEMeter()
meter.add([1, 2, 3, 4, 5], [4, 5, 6, 7, 8])
meter.value()   # 45.0
```

Inputs of different shapes raise `ValueError`.

### TimeMeter

Wall-clock timer that starts stopped and can be paused and resumed. With
`unit=True`, `value` reports the average time per unit.

```python
from flmeters.time_meter import TimeMeter

meter = TimeMeter(True)
meter.resume()
...                         # work
meter.stop_and_inc_unit(1)
seconds_per_unit = meter.value()
```

Calling `value` on a running timer adds the elapsed time and keeps it
running. `set(val, num)` overwrites the total time and the unit count;
`inc_unit(num)` adds units; `reset` clears everything and stops the timer.

## Utilities

### FileStore

A key/value store on a shared file system, for exchanging small blobs of
bytes between cooperating processes. Each key is kept in its own file inside
the store's directory, named by a SHA-256 digest of the key, and written
through a temporary file that is then renamed into place.

```python
from flmeters.file_store import FileStore

store = FileStore("/shared/rendezvous", 120.0)
store.set("session-id", b"\x01\x02\x03")
store.get("session-id")     # b"\x01\x02\x03"
store.clear("session-id")
```

`set` refuses a key that already exists. `get` polls until the key is present
or the timeout (in seconds, 120 by default) elapses, and rejects an empty
value. All of these failures raise `FileStoreError`. `clear` silently ignores
a missing key.

### LRUCache

A fixed-capacity least-recently-used cache. `put` returns the stored value;
`get` returns `None` for a missing key. Both mark the key as most recently
used. `len()` and `in` are supported.

```python
from flmeters.lru_cache import LRUCache, make_hash_key

cache = LRUCache(2)
buffer = bytearray(1024)
key = make_hash_key(buffer, 1024, "allreduce")   # "bytearray <id> 1024 allreduce"
if cache.get(key) is None:
    cache.put(key, {"size": 1024})
```

`make_hash_key` combines the type name and identity of an object with any
extra values, so keys are only meaningful while that object stays alive.

## What this package does not do

It performs no collective communication between processes: there is no
all-reduce or process-group setup. `FileStore` and `LRUCache` are building
blocks for such coordination, not an implementation of it. The meters work
on Python sequences and NumPy arrays only, and there is no command-line tool.