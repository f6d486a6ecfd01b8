# vecindex

Building blocks for writing vector similarity-search indexes in Python.
The package has no runtime dependencies. It provides:

- `vecindex.status`: the `Status` codes and the `KnowhereError` exception that
  carries one of them.
- `vecindex.bitset`: `BitsetView`, a read-only view of a packed bitset that is
  used to filter results (`test`, `count`, `to_string`).
- `vecindex.binaryset`: `BinarySet`, a named collection of serialized blobs.
- `vecindex.config`: `Config`, `BaseConfig` and `Field`, which declare
  parameters and load them from JSON-like dicts, with defaults, ranges and
  type checks. Failures are raised as `KnowhereError`.
- `vecindex.params`: index, metric and parameter names (`IndexType`, `Meta`,
  `IndexParam`, `Metric`), plus `is_metric_type` and `hash_vec`.
- `vecindex.thread_pool`: `ThreadPool`, which returns futures, and the
  process-wide pool (`init_global_thread_pool`, `get_global_thread_pool`).
- `vecindex.blocking_queue`: `BlockingQueue`, a bounded queue for handing
  work between threads.
- `vecindex.dataset`: `DataSet` and the `gen_*` helpers that build input and
  result datasets.
- `vecindex.index_node`: the abstract `IndexNode` interface and
  `ThreadPoolIndexNode`, which runs searches on a thread pool.
- `vecindex.file_manager`: the `FileManager` interface and `LocalFileManager`,
  which only remembers file names.
- `vecindex.memory_io`: `MemoryIOWriter`, `MemoryIOReader` and `FileReader`
  for serializing indexes.
- `vecindex.feder`: metadata and visit records for HNSW, IVF-Flat and DiskANN
  indexes, exported with `to_json`.

## Installation

```
pip install .
```

## Examples

Load a search configuration and check it:

```python
from vecindex.config import BaseConfig, ParamType
from vecindex.status import KnowhereError

cfg = BaseConfig()
cfg.load({"metric_type": "IP", "k": 5}, ParamType.SEARCH)
print(cfg.values()["k"])  # 5

try:
    cfg.load({"k": 0}, ParamType.SEARCH)
except KnowhereError as err:
    print(err.status.name)  # OUT_OF_RANGE_IN_JSON
```

Filter with a bitset:

```python
from vecindex.bitset import BitsetView

bits = BitsetView(bytes([0b00000101]), 8)
print(bits.test(0), bits.test(1), bits.count())  # True False 2
print(bits.to_string(0, 8))                      # "10100000"
```

Run work on a thread pool:

```python
from vecindex.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.submit(sum, [1, 2, 3])
    print(future.result())  # 6
```

## What the package does not do

`vecindex` contains no index implementations and no search algorithms:
`IndexNode` is an interface to implement, not a working index. There is no
helper for collecting top-k results, no distance computation, and no
command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```