# hornetkit

hornetkit is a small set of host utilities for graph processing work. It has
no dependencies outside the standard library.

## Modules

- `hornetkit.numeric`: integer helpers.
  - Rounding divisions: `ceil_div`, `round_div`, `lower_approx`, `upper_approx`.
  - Powers and logarithms: `power`, `floor_log`, `floor_log2`, `ceil_log2`,
    `ceil_log`.
  - Combinatorics: `product_sequence`, `binomial_coeff`, `geometric_series`.
  - Prefix sums: `inclusive_prefix_sum`, `exclusive_prefix_sum`. The exclusive
    result starts at 0 and is one item longer than the input.
  - Checks: `is_integer`, which accepts digits only (the empty string counts),
    and `is_aligned`.
  - Type-size helpers: `max_size`, `first_n_size_sum`, `is_vectorizable`.
  - Invalid arguments raise `ValueError`, and a zero divisor raises
    `ZeroDivisionError`.
- `hornetkit.statistics`: `average`, `std_deviation` (population) and
  `gini_coefficient`. The Gini coefficient is clamped at 0 and is NaN when the
  values sum to zero. An empty input raises `ValueError`.
- `hornetkit.printing`: text formatting.
  - `format_number` adds thousands separators. Floats are first rounded to two
    decimals and then cut to `precision` digits.
  - `format_array` and `format_matrix` render sequences and matrices.
    `format_matrix` takes row- or column-major storage and an optional leading
    dimension `ld`, and right-aligns its columns.
  - `format_bits` prints each value's bits, least significant first.
  - `print_array` and `print_matrix` write the formatted text to standard
    output.
- `hornetkit.bits`: `BitMatrix`, a boolean matrix packed 32 bits per word.
  Indexing a matrix gives a `BitRow`, and indexing a row gives a `BitRef`.
  `BitMatrix` also offers `copy`, `reset`, `row_reset`, `nnz` and `format`.
  `Matrix` is a plain dense matrix with the same row indexing, plus `copy` and
  `format`.
- `hornetkit.collection`: `Collection`, a fixed-capacity sequence.
  - `append` needs a free slot.
  - `extend` and `assign` need the resulting size to stay strictly below
    `max_size`.
  - Overflow raises `OverflowError`.
  - `reverse` reverses the elements in place.
- `hornetkit.timer`: `Timer`.
  - It reads one of three clocks, chosen with `TimerKind`: `HOST` (wall
    clock), `CPU` (process time) or `SYS` (user plus system time).
  - It reports durations in a `TimeUnit`: `MICRO`, `MILLI`, `SECONDS`,
    `MINUTES` or `HOURS`.
  - It records every run and gives `duration`, `total_duration`, `average`,
    `std_deviation`, `min` and `max`.
  - It works as a context manager.
- `hornetkit.hostmem`: byte filling of writable buffers (`memset`,
  `memset_zero`, `memset_one`), `copy` into a mutable sequence, and
  `generate_randoms`, which returns uniform integers in a closed range and can
  be seeded.
- `hornetkit.batch`: `generate_batch`, which returns random `(src, dst)` edge
  batches for a graph given as adjacency lists.
  - `BatchGenType.REMOVE` draws existing edges.
  - `BatchGenType.INSERT` draws vertex pairs uniformly, or weighted by
    out-degree with `BatchGenProperty.WEIGHTED`.
  - `BatchGenProperty.UNIQUE` sorts the batch and drops duplicates.
  - `BatchGenProperty.PRINT` prints the sorted batch using `format_batch`.

## Installation

```
pip install .
```

## Examples

```python
from hornetkit.numeric import ceil_div, exclusive_prefix_sum
from hornetkit.statistics import gini_coefficient
from hornetkit.bits import BitMatrix
from hornetkit.timer import Timer

ceil_div(10, 3)                 # 4
exclusive_prefix_sum([1, 2, 3]) # [0, 1, 3, 6]
gini_coefficient([1, 1, 1, 1])  # 0.0

m = BitMatrix(3, 40)
m[1][35] = True
m.nnz()                         # 1

with Timer() as t:
    sum(range(100_000))
print(t.format("sum"))
```

```python
from hornetkit.batch import generate_batch, BatchGenType, BatchGenProperty

adjacency = [[1, 2], [0], [0, 1]]
pairs = generate_batch(adjacency, 4, BatchGenType.INSERT,
                       BatchGenProperty.UNIQUE, seed=7)
```

## What it does not do

hornetkit is a library only.

- It has no command-line program.
- It does not read or write graph files. Graphs are passed in as in-memory
  adjacency lists.
- It does not store or update graphs itself.
- It has no device or accelerator memory support. `hornetkit.hostmem` works
  on ordinary Python buffers and sequences.

## Tests

```
pip install .[test]
pytest
```