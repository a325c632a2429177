# lazysegtree

Segment trees with lazy propagation for integer arrays. Every structure
builds from a non-empty sequence of integers and uses 0-based index ranges
that include both ends.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Structures

All structures support `len()`. Building from an empty sequence raises
`ValueError`; an index outside the array raises `IndexError`.

### `RangeAddPointQuery` (`lazysegtree.point_query`)

Add a value to every element in a range and read one element back.

```python
from lazysegtree.point_query import RangeAddPointQuery

tree = RangeAddPointQuery([1, 2, 3, 4, 5])
tree.add(1, 3, 10)
tree.get(2)   # 13
tree.get(4)   # 5
len(tree)     # 5
```

### `RangeSumTree` (`lazysegtree.range_sum`)

Add a value to a range and ask for the sum of a range.

```python
from lazysegtree.range_sum import RangeSumTree

tree = RangeSumTree([1, 2, 3, 4, 5])
tree.sum(1, 3)      # 9
tree.add(1, 3, 2)
tree.sum(1, 3)      # 15
tree.add(0, 4, 1)
tree.sum(0, 4)      # 26
```

### `SquareSumTree` (`lazysegtree.square_sum`)

Add a value to a range and ask for the sum, or the sum of squares, of a range.

```python
from lazysegtree.square_sum import SquareSumTree

tree = SquareSumTree([1, 2, 3, 4, 5])
tree.sum_of_squares(0, 4)   # 55
tree.add(1, 3, 2)
tree.sum_of_squares(0, 4)   # 103
tree.sum_of_squares(2, 4)   # 86
tree.sum(0, 4)              # 21
```

### `PrimeDivisorTree` (`lazysegtree.prime_divisor`)

Divide every element in a range by 2, 3 or 5, or set a single element to a
new value. `values()` applies everything still pending and returns the
resulting array. Any other prime passed to `divide` raises `ValueError`.

Each division is recorded as a pending count. When it reaches an element, the
element is divided by the prime only while it divides evenly and counts
remain. Counts that could not be used stay pending on that element, and
apply to whatever value it holds later, including a value set with `assign`:

```python
from lazysegtree.prime_divisor import PrimeDivisorTree

tree = PrimeDivisorTree([12, 15, 30, 7])
tree.divide(0, 2, 3)
tree.divide(0, 3, 2)   # 7 is odd, so the division by 2 stays pending
tree.assign(3, 20)
tree.values()          # [2, 5, 5, 10]
```

## The `prime-divisor` command

`prime-divisor` reads a batch of queries from standard input and prints the
final array on one line, each value followed by a space. The input is
whitespace separated:

```
n
a1 a2 ... an
q
query 1
...
query q
```

Indices in the input are 1-based. Each query is one of:

* `1 l r p` - divide every element in `[l, r]` once by the prime `p`
  (2, 3 or 5), as described above;
* any other type, such as `2 i d` - set element `i` to `d`.

Input that ends early raises `ValueError`.

Example:

```
$ printf '4\n12 15 30 7\n3\n1 1 3 3\n1 1 4 2\n2 4 20\n' | prime-divisor
2 5 5 10
```

The same processing is available from Python as
`lazysegtree.prime_divisor.run_queries(text)`, which returns the final values
as a list.

## What it does not do

Only `PrimeDivisorTree` has a command-line front end. The other structures
are used from Python only, and none of them saves its state anywhere.