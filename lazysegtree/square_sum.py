"""Segment tree with lazy range addition, range sums and sums of squares."""

from __future__ import annotations

from collections.abc import Iterable

from lazysegtree.range_sum import RangeSumTree


class SquareSumTree(RangeSumTree):
    """Add a value to every element of a range; query sums and sums of squares.

    Indices are zero-based and ranges are inclusive on both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        data = self._collect(values)
        self._squares = [0] * (4 * len(data))
        super().__init__(data)

    def __len__(self) -> int:
        return self._size

    def _set_leaf(self, node: int, value: int) -> None:
        super()._set_leaf(node, value)
        self._squares[node] = value * value

    def _pull(self, node: int) -> None:
        super()._pull(node)
        self._squares[node] = self._squares[node * 2] + self._squares[node * 2 + 1]

    def _apply(self, node: int, count: int, pending: int) -> None:
        # (a + v)^2 = a^2 + 2av + v^2, summed over the segment
        self._squares[node] += count * pending * pending + 2 * pending * self._sums[node]
        super()._apply(node, count, pending)

    def _total(self, node: int) -> tuple[int, int]:
        return self._sums[node], self._squares[node]

    def _empty(self) -> tuple[int, int]:
        return 0, 0

    def _merge(self, first: tuple[int, int], second: tuple[int, int]) -> tuple[int, int]:
        return first[0] + second[0], first[1] + second[1]

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element in ``[left, right]``."""
        super().add(left, right, value)

    def sum(self, left: int, right: int) -> int:
        """Return the sum of the elements in ``[left, right]``."""
        return self._totals(left, right)[0]

    def sum_of_squares(self, left: int, right: int) -> int:
        """Return the sum of the squares of the elements in ``[left, right]``."""
        return self._totals(left, right)[1]