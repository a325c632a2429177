"""Segment tree with lazy range addition and range sums."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from lazysegtree.point_query import _IndexedTree


class RangeSumTree(_IndexedTree):
    """Add a value to every element of a range; sum any range.

    Indices are zero-based and ranges are inclusive on both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        data = self._collect(values)
        self._size = len(data)
        slots = 4 * self._size
        self._sums = [0] * slots
        self._lazy = [0] * slots
        self._build(*self._root, data)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, start: int, end: int, data: list[int]) -> None:
        if start == end:
            self._set_leaf(node, data[start])
            return
        for child in self._halves(node, start, end):
            self._build(*child, data)
        self._pull(node)

    def _set_leaf(self, node: int, value: int) -> None:
        self._sums[node] = value

    def _pull(self, node: int) -> None:
        self._sums[node] = self._sums[node * 2] + self._sums[node * 2 + 1]

    def _apply(self, node: int, count: int, pending: int) -> None:
        self._sums[node] += count * pending

    def _total(self, node: int) -> Any:
        return self._sums[node]

    def _empty(self) -> Any:
        return 0

    def _merge(self, first: Any, second: Any) -> Any:
        return first + second

    def _propagate(self, node: int, start: int, end: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        self._apply(node, end - start + 1, pending)
        if start != end:
            for child, _, _ in self._halves(node, start, end):
                self._lazy[child] += pending
        self._lazy[node] = 0

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element in ``[left, right]``."""
        self._check(left, right)
        self._add(*self._root, left, right, value)

    def _add(self, node: int, start: int, end: int, left: int, right: int, value: int) -> None:
        self._propagate(node, start, end)
        if start > right or end < left:
            return
        if left <= start and end <= right:
            self._lazy[node] += value
            self._propagate(node, start, end)
            return
        for child in self._halves(node, start, end):
            self._add(*child, left, right, value)
        self._pull(node)

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> Any:
        self._propagate(node, start, end)
        if start > right or end < left:
            return self._empty()
        if left <= start and end <= right:
            return self._total(node)
        lower, upper = self._halves(node, start, end)
        return self._merge(self._query(*lower, left, right), self._query(*upper, left, right))

    def _totals(self, left: int, right: int) -> Any:
        self._check(left, right)
        return self._query(*self._root, left, right)

    def sum(self, left: int, right: int) -> int:
        """Return the sum of the elements in ``[left, right]``."""
        return self._totals(left, right)