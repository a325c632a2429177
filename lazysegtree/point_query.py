"""Segment tree with lazy range addition and point lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_Span = tuple[int, int, int]


class _IndexedTree:
    """Shared bookkeeping for the segment trees in this package.

    Nodes are numbered from 1, children of ``node`` are ``2 * node`` and
    ``2 * node + 1``. Subclasses set ``_size`` when they are built.
    """

    _size: int

    @staticmethod
    def _collect(values: Iterable[int]) -> list[int]:
        data = list(values)
        if not data:
            raise ValueError("at least one value is required")
        return data

    @property
    def _root(self) -> _Span:
        return 1, 0, self._size - 1

    def _check(self, *indices: int) -> None:
        for index in indices:
            if not 0 <= index < self._size:
                raise IndexError(f"index {index} out of range for size {self._size}")

    @staticmethod
    def _halves(node: int, start: int, end: int) -> tuple[_Span, _Span]:
        mid = (start + end) // 2
        return (node * 2, start, mid), (node * 2 + 1, mid + 1, end)

    def _descend(self, index: int) -> Iterator[_Span]:
        """Yield the nodes on the path from the root down to the leaf of ``index``."""
        span = self._root
        while True:
            yield span
            node, start, end = span
            if start == end:
                return
            lower, upper = self._halves(node, start, end)
            span = lower if index <= lower[2] else upper


class RangeAddPointQuery(_IndexedTree):
    """Add a value to every element of a range; read single elements back.

    Indices are zero-based and ranges are inclusive on both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        data = self._collect(values)
        self._size = len(data)
        self._lazy = [0] * (4 * self._size)
        self._build(*self._root, data)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, start: int, end: int, data: list[int]) -> None:
        if start == end:
            self._lazy[node] = data[start]
            return
        for child in self._halves(node, start, end):
            self._build(*child, data)

    def _push(self, node: int, start: int, end: int) -> None:
        pending = self._lazy[node]
        if start == end or not pending:
            return
        for child, _, _ in self._halves(node, start, end):
            self._lazy[child] += pending
        self._lazy[node] = 0

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element in ``[left, right]``.

        An empty range (``left > right``) changes nothing.
        """
        self._check(left, right)
        self._add(*self._root, left, right, value)

    def _add(self, node: int, start: int, end: int, left: int, right: int, value: int) -> None:
        if end < left or right < start:
            return
        if left <= start and end <= right:
            self._lazy[node] += value
            return
        self._push(node, start, end)
        for child in self._halves(node, start, end):
            self._add(*child, left, right, value)

    def get(self, index: int) -> int:
        """Return the current value at ``index``."""
        self._check(index)
        leaf = 1
        for leaf, start, end in self._descend(index):
            self._push(leaf, start, end)
        return self._lazy[leaf]