"""Segment tree that lazily divides ranges by 2, 3 or 5."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from lazysegtree.point_query import _IndexedTree

_PRIMES = (2, 3, 5)
_SLOT = {prime: slot for slot, prime in enumerate(_PRIMES)}


class PrimeDivisorTree(_IndexedTree):
    """Array supporting lazy range division by a small prime and point assignment.

    Each range division is recorded as a pending count per prime. When the
    counts reach an element, it is divided by the prime as long as it is
    divisible and counts remain; counts that cannot be used stay pending on
    that element and apply to whatever value it holds later.

    Indices are zero-based and ranges are inclusive on both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        data = self._collect(values)
        self._size = len(data)
        self._values = data
        self._counts = [[0] * len(_PRIMES) for _ in range(4 * self._size)]

    def __len__(self) -> int:
        return self._size

    def _propagate(self, node: int, start: int, end: int) -> None:
        counts = self._counts[node]
        if start != end:
            for child, _, _ in self._halves(node, start, end):
                self._counts[child] = [a + b for a, b in zip(self._counts[child], counts)]
            counts[:] = [0] * len(_PRIMES)
            return
        value = self._values[start]
        for slot, prime in enumerate(_PRIMES):
            while counts[slot] > 0 and value % prime == 0:
                value //= prime
                counts[slot] -= 1
        self._values[start] = value

    def divide(self, left: int, right: int, prime: int) -> None:
        """Divide every element in ``[left, right]`` once by ``prime`` (2, 3 or 5)."""
        try:
            slot = _SLOT[prime]
        except KeyError:
            raise ValueError(f"prime must be one of {_PRIMES}, got {prime}") from None
        self._check(left, right)
        self._divide(*self._root, left, right, slot)

    def _divide(self, node: int, start: int, end: int, left: int, right: int, slot: int) -> None:
        if end < left or right < start:
            return
        if left <= start and end <= right:
            self._counts[node][slot] += 1
            return
        for child in self._halves(node, start, end):
            self._divide(*child, left, right, slot)

    def assign(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        self._check(index)
        for span in self._descend(index):
            self._propagate(*span)
        self._values[index] = value

    def values(self) -> list[int]:
        """Apply every pending division and return the resulting elements."""
        self._propagate_all(*self._root)
        return list(self._values)

    def _propagate_all(self, node: int, start: int, end: int) -> None:
        self._propagate(node, start, end)
        if start != end:
            for child in self._halves(node, start, end):
                self._propagate_all(*child)


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def run_queries(text: str) -> list[int]:
    """Process a query script and return the final array.

    The script holds ``n``, then ``n`` values, then ``q`` and ``q`` queries:
    ``1 l r p`` divides the one-based range ``[l, r]`` by ``p``; any other
    type, as ``2 i d``, sets element ``i`` to ``d``.
    """
    numbers = _integers(text)

    def take() -> int:
        try:
            return next(numbers)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    count = take()
    tree = PrimeDivisorTree([take() for _ in range(count)])
    for _ in range(take()):
        if take() == 1:
            left, right, prime = take(), take(), take()
            tree.divide(left - 1, right - 1, prime)
        else:
            index, value = take(), take()
            tree.assign(index - 1, value)
    return tree.values()


def main(argv: list[str] | None = None) -> int:
    """Read a query script from standard input and print the final array."""
    result = run_queries(sys.stdin.read())
    sys.stdout.write("".join(f"{value} " for value in result) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())