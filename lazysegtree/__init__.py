"""Segment trees with lazy propagation: range add with point lookup, range sums,
sums of squares, and lazy division by 2, 3 or 5."""

__version__ = "0.1.0"