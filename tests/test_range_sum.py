import itertools

import pytest
from hypothesis import given, strategies as st

from lazysegtree.range_sum import RangeSumTree


def test_worked_example():
    tree = RangeSumTree([1, 2, 3, 4, 5])
    observed = [tree.sum(1, 3)]
    tree.add(1, 3, 2)
    observed.append(tree.sum(1, 3))
    tree.add(0, 4, 1)
    observed.append(tree.sum(0, 4))
    assert observed == [9, 15, 26]


def test_each_element_alone():
    tree = RangeSumTree([8, -2, 5, 0, 13])
    assert len(tree) == 5
    assert [tree.sum(i, i) for i in range(5)] == [8, -2, 5, 0, 13]


def test_reversed_range_sums_to_zero():
    assert RangeSumTree([3, 4, 5]).sum(2, 1) == 0


def test_requires_values():
    with pytest.raises(ValueError):
        RangeSumTree([])


@pytest.mark.parametrize("call", [lambda tree: tree.sum(0, 3), lambda tree: tree.add(-1, 2, 5)])
def test_indices_checked(call):
    with pytest.raises(IndexError):
        call(RangeSumTree([1, 2, 3]))


@given(
    st.lists(st.integers(-1000, 1000), min_size=1, max_size=12),
    st.lists(st.tuples(st.integers(0, 50), st.integers(0, 50), st.integers(-100, 100)), max_size=20),
)
def test_every_range_sum_is_exact(values, steps):
    tree = RangeSumTree(values)
    current = list(values)
    size = len(values)
    for a, b, amount in steps:
        low, high = sorted((a % size, b % size))
        tree.add(low, high, amount)
        current[low:high + 1] = [x + amount for x in current[low:high + 1]]
    for low, high in itertools.combinations_with_replacement(range(size), 2):
        assert tree.sum(low, high) == sum(current[low:high + 1])