import io
import math

import pytest
from hypothesis import given, strategies as st

from lazysegtree.prime_divisor import PrimeDivisorTree, main, run_queries


def _smooth(number):
    for prime in (2, 3, 5):
        while number % prime == 0:
            number //= prime
    return number


def test_divide_range():
    tree = PrimeDivisorTree([12, 9, 10])
    tree.divide(0, 2, 2)
    assert tree.values() == [6, 9, 5]


def test_non_divisible_values_unchanged():
    values = [7, 11, 13, 49]
    tree = PrimeDivisorTree(values)
    tree.divide(0, 3, 2)
    tree.divide(1, 2, 3)
    tree.divide(0, 0, 5)
    assert tree.values() == values


def test_assign_without_pending():
    tree = PrimeDivisorTree([4, 6, 8])
    tree.assign(1, 42)
    assert tree.values()[1] == 42
    assert len(tree) == 3


def test_unused_divisions_apply_to_assigned_value():
    tree = PrimeDivisorTree([3])
    tree.divide(0, 0, 2)
    tree.assign(0, 8)
    assert tree.values() == [4]


def test_values_is_stable():
    tree = PrimeDivisorTree([60, 90, 150])
    tree.divide(0, 1, 3)
    first = tree.values()
    assert tree.values() == first


@pytest.mark.parametrize("prime", [1, 4, 7, 0])
def test_invalid_prime(prime):
    tree = PrimeDivisorTree([10, 20])
    with pytest.raises(ValueError):
        tree.divide(0, 1, prime)


def test_out_of_range_indices():
    tree = PrimeDivisorTree([10, 20])
    with pytest.raises(IndexError):
        tree.assign(2, 5)
    with pytest.raises(IndexError):
        tree.divide(-1, 1, 2)


def test_empty_rejected():
    with pytest.raises(ValueError):
        PrimeDivisorTree([])


def test_run_queries():
    script = "3\n12 9 10\n2\n1 1 3 2\n2 2 7\n"
    assert run_queries(script) == [6, 7, 5]


def test_run_queries_truncated():
    with pytest.raises(ValueError):
        run_queries("3\n1 2")


def test_main_prints_result(monkeypatch, capsys):
    script = "4\n30 45 50 8\n3\n1 1 4 5\n1 2 3 3\n2 4 9\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.split() == [str(v) for v in run_queries(script)]
    assert out.endswith(" \n")


@given(
    st.lists(st.integers(1, 10**6), min_size=1, max_size=20),
    st.lists(st.tuples(st.integers(0, 19), st.integers(0, 19), st.sampled_from([2, 3, 5])), max_size=30),
)
def test_results_divide_originals(values, operations):
    tree = PrimeDivisorTree(values)
    n = len(values)
    for a, b, prime in operations:
        left, right = sorted((a % n, b % n))
        tree.divide(left, right, prime)
    for original, result in zip(values, tree.values()):
        assert original % result == 0
        assert _smooth(original // result) == 1


@given(st.lists(st.integers(1, 10**6), min_size=1, max_size=20))
def test_enough_divisions_strip_small_primes(values):
    tree = PrimeDivisorTree(values)
    n = len(values)
    for prime in (2, 3, 5):
        for _ in range(20):
            tree.divide(0, n - 1, prime)
    result = tree.values()
    assert all(math.gcd(value, 30) == 1 for value in result)
    assert result == [_smooth(v) for v in values]