from itertools import accumulate

import pytest

from cpalgos.fenwick_queries import (
    FenwickTree,
    distinct_value_queries,
    dynamic_range_sums,
)

VALUES = [3, 2, 4, 5, 1, 1, 5, 3]


def test_fenwick_prefix_sums_match_running_totals():
    deltas = [5, -2, 7, 0, 3, 9, -4]
    tree = FenwickTree(len(deltas))
    for i, delta in enumerate(deltas):
        tree.add(i, delta)
    assert [tree.prefix_sum(i) for i in range(len(deltas))] == list(accumulate(deltas))
    assert tree.prefix_sum(-1) == 0


def test_fenwick_repeated_adds_accumulate():
    tree = FenwickTree(4)
    tree.add(2, 3)
    tree.add(2, 4)
    assert tree.prefix_sum(1) == 0
    assert tree.prefix_sum(3) == 3 + 4


def test_fenwick_rejects_out_of_range():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.add(3, 1)
    with pytest.raises(IndexError):
        tree.add(-1, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(3)


def test_dynamic_range_sums_worked_example():
    queries = [(2, 1, 4), (2, 5, 6), (1, 3, 1), (2, 1, 4)]
    assert dynamic_range_sums(VALUES, queries) == [14, 2, 11]


def test_dynamic_range_sums_full_range_and_updates():
    n = len(VALUES)
    queries = [(2, 1, n), (1, 2, 10), (2, 1, n), (2, 2, 2)]
    total, updated_total, single = dynamic_range_sums(VALUES, queries)
    assert total == sum(VALUES)
    assert updated_total == sum(VALUES) - VALUES[1] + 10
    assert single == 10


def test_dynamic_range_sums_does_not_modify_input():
    values = list(VALUES)
    dynamic_range_sums(values, [(1, 1, 100)])
    assert values == VALUES


def test_dynamic_range_sums_rejects_unknown_type():
    with pytest.raises(ValueError):
        dynamic_range_sums(VALUES, [(3, 1, 2)])


def test_distinct_value_queries_worked_example():
    assert distinct_value_queries([3, 2, 3, 1, 2], [(1, 3), (2, 4), (1, 5)]) == [2, 3, 3]


def test_distinct_value_queries_every_range():
    values = [4, 1, 4, 2, 2, 7, 1, 4, 9]
    n = len(values)
    ranges = [(a, b) for a in range(1, n + 1) for b in range(a, n + 1)]
    answers = distinct_value_queries(values, ranges)
    for (a, b), answer in zip(ranges, answers):
        assert answer == len(set(values[a - 1 : b]))


def test_distinct_value_queries_rejects_out_of_range():
    with pytest.raises(IndexError):
        distinct_value_queries([1, 2], [(1, 3)])