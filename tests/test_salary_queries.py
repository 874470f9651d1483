import random

import pytest

from cpalgos.salary_queries import (
    CHANGE,
    COUNT,
    RangeCounter,
    brute_force_salary_queries,
    compress,
    salary_queries,
)


def test_compress_ranks_distinct_values():
    assert compress([5, 1, 5, 3]) == {1: 0, 3: 1, 5: 2}


def test_compress_empty():
    assert compress([]) == {}


def test_range_counter_totals():
    counter = RangeCounter(3, {0: 2, 2: 1})
    assert counter.query(0, 2) == 3
    assert counter.query(1, 1) == 0
    counter.update(1, 1)
    assert counter.query(1, 1) == 1
    assert counter.query(0, 2) == 4


def test_range_counter_empty_range_is_zero():
    counter = RangeCounter(2, {0: 5})
    assert counter.query(1, 0) == 0


def test_range_counter_out_of_bounds():
    counter = RangeCounter(2)
    with pytest.raises(IndexError):
        counter.query(0, 2)
    with pytest.raises(IndexError):
        counter.update(5, 1)


def test_unit_case_matches_brute_force():
    salaries = [2, 2, 3, 4, 5, 6]
    queries = [(COUNT, 2, 4), (COUNT, 6, 6), (CHANGE, 1, 9), (COUNT, 6, 10)]
    assert salary_queries(salaries, queries) == brute_force_salary_queries(
        salaries, queries
    )


def test_reversed_bounds_count_the_same_range():
    salaries = [3, 7, 1, 9]
    forward = salary_queries(salaries, [(COUNT, 2, 8)])
    backward = salary_queries(salaries, [(COUNT, 8, 2)])
    assert forward == backward == brute_force_salary_queries(salaries, [(COUNT, 2, 8)])


def test_input_is_not_modified():
    salaries = [1, 2, 3]
    salary_queries(salaries, [(CHANGE, 1, 10)])
    assert salaries == [1, 2, 3]


def test_random_against_brute_force():
    rng = random.Random(0)
    for _ in range(100):
        size = rng.randint(1, 100)
        salaries = [rng.randint(1, 100) for _ in range(size)]
        queries = []
        for _ in range(rng.randint(1, 100)):
            if rng.randint(1, 2) == CHANGE:
                queries.append((CHANGE, rng.randint(1, size), rng.randint(1, 100)))
            else:
                high = rng.randint(1, 100)
                queries.append((COUNT, rng.randint(1, high), high))
        assert salary_queries(salaries, queries) == brute_force_salary_queries(
            salaries, queries
        )


def test_unknown_query_type():
    with pytest.raises(ValueError):
        salary_queries([1], [(3, 1, 1)])


def test_change_out_of_range():
    with pytest.raises(IndexError):
        salary_queries([1, 2], [(CHANGE, 3, 5)])