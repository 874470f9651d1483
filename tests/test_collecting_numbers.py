import random

import pytest

from cpalgos.collecting_numbers import count_rounds, rounds_after_swaps


def test_count_rounds_example():
    assert count_rounds([4, 2, 1, 5, 3]) == 3


def test_sorted_takes_one_round():
    assert count_rounds(list(range(1, 11))) == 1


def test_reversed_takes_n_rounds():
    assert count_rounds(list(range(10, 0, -1))) == 10


def test_not_a_permutation():
    with pytest.raises(ValueError):
        count_rounds([1, 1, 3])


def test_rounds_after_swaps_example():
    assert rounds_after_swaps([4, 2, 1, 5, 3], [(2, 3), (1, 5), (2, 3)]) == [2, 3, 4]


def test_swap_with_itself_changes_nothing():
    values = [3, 1, 2]
    assert rounds_after_swaps(values, [(2, 2)]) == [count_rounds(values)]


def test_swap_out_of_range():
    with pytest.raises(IndexError):
        rounds_after_swaps([1, 2], [(1, 3)])


def test_input_is_not_modified():
    values = [2, 1, 3]
    rounds_after_swaps(values, [(1, 2)])
    assert values == [2, 1, 3]


@pytest.mark.parametrize("seed", range(30))
def test_swaps_match_recount(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    values = list(range(1, n + 1))
    rng.shuffle(values)
    swaps = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(20)]
    expected = []
    current = list(values)
    for a, b in swaps:
        current[a - 1], current[b - 1] = current[b - 1], current[a - 1]
        expected.append(count_rounds(current))
    assert rounds_after_swaps(values, swaps) == expected