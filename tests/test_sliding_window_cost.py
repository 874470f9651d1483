import pytest

from cpalgos.sliding_window_cost import SlidingMedianCost, sliding_window_costs

SEQUENCE = [2, 4, 3, 5, 8, 1, 2, 1]


def test_worked_example():
    assert sliding_window_costs(SEQUENCE, 3) == [2, 2, 5, 7, 7, 1]


def test_window_of_one_costs_nothing():
    assert sliding_window_costs(SEQUENCE, 1) == [0] * len(SEQUENCE)


def test_equal_values_cost_nothing():
    values = [6] * 7
    assert sliding_window_costs(values, 4) == [0] * (len(values) - 4 + 1)


@pytest.mark.parametrize("k", range(1, 10))
def test_costs_are_optimal_distances(k):
    values = [9, -3, 4, 4, 12, 0, 7, -8, 5, 5, 1]
    costs = sliding_window_costs(values, k)
    assert len(costs) == len(values) - k + 1
    for start, cost in enumerate(costs):
        window = values[start : start + k]
        assert cost == min(sum(abs(x - c) for x in window) for c in window)


def test_insert_then_remove_restores_cost():
    window = SlidingMedianCost([5, 1, 9, 3])
    before = window.cost()
    window.insert(100)
    window.remove(100)
    assert window.cost() == before
    assert len(window) == 4


def test_remove_missing_value_raises():
    window = SlidingMedianCost([1, 2, 3])
    with pytest.raises(ValueError):
        window.remove(7)


def test_cost_of_empty_window_raises():
    with pytest.raises(ValueError):
        SlidingMedianCost().cost()


@pytest.mark.parametrize("k", [0, len(SEQUENCE) + 1])
def test_invalid_window_size_raises(k):
    with pytest.raises(ValueError):
        sliding_window_costs(SEQUENCE, k)