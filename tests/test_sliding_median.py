import random

import pytest

from cpalgos.sliding_median import MedianStream, sliding_medians


def _lower_median(window):
    ordered = sorted(window)
    return ordered[(len(ordered) - 1) // 2]


def test_worked_example():
    assert sliding_medians([2, 4, 3, 5, 8, 1, 2, 1], 3) == [3, 4, 5, 5, 2, 1]


def test_window_of_one_returns_values():
    values = [7, 3, 9, 3, 1]
    assert sliding_medians(values, 1) == values


def test_full_window_gives_single_lower_median():
    values = [6, 2, 8, 4]
    assert sliding_medians(values, 4) == [_lower_median(values)]


@pytest.mark.parametrize("seed", range(5))
def test_random_windows_match_sorted_median(seed):
    rng = random.Random(seed)
    values = [rng.randint(-20, 20) for _ in range(60)]
    k = rng.randint(1, 20)
    result = sliding_medians(values, k)
    assert len(result) == len(values) - k + 1
    for start, median in enumerate(result):
        assert median == _lower_median(values[start : start + k])


def test_stream_insert_and_remove():
    stream = MedianStream([5, 1, 3])
    assert stream.median() == 3
    stream.remove(3)
    assert stream.median() == 1
    assert len(stream) == 2
    stream.insert(10)
    assert stream.median() == 5


def test_stream_handles_duplicates():
    stream = MedianStream([4, 4, 4, 4])
    stream.remove(4)
    assert stream.median() == 4
    assert len(stream) == 3


def test_empty_stream_median_raises():
    with pytest.raises(ValueError):
        MedianStream().median()


def test_remove_absent_raises():
    stream = MedianStream([1, 2])
    with pytest.raises(ValueError):
        stream.remove(9)


@pytest.mark.parametrize("k", [0, 4])
def test_bad_window_size(k):
    with pytest.raises(ValueError):
        sliding_medians([1, 2, 3], k)