import pytest

from cpalgos.distinct_colors import distinct_colors

EDGES = [(1, 2), (1, 3), (3, 4), (3, 5)]


def test_example():
    assert distinct_colors([2, 3, 2, 2, 1], EDGES) == [3, 1, 2, 1, 1]


def test_uniform_colour():
    n = 9
    edges = [(v // 2, v) for v in range(2, n + 1)]
    assert distinct_colors([7] * n, edges) == [1] * n


def test_root_sees_every_colour():
    n = 12
    edges = [(v // 2, v) for v in range(2, n + 1)]
    colors = [v % 5 for v in range(n)]
    result = distinct_colors(colors, edges)
    assert result[0] == len(set(colors))
    assert all(1 <= count <= result[0] for count in result)


def test_star_leaves():
    colors = [1, 2, 3, 2, 1]
    result = distinct_colors(colors, [(1, v) for v in range(2, 6)])
    assert result[1:] == [1] * 4
    assert result[0] == len(set(colors))


def test_path_with_distinct_colours():
    n = 6
    edges = [(v, v + 1) for v in range(1, n)]
    assert distinct_colors(list(range(n)), edges) == list(range(n, 0, -1))


def test_single_node():
    assert distinct_colors([4], []) == [1]


def test_wrong_edge_count():
    with pytest.raises(ValueError):
        distinct_colors([1, 2, 3], [(1, 2)])