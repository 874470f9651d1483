import random

from cpalgos.nested_ranges import nested_ranges_check, nested_ranges_count

EXAMPLE = [(1, 6), (2, 4), (4, 8), (3, 6)]


def test_check_example():
    assert nested_ranges_check(EXAMPLE) == (
        [True, False, False, False],
        [False, True, False, True],
    )


def test_count_example():
    assert nested_ranges_count(EXAMPLE) == ([2, 0, 0, 0], [0, 1, 0, 1])


def _random_ranges(rng):
    ranges = set()
    for _ in range(rng.randint(1, 9)):
        start = rng.randint(1, 15)
        ranges.add((start, start + rng.randint(1, 8)))
    return list(ranges)


def _holds(outer, inner):
    return outer[0] <= inner[0] and inner[1] <= outer[1]


def test_count_matches_definition():
    rng = random.Random(19)
    for _ in range(50):
        ranges = _random_ranges(rng)
        contains, contained = nested_ranges_count(ranges)
        for i, r in enumerate(ranges):
            others = ranges[:i] + ranges[i + 1 :]
            assert contains[i] == sum(1 for o in others if _holds(r, o))
            assert contained[i] == sum(1 for o in others if _holds(o, r))


def test_check_agrees_with_count():
    rng = random.Random(20)
    for _ in range(50):
        ranges = _random_ranges(rng)
        has, within = nested_ranges_check(ranges)
        contains, contained = nested_ranges_count(ranges)
        assert has == [c > 0 for c in contains]
        assert within == [c > 0 for c in contained]
        assert sum(contains) == sum(contained)


def test_empty_input():
    assert nested_ranges_check([]) == ([], [])
    assert nested_ranges_count([]) == ([], [])