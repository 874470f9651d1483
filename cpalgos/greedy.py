"""Greedy and binary-search answers to classic sorting problems."""

from bisect import bisect_right
from collections import deque
from collections.abc import Iterable, Sequence

MAX_TIME = 10**18


def ferris_wheel(weights: Iterable[int], max_weight: int) -> int:
    """Return the fewest gondolas for children of ``weights``, at most two per gondola."""
    children = deque(sorted(weights))
    gondolas = 0
    while children:
        heaviest = children.pop()
        if children and children[0] + heaviest <= max_weight:
            children.popleft()
        gondolas += 1
    return gondolas


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Return the smallest positive sum that no subset of ``coins`` adds up to."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most movies that can be watched in full, given ``(start, end)`` pairs."""
    ordered = sorted(movies)
    if not ordered:
        return 0
    watched = 1
    current_end = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= current_end:
            watched += 1
            current_end = end
        elif end < current_end:
            current_end = end
    return watched


def stick_lengths(lengths: Iterable[int]) -> int:
    """Return the least total change that makes all stick lengths equal."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("lengths must not be empty")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - length) for length in ordered)


def tasks_and_deadlines(tasks: Iterable[tuple[int, int]]) -> int:
    """Return the best total reward for ``(duration, deadline)`` tasks.

    Each task earns its deadline minus its finishing time; shortest tasks go first.
    """
    finish = 0
    reward = 0
    for duration, deadline in sorted(tasks, key=lambda task: task[0]):
        finish += duration
        reward += deadline - finish
    return reward


def towers(cubes: Iterable[int]) -> int:
    """Return the fewest towers when each cube goes on a strictly larger one, in order."""
    tops: list[int] = []
    for cube in cubes:
        if not tops or tops[-1] <= cube:
            tops.append(cube)
        else:
            tops[bisect_right(tops, cube)] = cube
    return len(tops)


def factory_machines(times: Sequence[int], products: int) -> int:
    """Return the shortest time in which machines taking ``times`` each make ``products`` items.

    Raises ValueError if there are no machines, a time is not positive, or no
    time up to 10**18 suffices.
    """
    machines = list(times)
    if not machines:
        raise ValueError("there must be at least one machine")
    if any(t <= 0 for t in machines):
        raise ValueError("machine times must be positive")

    def enough(time: int) -> bool:
        made = 0
        for machine in machines:
            if made >= products:
                return True
            made += time // machine
        return made >= products

    low, high = 0, MAX_TIME
    best = None
    while low <= high:
        middle = (low + high) // 2
        if enough(middle):
            best = middle
            high = middle - 1
        else:
            low = middle + 1
    if best is None:
        raise ValueError("no time within the limit is long enough")
    return best