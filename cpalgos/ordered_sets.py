"""Problems answered with sorted multisets and sweeps over sorted events."""

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def concert_tickets(prices: Iterable[int], budgets: Iterable[int]) -> list[int | None]:
    """Sell each customer the dearest ticket within budget.

    Returns the price paid by each customer in turn, or None when no ticket
    left is cheap enough.
    """
    remaining = SortedList(prices)
    sold: list[int | None] = []
    for budget in budgets:
        index = remaining.bisect_right(budget)
        if index:
            sold.append(remaining.pop(index - 1))
        else:
            sold.append(None)
    return sold


def traffic_lights(street_length: int, lights: Iterable[int]) -> list[int]:
    """Return the longest unlit stretch of the street after each light is added."""
    if street_length <= 0:
        raise ValueError("street length must be positive")
    cuts = SortedList([0, street_length])
    gaps = SortedList([street_length])
    longest = []
    for position in lights:
        if not 0 < position < street_length:
            raise ValueError(f"light position {position!r} is not inside the street")
        index = cuts.bisect_right(position)
        start, end = cuts[index - 1], cuts[index]
        gaps.remove(end - start)
        gaps.add(end - position)
        gaps.add(position - start)
        if position not in cuts:
            cuts.add(position)
        longest.append(gaps[-1])
    return longest


def distinct_numbers(values: Iterable[int]) -> int:
    """Return how many distinct values there are."""
    return len(set(values))


def playlist(songs: Iterable[int]) -> int:
    """Return the length of the longest run of songs with no repeat."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for index, song in enumerate(songs):
        previous = last_seen.get(song)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[song] = index
        best = max(best, index - start + 1)
    return best


def restaurant_customers(visits: Iterable[tuple[int, int]]) -> int:
    """Return the most customers present at once, given ``(arrival, leaving)`` times."""
    stays = list(visits)
    arrivals = sorted(arrival for arrival, _ in stays)
    leavings = sorted(leaving for _, leaving in stays)
    present = 0
    next_leaving = 0
    for arrival in arrivals:
        if arrival <= leavings[next_leaving]:
            present += 1
        else:
            next_leaving += 1
    return present


def room_allocation(stays: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Give rooms to ``(arrival, departure)`` stays; days are inclusive.

    Returns the number of rooms used and the 1-based room of every stay.
    """
    guests = list(stays)
    arrivals = sorted((arrival, guest) for guest, (arrival, _) in enumerate(guests))
    departures = sorted(
        (departure, guest) for guest, (_, departure) in enumerate(guests)
    )
    rooms = [0] * len(guests)
    opened = 0
    next_departure = 0
    for arrival, guest in arrivals:
        departure, leaving = departures[next_departure]
        if arrival <= departure:
            opened += 1
            rooms[guest] = opened
        else:
            rooms[guest] = rooms[leaving]
            next_departure += 1
    return opened, rooms