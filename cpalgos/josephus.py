"""The Josephus elimination where every second child is removed."""


def removal_order(n: int) -> list[int]:
    """Return the order in which children 1..n leave the circle."""
    if n < 1:
        raise ValueError("there must be at least one child")
    remaining = list(range(1, n + 1))
    order: list[int] = []
    while len(remaining) > 1:
        kept = remaining[0::2]
        order.extend(remaining[1::2])
        if len(remaining) % 2:
            order.append(kept[0])
            kept = kept[1:]
        remaining = kept
    order.append(remaining[0])
    return order


def last_removed(n: int) -> int:
    """Return the child who is removed last from a circle of ``n``."""
    if n < 1:
        raise ValueError("there must be at least one child")
    splits = 0
    survivor = 1
    while n > 1:
        splits += 1
        if n & 1:
            survivor += 1 << splits
        n //= 2
    return survivor