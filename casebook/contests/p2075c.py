"""Count ordered ways to paint a fence with two different paints."""

import sys
from bisect import bisect_left

__all__ = ["count_paintings", "main"]


def count_paintings(n, paints):
    """Return the number of ways to paint ``n`` planks with two distinct paints.

    Each paint in ``paints`` covers at most that many planks; the left part
    uses one paint, the right part another, and both parts are non-empty.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    ascending = sorted(int(p) for p in paints)
    if not ascending:
        return 0
    count = len(ascending)

    def at_least(size):
        return count - bisect_left(ascending, size)

    total = 0
    for split in range(1, n):
        small = min(split, n - split)
        large = n - small
        if large > ascending[-1]:
            continue
        wide = at_least(large)
        total += at_least(small) * wide - wide
    return total


def main(argv=None):
    """Read test cases from standard input and print one count per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n, m = int(next(tokens)), int(next(tokens))
        paints = [int(next(tokens)) for _ in range(m)]
        lines.append(str(count_paintings(n, paints)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0