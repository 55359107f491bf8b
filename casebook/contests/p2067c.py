"""Fewest additions of 9, 99, 999, ... needed to put a digit 7 in a number."""

import sys

__all__ = ["LOW", "HIGH", "min_ops_to_seven", "main"]

LOW = 10
HIGH = 1_000_000_000
_OUT_OF_RANGE = "Out of range!"


def _steps(n, addend):
    count = 0
    while n > 0:
        if "7" in str(n):
            return count
        n += addend
        count += 1
    return -1


def min_ops_to_seven(n):
    """Return the fewest repeated additions of one 10**k - 1 that yield a 7."""
    n = int(n)
    if not LOW <= n <= HIGH:
        raise ValueError(f"{n} must lie in [{LOW}, {HIGH}]")
    return min(_steps(n, 10**k - 1) for k in range(1, 10))


def main(argv=None):
    """Read the numbers from standard input and print one answer per number."""
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens))
    if not 1 <= count <= 10_000:
        print(_OUT_OF_RANGE)
        return 0
    values = [int(next(tokens)) for _ in range(count)]
    lines = []
    for value in values:
        try:
            lines.append(str(min_ops_to_seven(value)))
        except ValueError:
            lines.append(_OUT_OF_RANGE)
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0