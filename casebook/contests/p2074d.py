"""Count integer points covered by circles centred on the x-axis."""

import sys
from math import isqrt

__all__ = ["count_points", "main"]


def count_points(centers, radii):
    """Return the number of lattice points inside or on at least one circle."""
    centers = [int(c) for c in centers]
    radii = [int(r) for r in radii]
    if len(centers) != len(radii):
        raise ValueError("centers and radii differ in length")
    tallest = {}
    for center, radius in zip(centers, radii):
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")
        for x in range(center - radius, center + radius + 1):
            column = 2 * isqrt(radius * radius - (x - center) ** 2) + 1
            if column > tallest.get(x, 0):
                tallest[x] = column
    return sum(tallest.values())


def main(argv=None):
    """Read test cases from standard input and print one count per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        next(tokens)  # the total of the radii
        centers = [int(next(tokens)) for _ in range(n)]
        radii = [int(next(tokens)) for _ in range(n)]
        lines.append(str(count_points(centers, radii)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0