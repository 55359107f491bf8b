"""Fewest steps to repaint a grid so that every cell has one colour."""

import sys

__all__ = ["min_steps", "main"]


def min_steps(grid):
    """Return the fewest repaint steps that leave the grid a single colour.

    A colour with two side-by-side equal cells needs two steps, any other
    colour one; the colour that costs the most is the one kept.
    """
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all grid rows must have the same length")
    adjacent = {}
    for i, row in enumerate(rows):
        below = rows[i + 1] if i + 1 < len(rows) else None
        for j, colour in enumerate(row):
            if adjacent.setdefault(colour, False):
                continue
            if j + 1 < len(row) and row[j + 1] == colour:
                adjacent[colour] = True
            if below is not None and below[j] == colour:
                adjacent[colour] = True
    steps = [2 if touching else 1 for touching in adjacent.values()]
    return sum(steps) - max(steps, default=0)


def main(argv=None):
    """Read test cases from standard input and print one answer per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n, m = int(next(tokens)), int(next(tokens))
        grid = [[int(next(tokens)) for _ in range(m)] for _ in range(n)]
        lines.append(str(min_steps(grid)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0