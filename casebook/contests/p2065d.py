"""Best total score when concatenating equal-length arrays in any order."""

import sys
from itertools import accumulate

__all__ = ["max_score", "main"]


def max_score(arrays):
    """Return the largest sum of prefix sums over all concatenation orders."""
    rows = [[int(v) for v in row] for row in arrays]
    if not rows:
        raise ValueError("at least one array is required")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all arrays must have the same length")
    total = sum(sum(accumulate(row)) for row in rows)
    offset = 0
    for row_sum in sorted((sum(row) for row in rows), reverse=True):
        total += offset * width
        offset += row_sum
    return total


def main(argv=None):
    """Read test cases from standard input and print one score per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n, m = int(next(tokens)), int(next(tokens))
        arrays = [[int(next(tokens)) for _ in range(m)] for _ in range(n)]
        lines.append(str(max_score(arrays)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0