"""Rebuild an alternating-sum sequence from all but one of its elements."""

import sys

__all__ = ["reconstruct", "main"]


def reconstruct(values):
    """Return a sequence of 2n+1 numbers holding ``values`` plus one new number.

    The first element equals the alternating sum of the others:
    ``a[0] == a[1] - a[2] + a[3] - ... - a[2n]``.
    """
    values = [int(v) for v in values]
    if not values or len(values) % 2:
        raise ValueError("an even, non-zero number of values is required")
    n = len(values) // 2
    ordered = sorted(values, reverse=True)
    result = [0] * (2 * n + 1)
    result[1::2] = ordered[:n]
    result[2::2] = ordered[n:]
    head = sum(result[1::2]) - sum(result[2::2])
    first = result[1]
    if head < first:
        result[0] = first
        result[1] = first + (first - head)
    elif head == first:
        if n >= 2:
            result[2], result[3] = result[3], result[2]
        result[0] = first
        result[1] = first + sum(result[2::2]) - sum(result[3::2])
    else:
        result[0] = head
    return result


def main(argv=None):
    """Read test cases from standard input and print one sequence per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        values = [int(next(tokens)) for _ in range(2 * n)]
        lines.append(" ".join(str(v) for v in reconstruct(values)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0