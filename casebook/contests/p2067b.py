"""Decide whether two bags can be made equal by moving and incrementing."""

import sys

__all__ = ["can_equalize", "main"]


def can_equalize(values):
    """Return True when the bags can be equalized; values lie in 1..len(values)."""
    values = [int(v) for v in values]
    n = len(values)
    counts = [0] * n
    for value in values:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} must lie in [1, {n}]")
        counts[value - 1] += 1
    ok = True
    carry = 0
    for count in counts:
        count += carry
        if count > 2:
            carry = count - 2
            count = 2
        else:
            carry = 0
        if count == 1:
            ok = False
    return ok and carry % 2 == 0


def main(argv=None):
    """Read test cases from standard input and print YES or NO per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        lines.append("YES" if can_equalize(values) else "NO")
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0