"""Pick four sticks that form an isosceles trapezoid."""

import sys

__all__ = ["find_trapezoid", "main"]


def find_trapezoid(sticks):
    """Return (leg, leg, base, base) lengths, or None when no choice works."""
    values = sorted(sticks)
    if len(values) < 4:
        return None
    pair_at = next(
        (i for i in range(1, len(values)) if values[i] == values[i - 1]), None
    )
    if pair_at is None:
        return None
    leg = values[pair_at]
    rest = values[:pair_at - 1] + values[pair_at + 1:]
    for shorter, longer in zip(rest, rest[1:]):
        if longer < shorter + 2 * leg:
            return (leg, leg, shorter, longer)
    return None


def main(argv=None):
    """Read test cases from standard input and print one answer per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        count = int(next(tokens))
        sticks = [int(next(tokens)) for _ in range(count)]
        found = find_trapezoid(sticks)
        lines.append("-1" if found is None else " ".join(map(str, found)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0