"""Cheapest way to make two numbers equal by right shifts of growing cost."""

import sys

__all__ = ["min_cost", "main"]

_MAX_WIDTH = 61


def _width(value):
    if value < 2:
        return 1
    return min(value.bit_length(), _MAX_WIDTH)


def _triangle(target):
    """Return the smallest k with 1 + ... + k >= target, and that sum."""
    k = 0
    total = 0
    while True:
        k += 1
        total += k
        if total >= target:
            return k, total


def _powers(k, skipped):
    return sum(1 << j for j in range(1, k + 1) if j not in skipped)


def _from_zero(width):
    k, total = _triangle(width)
    return _powers(k, {total - width})


def min_cost(x, y):
    """Return the least total cost of shifting ``x`` and ``y`` until they are equal."""
    x, y = int(x), int(y)
    if x < 0 or y < 0:
        raise ValueError("x and y must be non-negative")
    if x == y:
        return 0
    nx, ny = _width(x), _width(y)
    if x == 0:
        return _from_zero(ny)
    if y == 0:
        return _from_zero(nx)
    same = 0
    for i, j in zip(range(nx - 1, -1, -1), range(ny - 1, -1, -1)):
        if (x >> i) & 1 != (y >> j) & 1:
            break
        same += 1
    num1, num2 = nx - same, ny - same
    op = num1 + num2
    if op == 0:
        return 0
    k, total = _triangle(op)
    cut = total - op
    if cut == 0 or cut >= 3:
        return _powers(k, {cut})
    if cut == 1:
        if num1 == 1 or num2 == 1:
            if num1 == 0 or num2 == 0:
                return 2
            if num1 == 1 and num2 == 1:
                return 12 if nx == 2 else 14
            k += 1
            return _powers(k, {2, k - 1})
        return _powers(k, {1})
    if num1 == 2 or num2 == 2:
        return _powers(k, set())
    return _powers(k, {2})


def main(argv=None):
    """Read test cases from standard input and print one cost per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        x, y = int(next(tokens)), int(next(tokens))
        lines.append(str(min_cost(x, y)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0