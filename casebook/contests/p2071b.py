"""Permutations of 1..n with no prefix sum that is a perfect square."""

import sys
from math import isqrt

__all__ = ["is_blocked", "build_permutation", "main"]


def is_blocked(n):
    """Return True when 1 + 2 + ... + n is a perfect square (no answer exists)."""
    total = n * (n + 1) // 2
    root = isqrt(total)
    return root * root == total


def build_permutation(n):
    """Return the permutation for ``n``, or None when ``n`` is blocked.

    The answer for ``n`` is always a prefix of the answer for any larger
    unblocked length.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if is_blocked(n):
        return None
    result = []
    for i in range(1, n + 1):
        if is_blocked(i):
            continue
        if i == len(result) + 2:
            result.extend((i, i - 1))
        else:
            result.append(i)
    return result


def main(argv=None):
    """Read the queries from standard input and print one line per query."""
    tokens = iter(sys.stdin.read().split())
    queries = [int(next(tokens)) for _ in range(int(next(tokens)))]
    longest = max((x for x in queries if not is_blocked(x)), default=0)
    permutation = build_permutation(longest) or []
    out = []
    for x in queries:
        if is_blocked(x):
            out.append("-1\n")
        else:
            out.append("".join(f"{v} " for v in permutation[:x]) + "\n")
    sys.stdout.write("".join(out))
    return 0