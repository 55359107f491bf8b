"""Lexicographically largest subsequence that forms a polygon."""

import sys

__all__ = ["CANDIDATES", "best_subsequence", "main"]

CANDIDATES = 33


def _greedy(values, limit):
    """Return the best subsequence with sum above ``limit``, or None."""
    n = len(values)
    bigger = [-1] * n
    stack = []
    for i in range(n - 1, -1, -1):
        while stack and values[stack[-1]] <= values[i]:
            stack.pop()
        bigger[i] = stack[-1] if stack else -1
        stack.append(i)
    suffix = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        suffix[i] = suffix[i + 1] + values[i]
    if suffix[0] <= limit:
        return None
    chosen = []
    running = 0
    i = 0
    while i < n:
        while bigger[i] != -1 and running + suffix[bigger[i]] > limit:
            i = bigger[i]
        chosen.append(values[i])
        running += values[i]
        i += 1
    return chosen


def best_subsequence(values):
    """Return the lexicographically largest polygon subsequence, or None."""
    values = [int(v) for v in values]
    best = None
    for cap in sorted(values, reverse=True)[:CANDIDATES]:
        candidate = _greedy([v for v in values if v <= cap], 2 * cap)
        if candidate is not None and (best is None or best < candidate):
            best = candidate
    return best


def main(argv=None):
    """Read test cases from standard input and print each chosen subsequence."""
    tokens = iter(sys.stdin.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        best = best_subsequence(values)
        if best is None:
            out.append("-1\n\n")
        else:
            out.append(f"{len(best)}\n" + "".join(f"{v} " for v in best) + "\n")
    sys.stdout.write("".join(out))
    return 0