"""Cheapest travel costs from the last station to query positions on a line."""

import sys

__all__ = ["INF", "min_costs", "main"]

INF = 0x3F3F3F3F3F3F3F3F


def _tdiv(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class _LineTree:
    """Lower envelope of lines laid out over the sorted positions."""

    def __init__(self, positions):
        self._pos = positions
        self._slope = [None] * len(positions)
        self._intercept = [0] * len(positions)

    def insert(self, slope, intercept):
        lo, hi = 0, len(self._pos) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            if self._slope[mid] is None:
                self._slope[mid], self._intercept[mid] = slope, intercept
                return
            x = self._pos[mid]
            if self._slope[mid] * x + self._intercept[mid] > slope * x + intercept:
                self._slope[mid], slope = slope, self._slope[mid]
                self._intercept[mid], intercept = intercept, self._intercept[mid]
            if slope > self._slope[mid]:
                hi = mid - 1
            else:
                lo = mid + 1

    def lowest(self, index):
        lo, hi = 0, len(self._pos) - 1
        best = INF
        x = self._pos[index]
        while lo <= hi:
            mid = (lo + hi) // 2
            if self._slope[mid] is not None:
                best = min(best, self._slope[mid] * x + self._intercept[mid])
            if index < mid:
                hi = mid - 1
            elif index > mid:
                lo = mid + 1
            else:
                break
        return best


def _sweep(order, pos, start, costs, m, dp):
    """Fill the costs of every position at or right of ``start``."""
    n = len(order)
    dp = list(dp)

    def value(index, cost):
        return pos[index] * cost - dp[index]

    def dominated(i, j, k):
        left = _tdiv(dp[j] - dp[i] + pos[j] - pos[i] - 1, pos[j] - pos[i])
        right = _tdiv(dp[k] - dp[j] + pos[k] - pos[i] - 1, pos[k] - pos[j])
        return left >= right

    hull = []
    for i in range(start, n):
        ident = order[i]
        if ident >= m:
            dp[i] = INF
            continue
        cost = costs[ident]
        if i == start:
            dp[i] = 0
        else:
            lower, upper = -1, len(hull) - 1
            while upper - lower > 1:
                g = (lower + upper) // 2
                if value(hull[g], cost) < value(hull[g + 1], cost):
                    lower = g
                else:
                    upper = g
            dp[i] = pos[i] * cost - value(hull[upper], cost)
        if hull and pos[hull[-1]] == pos[i] and dp[hull[-1]] < dp[i]:
            continue
        while hull and (
            dp[hull[-1]] >= dp[i] or (len(hull) >= 2 and dominated(hull[-2], hull[-1], i))
        ):
            hull.pop()
        hull.append(i)

    tree = _LineTree(pos)
    for i, ident in enumerate(order):
        if ident < m:
            cost = costs[ident]
            if i < start:
                tree.insert(2 * cost, -(pos[i] + pos[start]) * cost)
            else:
                tree.insert(2 * cost, dp[i] - 2 * pos[i] * cost)
        if i >= start:
            dp[i] = tree.lowest(i)

    direct = costs[m - 1]
    for i in range(start, n):
        dp[i] = min(dp[i], (pos[i] - pos[start]) * direct)
    for i in range(n - 2, start - 1, -1):
        dp[i] = min(dp[i], dp[i + 1])
    return dp


def min_costs(points, queries):
    """Return the cost for each query position.

    ``points`` holds (position, cost) pairs; the journey starts at the last one.
    """
    points = [(int(x), int(c)) for x, c in points]
    if not points:
        raise ValueError("at least one point is required")
    queries = [int(q) for q in queries]
    m = len(points)
    n = m + len(queries)
    coords = [x for x, _ in points] + queries
    costs = [c for _, c in points]
    order = sorted(range(n), key=lambda i: coords[i])
    dp = [0] * n
    for _ in range(2):
        pos = [coords[i] for i in order]
        start = order.index(m - 1)
        dp = _sweep(order, pos, start, costs, m, dp)
        coords = [-x for x in coords]
        order.reverse()
        dp.reverse()
    answers = [0] * len(queries)
    for i, ident in enumerate(order):
        if ident >= m:
            answers[ident - m] = dp[i]
    return answers


def main(argv=None):
    """Read the stations and queries from standard input and print each cost."""
    tokens = iter(sys.stdin.read().split())
    next(tokens)
    m, q = int(next(tokens)), int(next(tokens))
    points = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
    queries = [int(next(tokens)) for _ in range(q)]
    sys.stdout.write("".join(f"{a}\n" for a in min_costs(points, queries)))
    return 0