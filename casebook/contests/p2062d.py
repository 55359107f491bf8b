"""Smallest common value reachable for a tree with per-node value ranges."""

import sys

__all__ = ["min_balanced_value", "main"]


def _tree(n, edges):
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} nodes needs {n - 1} edges")
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) names a missing node")
        adjacency[a - 1].append(b - 1)
        adjacency[b - 1].append(a - 1)
    parent = [-1] * n
    seen = [False] * n
    seen[0] = True
    order = []
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in adjacency[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                parent[neighbour] = node
                stack.append(neighbour)
    if len(order) != n:
        raise ValueError("edges do not connect every node")
    return adjacency, parent, order


def min_balanced_value(bounds, edges):
    """Return the minimum final value; ``bounds`` holds (low, high) per node.

    Edges are pairs of 1-based node numbers; node 1 is the root.
    """
    bounds = [(int(low), int(high)) for low, high in bounds]
    if not bounds:
        raise ValueError("the tree needs at least one node")
    adjacency, parent, order = _tree(len(bounds), edges)
    best = [0] * len(bounds)
    total = 0
    for node in reversed(order):
        low, high = bounds[node]
        children = [c for c in adjacency[node] if c != parent[node]]
        value = max([low] + [best[c] for c in children])
        if value > high:
            value = high
            total += sum(max(best[c] - value, 0) for c in children)
        best[node] = value
    return total + best[0]


def main(argv=None):
    """Read test cases from standard input and print one answer per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        bounds = [(int(next(tokens)), int(next(tokens))) for _ in range(n)]
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
        lines.append(str(min_balanced_value(bounds, edges)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0