"""Post-order traversal of a tree from a chosen start node."""

import sys

__all__ = ["postorder", "main"]


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n + 1)]
    for x, y in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) names a missing node")
        adjacency[y].append(x)
        adjacency[x].append(y)
    return adjacency


def postorder(n, start, edges):
    """Return the nodes of the tree in post-order from ``start``.

    Nodes are numbered 1..n; children are visited in the order their
    edges were given.
    """
    if n < 1:
        raise ValueError("the tree needs at least one node")
    if not 1 <= start <= n:
        raise ValueError(f"start node {start} must lie in [1, {n}]")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} nodes needs {n - 1} edges")
    adjacency = _adjacency(n, edges)
    order = []
    stack = [(start, 0, False)]
    while stack:
        node, parent, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        stack.append((node, parent, True))
        stack.extend(
            (neighbour, node, False)
            for neighbour in reversed(adjacency[node])
            if neighbour != parent
        )
    return order


def main(argv=None):
    """Read test cases from standard input and print each traversal."""
    tokens = iter(sys.stdin.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        next(tokens)  # the other endpoint plays no part in the traversal
        start = int(next(tokens))
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
        out.append("".join(f"{v} " for v in postorder(n, start, edges)) + "\n")
    sys.stdout.write("".join(out))
    return 0