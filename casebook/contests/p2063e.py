"""Sum over vertex pairs of the number of valid triangle sides in a tree."""

import sys

__all__ = ["triangle_pair_sum", "main"]


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


def triangle_pair_sum(n, edges):
    """Return the total for a tree of ``n`` nodes rooted at node 1.

    Edges are pairs of 1-based node numbers.
    """
    if n < 1:
        raise ValueError("the tree needs at least one node")
    adjacency, parent, order = _tree(n, edges)
    depth = [0] * n
    heavy = [-1] * n
    weight = [0] * n
    total = 0
    for node in reversed(order):
        children = [c for c in reversed(adjacency[node]) if c != parent[node]]
        chosen = -1
        for child in children:
            if chosen == -1 or depth[chosen] < depth[child]:
                chosen = child
        heavy[node] = chosen
        for child in children:
            if child == chosen:
                continue
            main_chain, side_chain = chosen, child
            total -= weight[main_chain] * weight[side_chain]
            while side_chain != -1:
                total += 2 * weight[main_chain] * weight[side_chain]
                weight[main_chain] += weight[side_chain]
                main_chain, side_chain = heavy[main_chain], heavy[side_chain]
        if chosen == -1:
            depth[node], weight[node] = 0, 1
        else:
            depth[node], weight[node] = depth[chosen] + 1, weight[chosen] + 1
    return total


def main(argv=None):
    """Read test cases from standard input and print one answer per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
        lines.append(str(triangle_pair_sum(n, edges)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0