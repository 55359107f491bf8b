"""Count the distinct sand-sorting outcomes of a coloured permutation."""

import sys

__all__ = ["MOD", "count_final_orders", "main"]

MOD = 998_244_353


def count_final_orders(permutation, colors):
    """Return the number of reachable orders modulo MOD.

    ``permutation`` holds the values 1..n; ``colors`` gives each position's colour.
    """
    values = [int(v) for v in permutation]
    colors = list(colors)
    n = len(values)
    if len(colors) != n:
        raise ValueError("permutation and colors differ in length")
    if sorted(values) != list(range(1, n + 1)):
        raise ValueError("values must be a permutation of 1..n")

    position = [0] * n
    for index, value in enumerate(values):
        position[value - 1] = index

    parent = list(range(n))
    size = [1] * n

    def find(node):
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    def union(a, b):
        a, b = find(a), find(b)
        if a != b:
            parent[b] = a
            size[a] += size[b]

    for index in range(n - 1):
        if colors[index] == colors[index + 1]:
            union(index, index + 1)

    left = list(range(-1, n - 1))
    right = list(range(1, n + 1))
    result = 1
    for index in position:
        root = find(index)
        result = result * size[root] % MOD
        size[root] -= 1
        before, after = left[index], right[index]
        if before >= 0 and after < n and colors[before] == colors[after]:
            union(before, after)
        if before >= 0:
            right[before] = after
        if after < n:
            left[after] = before
    return result


def main(argv=None):
    """Read test cases from standard input and print one count per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        permutation = [int(next(tokens)) for _ in range(n)]
        colors = [int(next(tokens)) for _ in range(n)]
        lines.append(str(count_final_orders(permutation, colors)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0