"""Segment tree answering move counts for Hanoi-style disk placements."""

import sys

__all__ = ["MOD", "TowerTree", "main"]

MOD = 998_244_353
_ZERO = ((0, 0, 0), (0, 0, 0), 0)


def _leaf(peg):
    target = peg - 1
    targets = tuple(i if i == target else 3 - i - target for i in range(3))
    moves = tuple(0 if i == target else 1 for i in range(3))
    return targets, moves, 2


def _combine(first, second):
    first_targets, first_moves, first_power = first
    second_targets, second_moves, second_power = second
    targets = tuple(first_targets[t] for t in second_targets)
    moves = tuple(
        (second_moves[i] * first_power + first_moves[second_targets[i]]) % MOD
        for i in range(3)
    )
    return targets, moves, first_power * second_power % MOD


class TowerTree:
    """Disks on pegs 1..3 with point updates and range move-count queries.

    Positions are 1-based; a tree of depth ``d`` holds ``2**d`` positions.
    """

    def __init__(self, values=(), depth=17):
        if depth < 0:
            raise ValueError("depth must be non-negative")
        self._depth = depth
        self._nodes = {}
        for position, value in enumerate(values, 1):
            self.update(position, value)

    @property
    def size(self):
        """Number of positions the tree can hold."""
        return 1 << self._depth

    def _node(self, index):
        return self._nodes.get(index, _ZERO)

    def update(self, position, value):
        """Place the disk at ``position`` on peg ``value`` (1, 2 or 3)."""
        if value not in (1, 2, 3):
            raise ValueError(f"peg must be 1, 2 or 3, got {value}")
        if not 1 <= position <= self.size:
            raise ValueError(f"position {position} must lie in [1, {self.size}]")
        offset = position - 1
        node = 0
        path = []
        for level in range(self._depth, 0, -1):
            half = 1 << (level - 1)
            path.append(node)
            if offset < half:
                node = 2 * node + 1
            else:
                node = 2 * node + 2
                offset -= half
        self._nodes[node] = _leaf(value)
        for parent in reversed(path):
            self._nodes[parent] = _combine(
                self._node(2 * parent + 1), self._node(2 * parent + 2)
            )

    def _query(self, node, level, left, right):
        if left == 0 and right == 1 << level:
            return self._node(node)
        half = 1 << (level - 1)
        if left < half:
            if right <= half:
                return self._query(2 * node + 1, level - 1, left, right)
            return _combine(
                self._query(2 * node + 1, level - 1, left, half),
                self._query(2 * node + 2, level - 1, 0, right - half),
            )
        return self._query(2 * node + 2, level - 1, left - half, right - half)

    def query(self, left, right):
        """Return the move count for positions ``left..right`` inclusive, mod MOD."""
        if not 1 <= left <= right <= self.size:
            raise ValueError(f"range [{left}, {right}] must lie in [1, {self.size}]")
        return self._query(0, self._depth, left - 1, right)[1][0]


def main(argv=None):
    """Read the disks and operations from standard input and print each answer."""
    tokens = iter(sys.stdin.read().split())
    n, q = int(next(tokens)), int(next(tokens))
    tree = TowerTree(int(next(tokens)) for _ in range(n))
    out = []
    for _ in range(q):
        op = next(tokens)
        a, b = int(next(tokens)), int(next(tokens))
        if op.startswith("s"):
            out.append(f"{tree.query(a, b)}\n")
        else:
            tree.update(a, b)
    sys.stdout.write("".join(out))
    return 0