"""Count how many slimes a new slime eats from the right end of a row."""

import sys

__all__ = ["BITS", "eat_counts", "main"]

BITS = 30


def _check(name, value):
    if not 0 <= value < 1 << BITS:
        raise ValueError(f"{name} {value} must lie in [0, 2**{BITS})")
    return value


def eat_counts(weights, queries):
    """Return, for each query weight, the number of slimes eaten."""
    weights = [_check("weight", int(w)) for w in weights]
    n = len(weights)
    weight_at = [0] + weights
    prefix = [0]
    for weight in weights:
        prefix.append(prefix[-1] ^ weight)
    # last_wide[i][b]: latest position <= i whose weight has at least b bits.
    last_wide = [[0] * (BITS + 1)]
    for position, weight in enumerate(weights, 1):
        width = weight.bit_length()
        previous = last_wide[-1]
        last_wide.append(
            [position if b <= width else previous[b] for b in range(BITS + 1)]
        )
    answers = []
    for query in queries:
        x = _check("query", int(query))
        eaten = 0
        tail = n
        while tail > 0 and x > 0:
            blocker = last_wide[tail][x.bit_length()]
            eaten += tail - blocker
            x ^= prefix[blocker] ^ prefix[tail]
            if blocker == 0 or x < weight_at[blocker]:
                break
            x ^= weight_at[blocker]
            tail = blocker - 1
            eaten += 1
        answers.append(eaten)
    return answers


def main(argv=None):
    """Read test cases from standard input and print the answers per case."""
    tokens = iter(sys.stdin.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n, q = int(next(tokens)), int(next(tokens))
        weights = [int(next(tokens)) for _ in range(n)]
        queries = [int(next(tokens)) for _ in range(q)]
        out.append("".join(f"{a} " for a in eat_counts(weights, queries)) + "\n")
    sys.stdout.write("".join(out))
    return 0