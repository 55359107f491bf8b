"""Expected count of leaf pairs in a tree whose vertices fall at random."""

import sys

__all__ = ["MOD", "expected_pairs", "main"]

MOD = 998_244_353
_HALF = (MOD + 1) // 2


def _inverse(value):
    value %= MOD
    if value == 0:
        raise ValueError("value has no inverse modulo MOD")
    return pow(value, MOD - 2, MOD)


def _pairs(values):
    """Sum over unordered pairs of products, modulo MOD."""
    total = 0
    squares = 0
    for value in values:
        total = (total + value) % MOD
        squares = (squares + value * value) % MOD
    return (total * total - squares) * _HALF % MOD


def expected_pairs(probabilities, edges):
    """Return the expected value modulo MOD.

    ``probabilities`` holds one ``(x, y)`` fraction x/y per vertex; edges are
    pairs of 1-based vertex numbers.
    """
    fractions = [(int(x), int(y)) for x, y in probabilities]
    n = len(fractions)
    if n == 0:
        raise ValueError("the tree needs at least one vertex")
    edges = [(int(a), int(b)) for a, b in edges]
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} vertices needs {n - 1} edges")
    neighbours = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) names a missing vertex")
        neighbours[a - 1].append(b - 1)
        neighbours[b - 1].append(a - 1)

    stay = [x * _inverse(y) % MOD for x, y in fractions]
    inv = [_inverse(a) for a in stay]
    ratio = [(1 - a) * v % MOD for a, v in zip(stay, inv)]

    alone = []
    ratio_sum = []
    for i in range(n):
        product = (1 - stay[i]) % MOD
        total = 0
        for j in neighbours[i]:
            product = product * stay[j] % MOD
            total = (total + ratio[j]) % MOD
        alone.append(product)
        ratio_sum.append(total)
    leaf = [p * s % MOD for p, s in zip(alone, ratio_sum)]

    answer = _pairs(leaf)
    for a, b in edges:
        i, j = a - 1, b - 1
        answer -= leaf[i] * leaf[j]
        answer += alone[i] * alone[j] % MOD * inv[i] % MOD * inv[j]
        answer %= MOD
    for i in range(n):
        around = neighbours[i]
        answer -= _pairs(leaf[j] for j in around)
        answer += _pairs(alone[j] for j in around) * inv[i] % MOD * ratio[i]
        shifted = (alone[j] * (ratio_sum[j] - ratio[i]) % MOD for j in around)
        answer += _pairs(shifted) * inv[i]
        answer %= MOD
    return answer


def main(argv=None):
    """Read test cases from standard input and print one value per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        probabilities = [(int(next(tokens)), int(next(tokens))) for _ in range(n)]
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
        lines.append(str(expected_pairs(probabilities, edges)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0