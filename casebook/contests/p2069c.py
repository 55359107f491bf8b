"""Count subsequences of the form 1, 2, ..., 2, 3 in an array of 1s, 2s and 3s."""

import sys

__all__ = ["MOD", "count_beautiful_subsequences", "main"]

MOD = 998_244_353


def count_beautiful_subsequences(values):
    """Return the number of subsequences 1, 2 (at least once), 3 modulo MOD."""
    ones_seen = 0
    twos_seen = 0
    reciprocal_sum = 0
    answer = 0
    for value in (int(v) for v in values):
        if value == 3 and ones_seen:
            term = pow(2, twos_seen, MOD) * reciprocal_sum - ones_seen
            answer = (answer + term) % MOD
        elif value == 1:
            reciprocal_sum = (reciprocal_sum + pow(2, MOD - 1 - twos_seen, MOD)) % MOD
            ones_seen += 1
        elif value == 2:
            twos_seen += 1
    return answer


def main(argv=None):
    """Read test cases from standard input and print one count per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        lines.append(str(count_beautiful_subsequences(values)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0