"""Count operation sequences keeping three XOR registers never pairwise distinct."""

import sys

__all__ = ["MOD", "count_valid_sequences", "main"]

MOD = 1_000_000_007


def count_valid_sequences(values):
    """Return the number of valid sequences of operations modulo MOD."""
    values = [int(v) for v in values]
    n = len(values)
    prefix = [0]
    for value in values:
        prefix.append(prefix[-1] ^ value)
    following = [-1] * (n + 1)
    latest = {}
    for index in range(n, -1, -1):
        following[index] = latest.get(prefix[index], -1)
        latest[prefix[index]] = index
    dp = [0] * (n + 1)
    dp[0] = 3
    answer = 0
    for index in range(n):
        nxt = following[index]
        if nxt == -1:
            answer = (answer + dp[index]) % MOD
            continue
        if nxt < n:
            dp[nxt] = (dp[nxt] + dp[index] * 3) % MOD
        else:
            answer = (answer + dp[index]) % MOD
        dp[nxt - 1] = (dp[nxt - 1] + dp[index] * 2) % MOD
    return answer


def main(argv=None):
    """Read test cases from standard input and print one count per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        lines.append(str(count_valid_sequences(values)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0