"""Count honest/liar arrangements consistent with the players' claims."""

import sys

__all__ = ["MOD", "count_configurations", "main"]

MOD = 998_244_353


def count_configurations(claims):
    """Return the number of valid arrangements modulo MOD."""
    claims = list(claims)
    if not claims:
        raise ValueError("at least one claim is required")
    liar, honest = 1, (1 if claims[0] == 0 else 0)
    if len(claims) > 1:
        second = claims[1]
        if second == 0:
            next_honest = honest
        elif second == 1:
            next_honest = liar
        else:
            next_honest = 0
        liar, honest = honest, next_honest
    for before, previous, current in zip(claims, claims[1:], claims[2:]):
        next_honest = 0
        if current == previous:
            next_honest += honest
        if current == before + 1:
            next_honest += liar
        liar, honest = honest, next_honest % MOD
    return (liar + honest) % MOD


def main(argv=None):
    """Read test cases from standard input and print one count per case."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        count = int(next(tokens))
        claims = [int(next(tokens)) for _ in range(count)]
        lines.append(str(count_configurations(claims)))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0