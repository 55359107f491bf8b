"""Sum of subsequence values of a binary string under single-bit flips."""

import sys

__all__ = ["MOD", "query_answers", "main"]

MOD = 998_244_353
_INV4 = 748_683_265


def query_answers(bits, flips):
    """Flip each 1-based position in turn and return the answer after each flip.

    ``bits`` is a string of '0' and '1'; any character other than '0' counts as 1.
    """
    state = [ch != "0" for ch in str(bits)]
    n = len(state)
    ones = sum(state)
    zeros = n - ones
    if n >= 2:
        half = pow(2, n - 2, MOD)
        full = pow(2, n - 1, MOD)
    answers = []
    for flip in flips:
        flip = int(flip)
        if not 1 <= flip <= n:
            raise ValueError(f"position {flip} must lie in [1, {n}]")
        index = flip - 1
        if state[index]:
            ones -= 1
            zeros += 1
        else:
            zeros -= 1
            ones += 1
        state[index] = not state[index]
        if n < 2:
            answers.append(0)
            continue
        total = (
            (zeros * (zeros - 1) + ones * (ones - 1)) * half
            + n * full
            - 2 * zeros * ones * half
            - full
        )
        answers.append(total * _INV4 % MOD)
    return answers


def main(argv=None):
    """Read test cases from standard input and print one answer per flip."""
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        int(next(tokens))
        q = int(next(tokens))
        bits = next(tokens)
        flips = [int(next(tokens)) for _ in range(q)]
        lines.extend(str(a) for a in query_answers(bits, flips))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0