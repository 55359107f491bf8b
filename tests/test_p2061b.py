import io
import random
import sys
from collections import Counter

import pytest

from casebook.contests.p2061b import find_trapezoid, main

SAMPLE = """7
4
5 5 5 10
4
10 5 10 5
4
1 2 3 4
4
1 1 1 3
6
4 2 1 5 7 1
6
10 200 30 300 30 100
4
100000000 100000000 1 2
"""

EXPECTED = """5 5 5 10
5 5 10 10
-1
-1
1 1 4 5
-1
100000000 100000000 1 2
"""


def test_main_sample(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(SAMPLE))
    main([])
    assert capsys.readouterr().out == EXPECTED


@pytest.mark.parametrize("sticks", [[1, 1, 2], [1, 2, 3, 4], [1, 1, 1, 3]])
def test_impossible(sticks):
    assert find_trapezoid(sticks) is None


def test_answers_are_valid_trapezoids():
    rng = random.Random(2061)
    found_any = False
    for _ in range(300):
        sticks = [rng.randint(1, 20) for _ in range(rng.randint(4, 9))]
        result = find_trapezoid(sticks)
        if result is None:
            continue
        found_any = True
        leg_a, leg_b, shorter, longer = result
        assert leg_a == leg_b
        assert shorter <= longer < shorter + 2 * leg_a
        assert not Counter(result) - Counter(sticks)
    assert found_any