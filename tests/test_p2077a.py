import io
import random
from collections import Counter

import pytest

from casebook.contests.p2077a import main, reconstruct


def _alternating(seq):
    return sum(v if i % 2 == 0 else -v for i, v in enumerate(seq[1:]))


def _contains_all(result, values):
    return not (Counter(values) - Counter(result))


@pytest.mark.parametrize(
    "values",
    [[9, 2], [5, 5], [1, 2, 3, 4], [3, 2, 2, 0], [7, 7, 7, 7, 7, 7], [10, 1, 8, 3, 6, 5]],
)
def test_identity_and_membership(values):
    result = reconstruct(values)
    assert len(result) == len(values) + 1
    assert result[0] == _alternating(result)
    assert _contains_all(result, values)


def test_random_inputs_satisfy_identity():
    rng = random.Random(2077)
    for _ in range(200):
        n = rng.randint(1, 6)
        values = [rng.randint(1, 50) for _ in range(2 * n)]
        result = reconstruct(values)
        assert result[0] == _alternating(result)
        assert _contains_all(result, values)


def test_odd_count_rejected():
    with pytest.raises(ValueError):
        reconstruct([1, 2, 3])


def test_empty_rejected():
    with pytest.raises(ValueError):
        reconstruct([])


def test_main_matches_function(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n9 2\n2\n1 2 3 4\n"))
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        " ".join(map(str, reconstruct([9, 2]))),
        " ".join(map(str, reconstruct([1, 2, 3, 4]))),
    ]