import io

import pytest

from casebook.contests.p2066f import main, transform_operations


def _apply(source, operations):
    current = list(source)
    for left, right, values in operations:
        assert 1 <= left <= right <= len(current)
        assert len(values) >= 1
        current[left - 1:right] = list(values)
    return current


@pytest.mark.parametrize(
    "source, target",
    [
        ([1, 2], [1, 2]),
        ([2, -3, 2, 0], [-3, -7, 0]),
        ([3], [5, -1, 2]),
    ],
)
def test_operations_reach_target(source, target):
    operations = transform_operations(source, target)
    assert operations is not None
    assert len(operations) % 2 == 0
    assert _apply(source, operations) == target


def test_impossible_when_negative_pair_must_shrink():
    assert transform_operations([-2, -2], [2]) is None


def test_impossible_when_separator_blocks_both_sides():
    assert transform_operations([1, -5, 1], [2, -5, 2]) is None


def test_first_half_replaces_with_single_threshold():
    operations = transform_operations([2, -3, 2, 0], [-3, -7, 0])
    half = len(operations) // 2
    thresholds = {values for _, _, values in operations[:half]}
    assert len(thresholds) == 1
    assert all(len(values) == 1 for values in thresholds)


def test_main_prints_minus_one(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2 1\n-2 -2\n2\n"))
    main()
    assert capsys.readouterr().out == "-1\n"


def test_main_prints_operations(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1 1\n3\n5\n"))
    main()
    assert capsys.readouterr().out == "2\n1 1 1\n3\n1 1 1\n5 \n"