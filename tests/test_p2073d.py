import io

import pytest

from casebook.contests.p2073d import MOD, TowerTree, main

VALUES = [2, 3, 1, 1, 2, 3, 3, 2, 1, 2]


def test_disk_already_on_first_peg():
    assert TowerTree([1]).query(1, 1) == 0


def test_disk_on_second_peg_needs_one_move():
    assert TowerTree([2]).query(1, 1) == 1


def test_all_on_first_peg_needs_no_moves():
    assert TowerTree([1] * 12).query(1, 12) == 0


@pytest.mark.parametrize("count", range(1, 12))
def test_full_tower_elsewhere_follows_hanoi(count):
    assert TowerTree([2] * count).query(1, count) == 2**count - 1


@pytest.mark.parametrize("left, right", [(1, 10), (2, 7), (4, 4), (5, 10)])
def test_range_matches_fresh_tree_of_slice(left, right):
    whole = TowerTree(VALUES)
    part = TowerTree(VALUES[left - 1:right])
    assert whole.query(left, right) == part.query(1, right - left + 1)


def test_update_matches_fresh_tree():
    tree = TowerTree(VALUES)
    tree.update(3, 3)
    changed = list(VALUES)
    changed[2] = 3
    assert tree.query(1, len(VALUES)) == TowerTree(changed).query(1, len(VALUES))


def test_small_depth_tree_agrees_with_default():
    assert TowerTree(VALUES, depth=4).query(2, 9) == TowerTree(VALUES).query(2, 9)


def test_results_are_reduced():
    tree = TowerTree([3, 2] * 40)
    assert 0 <= tree.query(1, 80) < MOD


def test_bad_peg_rejected():
    with pytest.raises(ValueError):
        TowerTree([1]).update(1, 4)


def test_bad_position_rejected():
    with pytest.raises(ValueError):
        TowerTree(depth=2).update(5, 1)


def test_reversed_range_rejected():
    with pytest.raises(ValueError):
        TowerTree(VALUES).query(5, 3)


def test_main_answers_queries_after_updates(monkeypatch, capsys):
    text = "3 3\n2 1 3\nsolve 1 3\nupdate 2 2\nsolve 1 3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main() == 0
    before = TowerTree([2, 1, 3]).query(1, 3)
    after = TowerTree([2, 2, 3]).query(1, 3)
    assert capsys.readouterr().out == f"{before}\n{after}\n"