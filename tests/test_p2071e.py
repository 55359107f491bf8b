import io

import pytest

from casebook.contests.p2071e import MOD, expected_pairs, main

PATH_PROBS = [(1, 2), (1, 3), (2, 5), (3, 4)]
PATH_EDGES = [(1, 2), (2, 3), (3, 4)]
STAR_PROBS = [(1, 2), (1, 2), (2, 3), (1, 4), (5, 7)]
STAR_EDGES = [(1, 2), (1, 3), (1, 4), (1, 5)]


def test_single_vertex_has_no_pairs():
    assert expected_pairs([(1, 2)], []) == 0


def test_certain_vertices_give_zero():
    assert expected_pairs([(1, 1)] * 4, PATH_EDGES) == 0


@pytest.mark.parametrize(
    "probs, edges", [(PATH_PROBS, PATH_EDGES), (STAR_PROBS, STAR_EDGES)]
)
def test_edge_order_and_direction_do_not_matter(probs, edges):
    flipped = [(b, a) for a, b in reversed(edges)]
    assert expected_pairs(probs, flipped) == expected_pairs(probs, edges)


@pytest.mark.parametrize(
    "probs, edges", [(PATH_PROBS, PATH_EDGES), (STAR_PROBS, STAR_EDGES)]
)
def test_relabelling_vertices_does_not_matter(probs, edges):
    n = len(probs)
    label = {old: n + 1 - old for old in range(1, n + 1)}
    relabelled_probs = [None] * n
    for old, prob in enumerate(probs, 1):
        relabelled_probs[label[old] - 1] = prob
    relabelled_edges = [(label[a], label[b]) for a, b in edges]
    assert expected_pairs(relabelled_probs, relabelled_edges) == (
        expected_pairs(probs, edges)
    )


def test_equivalent_fractions_agree():
    doubled = [(2 * x, 2 * y) for x, y in PATH_PROBS]
    assert expected_pairs(doubled, PATH_EDGES) == expected_pairs(PATH_PROBS, PATH_EDGES)


def test_result_is_reduced():
    assert 0 <= expected_pairs(STAR_PROBS, STAR_EDGES) < MOD


def test_wrong_edge_count_rejected():
    with pytest.raises(ValueError):
        expected_pairs(PATH_PROBS, PATH_EDGES[:2])


def test_zero_probability_rejected():
    with pytest.raises(ValueError):
        expected_pairs([(0, 2), (1, 2)], [(1, 2)])


def test_main_prints_each_value(monkeypatch, capsys):
    text = "1\n4\n1 2\n1 3\n2 5\n3 4\n1 2\n2 3\n3 4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main() == 0
    assert capsys.readouterr().out == f"{expected_pairs(PATH_PROBS, PATH_EDGES)}\n"