import io
import random

import pytest

from casebook.contests.p2073f import main, min_costs


def _case(seed, m, q):
    rng = random.Random(seed)
    coords = rng.sample(range(-60, 60), m + q)
    points = [(x, rng.randint(1, 9)) for x in coords[:m]]
    return points, coords[m:]


def test_single_station_costs_distance_times_rate():
    assert min_costs([(0, 5)], [3]) == [15]
    assert min_costs([(0, 5)], [-3]) == [15]


def test_query_at_start_is_free():
    assert min_costs([(7, 2), (4, 3)], [4]) == [0]


def test_no_queries():
    assert min_costs([(1, 1)], []) == []


def test_needs_a_station():
    with pytest.raises(ValueError):
        min_costs([], [1])


@pytest.mark.parametrize("seed", range(6))
def test_mirror_symmetry(seed):
    points, queries = _case(seed, 5, 6)
    mirrored = min_costs([(-x, c) for x, c in points], [-q for q in queries])
    assert mirrored == min_costs(points, queries)


@pytest.mark.parametrize("seed", range(6))
def test_translation_invariance(seed):
    points, queries = _case(seed, 4, 5)
    shifted = min_costs([(x + 1000, c) for x, c in points], [q + 1000 for q in queries])
    assert shifted == min_costs(points, queries)


@pytest.mark.parametrize("seed", range(6))
def test_never_worse_than_direct(seed):
    points, queries = _case(seed, 6, 6)
    start_x, start_c = points[-1]
    for query, answer in zip(queries, min_costs(points, queries)):
        assert 0 <= answer <= abs(query - start_x) * start_c


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 1 2\n0 5\n3 -3\n"))
    main()
    assert capsys.readouterr().out == "15\n15\n"