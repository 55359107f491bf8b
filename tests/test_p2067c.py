import io

import pytest

from casebook.contests.p2067c import main, min_ops_to_seven


def test_examples():
    assert min_ops_to_seven(51) == 3
    assert min_ops_to_seven(60) == 2
    assert min_ops_to_seven(777) == 0


@pytest.mark.parametrize("n", [10, 51, 60, 61, 80, 96, 2002, 3001, 12345689, 10**9])
def test_answer_is_achievable(n):
    answer = min_ops_to_seven(n)
    assert 0 <= answer <= 9
    assert any("7" in str(n + answer * (10**k - 1)) for k in range(1, 10))
    if answer > 0:
        assert "7" not in str(n)


@pytest.mark.parametrize("n", [9, 1, 10**9 + 1])
def test_out_of_range(n):
    with pytest.raises(ValueError):
        min_ops_to_seven(n)


def test_main_reports_bad_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    main()
    assert capsys.readouterr().out == "Out of range!\n"


def test_main_mixes_answers_and_range_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\n777\n"))
    main()
    assert capsys.readouterr().out == "Out of range!\n0\n"