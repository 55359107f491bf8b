import io

import pytest

from casebook.contests.p2066c import MOD, count_valid_sequences, main


@pytest.mark.parametrize("value", [0, 1, 5, 1000])
def test_single_value_gives_initial_choices(value):
    assert count_valid_sequences([value]) == 3


@pytest.mark.parametrize("values", [[1, 2, 4, 8], [1, 7, 9], [3, 4, 16, 32, 64]])
def test_distinct_prefixes_give_three(values):
    assert count_valid_sequences(values) == 3


def test_repeated_prefix_case():
    assert count_valid_sequences([179, 1, 1, 179]) == 9


def test_empty_input():
    assert count_valid_sequences([]) == 0


@pytest.mark.parametrize(
    "values", [[1, 2, 3, 3, 2], [5, 5, 5, 5, 5, 5], [0, 0, 0, 0, 0, 0, 0, 0]]
)
def test_result_in_range_and_multiple_of_three(values):
    result = count_valid_sequences(values)
    assert 0 <= result < MOD
    assert result % 3 == 0
    assert result >= 3


def test_main_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n1 7 9\n4\n179 1 1 179\n"))
    assert main() == 0
    assert capsys.readouterr().out == "3\n9\n"