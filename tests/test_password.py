import pytest

from aoc2019.password import (
    is_valid,
    is_valid_strict,
    matching_passwords,
    solve_day4a,
    solve_day4b,
)


@pytest.mark.parametrize(
    "number, expected", [(111111, True), (223450, False), (123789, False)]
)
def test_is_valid_examples(number, expected):
    assert is_valid(number) is expected


@pytest.mark.parametrize(
    "number, expected", [(112233, True), (123444, False), (111122, True)]
)
def test_is_valid_strict_examples(number, expected):
    assert is_valid_strict(number) is expected


def test_strict_implies_valid():
    assert all(is_valid(n) for n in range(100000, 130000) if is_valid_strict(n))


def test_negative_rejected():
    with pytest.raises(ValueError):
        is_valid(-11)
    with pytest.raises(ValueError):
        is_valid_strict(-11)


def test_matching_passwords_are_in_range_and_accepted():
    found = list(matching_passwords(1000, 3000, is_valid))
    assert found
    assert all(1000 <= n < 3000 and is_valid(n) for n in found)
    assert found == sorted(found)


def test_solve_day4a_prints_each_match(capsys):
    count = solve_day4a(100, 400)
    printed = [int(line) for line in capsys.readouterr().out.split()]
    assert printed == list(matching_passwords(100, 400, is_valid))
    assert count == len(printed)


def test_solve_day4b_prints_each_match(capsys):
    count = solve_day4b(100000, 120000)
    printed = [int(line) for line in capsys.readouterr().out.split()]
    assert printed == list(matching_passwords(100000, 120000, is_valid_strict))
    assert count == len(printed)


def test_empty_range_counts_nothing(capsys):
    assert solve_day4a(500, 500) == len(list(matching_passwords(500, 500, is_valid)))
    assert capsys.readouterr().out == ""