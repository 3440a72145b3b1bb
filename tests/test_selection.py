import pytest

from sqlite_search.state.selection import parse_field_selection, parse_leading_int


def test_mixed_input_keeps_order_and_drops_garbage():
    assert parse_field_selection("1 ,, abc 3,2", 3) == [1, 3, 2]


def test_all_out_of_range_gives_empty():
    assert parse_field_selection("5 0 -1", 2) == []


def test_duplicates_pass_through():
    assert parse_field_selection("2 2,1,2", 2) == [2, 2, 1, 2]


@pytest.mark.parametrize("line, expected", [
    ("1", [1]),
    ("3 4", [3, 4]),
    ("3,4", [3, 4]),
    ("  4,,3  ", [4, 3]),
    ("+2", [2]),
    ("", []),
    ("1.5 2x x2", [1, 2]),
    ("1\t2", [1]),
])
def test_examples(line, expected):
    assert parse_field_selection(line, 4) == expected


@pytest.mark.parametrize("line", ["-3 0 1 2 3 99 7,8 abc", "10,9,8,7,6,5,4,3,2,1,0"])
def test_every_value_in_range(line):
    max_field = 5
    result = parse_field_selection(line, max_field)
    assert result
    assert all(1 <= n <= max_field for n in result)


def test_zero_columns_accepts_nothing():
    assert parse_field_selection("1 2 3", 0) == []


def test_leading_digits_are_taken_from_each_piece():
    assert parse_field_selection("2x 1.5 3abc", 3) == [2, 1, 3]


@pytest.mark.parametrize("text, expected", [
    ("2abc", 2),
    ("\t 7", 7),
    ("-4", -4),
    ("+1z", 1),
    ("abc", None),
    ("", None),
    ("x2", None),
])
def test_parse_leading_int(text, expected):
    assert parse_leading_int(text) == expected
