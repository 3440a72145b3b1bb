import pytest
from sqlalchemy import create_engine

from sqlite_search.state.search_state import SearchState, quote_ident


@pytest.mark.parametrize("ident, expected", [
    ("name", '"name"'),
    ('say "hi"', '"say ""hi"""'),
    ('"', '""""'),
    ("a b;c'd", "\"a b;c'd\""),
])
def test_quote_ident(ident, expected):
    assert quote_ident(ident) == expected


@pytest.mark.parametrize("ident", [
    "plain",
    'with "quotes" inside',
    '""',
    "semi;colon -- comment",
    "it's",
    "ünïcode",
])
def test_quote_ident_round_trips_through_sqlite(ident):
    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        res = conn.exec_driver_sql(f"SELECT 1 AS {quote_ident(ident)}")
        assert list(res.keys()) == [ident]
    engine.dispose()


def test_build_sql_single_predicate():
    sql, params = SearchState("people", ["name"], ["Alice"]).build_sql()
    assert sql == 'SELECT * FROM "people" WHERE TRIM("name", \'"\') = ?;'
    assert params == ("Alice",)


def test_build_sql_ands_predicates_in_order():
    state = SearchState('my "t"', ["a", "b", "a"], ["1", "x' OR 1=1", "3"])
    sql, params = state.build_sql()
    assert sql == (
        'SELECT * FROM "my ""t""" WHERE TRIM("a", \'"\') = ? '
        'AND TRIM("b", \'"\') = ? AND TRIM("a", \'"\') = ?;'
    )
    assert params == ("1", "x' OR 1=1", "3")
    assert "OR 1=1" not in sql


def test_add_keeps_fields_and_values_aligned():
    state = SearchState("t")
    state.add("a", "1")
    state.add("b", "2")
    assert state.fields == ["a", "b"]
    assert state.values == ["1", "2"]
    assert state.validate()


@pytest.mark.parametrize("fields, values", [
    ([], []),
    (["a", "b"], ["1"]),
    (["a"], ["1", "2"]),
])
def test_build_sql_rejects_malformed_input(fields, values):
    state = SearchState("t", fields, values)
    assert not state.validate()
    with pytest.raises(ValueError):
        state.build_sql()
