import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import URL


@pytest.fixture
def make_db(tmp_path):
    """
    Фабрика временных SQLite-файлов: make_db(ddl, inserts) -> путь.
    inserts: список (sql, params) с ?-параметрами.
    """
    def _make(ddl=(), inserts=(), name="test.db"):
        path = str(tmp_path / name)
        engine = create_engine(URL.create("sqlite", database=path))
        with engine.begin() as conn:
            for stmt in ddl:
                conn.exec_driver_sql(stmt)
            for sql, params in inserts:
                conn.exec_driver_sql(sql, params)
        engine.dispose()
        return path

    return _make


@pytest.fixture
def people_db(make_db):
    return make_db(
        ddl=["CREATE TABLE people (id INTEGER, name TEXT, city TEXT)"],
        inserts=[
            ("INSERT INTO people VALUES (?, ?, ?)", (1, '"Alice"', "Paris")),
            ("INSERT INTO people VALUES (?, ?, ?)", (2, "Alice", None)),
            ("INSERT INTO people VALUES (?, ?, ?)", (3, "Bob", "Oslo")),
        ],
    )
