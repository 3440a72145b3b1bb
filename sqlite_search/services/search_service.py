import time
from typing import Iterator, List, Sequence, Tuple

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from sqlite_search.db.connections import debug
from sqlite_search.extractors.base import ColumnInfo
from sqlite_search.services.outcome import ErrorKind, Outcome
from sqlite_search.state.search_state import SearchState

ResultRow = List[Tuple[str, str]]


def _as_text(value) -> str:
    """NULL -> '', остальное приводим к тексту."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


class SearchService:
    def __init__(self, conn: Connection):
        self.conn = conn

    def iter_rows(self, state: SearchState, columns: Sequence[ColumnInfo]) -> Iterator[ResultRow]:
        """
        Выполняет поиск и отдаёт строки по одной.
        Каждая строка покрывает все колонки таблицы, а не только искомые.
        """
        sql, params = state.build_sql()
        debug(f"[dbg] SQL: {sql} params={params!r}")
        res = self.conn.exec_driver_sql(sql, params)
        for r in res:
            yield [
                (c["name"], _as_text(r[i]) if i < len(r) else "")
                for i, c in enumerate(columns)
            ]

    def run(self, state: SearchState, columns: Sequence[ColumnInfo]) -> Outcome:
        if not state.validate():
            return Outcome.failure(ErrorKind.INVALID_INPUT, "Invalid search input.")

        t0 = time.perf_counter()
        try:
            rows = list(self.iter_rows(state, columns))
        except SQLAlchemyError as e:
            dt = round((time.perf_counter() - t0) * 1000)
            debug(f"[db] ERR search: {e}")
            return Outcome.failure(ErrorKind.QUERY_FAILED,
                                   "Failed to prepare search query.", duration_ms=dt)
        dt = round((time.perf_counter() - t0) * 1000)
        debug(f"[db] search: {len(rows)} row(s) ({dt} ms)")

        if not rows:
            return Outcome.nothing("No matching records found.", duration_ms=dt)
        return Outcome.success(rows, duration_ms=dt)
