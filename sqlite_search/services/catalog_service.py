from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from sqlite_search.db.connections import debug
from sqlite_search.extractors.sqlite import SqliteExtractor
from sqlite_search.services.outcome import ErrorKind, Outcome


class CatalogService:
    """
    Каталог текущей сессии: список таблиц и колонок выбранной таблицы.
    Пустой список -> EMPTY, сломанный каталог/соединение -> FAILED.
    """

    def __init__(self, conn: Connection):
        self.extractor = SqliteExtractor(conn)

    def tables(self) -> Outcome:
        try:
            names = self.extractor.list_tables()
        except SQLAlchemyError as e:
            debug(f"[db] ERR list tables: {e}")
            return Outcome.failure(ErrorKind.CATALOG_UNAVAILABLE,
                                   "Failed to prepare statement to get tables.")
        if not names:
            return Outcome.nothing("No tables found in the database.")
        return Outcome.success(names)

    def columns(self, table: str) -> Outcome:
        try:
            cols = self.extractor.list_columns(table)
        except SQLAlchemyError as e:
            debug(f"[db] ERR list columns of {table!r}: {e}")
            return Outcome.failure(ErrorKind.CATALOG_UNAVAILABLE,
                                   "Failed to prepare statement to get columns.")
        if not cols:
            return Outcome.nothing("No columns found in the table.")
        return Outcome.success(cols)
