from __future__ import annotations
from typing import List

from sqlalchemy.engine import Connection

from ..db.connections import debug
from ..state.search_state import quote_ident
from .base import BaseExtractor, ColumnInfo

# в PRAGMA table_info имя колонки лежит во втором поле
_PRAGMA_NAME_FIELD = 1


class SqliteExtractor(BaseExtractor):
    """
    реализация BaseExtractor для SQLite.
    достаёт метаданные из sqlite_master и PRAGMA table_info.
    """

    def __init__(self, conn: Connection):
        super().__init__(conn)

    def list_tables(self) -> List[str]:
        sql = "SELECT name FROM sqlite_master WHERE type='table';"
        rows = self.conn.exec_driver_sql(sql).fetchall()
        debug(f"[dbg] tables: {len(rows)}")
        return [r[0] for r in rows]

    def list_columns(self, table_name: str) -> List[ColumnInfo]:
        """
        Колонки в порядке объявления (cid), без скрытых колонок.
        """
        sql = f"PRAGMA table_info({quote_ident(table_name)});"
        rows = self.conn.exec_driver_sql(sql).fetchall()
        debug(f"[dbg] columns of {table_name!r}: {len(rows)}")

        return [
            ColumnInfo(name=r[_PRAGMA_NAME_FIELD], ordinal_position=pos)
            for pos, r in enumerate(rows, start=1)
        ]
