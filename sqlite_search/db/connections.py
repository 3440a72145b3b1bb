import os
import sys
import time
from contextlib import contextmanager
from typing import Dict, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from dotenv import load_dotenv

load_dotenv()

SQL_ECHO = os.getenv("SQLITE_SEARCH_ECHO", "0") == "1"
DEBUG = os.getenv("SQLITE_SEARCH_DEBUG", "0") == "1"

# кеш движков по пути к файлу
_engines: Dict[str, Engine] = {}


class DatabaseOpenError(RuntimeError):
    """Не удалось открыть файл базы данных."""


def debug(msg: str) -> None:
    """Диагностика в stderr (stdout занят под промпты и результаты)."""
    if DEBUG:
        print(msg, file=sys.stderr)


def get_engine(path: str) -> Engine:
    """
    Возвращает (или создаёт) SQLAlchemy Engine для конкретного файла SQLite.
    Путь передаётся как есть, без разбора URL.
    """
    if path in _engines:
        return _engines[path]

    url = URL.create("sqlite", database=path)
    debug(f"[dbg] URL: {url!r}")
    engine = create_engine(url, echo=SQL_ECHO)

    @event.listens_for(engine, "connect")
    def _lenient_text(dbapi_conn, _record):
        # битый UTF-8 в TEXT не должен ронять выборку
        dbapi_conn.text_factory = lambda b: b.decode("utf-8", "replace")

    _engines[path] = engine
    return engine


def dispose_engine(path: str) -> None:
    engine = _engines.pop(path, None)
    if engine is not None:
        engine.dispose()


def test_connection(conn: Connection) -> bool:
    """
    Пинг базы: выполняет SELECT 1. Возвращает True/False.
    """
    try:
        t0 = time.perf_counter()
        conn.exec_driver_sql("SELECT 1").fetchone()
        dt = (time.perf_counter() - t0) * 1000
        debug(f"[db] OK  ({dt:.1f} ms)")
        return True
    except SQLAlchemyError as e:
        debug(f"[db] ERR {e}")
        return False


@contextmanager
def open_session(path: str) -> Iterator[Connection]:
    """
    Открывает единственное соединение на всю сессию оператора.

    Соединение закрывается, а движок освобождается ровно один раз
    на любом пути выхода (в т.ч. при исключениях и ранних return).
    Незакоммиченная транзакция откатывается при закрытии, так что файл
    не меняется.
    """
    engine = get_engine(path)
    try:
        conn = engine.connect()
    except SQLAlchemyError as e:
        dispose_engine(path)
        raise DatabaseOpenError(str(getattr(e, "orig", None) or e)) from e

    try:
        if not test_connection(conn):
            raise DatabaseOpenError(f"unable to query '{path}'")
        debug(f"[db] session opened: {path}")
        yield conn
    finally:
        conn.close()
        dispose_engine(path)
        debug(f"[db] session closed: {path}")
