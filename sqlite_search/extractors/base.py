from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, TypedDict


# ---- типизированные структуры данных

class ColumnInfo(TypedDict):
    name: str               # имя колонки
    ordinal_position: int   # порядковый номер колонки в таблице (с 1)


class BaseExtractor(ABC):
    """
    Абстрактный базовый класс для чтения каталога (таблицы/колонки).

    Работает поверх уже открытого соединения сессии: extractor не владеет
    соединением и не закрывает его.
    Ошибки драйвера (SQLAlchemyError) пробрасываются вызывающему.
    """

    def __init__(self, conn):
        self.conn = conn

    # ---- основное API ----

    @abstractmethod
    def list_tables(self) -> List[str]:
        """
        возвращает имена таблиц в порядке каталога.
        """

    @abstractmethod
    def list_columns(self, table_name: str) -> List[ColumnInfo]:
        """
        возвращает колонки таблицы в порядке объявления.
        """

