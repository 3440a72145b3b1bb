from typing import List, Optional, Tuple


def quote_ident(ident: str) -> str:
    # экранируем двойные кавычки внутри идентификатора
    return '"' + ident.replace('"', '""') + '"'


class SearchState:
    """
    Состояние поиска: таблица + пары (колонка, значение), выровненные по индексу.
    fields[i] соответствует values[i] и i-му элементу выбора оператора.
    """

    def __init__(self, table: Optional[str] = None,
                 fields: Optional[List[str]] = None,
                 values: Optional[List[str]] = None):
        self.table = table
        self.fields = list(fields or [])
        self.values = list(values or [])

    def add(self, field: str, value: str) -> None:
        self.fields.append(field)
        self.values.append(value)

    def validate(self) -> bool:
        return bool(self.table) and bool(self.fields) and len(self.fields) == len(self.values)

    def build_sql(self) -> Tuple[str, Tuple[str, ...]]:
        """
        SELECT * FROM "t" WHERE TRIM("c1", '"') = ? AND TRIM("c2", '"') = ?;

        Из хранимого значения срезаются обрамляющие двойные кавычки
        (не пробелы), значение оператора идёт как есть через параметр.
        """
        if not self.validate():
            raise ValueError("invalid search input")

        conds = [f"TRIM({quote_ident(c)}, '\"') = ?" for c in self.fields]
        sql = f"SELECT * FROM {quote_ident(self.table)} WHERE " + " AND ".join(conds) + ";"
        return sql, tuple(self.values)
