import sys
from typing import Optional, TextIO

from sqlite_search.db.connections import DatabaseOpenError, open_session
from sqlite_search.services.catalog_service import CatalogService
from sqlite_search.services.outcome import ErrorKind
from sqlite_search.services.search_service import SearchService
from sqlite_search.state.search_state import SearchState
from sqlite_search.state.selection import parse_field_selection, parse_leading_int
from sqlite_search.ui.console import ask, print_columns, print_numbered, render_outcome

FIELD_PROMPT = (
    "Select field/fields to search by data (separated by spaces or commas), "
    "e.g. '1' or '3 4' : "
)


def _parse_table_number(raw: str, count: int) -> Optional[int]:
    num = parse_leading_int(raw)
    if num is not None and 0 < num <= count:
        return num
    return None


def run(stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None) -> int:
    """
    Один проход оператора: файл -> таблица -> поля -> значения -> результат.
    Возвращает код выхода (0 - норма, в т.ч. «ничего не найдено»; 1 - фатальная ошибка).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    def fail(msg: str) -> int:
        print(msg, file=stderr)
        return 1

    db_path = ask("Enter path to your .db file: ", stdin, stdout)

    try:
        with open_session(db_path) as conn:
            catalog = CatalogService(conn)

            res = catalog.tables()
            if not res.ok:
                return fail(res.message)
            tables = res.value

            print_numbered("Tables found:", tables, stdout)
            raw = ask("Select a table by number: ", stdin, stdout)
            table_no = _parse_table_number(raw, len(tables))
            if table_no is None:
                return fail("Invalid table selection.")
            table = tables[table_no - 1]

            res = catalog.columns(table)
            if not res.ok:
                return fail(res.message)
            columns = res.value

            print_columns(table, columns, stdout)
            selection = parse_field_selection(ask(FIELD_PROMPT, stdin, stdout), len(columns))
            if not selection:
                return fail("No valid fields selected.")

            state = SearchState(table)
            for idx in selection:
                col = columns[idx - 1]["name"]
                value = ask(f"Enter value to search for in field '{col}': ", stdin, stdout)
                state.add(col, value)

            outcome = SearchService(conn).run(state, columns)
            render_outcome(outcome, stdout, stderr)
            if outcome.error is ErrorKind.INVALID_INPUT:
                return 1

            ask("Press Enter to exit...", stdin, stdout)
    except DatabaseOpenError as e:
        return fail(f"Can't open database: {e}")

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
