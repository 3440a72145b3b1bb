import sys
from typing import Iterable, Optional, Sequence, TextIO, Tuple

from sqlite_search.extractors.base import ColumnInfo
from sqlite_search.services.outcome import Outcome

LABEL_WIDTH = 15
DELIMITER = "_" * 29


def ask(prompt: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """
    Промпт в stdout + чтение одной строки. EOF считается пустой строкой.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    return line.rstrip("\r\n")


def print_numbered(title: str, names: Iterable[str], out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print(title, file=out)
    for i, name in enumerate(names, start=1):
        print(f"{i}: {name}", file=out)


def print_columns(table: str, columns: Sequence[ColumnInfo], out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print(f"Fields in table '{table}':", file=out)
    for c in columns:
        print(f"{c['ordinal_position']}: {c['name']}", file=out)


def render_row(row: Sequence[Tuple[str, str]], out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    out.write("\n Match found:\n\n")
    print(DELIMITER, file=out)
    for label, value in row:
        print(f"{label:<{LABEL_WIDTH}}: {value}", file=out)
    print(DELIMITER, file=out)


def render_outcome(outcome: Outcome, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
    """
    OK -> блоки строк, EMPTY -> 'ничего не найдено', FAILED -> сообщение в stderr.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    if outcome.failed:
        print(f" {outcome.message}", file=err)
        return
    if outcome.empty:
        print(f" {outcome.message or 'No matching records found.'}", file=out)
        return
    for row in outcome.value:
        render_row(row, out)
