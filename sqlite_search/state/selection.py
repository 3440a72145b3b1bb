import re
from typing import List, Optional

# ведущие пробелы, опциональный знак, ASCII-цифры; хвост после цифр игнорируется
_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


def parse_leading_int(text: str) -> Optional[int]:
    """
    '2x' -> 2, ' 1.5' -> 1, 'abc' / '' -> None.
    """
    m = _LEADING_INT_RE.match(text)
    if m is None:
        return None
    return int(m.group())


def parse_field_selection(line: str, max_field: int) -> List[int]:
    """
    '1' / '3,4 2' -> [1] / [3, 4, 2]

    Делим по пробелам, затем каждый кусок по запятым. Из кусочка берётся
    ведущее целое; нечисловые, пустые и вне диапазона [1, max_field]
    кусочки молча отбрасываются.
    Порядок сохраняется, дубли не убираются.
    Пустой результат вызывающий обязан считать ошибкой.
    """
    fields: List[int] = []
    for token in line.split(" "):
        if not token:
            continue
        for sub in token.split(","):
            num = parse_leading_int(sub)
            if num is not None and 0 < num <= max_field:
                fields.append(num)
    return fields
