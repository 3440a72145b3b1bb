from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeStatus(Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    QUERY_FAILED = "query_failed"
    CATALOG_UNAVAILABLE = "catalog_unavailable"


@dataclass
class Outcome:
    """Результат операции: значение, пусто или ошибка определённого вида."""
    status: OutcomeStatus
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK

    @property
    def empty(self) -> bool:
        return self.status is OutcomeStatus.EMPTY

    @property
    def failed(self) -> bool:
        return self.status is OutcomeStatus.FAILED

    @classmethod
    def success(cls, value, duration_ms: int = 0) -> "Outcome":
        return cls(OutcomeStatus.OK, value=value, duration_ms=duration_ms)

    @classmethod
    def nothing(cls, message: str = "", duration_ms: int = 0) -> "Outcome":
        return cls(OutcomeStatus.EMPTY, value=[], message=message, duration_ms=duration_ms)

    @classmethod
    def failure(cls, error: ErrorKind, message: str, duration_ms: int = 0) -> "Outcome":
        return cls(OutcomeStatus.FAILED, error=error, message=message, duration_ms=duration_ms)
