"""
Field errors — исключения арифметики полей и их снимки

Иерархия:
- FieldError: унарная ошибка (invert() нуля). Несёт исходный операнд.
- FieldBinaryError(FieldError): бинарная ошибка. Дополнительно несёт
  второй операнд.

Операнды мутабельны, поэтому каждая ошибка хранит также снимки
(FieldSnapshot), сделанные в момент возникновения.

FieldResult — значение-результат для кода, который предпочитает
сопоставление по виду ошибки вместо try/except.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from src.cladosf.domain.kinds import FieldKind
from src.cladosf.domain.unit import UnitValue


# =============================================================================
# SNAPSHOT
# =============================================================================


class FieldSnapshot(BaseModel):
    """
    Неизменяемый снимок field-значения.

    Для real-видов img равен None.
    """

    kind: FieldKind = Field(..., description="Вид field-значения")
    cardinal: str = Field(..., min_length=1, description="Имя Cardinal")
    real: float = Field(..., description="Вещественная компонента")
    img: Optional[float] = Field(default=None, description="Мнимая компонента")

    model_config = {"frozen": True}


def _snapshot_of(value: Any) -> Optional[FieldSnapshot]:
    # Операнд может быть не field-значением (например, float)
    if not isinstance(value, UnitValue) or not hasattr(value, "snapshot"):
        return None
    return value.snapshot()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FieldError(Exception):
    """
    Ошибка унарной операции над field-значением.

    Возникает при invert() нулевого значения.
    """

    def __init__(self, source: Any, message: str):
        super().__init__(message)
        self.source = source
        self.source_message = message
        self.source_snapshot = _snapshot_of(source)


class FieldBinaryError(FieldError):
    """
    Ошибка бинарной операции.

    Возникает при несовпадении Cardinal или вида, NaN/Inf операнде
    и делении на нулевое значение (делитель — второй операнд).
    """

    def __init__(self, source: Any, message: str, second: Any):
        super().__init__(source, message)
        self.second = second
        self.second_snapshot = _snapshot_of(second)


# =============================================================================
# RESULT TYPE
# =============================================================================


T = TypeVar("T")


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """Результат операции: либо value, либо error."""

    value: Optional[T] = None
    error: Optional[FieldError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_binary_error(self) -> bool:
        return isinstance(self.error, FieldBinaryError)

    def unwrap(self) -> T:
        """
        Значение результата.

        Raises:
            FieldError: Сохранённая ошибка, если результат неуспешный
        """
        if self.error is not None:
            raise self.error
        return self.value
