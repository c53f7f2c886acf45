"""
Field operations — чистые зеркала операций, предикаты и редукторы

Функции этого модуля не изменяют операнды: каждая бинарная/унарная
операция возвращает новое значение. Предикаты никогда не бросают
исключений.

Для кода, предпочитающего значения-результаты, attempt() превращает
FieldError/FieldBinaryError в FieldResult.
"""

from typing import Any, Callable, Optional, Sequence, TypeVar

from src.cladosf.domain.errors import FieldError, FieldResult
from src.cladosf.domain.unit import UnitValue
from src.cladosf.fields.base import CardinalLike, DivField

F = TypeVar("F", bound=DivField)


# =============================================================================
# ЧИСТЫЕ БИНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def add(first: F, second: F) -> F:
    """
    Сумма двух значений как новое значение.

    Raises:
        FieldBinaryError: Несовместимые или NaN/Inf операнды
    """
    first.check_operand(second, "Addition")
    return first.copy().add(second)


def subtract(first: F, second: F) -> F:
    """Разность двух значений как новое значение."""
    first.check_operand(second, "Subtraction")
    return first.copy().subtract(second)


def multiply(first: F, second: F) -> F:
    """Произведение двух значений как новое значение."""
    first.check_operand(second, "Multiplication")
    return first.copy().multiply(second)


def divide(first: F, second: F) -> F:
    """
    Частное двух значений как новое значение.

    Raises:
        FieldBinaryError: Несовместимые, NaN/Inf операнды или нулевой делитель
    """
    first.check_operand(second, "Division")
    return first.copy().divide(second)


# =============================================================================
# ЧИСТЫЕ УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def copy(value: F) -> F:
    return value.copy()


def invert(value: F) -> F:
    """
    Обратное значение как новое значение.

    Raises:
        FieldError: Если значение нулевое
    """
    if value.is_zero():
        raise FieldError(value, f"Can't invert a zero {type(value).__name__}")
    return value.copy().invert()


def conjugate(value: F) -> F:
    return value.copy().conjugate()


def scale(value: F, number: float) -> F:
    """Масштабированная копия. Cardinal не проверяется."""
    return value.copy().scale(number)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_zero(value: DivField) -> bool:
    return value.is_zero()


def is_nan(value: DivField) -> bool:
    return value.is_nan()


def is_infinite(value: DivField) -> bool:
    return value.is_infinite()


def is_real(value: DivField) -> bool:
    return value.is_real()


def is_imaginary(value: DivField) -> bool:
    return value.is_imaginary()


def is_equal(first: Optional[DivField], second: Optional[DivField]) -> bool:
    """
    Равенство вида, Cardinal и компонент.

    Несовпадение Cardinal даёт False, а не исключение.
    """
    if first is None or second is None:
        return False
    return first.is_equal(second)


def is_type_match(first: Optional[UnitValue], second: Optional[UnitValue]) -> bool:
    """Совпадение Cardinal по имени. None ни с чем не совпадает."""
    if first is None or second is None:
        return False
    return UnitValue.is_type_match(first, second)


# =============================================================================
# РЕДУКТОРЫ
# =============================================================================


def _kind_of(values: Sequence[F], kind: Optional[type[F]]) -> type[F]:
    if kind is not None:
        return kind
    if not values:
        raise ValueError("Cannot infer field kind from an empty sequence")
    return type(values[0])


def copy_from_moduli_sum(
    values: Sequence[F],
    cardinal: CardinalLike = None,
    kind: Optional[type[F]] = None,
) -> F:
    """
    Значение с real = сумма модулей.

    Вид результата — kind, либо вид первого элемента.

    Args:
        values: Значения одного вида и Cardinal
        cardinal: Cardinal результата (по умолчанию — первого элемента)
        kind: Вид результата; обязателен для пустого входа

    Returns:
        Новое значение; для пустого входа — нулевое значение вида kind

    Raises:
        ValueError: Если вход пуст и kind не задан
        FieldBinaryError: Несовместимые или NaN/Inf входы
    """
    return _kind_of(values, kind).copy_from_moduli_sum(values, cardinal)


def copy_from_sq_moduli_sum(
    values: Sequence[F],
    cardinal: CardinalLike = None,
    kind: Optional[type[F]] = None,
) -> F:
    """
    Значение с real = сумма квадратов модулей.

    Raises:
        ValueError: Если вход пуст и kind не задан
        FieldBinaryError: Несовместимые или NaN/Inf входы
    """
    return _kind_of(values, kind).copy_from_sq_moduli_sum(values, cardinal)


# =============================================================================
# RESULT-СТИЛЬ
# =============================================================================


def attempt(operation: Callable[..., Any], *args: Any) -> FieldResult:
    """
    Выполнение операции с перехватом ошибок поля.

    Examples:
        >>> result = attempt(divide, one, zero)
        >>> result.ok
        False
        >>> result.is_binary_error
        True
    """
    try:
        return FieldResult(value=operation(*args))
    except FieldError as e:
        return FieldResult(error=e)
