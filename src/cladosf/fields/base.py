"""
DivField — контракт делимого поля

Общая часть всех четырёх видов: хранение компонент, проверки операндов,
покомпонентные сложение/вычитание/масштабирование, предикаты и редукторы
по модулям. Умножение, деление, обращение и сопряжение реализуются
в RealField / ComplexField.

Мутирующие операции изменяют получателя и возвращают его (chaining).
Чистые зеркала операций находятся в src.cladosf.fields.operations.

ПРАВИЛА ВАЛИДАЦИИ (бинарные операции и редукторы):
1. Операнды одного вида (RealF с RealF и т.д.)
2. Cardinal операндов равны по имени
3. Ни один операнд не содержит NaN/Inf
4. Делитель не равен нулевому значению
Нарушение любого правила → FieldBinaryError.

scale() не проверяет Cardinal и никогда не бросает исключений.
"""

import math
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Iterable, List, Sequence, TypeVar, Union

from src.cladosf.domain.cardinal import Cardinal
from src.cladosf.domain.errors import FieldBinaryError, FieldError, FieldSnapshot
from src.cladosf.domain.kinds import FieldKind
from src.cladosf.domain.unit import UnitValue
from src.cladosf.math.numerical import (
    all_zero,
    any_infinite,
    any_nan,
    sq_modulus,
)

F = TypeVar("F", bound="DivField")

CardinalLike = Union[Cardinal, str, None]


class DivField(UnitValue, ABC):
    """
    Абстрактное field-значение: Cardinal + компоненты.

    Подклассы задают kind и функцию приведения точности _coerce.
    Все записываемые компоненты проходят через _coerce.
    """

    kind: ClassVar[FieldKind]
    _coerce: ClassVar[Callable[[float], float]]

    def __init__(self, cardinal: Cardinal, values: Sequence[float]):
        super().__init__(cardinal)
        self._vals: List[float] = [self._coerce(v) for v in values]

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def cardinal_from(cls, cardinal: CardinalLike) -> Cardinal:
        """
        Приведение аргумента к Cardinal.

        None → Cardinal вида по умолчанию, str → новая Cardinal с этим именем.
        Реестр не используется: регистрацией занимаются builders.
        """
        if cardinal is None:
            return Cardinal.for_kind(cls.kind)
        if isinstance(cardinal, Cardinal):
            return cardinal
        return Cardinal(name=cardinal)

    @classmethod
    @abstractmethod
    def zero(cls: type[F], cardinal: CardinalLike = None) -> F:
        """Нулевое значение вида."""

    @classmethod
    @abstractmethod
    def one(cls: type[F], cardinal: CardinalLike = None) -> F:
        """Мультипликативная единица вида."""

    @classmethod
    def copy_of(cls: type[F], other: F) -> F:
        """
        Копия значения: компоненты дублируются, Cardinal переиспользуется
        по ссылке.

        Raises:
            TypeError: Если other не того же вида
        """
        if type(other) is not cls:
            raise TypeError(f"{cls.__name__}.copy_of cannot copy {type(other).__name__}")
        clone = cls.zero(other.cardinal)
        clone._vals = list(other._vals)
        return clone

    def copy(self: F) -> F:
        return type(self).copy_of(self)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def real(self) -> float:
        return self._vals[0]

    @real.setter
    def real(self, value: float) -> None:
        self._vals[0] = self._coerce(value)

    def components(self) -> tuple:
        return tuple(self._vals)

    def _assign(self, *values: float) -> None:
        self._vals = [self._coerce(v) for v in values]

    def modulus(self) -> float:
        """
        Модуль: |x| для real, евклидова норма для complex.

        Считается через math.hypot без промежуточного квадрата, поэтому
        крайние конечные значения не переполняются.
        """
        return self._coerce(math.hypot(*self._vals))

    def sq_modulus(self) -> float:
        """Квадрат модуля без извлечения корня."""
        return self._coerce(sq_modulus(self._vals))

    def snapshot(self) -> FieldSnapshot:
        return FieldSnapshot(
            kind=self.kind,
            cardinal=self.cardinal_name,
            real=self._vals[0],
            img=self._vals[1] if len(self._vals) > 1 else None,
        )

    # -------------------------------------------------------------------------
    # Predicates (never raise)
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return all_zero(self._vals)

    def is_nan(self) -> bool:
        return any_nan(self._vals)

    def is_infinite(self) -> bool:
        return any_infinite(self._vals)

    @abstractmethod
    def is_real(self) -> bool:
        """True если мнимая компонента равна нулю."""

    @abstractmethod
    def is_imaginary(self) -> bool:
        """True если значение чисто мнимое и ненулевое."""

    def is_equal(self, other: "DivField") -> bool:
        """Совпадение вида, Cardinal и всех компонент."""
        return (
            type(self) is type(other)
            and UnitValue.is_type_match(self, other)
            and self._vals == other._vals
        )

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def check_operand(self, other: "DivField", operation: str) -> None:
        """
        Проверка пары операндов бинарной операции.

        Raises:
            FieldBinaryError: Если вид или Cardinal не совпадают
                либо один из операндов NaN/Inf
        """
        if type(other) is not type(self):
            raise FieldBinaryError(self, f"{operation} failed kind match test", other)
        if not UnitValue.is_type_match(self, other):
            raise FieldBinaryError(self, f"{operation} failed type match test", other)
        if self.is_nan() or other.is_nan():
            raise FieldBinaryError(self, f"{operation} found a NaN operand", other)
        if self.is_infinite() or other.is_infinite():
            raise FieldBinaryError(self, f"{operation} found an infinite operand", other)

    # -------------------------------------------------------------------------
    # Self-altering arithmetic
    # -------------------------------------------------------------------------

    def add(self: F, other: F) -> F:
        self.check_operand(other, "Addition")
        self._assign(*(a + b for a, b in zip(self._vals, other._vals)))
        return self

    def subtract(self: F, other: F) -> F:
        self.check_operand(other, "Subtraction")
        self._assign(*(a - b for a, b in zip(self._vals, other._vals)))
        return self

    def multiply(self: F, other: F) -> F:
        self.check_operand(other, "Multiplication")
        self._multiply_by(other)
        return self

    def divide(self: F, other: F) -> F:
        self.check_operand(other, "Division")
        if other.is_zero():
            raise FieldBinaryError(self, "Divide by zero detected", other)
        self._divide_by(other)
        return self

    def invert(self: F) -> F:
        """
        Замена значения мультипликативно обратным.

        Raises:
            FieldError: Если значение нулевое
        """
        if self.is_zero():
            raise FieldError(self, f"Can't invert a zero {type(self).__name__}")
        self._invert()
        return self

    @abstractmethod
    def conjugate(self: F) -> F:
        """Сопряжение на месте."""

    def scale(self: F, number: float) -> F:
        """Умножение всех компонент на число без проверки Cardinal."""
        self._assign(*(v * number for v in self._vals))
        return self

    @abstractmethod
    def _multiply_by(self, other: "DivField") -> None:
        ...

    @abstractmethod
    def _divide_by(self, other: "DivField") -> None:
        ...

    @abstractmethod
    def _invert(self) -> None:
        ...

    # -------------------------------------------------------------------------
    # Reducers
    # -------------------------------------------------------------------------

    @classmethod
    def _validate_sequence(cls, values: Sequence["DivField"], operation: str) -> None:
        first = values[0]
        for value in values:
            if type(value) is not cls:
                raise FieldBinaryError(first, f"{operation} failed kind match test", value)
            if not UnitValue.is_type_match(first, value):
                raise FieldBinaryError(first, f"{operation} failed type match test", value)
            if value.is_nan():
                raise FieldBinaryError(first, f"{operation} found a NaN operand", value)
            if value.is_infinite():
                raise FieldBinaryError(first, f"{operation} found an infinite operand", value)

    @classmethod
    def _reduce(
        cls: type[F],
        values: Iterable[F],
        cardinal: CardinalLike,
        operation: str,
        measure: Callable[["DivField"], float],
    ) -> F:
        items = list(values)
        if not items:
            return cls.zero(cardinal)

        cls._validate_sequence(items, operation)
        result = cls.zero(items[0].cardinal if cardinal is None else cardinal)
        total = 0.0
        for item in items:
            total += measure(item)
        result.real = total
        return result

    @classmethod
    def copy_from_moduli_sum(cls: type[F], values: Iterable[F], cardinal: CardinalLike = None) -> F:
        """
        Новое значение с real = сумма модулей входов.

        Пустой вход даёт нулевое значение.

        Args:
            values: Последовательность значений этого вида
            cardinal: Cardinal результата (по умолчанию — первого элемента)

        Raises:
            FieldBinaryError: Если входы не совместимы или содержат NaN/Inf
        """
        return cls._reduce(values, cardinal, "Moduli sum", lambda v: v.modulus())

    @classmethod
    def copy_from_sq_moduli_sum(
        cls: type[F], values: Iterable[F], cardinal: CardinalLike = None
    ) -> F:
        """
        Новое значение с real = сумма квадратов модулей входов.

        Raises:
            FieldBinaryError: Если входы не совместимы или содержат NaN/Inf
        """
        return cls._reduce(values, cardinal, "Squared moduli sum", lambda v: v.sq_modulus())

    def __repr__(self) -> str:
        parts = ", ".join(repr(v) for v in self._vals)
        return f"{type(self).__name__}({self.cardinal_name!r}, {parts})"

