"""
ComplexF / ComplexD — комплексные field-значения

Две компоненты: real и img.

ФОРМУЛЫ:
    (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    (a + bi) / (c + di) = (a + bi)(c - di) / (c² + d²)
    1 / (a + bi) = (a - bi) / (a² + b²)

Деление и обращение считаются по алгоритму Smith (без явного c² + d²).
"""

import math
from typing import ClassVar, Tuple, TypeVar

from src.cladosf.domain.cardinal import Cardinal
from src.cladosf.domain.kinds import FieldKind
from src.cladosf.fields.base import CardinalLike, DivField
from src.cladosf.math.numerical import to_double, to_single

C = TypeVar("C", bound="ComplexField")


class ComplexField(DivField):
    """Общая реализация комплексных видов."""

    def __init__(self, cardinal: Cardinal, real: float = 0.0, img: float = 0.0):
        super().__init__(cardinal, (real, img))

    @classmethod
    def zero(cls: type[C], cardinal: CardinalLike = None) -> C:
        return cls(cls.cardinal_from(cardinal), 0.0, 0.0)

    @classmethod
    def one(cls: type[C], cardinal: CardinalLike = None) -> C:
        return cls(cls.cardinal_from(cardinal), 1.0, 0.0)

    @property
    def img(self) -> float:
        return self._vals[1]

    @img.setter
    def img(self, value: float) -> None:
        self._vals[1] = self._coerce(value)

    def argument(self) -> float:
        """Аргумент (фаза) в радианах, диапазон (-π, π]."""
        return math.atan2(self.img, self.real)

    def is_real(self) -> bool:
        return self.img == 0.0

    def is_imaginary(self) -> bool:
        return self.real == 0.0 and self.img != 0.0

    def conjugate(self: C) -> C:
        self.img = -self.img
        return self

    def _multiply_by(self, other: DivField) -> None:
        a, b = self.real, self.img
        c, d = other.real, other.img
        self._assign(a * c - b * d, a * d + b * c)

    def _divide_by(self, other: DivField) -> None:
        self._assign(*_smith_divide(self.real, self.img, other.real, other.img))

    def _invert(self) -> None:
        self._assign(*_smith_divide(1.0, 0.0, self.real, self.img))


def _smith_divide(a: float, b: float, c: float, d: float) -> Tuple[float, float]:
    """
    (a + bi) / (c + di) по алгоритму Smith.

    Знаменатель масштабируется большей по модулю компонентой делителя,
    поэтому c² + d² не вычисляется и не переполняется/не обнуляется
    для крайних, но конечных значений.

    Examples:
        >>> _smith_divide(2.0, 2.0, 1.0, 1.0)
        (2.0, 0.0)
    """
    if abs(c) >= abs(d):
        ratio = d / c
        denom = c + d * ratio
        return (a + b * ratio) / denom, (b - a * ratio) / denom

    ratio = c / d
    denom = c * ratio + d
    return (a * ratio + b) / denom, (b * ratio - a) / denom


class ComplexF(ComplexField):
    """Комплексное значение single precision."""

    kind: ClassVar[FieldKind] = FieldKind.COMPLEXF
    _coerce = staticmethod(to_single)


class ComplexD(ComplexField):
    """Комплексное значение double precision."""

    kind: ClassVar[FieldKind] = FieldKind.COMPLEXD
    _coerce = staticmethod(to_double)
