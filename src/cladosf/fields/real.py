"""
RealF / RealD — вещественные field-значения

Одна компонента. Сопряжение — тождество, модуль — абсолютное значение.
RealF хранит компоненту в single precision, RealD — в double.
"""

from typing import ClassVar, TypeVar

from src.cladosf.domain.cardinal import Cardinal
from src.cladosf.domain.kinds import FieldKind
from src.cladosf.fields.base import CardinalLike, DivField
from src.cladosf.math.numerical import to_double, to_single

R = TypeVar("R", bound="RealField")


class RealField(DivField):
    """Общая реализация вещественных видов."""

    def __init__(self, cardinal: Cardinal, real: float = 0.0):
        super().__init__(cardinal, (real,))

    @classmethod
    def zero(cls: type[R], cardinal: CardinalLike = None) -> R:
        return cls(cls.cardinal_from(cardinal), 0.0)

    @classmethod
    def one(cls: type[R], cardinal: CardinalLike = None) -> R:
        return cls(cls.cardinal_from(cardinal), 1.0)

    def is_real(self) -> bool:
        return True

    def is_imaginary(self) -> bool:
        return False

    def conjugate(self: R) -> R:
        return self

    def _multiply_by(self, other: DivField) -> None:
        self.real = self.real * other.real

    def _divide_by(self, other: DivField) -> None:
        self.real = self.real / other.real

    def _invert(self) -> None:
        self.real = 1.0 / self.real


class RealF(RealField):
    """Вещественное значение single precision."""

    kind: ClassVar[FieldKind] = FieldKind.REALF
    _coerce = staticmethod(to_single)


class RealD(RealField):
    """Вещественное значение double precision."""

    kind: ClassVar[FieldKind] = FieldKind.REALD
    _coerce = staticmethod(to_double)
