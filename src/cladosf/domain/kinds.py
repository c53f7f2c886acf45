"""
FieldKind — селектор вида field-значения

Четыре вида делимых полей: real/complex × single/double precision.
Значение enum одновременно является именем Cardinal по умолчанию для вида.
"""

from enum import Enum


class FieldKind(str, Enum):
    """Вид field-значения"""

    REALF = "REALF"
    REALD = "REALD"
    COMPLEXF = "COMPLEXF"
    COMPLEXD = "COMPLEXD"

    @property
    def default_cardinal_name(self) -> str:
        """Имя Cardinal, используемого при создании без явной метки."""
        return self.value

    @property
    def is_complex(self) -> bool:
        return self in (FieldKind.COMPLEXF, FieldKind.COMPLEXD)

    @property
    def is_single(self) -> bool:
        return self in (FieldKind.REALF, FieldKind.COMPLEXF)
