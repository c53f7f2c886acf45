"""
FieldListBuilder — пакетное создание field-значений

Builder привязан к виду поля и реестру Cardinal. Все значения одной
партии разделяют одну каноническую Cardinal: реестр получает не более
одной новой записи на партию, независимо от count.

Методы массивов возвращают tuple, методы списков — list.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Cardinal разрешается один раз на партию
2. copy_of переиспользует Cardinal первого элемента и не трогает реестр
3. count <= 0 даёт пустой результат без обращения к реестру
"""

import logging
from typing import Callable, Final, List, Optional, Sequence, Tuple

from src.cladosf.builder.config import BuilderConfig
from src.cladosf.builder.field_builder import FieldBuilder, field_class
from src.cladosf.domain.cardinal import CARDINAL_REGISTRY, Cardinal, CardinalRegistry
from src.cladosf.domain.kinds import FieldKind
from src.cladosf.fields.base import CardinalLike, DivField

logger = logging.getLogger(__name__)


class FieldListBuilder:
    """
    Builder партий значений одного вида.

    Args:
        kind: Вид создаваемых значений
        registry: Реестр Cardinal (по умолчанию глобальный CARDINAL_REGISTRY)
        config: Конфигурация builder-а
    """

    def __init__(
        self,
        kind: FieldKind,
        registry: Optional[CardinalRegistry] = None,
        config: Optional[BuilderConfig] = None,
    ):
        self.kind = FieldKind(kind)
        self.registry = registry if registry is not None else CARDINAL_REGISTRY
        self.config = config or BuilderConfig()
        self._fields = FieldBuilder(self.registry, self.config)

    @classmethod
    def for_kind(
        cls,
        kind: FieldKind,
        registry: Optional[CardinalRegistry] = None,
        config: Optional[BuilderConfig] = None,
    ) -> "FieldListBuilder":
        return cls(kind, registry=registry, config=config)

    @property
    def field_class(self) -> type[DivField]:
        return field_class(self.kind)

    # -------------------------------------------------------------------------
    # Core
    # -------------------------------------------------------------------------

    def _build(self, cardinal: CardinalLike, count: int, unit: bool) -> List[DivField]:
        if count <= 0:
            return []

        shared = self._fields.resolve_cardinal(self.kind, cardinal)
        factory: Callable[[Cardinal], DivField] = (
            self.field_class.one if unit else self.field_class.zero
        )
        values = [factory(shared) for _ in range(count)]
        logger.debug(
            "Built %d %s values (%s) under cardinal %r",
            count,
            self.kind.value,
            "ONE" if unit else "ZERO",
            shared.name,
        )
        return values

    # -------------------------------------------------------------------------
    # Arrays (tuple)
    # -------------------------------------------------------------------------

    def create(self, count: int) -> Tuple[DivField, ...]:
        """count нулевых значений под Cardinal вида по умолчанию."""
        return tuple(self._build(None, count, unit=False))

    def create_with_name(self, name: str, count: int) -> Tuple[DivField, ...]:
        """count нулевых значений под Cardinal, разрешённой по имени."""
        return tuple(self._build(name, count, unit=False))

    def create_with_cardinal(self, cardinal: Cardinal, count: int) -> Tuple[DivField, ...]:
        return tuple(self._build(cardinal, count, unit=False))

    def create_one(self, count: int) -> Tuple[DivField, ...]:
        """count единичных значений под Cardinal вида по умолчанию."""
        return tuple(self._build(None, count, unit=True))

    def create_one_with_name(self, name: str, count: int) -> Tuple[DivField, ...]:
        return tuple(self._build(name, count, unit=True))

    def create_one_with_cardinal(self, cardinal: Cardinal, count: int) -> Tuple[DivField, ...]:
        return tuple(self._build(cardinal, count, unit=True))

    def copy_of(self, values: Sequence[DivField]) -> Tuple[DivField, ...]:
        """Копии значений под Cardinal первого элемента (по ссылке)."""
        return tuple(self._copy(values))

    # -------------------------------------------------------------------------
    # Lists
    # -------------------------------------------------------------------------

    def create_list(self, count: int) -> List[DivField]:
        return self._build(None, count, unit=False)

    def create_list_with_name(self, name: str, count: int) -> List[DivField]:
        return self._build(name, count, unit=False)

    def create_list_with_cardinal(self, cardinal: Cardinal, count: int) -> List[DivField]:
        return self._build(cardinal, count, unit=False)

    def create_one_list(self, count: int) -> List[DivField]:
        return self._build(None, count, unit=True)

    def create_one_list_with_name(self, name: str, count: int) -> List[DivField]:
        return self._build(name, count, unit=True)

    def create_one_list_with_cardinal(self, cardinal: Cardinal, count: int) -> List[DivField]:
        return self._build(cardinal, count, unit=True)

    def copy_list_of(self, values: Sequence[DivField]) -> List[DivField]:
        return self._copy(values)

    def _copy(self, values: Sequence[DivField]) -> List[DivField]:
        if not values:
            return []

        shared = values[0].cardinal
        cls = self.field_class
        copies = []
        for value in values:
            if not isinstance(value, cls):
                raise TypeError(
                    f"{self.kind.value} builder cannot copy {type(value).__name__}"
                )
            copies.append(cls(shared, *value.components()))
        return copies


# Builders по умолчанию, привязанные к глобальному реестру
REALF: Final[FieldListBuilder] = FieldListBuilder(FieldKind.REALF)
REALD: Final[FieldListBuilder] = FieldListBuilder(FieldKind.REALD)
COMPLEXF: Final[FieldListBuilder] = FieldListBuilder(FieldKind.COMPLEXF)
COMPLEXD: Final[FieldListBuilder] = FieldListBuilder(FieldKind.COMPLEXD)
