"""
FieldBuilder — создание одиночных field-значений через реестр Cardinal

Таблица видов FIELD_CLASSES сопоставляет FieldKind конкретному классу;
фабрики zero/one/copy_of берутся из класса.

Все Cardinal, выдаваемые builder-ом, канонические: они разрешаются
через реестр, переданный в конструктор.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from src.cladosf.builder.config import BuilderConfig
from src.cladosf.contracts.validators import validate_field_snapshot
from src.cladosf.domain.cardinal import CARDINAL_REGISTRY, Cardinal, CardinalRegistry
from src.cladosf.domain.errors import FieldSnapshot
from src.cladosf.domain.kinds import FieldKind
from src.cladosf.fields.base import CardinalLike, DivField
from src.cladosf.fields.complex import ComplexD, ComplexF
from src.cladosf.fields.real import RealD, RealF

logger = logging.getLogger(__name__)


# Таблица конструкторов по виду
FIELD_CLASSES: Dict[FieldKind, type[DivField]] = {
    FieldKind.REALF: RealF,
    FieldKind.REALD: RealD,
    FieldKind.COMPLEXF: ComplexF,
    FieldKind.COMPLEXD: ComplexD,
}


def field_class(kind: FieldKind) -> type[DivField]:
    """Конкретный класс для вида поля."""
    return FIELD_CLASSES[FieldKind(kind)]


class FieldBuilder:
    """
    Builder одиночных значений.

    Args:
        registry: Реестр Cardinal (по умолчанию глобальный CARDINAL_REGISTRY)
        config: Конфигурация builder-а
    """

    def __init__(
        self,
        registry: Optional[CardinalRegistry] = None,
        config: Optional[BuilderConfig] = None,
    ):
        self.registry = registry if registry is not None else CARDINAL_REGISTRY
        self.config = config or BuilderConfig()

    def create_cardinal(self, name: str) -> Cardinal:
        """Каноническая Cardinal для имени (создаётся при отсутствии)."""
        return self.registry.resolve(name)

    def resolve_cardinal(self, kind: FieldKind, cardinal: CardinalLike = None) -> Cardinal:
        """
        Приведение аргумента к канонической Cardinal.

        None → Cardinal вида по умолчанию, str → resolve по имени,
        Cardinal → регистрация с дедупликацией по имени.
        """
        if cardinal is None:
            return self.registry.resolve(self.config.default_name(kind))
        if isinstance(cardinal, Cardinal):
            return self.registry.append(cardinal)
        return self.registry.resolve(cardinal)

    def create_zero(self, kind: FieldKind, cardinal: CardinalLike = None) -> DivField:
        return field_class(kind).zero(self.resolve_cardinal(kind, cardinal))

    def create_one(self, kind: FieldKind, cardinal: CardinalLike = None) -> DivField:
        return field_class(kind).one(self.resolve_cardinal(kind, cardinal))

    @staticmethod
    def copy_of(value: Optional[DivField]) -> Optional[DivField]:
        """Копия значения или None для None. Реестр не затрагивается."""
        if value is None:
            return None
        return value.copy()

    def from_snapshot(self, snapshot: Union[FieldSnapshot, Mapping[str, Any]]) -> DivField:
        """
        Восстановление значения из снимка.

        Снимок проверяется по контракту field_snapshot до обращения
        к реестру. Cardinal снимка разрешается через реестр.

        Raises:
            jsonschema.ValidationError: Если снимок не соответствует контракту
        """
        validate_field_snapshot(snapshot)
        if not isinstance(snapshot, FieldSnapshot):
            snapshot = FieldSnapshot.model_validate(snapshot)

        value = self.create_zero(snapshot.kind, snapshot.cardinal)
        value.real = snapshot.real
        if snapshot.kind.is_complex and snapshot.img is not None:
            value.img = snapshot.img
        logger.debug("Restored %s under cardinal %r", snapshot.kind.value, snapshot.cardinal)
        return value
