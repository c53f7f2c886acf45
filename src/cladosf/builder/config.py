"""Конфигурация builders."""

from dataclasses import dataclass, field
from typing import Dict

from src.cladosf.domain.kinds import FieldKind


def _default_names() -> Dict[FieldKind, str]:
    return {kind: kind.default_cardinal_name for kind in FieldKind}


@dataclass(frozen=True)
class BuilderConfig:
    """
    Конфигурация builders.

    - default_cardinal_names: имя Cardinal для создания без явной метки,
      по виду поля. Отсутствующие виды используют имя вида.
    """

    default_cardinal_names: Dict[FieldKind, str] = field(default_factory=_default_names)

    def default_name(self, kind: FieldKind) -> str:
        return self.default_cardinal_names.get(kind, kind.default_cardinal_name)
