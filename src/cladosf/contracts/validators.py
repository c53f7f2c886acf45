"""
JSON Schema Contract Validators

Контракт сериализованной формы field-значения (снимка). Используется
FieldBuilder.from_snapshot перед восстановлением значения и доступен
напрямую для внешних данных.

Схемы:
- field_snapshot.json (снимок значения: kind, cardinal, real, img)

Схемы проходят meta-валидацию один раз; скомпилированные
Draft202012Validator кэшируются по имени схемы.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator

from src.cladosf.domain.errors import FieldSnapshot

SCHEMA_DIR = Path(__file__).parent / "schema"

SnapshotLike = Union[FieldSnapshot, Mapping[str, Any]]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Источник схем контрактов.

    Args:
        schema_dir: Каталог *.json схем (по умолчанию schema/ пакета)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени (без расширения .json).

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если схема не проходит meta-валидацию
        """
        return self.validator_for(schema_name).schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный валидатор схемы, загружается при первом запросе."""
        cached = self._validators.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        validator = Draft202012Validator(schema)
        self._validators[schema_name] = validator
        return validator


@lru_cache(maxsize=None)
def _default_loader() -> SchemaLoader:
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def snapshot_to_dict(snapshot: SnapshotLike) -> Dict[str, Any]:
    """
    Снимок как dict примитивов (kind — строка).

    NaN/Inf компоненты остаются float.
    """
    if isinstance(snapshot, FieldSnapshot):
        data = snapshot.model_dump()
        data["kind"] = snapshot.kind.value
        return data
    return dict(snapshot)


class ContractValidator:
    """Проверка данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.validator = (loader or _default_loader()).validator_for(schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)


class FieldSnapshotValidator(ContractValidator):
    """Контракт field_snapshot; принимает FieldSnapshot или dict."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("field_snapshot", loader)

    def validate(self, data: SnapshotLike) -> None:
        super().validate(snapshot_to_dict(data))

    def is_valid(self, data: SnapshotLike) -> bool:
        return super().is_valid(snapshot_to_dict(data))

    def iter_errors(self, data: SnapshotLike) -> Iterator[jsonschema.ValidationError]:
        return super().iter_errors(snapshot_to_dict(data))


@lru_cache(maxsize=None)
def _snapshot_validator() -> FieldSnapshotValidator:
    return FieldSnapshotValidator()


def validate_field_snapshot(data: SnapshotLike) -> None:
    """
    Проверка снимка field-значения по контракту.

    Raises:
        jsonschema.ValidationError: Если снимок не соответствует схеме
    """
    _snapshot_validator().validate(data)
