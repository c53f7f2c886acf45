"""
Tests for JSON Schema Contract Validators

Тестирование контракта field_snapshot:
- Валидность самой схемы
- Валидация правильных снимков (dict и FieldSnapshot)
- Детекция нарушений required полей, типов и enum
- Согласованность img с видом поля
- Интеграция с Pydantic моделью FieldSnapshot
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as ModelValidationError

from src.cladosf.contracts import (
    FieldSnapshotValidator,
    SchemaLoader,
    snapshot_to_dict,
    validate_field_snapshot,
)
from src.cladosf.domain import Cardinal, FieldBinaryError, FieldKind, FieldSnapshot
from src.cladosf.fields import ComplexF, RealD


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_real_snapshot():
    """Валидный снимок RealD."""
    return {"kind": "REALD", "cardinal": "Test:RealD", "real": 2.5, "img": None}


@pytest.fixture
def valid_complex_snapshot():
    """Валидный снимок ComplexF."""
    return {"kind": "COMPLEXF", "cardinal": "Test:ComplexF", "real": 1.0, "img": -1.0}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_is_valid_draft_2020_12(self) -> None:
        schema = SchemaLoader().load_schema("field_snapshot")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("field_snapshot") is loader.load_schema("field_snapshot")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# FIELD SNAPSHOT CONTRACT
# =============================================================================


class TestFieldSnapshotContract:
    """Тесты контракта field_snapshot"""

    def test_valid_real(self, valid_real_snapshot) -> None:
        validate_field_snapshot(valid_real_snapshot)

    def test_valid_real_without_img(self, valid_real_snapshot) -> None:
        del valid_real_snapshot["img"]
        assert FieldSnapshotValidator().is_valid(valid_real_snapshot)

    def test_valid_complex(self, valid_complex_snapshot) -> None:
        validate_field_snapshot(valid_complex_snapshot)

    @pytest.mark.parametrize("missing", ["kind", "cardinal", "real"])
    def test_required_fields(self, valid_real_snapshot, missing: str) -> None:
        del valid_real_snapshot[missing]
        with pytest.raises(ValidationError):
            validate_field_snapshot(valid_real_snapshot)

    def test_unknown_kind(self, valid_real_snapshot) -> None:
        valid_real_snapshot["kind"] = "QUATERNION"
        with pytest.raises(ValidationError):
            validate_field_snapshot(valid_real_snapshot)

    def test_empty_cardinal(self, valid_real_snapshot) -> None:
        valid_real_snapshot["cardinal"] = ""
        assert not FieldSnapshotValidator().is_valid(valid_real_snapshot)

    def test_real_must_be_number(self, valid_real_snapshot) -> None:
        valid_real_snapshot["real"] = "2.5"
        with pytest.raises(ValidationError):
            validate_field_snapshot(valid_real_snapshot)

    def test_complex_requires_img(self, valid_complex_snapshot) -> None:
        del valid_complex_snapshot["img"]
        with pytest.raises(ValidationError):
            validate_field_snapshot(valid_complex_snapshot)

    def test_complex_img_not_null(self, valid_complex_snapshot) -> None:
        valid_complex_snapshot["img"] = None
        assert not FieldSnapshotValidator().is_valid(valid_complex_snapshot)

    def test_real_img_must_be_null(self, valid_real_snapshot) -> None:
        valid_real_snapshot["img"] = 1.0
        assert not FieldSnapshotValidator().is_valid(valid_real_snapshot)

    def test_additional_properties(self, valid_real_snapshot) -> None:
        valid_real_snapshot["unit"] = "m"
        with pytest.raises(ValidationError):
            validate_field_snapshot(valid_real_snapshot)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(FieldSnapshotValidator().iter_errors({"kind": "X", "real": "y"}))
        assert len(errors) >= 3


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Снимки, сделанные field-значениями, проходят контракт"""

    def test_real_value_snapshot(self) -> None:
        snapshot = RealD(Cardinal(name="Meters"), 3.0).snapshot()
        validate_field_snapshot(snapshot)

    def test_complex_value_snapshot(self) -> None:
        snapshot = ComplexF(Cardinal(name="Phase"), 0.5, -0.5).snapshot()
        assert FieldSnapshotValidator().is_valid(snapshot)

    def test_snapshot_to_dict(self) -> None:
        snapshot = FieldSnapshot(kind=FieldKind.COMPLEXD, cardinal="C", real=1.0, img=2.0)
        data = snapshot_to_dict(snapshot)
        assert data == {"kind": "COMPLEXD", "cardinal": "C", "real": 1.0, "img": 2.0}
        assert json.loads(json.dumps(data)) == data

    def test_error_snapshots_pass_contract(self) -> None:
        first = ComplexF(Cardinal(name="A"), 1.0, 2.0)
        second = ComplexF(Cardinal(name="B"), 3.0, 4.0)
        with pytest.raises(FieldBinaryError) as exc_info:
            first.add(second)
        validate_field_snapshot(exc_info.value.source_snapshot)
        validate_field_snapshot(exc_info.value.second_snapshot)

    def test_snapshot_frozen(self) -> None:
        snapshot = RealD(Cardinal(name="Meters"), 3.0).snapshot()
        with pytest.raises(ModelValidationError):
            snapshot.real = 4.0
