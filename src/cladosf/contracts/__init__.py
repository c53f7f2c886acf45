"""
Contract Validation Module

Модуль для валидации JSON контрактов cladosf.
"""

from .validators import (
    ContractValidator,
    FieldSnapshotValidator,
    SchemaLoader,
    snapshot_to_dict,
    validate_field_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FieldSnapshotValidator",
    # Functions
    "snapshot_to_dict",
    "validate_field_snapshot",
]
