"""
Domain models and value objects.

Contains Cardinal identities, their registry, the named value base and
the field error hierarchy.
"""

from src.cladosf.domain.cardinal import CARDINAL_REGISTRY, Cardinal, CardinalRegistry
from src.cladosf.domain.errors import (
    FieldBinaryError,
    FieldError,
    FieldResult,
    FieldSnapshot,
)
from src.cladosf.domain.kinds import FieldKind
from src.cladosf.domain.unit import UnitValue

__all__ = [
    # Cardinal
    "Cardinal",
    "CardinalRegistry",
    "CARDINAL_REGISTRY",
    # Kinds
    "FieldKind",
    # Base value
    "UnitValue",
    # Errors
    "FieldError",
    "FieldBinaryError",
    "FieldResult",
    "FieldSnapshot",
]
