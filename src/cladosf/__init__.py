"""
cladosf — division-field scalars tagged with Cardinals.

Coefficient types for a geometric-algebra layer: RealF, RealD, ComplexF,
ComplexD. Binary arithmetic is allowed only between values whose Cardinals
match by name.
"""

from src.cladosf.builder import BuilderConfig, FieldBuilder, FieldListBuilder
from src.cladosf.domain import (
    CARDINAL_REGISTRY,
    Cardinal,
    CardinalRegistry,
    FieldBinaryError,
    FieldError,
    FieldKind,
    FieldResult,
    FieldSnapshot,
    UnitValue,
)
from src.cladosf.fields import ComplexD, ComplexF, DivField, RealD, RealF

__all__ = [
    "BuilderConfig",
    "FieldBuilder",
    "FieldListBuilder",
    "CARDINAL_REGISTRY",
    "Cardinal",
    "CardinalRegistry",
    "FieldBinaryError",
    "FieldError",
    "FieldKind",
    "FieldResult",
    "FieldSnapshot",
    "UnitValue",
    "DivField",
    "RealF",
    "RealD",
    "ComplexF",
    "ComplexD",
]
