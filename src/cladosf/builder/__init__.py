"""
Builders для field-значений.

FieldBuilder создаёт одиночные значения, FieldListBuilder — партии
значений под одной канонической Cardinal.
"""

from src.cladosf.builder.config import BuilderConfig
from src.cladosf.builder.field_builder import FIELD_CLASSES, FieldBuilder, field_class
from src.cladosf.builder.list_builder import (
    COMPLEXD,
    COMPLEXF,
    REALD,
    REALF,
    FieldListBuilder,
)

__all__ = [
    # Config
    "BuilderConfig",
    # Single values
    "FIELD_CLASSES",
    "FieldBuilder",
    "field_class",
    # Batches
    "FieldListBuilder",
    "REALF",
    "REALD",
    "COMPLEXF",
    "COMPLEXD",
]
