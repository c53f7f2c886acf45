"""
Core math modules для cladosf

Численные примитивы для компонент field-значений.
"""

from src.cladosf.math.numerical import (
    FLOAT32_MAX,
    FLOAT64_MAX,
    all_zero,
    any_infinite,
    any_nan,
    is_valid_float,
    sq_modulus,
    to_double,
    to_single,
)

__all__ = [
    # Constants
    "FLOAT32_MAX",
    "FLOAT64_MAX",
    # Rounding
    "to_single",
    "to_double",
    # NaN/Inf checks
    "is_valid_float",
    "any_nan",
    "any_infinite",
    "all_zero",
    # Modulus
    "sq_modulus",
]
