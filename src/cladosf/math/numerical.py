"""
Numerical primitives — точность и валидность компонент поля

Модуль обеспечивает единообразную работу с компонентами field-значений:
- Округление до single precision (IEEE binary32) через numpy.float32
- Проверки NaN/Inf для валидации операндов
- Квадрат модуля по набору компонент

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Single-precision компоненты всегда хранятся уже округлёнными
2. NaN/Inf допустимы как хранимые значения, но не как операнды арифметики
3. Переполнение при округлении даёт ±Inf, а не исключение
"""

import math
from typing import Final, Iterable

import numpy as np

# =============================================================================
# КОНСТАНТЫ ТОЧНОСТИ
# =============================================================================

# Максимальное конечное значение single precision
FLOAT32_MAX: Final[float] = float(np.finfo(np.float32).max)

# Максимальное конечное значение double precision
FLOAT64_MAX: Final[float] = float(np.finfo(np.float64).max)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def to_single(value: float) -> float:
    """
    Округление значения до single precision.

    Значения вне диапазона float32 становятся ±Inf, NaN сохраняется.

    Args:
        value: Исходное значение

    Returns:
        Python float, точно представимый в binary32

    Examples:
        >>> to_single(1.0)
        1.0
        >>> to_single(0.1) == 0.1
        False
        >>> to_single(1e39)
        inf
    """
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.float32(value))


def to_double(value: float) -> float:
    """Приведение к double precision (Python float)."""
    return float(value)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def any_nan(values: Iterable[float]) -> bool:
    """True если хотя бы одна компонента NaN."""
    return any(math.isnan(v) for v in values)


def any_infinite(values: Iterable[float]) -> bool:
    """True если хотя бы одна компонента ±Inf."""
    return any(math.isinf(v) for v in values)


def all_zero(values: Iterable[float]) -> bool:
    """True если все компоненты точно равны нулю (включая -0.0)."""
    return all(v == 0.0 for v in values)


# =============================================================================
# МОДУЛЬ
# =============================================================================


def sq_modulus(values: Iterable[float]) -> float:
    """
    Квадрат евклидовой нормы набора компонент.

    NaN и Inf распространяются в результат без исключений.

    Examples:
        >>> sq_modulus([3.0, 4.0])
        25.0
    """
    total = 0.0
    for v in values:
        total += v * v
    return total

