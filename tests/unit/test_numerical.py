"""
Тесты для модуля Numerical primitives

Проверяет:
1. Округление до single precision
2. NaN/Inf проверки
3. Квадрат модуля
"""

import math

import pytest

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


class TestToSingle:
    """Тесты для to_single"""

    def test_exact_values_unchanged(self) -> None:
        """Точно представимые значения не меняются"""
        assert to_single(1.0) == 1.0
        assert to_single(-0.5) == -0.5
        assert to_single(16.0) == 16.0

    def test_inexact_value_rounded(self) -> None:
        """0.1 не представимо в binary32"""
        rounded = to_single(0.1)
        assert rounded != 0.1
        assert rounded == pytest.approx(0.1, rel=1e-7)

    def test_overflow_becomes_infinity(self) -> None:
        """Значения вне диапазона float32 становятся ±Inf"""
        assert math.isinf(to_single(1e39))
        assert to_single(-1e39) == -math.inf

    def test_max_value_preserved(self) -> None:
        assert to_single(FLOAT32_MAX) == FLOAT32_MAX

    def test_nan_preserved(self) -> None:
        assert math.isnan(to_single(math.nan))

    def test_returns_python_float(self) -> None:
        assert type(to_single(2.0)) is float


class TestToDouble:
    """Тесты для to_double"""

    def test_int_converted(self) -> None:
        assert to_double(3) == 3.0
        assert type(to_double(3)) is float

    def test_max_value_finite(self) -> None:
        assert math.isfinite(to_double(FLOAT64_MAX))


class TestNanInfChecks:
    """Тесты NaN/Inf проверок"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(1.0)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_any_nan(self) -> None:
        assert any_nan([0.0, math.nan])
        assert not any_nan([0.0, 1.0])
        assert not any_nan([])

    def test_any_infinite(self) -> None:
        assert any_infinite([math.inf])
        assert any_infinite([1.0, -math.inf])
        assert not any_infinite([1.0, math.nan])

    def test_all_zero(self) -> None:
        assert all_zero([0.0, -0.0])
        assert not all_zero([0.0, 1e-300])


class TestSqModulus:
    """Тесты для sq_modulus"""

    def test_pythagorean(self) -> None:
        assert sq_modulus([3.0, 4.0]) == 25.0

    def test_empty_is_zero(self) -> None:
        assert sq_modulus([]) == 0.0

    def test_nan_propagates(self) -> None:
        assert math.isnan(sq_modulus([1.0, math.nan]))

    def test_infinity_propagates(self) -> None:
        assert math.isinf(sq_modulus([-math.inf]))
