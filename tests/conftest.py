"""
Pytest configuration for cladosf tests.

Shared fixtures: a fresh Cardinal registry per test and isolation of
the process-wide CARDINAL_REGISTRY.
"""

import pytest

from src.cladosf.domain.cardinal import CARDINAL_REGISTRY, CardinalRegistry


@pytest.fixture
def registry() -> CardinalRegistry:
    """Пустой реестр, не связанный с глобальным"""
    return CardinalRegistry()


@pytest.fixture(autouse=True)
def clean_global_registry():
    """Глобальный реестр пуст до и после каждого теста"""
    CARDINAL_REGISTRY.clear()
    yield
    CARDINAL_REGISTRY.clear()
