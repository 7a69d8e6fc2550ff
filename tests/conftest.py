"""Pytest configuration and fixtures for variantkit tests."""

import pytest

from variantkit import Option, Result, UnionBuilder, VariantValue


@pytest.fixture
def option() -> Option:
    """Provide an Option builder over ints."""
    return Option(int)


@pytest.fixture
def result() -> Result:
    """Provide a Result builder over int / str."""
    return Result(int, str)


@pytest.fixture
def shape() -> UnionBuilder:
    """Provide a three-way schema with one absent payload."""
    return UnionBuilder({"Circle": float, "Rect": tuple, "Empty": None})


@pytest.fixture
def sample_values(shape: UnionBuilder) -> list[VariantValue]:
    """Provide one value per shape alternative."""
    return [shape.Circle(1.5), shape.Rect((2, 3)), shape.Empty()]


# Pytest markers for organizing tests
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom assertion helpers
def assert_same_value(left: VariantValue, right: VariantValue) -> None:
    """Assert two values are observably equal."""
    assert left.key() == right.key(), f"keys differ: {left!r} vs {right!r}"
    assert left.unwrap() == right.unwrap(), f"payloads differ: {left!r} vs {right!r}"
