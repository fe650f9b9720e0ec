"""
Pytest configuration and shared fixtures for rpncalc tests.
"""

import pytest

from rpncalc import (
    DEFAULT_REGISTRY,
    Calculator,
    Fixity,
    OperatorDescriptor,
    Precedence,
)


@pytest.fixture
def registry():
    """Fixture providing the built-in operator registry."""
    return DEFAULT_REGISTRY


@pytest.fixture
def calculator():
    """Fixture providing a calculator bound to the built-in operators."""
    return Calculator()


@pytest.fixture
def extended_registry():
    """Fixture providing built-ins plus a shift operator and a negation function."""
    return DEFAULT_REGISTRY.extend(
        OperatorDescriptor("<<", Fixity.INFIX, Precedence.HIGH, lambda left, right: left * 2 ** right),
        OperatorDescriptor("neg", Fixity.FUNCTION, Precedence.HIGH, lambda left, right: -left),
    )


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the full tokenize/convert/evaluate pipeline"
    )
    config.addinivalue_line(
        "markers", "cli: Command-line entry point tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test names/paths."""
    for item in items:
        if "cli" in item.nodeid.lower():
            item.add_marker(pytest.mark.cli)
        elif "evaluator" in item.nodeid.lower() or "regression" in item.nodeid.lower():
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
