"""
Global test configuration and fixtures.

This module contains ONLY global, test-agnostic fixtures shared across test
types. Unit test fixtures (mock transports, translator factories) live in
tests/unit/conftest.py.
"""

import inspect

import pytest

# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_alignment():
    """Alignment for 'Hi there' -> 'Bonjour ami cher'."""
    return {
        "source": "Hi there",
        "target": "Bonjour ami cher",
        "alignment": "0:2-0:1 4:7-3:6",
    }


@pytest.fixture
def sample_literal_translation():
    """Source with a literal phrase and a translation that mangles it."""
    return {
        "source": "I love <literal>New York</literal> city",
        "target": "Amo Nueva York ciudad",
        "alignment": "0:5-0:2 7:9-4:8 11:14-10:13 16:19-15:20",
    }


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Markers are also declared in pyproject.toml; registering them here keeps
    IDE support and documentation in one place.
    """
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies (fast)")
    config.addinivalue_line("markers", "slow: Tests that take longer to run")


def pytest_collection_modifyitems(config, items):
    """
    Auto-mark tests based on their file location.

    This ensures tests are properly categorized even if developers
    forget to add the @pytest.mark.xxx decorator.
    """
    for item in items:
        test_path = str(item.fspath)

        # Auto-mark based on directory
        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)

        # Auto-mark async tests
        if inspect.iscoroutinefunction(getattr(item, "obj", None)):
            item.add_marker(pytest.mark.asyncio)
