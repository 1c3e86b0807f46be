"""Pytest configuration and shared fixtures."""

import pytest

from roster.config import RosterConfig


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def cfg():
    """Default roster configuration (production rule tables)."""
    return RosterConfig()
