"""Pytest configuration and shared fixtures."""

import pytest

from uuid_compactor import UuidCompactor


@pytest.fixture
def compactor() -> UuidCompactor:
    """Provide a compactor with the default configuration."""
    return UuidCompactor()
