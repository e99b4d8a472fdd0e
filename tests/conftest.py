"""Shared pytest configuration."""

import pytest
import structlog

pytest_plugins = ["wallclock.testing.fixtures"]


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any ``structlog.configure`` a test performed."""
    yield
    structlog.reset_defaults()
