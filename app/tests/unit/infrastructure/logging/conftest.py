"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def clean_context():
    """Start and finish every test with empty context vars."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
