"""
Shared pytest fixtures.
"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration applied by CLI commands."""
    yield
    structlog.reset_defaults()
