"""Shared fixtures."""

import pytest

from endinero.logger import reset_logger


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Give every test the library's default logging state."""
    reset_logger()
    yield
    reset_logger()
