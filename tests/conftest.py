"""Pytest configuration and shared fixtures for pyoptional tests."""

from __future__ import annotations

import pytest
from pyoptional import _config, clear_log_hooks


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from pyoptional import Optional

    return Optional.of('something')


@pytest.fixture
def sample_absent():
    """Sample empty Optional for testing."""
    from pyoptional import Optional

    return Optional.empty()


@pytest.fixture
def reset_config():
    """Restore the uninitialized global config and drop log hooks around a test."""
    previous = _config._config
    _config._config = None
    clear_log_hooks()
    yield
    _config._config = previous
    clear_log_hooks()
