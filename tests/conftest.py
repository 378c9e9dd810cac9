"""
Shared test fixtures for the twotrack test suite.

Every test starts from default structlog configuration and freshly loaded
settings, with no TWOTRACK_* variables leaking in from the environment.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
import structlog

from twotrack.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop TWOTRACK_* overrides and reload settings around each test."""
    for name in list(os.environ):
        if name.startswith("TWOTRACK_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any configure_structlog() call made by a test."""
    yield
    structlog.reset_defaults()
