"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """CLI tests reconfigure structlog globally; restore defaults after each test."""
    yield
    structlog.reset_defaults()
