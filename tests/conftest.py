"""Shared test fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from campaign_scenes.cli import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Keep structlog's default stdout logger out of captured command output."""
    configure_logging("critical")
    yield
    structlog.reset_defaults()
