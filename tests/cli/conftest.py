"""Fixtures for CLI tests."""

import pytest
from loguru import logger
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The app callback adds sinks bound to the runner's streams; drop them afterwards."""
    yield
    logger.remove()
