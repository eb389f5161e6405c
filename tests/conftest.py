"""Shared fixtures for the tests."""

from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(name="fixtures_dir")
def fixtures_dir_fixture():
    """The directory holding the test fixture files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(name="config_yaml")
def config_yaml_fixture(fixtures_dir):
    return fixtures_dir / "filters.yaml"


@pytest.fixture
def caplog(caplog):
    """Route loguru messages into pytest's `caplog`."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)
