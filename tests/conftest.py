"""Shared test fixtures."""

import logging
from collections.abc import Iterator

import pytest
from genericfile.config import Config, LoggingConfig, OutputConfig, ServerConfig


@pytest.fixture
def test_config() -> Config:
    """Create a configuration with default sections and no file."""
    return Config(
        server=ServerConfig(),
        output=OutputConfig(),
        logging=LoggingConfig(),
    )


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Remove handlers the CLI attaches to the package logger."""
    yield
    package_logger = logging.getLogger("genericfile")
    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
