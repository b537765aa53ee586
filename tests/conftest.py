"""Global test configuration and fixtures."""

import logging
import os
import shutil
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
import structlog

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config.manager import reset_hydration_config, set_hydration_config  # noqa: E402
from config.schemas.hydration_schema import HydrationConfig  # noqa: E402
from domain.base.ports.logging_port import LoggingPort  # noqa: E402
from infrastructure.logging.logger import ROOT_LOGGER_NAME, reset_logging  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ.update(
        {
            "PYTHONWARNINGS": "ignore::DeprecationWarning",
        }
    )


@pytest.fixture(autouse=True)
def reset_hydrator_state():
    """Start every test with unconfigured logging and no cached configuration."""
    _reset_logging_state()
    reset_hydration_config()
    set_hydration_config(HydrationConfig(log_destination="none"))
    yield
    reset_hydration_config()
    _reset_logging_state()


def _reset_logging_state():
    reset_logging()
    structlog.reset_defaults()
    stdlib_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
        handler.close()
    stdlib_logger.setLevel(logging.NOTSET)
    stdlib_logger.propagate = True


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double recording every advisory entry."""
    return Mock(spec=LoggingPort)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)
