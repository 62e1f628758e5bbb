"""Pytest configuration and fixtures for wpddev tests."""

import sys
import tempfile
from pathlib import Path

import pytest

from wpddev.core.log import ConsoleSink, FileSink, LogfireSink, setup_logger


@pytest.fixture(autouse=True, scope="session")
def configure_logging():
    """Configure logging for console-only mode during tests.

    This enables debug output during test runs without writing log
    files or sending logs to logfire.dev.
    """
    test_log_root = Path(tempfile.gettempdir()) / "wpddev-tests"
    setup_logger(
        log_root=test_log_root,
        run_name="test",
        console=ConsoleSink(level="debug"),
        file=FileSink(enabled=False),
        logfire=LogfireSink(enabled=False),
    )


@pytest.fixture
def mock_argv():
    """Save and restore sys.argv."""
    original = sys.argv.copy()
    sys.argv = ["wpddev"]
    yield
    sys.argv = original


@pytest.fixture
def wp_project(tmp_path):
    """A working directory with a valid WordPress layout."""
    (tmp_path / "wp-content" / "themes" / "twentytwentyfour").mkdir(
        parents=True
    )
    return tmp_path
