# topmark:header:start
#
#   project      : RecordOut
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the RecordOut test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

import io

import pytest

from recordout.config import logging


@pytest.fixture(autouse=True)
def silence_recordout_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure RecordOut's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("RECORDOUT_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so every log call is exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def buffer() -> io.StringIO:
    """Return an in-memory text stream opened like a destination file."""
    return io.StringIO(newline="")
