"""Pytest configuration and shared fixtures for connstring tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture
def connstring_debug_logs(
    caplog: pytest.LogCaptureFixture,
) -> Iterator[pytest.LogCaptureFixture]:
    """Capture DEBUG records emitted by the connstring loggers.

    The library never configures handlers itself, so tests that assert on
    log output need caplog raised to DEBUG for the ``connstring`` hierarchy.
    """
    with caplog.at_level(logging.DEBUG, logger="connstring"):
        yield caplog
