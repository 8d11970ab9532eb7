"""
Pytest configuration and fixtures for inflections tests.

Every test runs against an isolated process-wide default ruleset:
INFLECT_PATH points into the test's tmp_path, so a stray inflections.json
in the working directory never leaks into results, and the default ruleset
is rebuilt for each test.
"""

import logging

import pytest

from inflections import Ruleset
from inflections.defaults import reset_default_ruleset


@pytest.fixture(autouse=True)
def isolated_default_ruleset(tmp_path, monkeypatch):
    """Fresh default ruleset per test, bootstrapped from an empty tmp dir."""
    monkeypatch.setenv("INFLECT_PATH", str(tmp_path / "inflections.json"))
    reset_default_ruleset()
    yield
    reset_default_ruleset()


@pytest.fixture
def ruleset():
    """Ruleset with the built-in English rules."""
    return Ruleset.default()


@pytest.fixture
def empty_ruleset():
    """Ruleset with no rules at all."""
    return Ruleset()


@pytest.fixture
def inflections_file(tmp_path):
    """Write an irregular-word document and return its path."""

    def _create_file(content: str, name: str = "inflections.json"):
        file_path = tmp_path / name
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _create_file


@pytest.fixture
def clean_inflections_logger():
    """Remove handlers added by setup_logging() after the test."""
    logger = logging.getLogger("inflections")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in original_handlers:
            handler.close()
    logger.handlers = original_handlers
    logger.setLevel(original_level)
