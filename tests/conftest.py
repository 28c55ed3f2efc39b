"""Shared fixtures for the StressMate test suite."""

import logging

import pytest

from stressmate.config import load_default_config
from stressmate.domain.models import StressCategory, StressResult
from stressmate.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer STRESSMATE_* settings out of the tests."""
    for name in ("STRESSMATE_RULES", "STRESSMATE_LOG_LEVEL", "STRESSMATE_LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by configure_logging() and restore the root level."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def app_config():
    """The packaged rule tables."""
    return load_default_config()


@pytest.fixture
def make_result():
    """Factory for StressResults that skips the scorer."""

    def _make(score: int, category: StressCategory, label: str) -> StressResult:
        return StressResult(score=score, category=category, label=label, message="test message")

    return _make
