"""Test configuration and shared fixtures."""

import pytest

from patmatch.eval.matcher import PatternMatcher, reset_default_matcher


@pytest.fixture(autouse=True)
def _isolated_default_matcher(monkeypatch: pytest.MonkeyPatch):
    """Each test builds the default matcher from a clean environment."""
    for name in ("PATMATCH_CONS_SINGLETON", "PATMATCH_TRACE", "PATMATCH_LOG_FILTER"):
        monkeypatch.delenv(name, raising=False)
    reset_default_matcher()
    yield
    reset_default_matcher()


@pytest.fixture
def matcher() -> PatternMatcher:
    return PatternMatcher()


@pytest.fixture
def tail_matcher() -> PatternMatcher:
    return PatternMatcher(cons_singleton="tail")
