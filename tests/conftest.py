"""Shared pytest fixtures."""

import pytest

from palindrome_checker.logging.context import clear_log_context
from palindrome_checker.strategies import all_strategies, core_strategies, get_strategy

ENV_VARS = ["PALINDROME_STRATEGY", "LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove configuration environment variables for every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set a valid set of environment overrides."""
    monkeypatch.setenv("PALINDROME_STRATEGY", "deque")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("ENVIRONMENT", "test")


@pytest.fixture
def two_pointer():
    return get_strategy("two_pointer")


@pytest.fixture(params=[strategy.name for strategy in core_strategies()])
def core_strategy(request):
    """Each of the four core strategies in turn."""
    return get_strategy(request.param)


@pytest.fixture(params=[strategy.name for strategy in all_strategies()])
def any_strategy(request):
    """Every registered strategy in turn."""
    return get_strategy(request.param)
