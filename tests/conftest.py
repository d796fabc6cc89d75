"""Pytest configuration and shared fixtures for fun-core tests."""

import logging

import pytest


@pytest.fixture
def calls():
    """List recording callback invocations."""
    return []


@pytest.fixture
def thrower():
    """Callback that fails the test if it is ever invoked."""

    def _thrower(*_args, **_kwargs):
        raise AssertionError('callback should not have been invoked')

    return _thrower


@pytest.fixture
def fresh_config(monkeypatch):
    """Clear FUN_CORE_* variables and the cached configuration."""
    from fun_core import _config

    for name in ('FUN_CORE_LOG_LEVEL', 'FUN_CORE_JSON_LOGS', 'FUN_CORE_MEMOIZE_MAXSIZE'):
        monkeypatch.delenv(name, raising=False)
    _config.reset()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    _config.reset()
    root.handlers[:] = handlers
    root.setLevel(level)
