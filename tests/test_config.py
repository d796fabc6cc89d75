"""Tests for configuration and structured logging."""

import json
import logging

import pytest

from fun_core import FunConfig, Result, configure_logging, get_config, get_logger, init
from fun_core._config import DEFAULT_MEMOIZE_MAXSIZE, config_from_env


class TestConfigFromEnv:
    """Tests for reading FUN_CORE_* variables."""

    def test_defaults(self, fresh_config):
        """An empty environment gives the defaults."""
        config = config_from_env()
        assert config == FunConfig()
        assert config.memoize_maxsize == DEFAULT_MEMOIZE_MAXSIZE

    def test_reads_variables(self, fresh_config, monkeypatch):
        """Each variable maps onto its field."""
        monkeypatch.setenv('FUN_CORE_LOG_LEVEL', 'DEBUG')
        monkeypatch.setenv('FUN_CORE_JSON_LOGS', 'true')
        monkeypatch.setenv('FUN_CORE_MEMOIZE_MAXSIZE', '32')
        assert config_from_env() == FunConfig(log_level='DEBUG', json_logs=True, memoize_maxsize=32)

    def test_unbounded_maxsize(self, fresh_config, monkeypatch):
        """'none' disables the memoize bound."""
        monkeypatch.setenv('FUN_CORE_MEMOIZE_MAXSIZE', 'None')
        assert config_from_env().memoize_maxsize is None

    @pytest.mark.parametrize('raw', ['abc', '0', '-5'])
    def test_invalid_maxsize_falls_back(self, fresh_config, monkeypatch, caplog, raw):
        """Bad values log a warning and use the default."""
        monkeypatch.setenv('FUN_CORE_MEMOIZE_MAXSIZE', raw)
        with caplog.at_level(logging.WARNING, logger='fun_core._config'):
            config = config_from_env()
        assert config.memoize_maxsize == DEFAULT_MEMOIZE_MAXSIZE
        assert [r.getMessage() for r in caplog.records] == ['config.invalid_maxsize']


class TestInit:
    """Tests for init and get_config."""

    def test_get_config_lazily_reads_env(self, fresh_config, monkeypatch):
        """get_config builds from the environment on first use."""
        monkeypatch.setenv('FUN_CORE_MEMOIZE_MAXSIZE', '8')
        assert get_config().memoize_maxsize == 8

    def test_init_explicit(self, fresh_config):
        """An explicit config becomes the active one."""
        config = FunConfig(memoize_maxsize=4)
        assert init(config) is config
        assert get_config() is config

    def test_init_without_level_leaves_logging_alone(self, fresh_config):
        """No log level means no handler changes."""
        before = list(logging.getLogger().handlers)
        init(FunConfig())
        assert logging.getLogger().handlers == before

    def test_init_configures_logging(self, fresh_config):
        """A log level installs the structured handler."""
        init(FunConfig(log_level='WARNING'))
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1


class TestLogging:
    """Tests for configure_logging and library loggers."""

    def test_configure_logging_sets_level(self, fresh_config):
        """The root logger gets one handler at the given level."""
        configure_logging('DEBUG')
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_json_output(self, fresh_config, capsys):
        """Events render as JSON with their fields."""
        configure_logging('INFO', json_output=True)
        get_logger('fun_core.test').info('something.happened', attempt_count=3)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event['event'] == 'something.happened'
        assert event['attempt_count'] == 3
        assert event['level'] == 'info'

    def test_silent_below_level(self, fresh_config, capsys):
        """Events below the configured level are dropped."""
        configure_logging('WARNING')
        get_logger('fun_core.test').debug('too.quiet')
        assert 'too.quiet' not in capsys.readouterr().err

    def test_try_logs_caught_exception(self, caplog):
        """Result.try_ logs the caught exception type at debug level."""
        with caplog.at_level(logging.DEBUG, logger='fun_core.result'):
            Result.try_(lambda: int('x'), ValueError, str)
        records = [r for r in caplog.records if r.getMessage() == 'result.try.caught']
        assert len(records) == 1
        assert records[0].exception_type == 'ValueError'
