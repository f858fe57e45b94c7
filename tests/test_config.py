"""
Tests for environment-driven configuration.
"""

import logging

import pytest

from fsd_starter import config as config_module
from fsd_starter.config import StarterConfig, load_config


def test_defaults(monkeypatch):
    monkeypatch.setattr(config_module.sys, 'platform', 'linux')
    cfg = load_config({})

    assert cfg == StarterConfig(npm_command='npm', log_level=logging.WARNING)


def test_windows_default_npm(monkeypatch):
    monkeypatch.setattr(config_module.sys, 'platform', 'win32')
    assert load_config({}).npm_command == 'npm.cmd'


def test_npm_override():
    cfg = load_config({'FSD_STARTER_NPM': ' /opt/node/bin/npm '})
    assert cfg.npm_command == '/opt/node/bin/npm'


def test_blank_npm_falls_back_to_default(monkeypatch):
    monkeypatch.setattr(config_module.sys, 'platform', 'linux')
    assert load_config({'FSD_STARTER_NPM': '   '}).npm_command == 'npm'


def test_log_level_is_case_insensitive():
    assert load_config({'FSD_STARTER_LOG_LEVEL': 'debug'}).log_level == logging.DEBUG
    assert load_config({'FSD_STARTER_LOG_LEVEL': 'Info'}).log_level == logging.INFO


def test_unknown_log_level():
    with pytest.raises(ValueError, match='Unknown log level'):
        load_config({'FSD_STARTER_LOG_LEVEL': 'loud'})


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv('FSD_STARTER_NPM', 'pnpm-shim')
    monkeypatch.delenv('FSD_STARTER_LOG_LEVEL', raising=False)
    assert load_config().npm_command == 'pnpm-shim'
