import logging

from sanguinius import config


def test_defaults(monkeypatch):
    for var in ("SANGUINIUS_PROMPT", "SANGUINIUS_RECURSION_LIMIT", "SANGUINIUS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "> "
    assert config.get_recursion_limit() == 10000
    assert config.get_log_level() == logging.WARNING


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("SANGUINIUS_PROMPT", "scheme> ")
    monkeypatch.setenv("SANGUINIUS_RECURSION_LIMIT", "50000")
    monkeypatch.setenv("SANGUINIUS_LOG_LEVEL", "debug")
    assert config.get_prompt() == "scheme> "
    assert config.get_recursion_limit() == 50000
    assert config.get_log_level() == logging.DEBUG


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("SANGUINIUS_RECURSION_LIMIT", "lots")
    monkeypatch.setenv("SANGUINIUS_LOG_LEVEL", "chatty")
    assert config.get_recursion_limit() == 10000
    assert config.get_log_level() == logging.WARNING
    monkeypatch.setenv("SANGUINIUS_RECURSION_LIMIT", "-5")
    assert config.get_recursion_limit() == 10000
