import logging

from kappa import config


def test_separator_default_and_override(monkeypatch):
    assert config.get_join_separator() == ", "
    monkeypatch.setenv("KAPPA_JOIN_SEPARATOR", " :: ")
    assert config.get_join_separator() == " :: "


def test_log_level(monkeypatch):
    monkeypatch.delenv("KAPPA_LOG_LEVEL", raising=False)
    assert config.get_log_level() == logging.WARNING
    monkeypatch.setenv("KAPPA_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("KAPPA_LOG_LEVEL", "nonsense")
    assert config.get_log_level() == logging.WARNING


def test_configure_logging_sets_package_logger(monkeypatch):
    monkeypatch.setenv("KAPPA_LOG_LEVEL", "INFO")
    logger = config.configure_logging()
    assert logger.name == "kappa"
    assert logger.level == logging.INFO
