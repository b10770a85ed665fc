"""Tests for the package logging setup."""

import logging
from io import StringIO

import pytest

from faulttree.errors import SettingsError
from faulttree.logging import (
    ROOT_LOGGER_NAME,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    reset_logging()
    setup_root_logger()


def test_single_handler_on_package_logger():
    """Repeated setup does not stack handlers."""
    setup_root_logger()
    setup_root_logger()
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1


def test_child_loggers_inherit_level():
    logger = get_logger("faulttree.model.formula")
    assert logger.name == "faulttree.model.formula"
    assert logger.level == logging.NOTSET

    set_global_log_level(logging.ERROR)
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.ERROR
    assert logger.getEffectiveLevel() == logging.ERROR


def test_level_names_accepted():
    set_global_log_level("info")
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO
    with pytest.raises(SettingsError):
        set_global_log_level("chatty")


def test_numeric_level_strings_accepted():
    set_global_log_level("10")
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG


def test_custom_handler_receives_debug_after_enable():
    reset_logging()
    stream = StringIO()
    setup_root_logger(level=logging.WARNING, handler=logging.StreamHandler(stream))
    logger = get_logger("faulttree.test")

    logger.debug("hidden message")
    assert "hidden message" not in stream.getvalue()

    enable_debug_logging()
    logger.debug("visible message")
    output = stream.getvalue()
    assert "visible message" in output
    assert "faulttree.test - DEBUG" in output


def test_level_from_environment(monkeypatch):
    reset_logging()
    monkeypatch.setenv("FAULTTREE_LOG_LEVEL", "debug")
    setup_root_logger()
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG


def test_numeric_level_from_environment(monkeypatch):
    reset_logging()
    monkeypatch.setenv("FAULTTREE_LOG_LEVEL", "20")
    setup_root_logger()
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO


@pytest.mark.parametrize("value", ["verbose", "Level 5"])
def test_unknown_environment_level_falls_back(monkeypatch, caplog, value):
    """A bad environment value never breaks setup; WARNING is used instead."""
    reset_logging()
    monkeypatch.setenv("FAULTTREE_LOG_LEVEL", value)
    with caplog.at_level(logging.WARNING):
        setup_root_logger()
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING
    assert "FAULTTREE_LOG_LEVEL" in caplog.text
    assert value in caplog.text


def test_package_imports_with_bad_environment_level(monkeypatch):
    import importlib

    import faulttree.logging as ft_logging

    monkeypatch.setenv("FAULTTREE_LOG_LEVEL", "verbose")
    reset_logging()
    importlib.reload(ft_logging)
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING
