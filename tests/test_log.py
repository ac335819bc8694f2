from __future__ import annotations

import logging

import pytest

from textrain.errors import ConfigError
from textrain.util.log import configure_logging


def test_without_log_file_records_are_dropped():
    logger = configure_logging(None)
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]


def test_log_file_created_with_parents(tmp_path):
    path = tmp_path / "deep" / "rain.log"
    logger = configure_logging(path, verbose=True)
    logger.getChild("test").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in path.read_text(encoding="utf-8")
    configure_logging(None)


def test_unopenable_log_file_keeps_previous_handlers(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    before = configure_logging(None).handlers[:]
    with pytest.raises(ConfigError, match="cannot open log file"):
        configure_logging(blocker / "rain.log")
    assert logging.getLogger("textrain").handlers == before
