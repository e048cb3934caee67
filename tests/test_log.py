import logging

import pytest

from scenekey.common import log
from scenekey.common.errors import EncodingError
from scenekey.common.utils import b64e
from scenekey.crypto import aes


def _console_handlers():
    return [h for h in log.logger.handlers if log._is_console_handler(h)]


def test_child_loggers_live_under_project_namespace():
    child = log.get_logger("scenes")
    assert child.name == "scenekey.scenes"
    assert child.parent is log.logger


def test_normalize_level():
    assert log._normalize_level("debug") == logging.DEBUG
    assert log._normalize_level(" error ") == logging.ERROR
    assert log._normalize_level("") == logging.WARNING
    assert log._normalize_level("verbose") == logging.WARNING


def test_library_logger_propagates_without_console_output():
    assert log.logger.propagate is True
    assert any(isinstance(h, logging.NullHandler) for h in log.logger.handlers)
    assert _console_handlers() == []


def test_codec_failures_reach_host_handlers(caplog):
    # caplog's handler sits on the root logger, so this only passes if
    # records propagate out of the scenekey namespace.
    with caplog.at_level(logging.DEBUG, logger="scenekey"):
        raw = aes.encrypt(aes.derive_key("k"), b"\xff")
        with pytest.raises(EncodingError):
            aes.decode(b64e(raw), "k")
    assert "not valid UTF-8" in caplog.text
    assert caplog.records[-1].name == "scenekey.crypto.aes"


def test_configure_logging_adds_one_console_handler():
    log.configure_logging("INFO")
    log.configure_logging("DEBUG")

    handlers = _console_handlers()
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == log.LOG_FORMAT
    assert handlers[0].level == logging.DEBUG
    assert log.logger.level == logging.DEBUG


def test_configure_logging_reads_environment(monkeypatch):
    monkeypatch.setenv("SCENEKEY_LOG_LEVEL", "error")
    log.configure_logging()
    assert log.logger.level == logging.ERROR
