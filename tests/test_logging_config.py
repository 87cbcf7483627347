import json
import logging

from diskweave.logging import JSONFormatter, init_logging, init_logging_from_cfg
from diskweave.config import LoggingConfig
from diskweave.utils.logging import logger


def _ours():
    return [h for h in logging.getLogger().handlers if getattr(h, "_diskweave", False)]


def test_json_formatter_merges_extra():
    rec = logging.makeLogRecord({"name": "diskweave.test", "levelname": "INFO", "msg": "hello", "extra": {"k": 1}})
    out = json.loads(JSONFormatter().format(rec))
    assert out == {"level": "INFO", "name": "diskweave.test", "msg": "hello", "k": 1}


def test_init_logging_levels_and_single_handler(monkeypatch):
    monkeypatch.delenv("DISKWEAVE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DISKWEAVE_LOG_FORMAT", raising=False)
    init_logging("debug")
    init_logging("info", fmt="json")
    assert len(_ours()) == 1
    assert logging.getLogger("diskweave").level == logging.INFO
    assert isinstance(_ours()[0].formatter, JSONFormatter)
    init_logging(None)
    assert len(_ours()) == 1
    assert logging.getLogger("diskweave").level == logging.WARNING


def test_handler_not_stacked_after_cli_style_setup(monkeypatch):
    monkeypatch.delenv("DISKWEAVE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DISKWEAVE_LOG_FORMAT", raising=False)
    for _ in range(3):
        init_logging_from_cfg(LoggingConfig(level="info"))
    assert len(_ours()) == 1


def test_env_overrides_level(monkeypatch):
    monkeypatch.setenv("DISKWEAVE_LOG_LEVEL", "debug")
    init_logging_from_cfg(LoggingConfig(level="none"))
    assert logging.getLogger("diskweave").level == logging.DEBUG


def test_init_from_mapping(monkeypatch):
    monkeypatch.delenv("DISKWEAVE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DISKWEAVE_LOG_FORMAT", raising=False)
    init_logging_from_cfg({"level": "info", "format": "text"})
    assert logging.getLogger("diskweave").level == logging.INFO


def test_package_logger_silent_by_default():
    assert logger.name == "diskweave"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
