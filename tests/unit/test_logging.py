"""Tests for logging setup"""

import json
import logging

from barcode_server.logging import ROOT_LOGGER, ConsoleFormatter, JsonFormatter, get_logger, setup_logging


def _record(msg: str = "hello %s", args=("world",)) -> logging.LogRecord:
    return logging.LogRecord("barcode_server.test", logging.INFO, __file__, 1, msg, args, None)


def test_get_logger_namespaced():
    """Loggers live under the barcode_server namespace"""
    assert get_logger("barcode_server.api.app").name == "barcode_server.api.app"
    assert get_logger("tests").name == "barcode_server.tests"
    assert get_logger(ROOT_LOGGER).name == ROOT_LOGGER


def test_json_formatter():
    """One JSON object with level, source and message"""
    entry = json.loads(JsonFormatter().format(_record()))

    assert entry["level"] == "INFO"
    assert entry["src"] == "barcode_server.test"
    assert entry["msg"] == "hello world"
    assert entry["ts"].endswith("Z")


def test_console_formatter():
    line = ConsoleFormatter().format(_record())
    assert "INFO" in line
    assert "[barcode_server.test] hello world" in line


def test_setup_logging_replaces_handlers():
    """Repeated setup leaves exactly one console handler"""
    setup_logging(level="debug")
    setup_logging(level="WARNING", json_format=True)

    root = logging.getLogger(ROOT_LOGGER)
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_setup_logging_log_file(tmp_path):
    """log_file receives JSON lines in addition to the console"""
    path = tmp_path / "barcode.log"
    setup_logging(level="INFO", log_file=str(path))
    try:
        get_logger("tests").info("rendered %s", "qr")
        for handler in logging.getLogger(ROOT_LOGGER).handlers:
            handler.flush()

        entry = json.loads(path.read_text().splitlines()[-1])
        assert entry["msg"] == "rendered qr"
        assert entry["src"] == "barcode_server.tests"
    finally:
        setup_logging()
