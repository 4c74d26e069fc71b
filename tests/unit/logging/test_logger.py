# tests/unit/logging/test_logger.py
"""Tests for logging/logger.py: logger factory and formatters."""

from __future__ import annotations

import json
import logging
import sys

from conllukit.logging.context import set_operation_context
from conllukit.logging.logger import JsonFormatter, TextFormatter, setup_logging


def _record(msg: str = "Hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_format_basic(self):
        parsed = json.loads(JsonFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert "timestamp" in parsed
        assert "context" not in parsed

    def test_format_with_context(self):
        set_operation_context("slice", "corpus.conllu")
        parsed = json.loads(JsonFormatter().format(_record("test msg")))
        assert parsed["context"] == {"operation": "slice", "source": "corpus.conllu"}

    def test_format_with_data(self):
        parsed = json.loads(JsonFormatter().format(_record(data={"chunks": 3})))
        assert parsed["data"] == {"chunks": 3}

    def test_format_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                name="test", level=logging.ERROR, pathname="", lineno=0,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )
        parsed = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in parsed["exception"]


class TestTextFormatter:
    def test_format_basic(self):
        output = TextFormatter().format(_record("Hello text"))
        assert "Hello text" in output
        assert "INFO" in output

    def test_format_with_context(self):
        set_operation_context("join", "joined.conllu")
        output = TextFormatter().format(_record())
        assert "[join]" in output
        assert "(joined.conllu)" in output


class TestSetupLogging:
    def test_setup_json(self):
        setup_logging(level="DEBUG", log_format="json")
        root = logging.getLogger("conllukit")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_setup_text(self):
        setup_logging(level="INFO", log_format="text")
        root = logging.getLogger("conllukit")
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_reinit_does_not_duplicate(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("conllukit").handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "conllukit.log"
        setup_logging(log_file=log_file)
        root = logging.getLogger("conllukit")
        assert len(root.handlers) == 2
        root.info("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
        setup_logging()
