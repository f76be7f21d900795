# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the structured JSON logger.

We verify:
  - output is valid JSON on stderr (stdout is reserved for the results table)
  - all mandatory fields are present (ts, level, module, msg)
  - log levels filter correctly
  - extra context fields and tracebacks get merged into the JSON
  - child module loggers inherit the package logger's configuration
"""

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from aocrun.logging.logger import get_logger


@pytest.fixture(autouse=True)
def _reset_loggers() -> Iterator[None]:
    """Clear handlers of the test loggers so each test builds its own."""
    yield
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("aocrun_test"):
            logging.getLogger(name).handlers.clear()


class TestJsonOutput:
    def test_output_is_valid_json_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("aocrun_test.json", log_level="INFO")
        logger.info("hello")
        captured = capsys.readouterr()

        assert captured.out == ""
        parsed = json.loads(captured.err.strip())
        assert isinstance(parsed, dict)

    def test_mandatory_fields_are_present(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("aocrun_test.fields", log_level="INFO")
        logger.info("test message")
        captured = capsys.readouterr()

        parsed = json.loads(captured.err.strip())
        assert "ts" in parsed
        assert parsed["level"] == "INFO"
        assert parsed["module"] == "aocrun_test.fields"
        assert parsed["msg"] == "test message"

    def test_extra_fields_are_included(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("aocrun_test.extra", log_level="DEBUG")
        logger.warning("skipped", extra={"year": 2025, "day": 3})
        captured = capsys.readouterr()

        parsed = json.loads(captured.err.strip())
        assert parsed["year"] == 2025
        assert parsed["day"] == 3

    def test_exception_info_is_included(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("aocrun_test.exc", log_level="INFO")
        try:
            raise ValueError("boom")
        except ValueError:
            logger.error("failed", exc_info=True)
        captured = capsys.readouterr()

        parsed = json.loads(captured.err.strip())
        assert "ValueError: boom" in parsed["exc"]

    def test_child_loggers_use_parent_handler(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("aocrun_test.parent", log_level="INFO")
        logging.getLogger("aocrun_test.parent.child").info("from child")
        captured = capsys.readouterr()

        parsed = json.loads(captured.err.strip())
        assert parsed["module"] == "aocrun_test.parent.child"


class TestLogLevelFiltering:
    def test_debug_messages_hidden_at_info_level(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        logger = get_logger("aocrun_test.level_filter", log_level="INFO")
        logger.debug("this should not appear")
        captured = capsys.readouterr()
        assert captured.err.strip() == ""

    def test_level_can_be_changed_on_second_call(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        get_logger("aocrun_test.relevel", log_level="INFO")
        logger = get_logger("aocrun_test.relevel", log_level="DEBUG")
        logger.debug("now visible")
        captured = capsys.readouterr()
        assert "now visible" in captured.err
        assert len(logger.handlers) == 1


class TestFileOutput:
    def test_logs_are_written_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "test.log"
        logger = get_logger("aocrun_test.file_output", log_level="INFO", log_file=log_file)
        logger.info("file log test")

        assert log_file.exists()
        content = log_file.read_text(encoding="utf-8")
        parsed = json.loads(content.strip())
        assert parsed["msg"] == "file log test"


class TestInvalidLogLevel:
    def test_invalid_level_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            get_logger("aocrun_test.invalid", log_level="INVALID")
