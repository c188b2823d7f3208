"""Tests for the log formatters in logging_setup."""

import logging

from shared.logging.logging_setup import ColoredFormatter, CustomFormatter


def _record(level: int, msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("archive_ai_bridge", level, __file__, 1, msg, args, None)


def test_warning_prefix_is_added_once_per_handler() -> None:
    console = ColoredFormatter("UTC", fmt="%(levelname)s - %(message)s")
    file = CustomFormatter("UTC", fmt="%(levelname)s - %(message)s")
    record = _record(logging.WARNING, "No LLM engine configured (%s)", "fallback")

    assert console.format(record) == "WARNING - ⚠️ No LLM engine configured (fallback)"
    assert file.format(record) == "WARNING - ⚠️ No LLM engine configured (fallback)"
    assert record.msg == "No LLM engine configured (%s)"
    assert record.args == ("fallback",)


def test_error_and_info_prefixes() -> None:
    formatter = CustomFormatter("UTC", fmt="%(message)s")
    assert formatter.format(_record(logging.ERROR, "boom")) == "⛔ boom"
    assert formatter.format(_record(logging.INFO, "%d documents", 8)) == "8 documents"


def test_color_is_applied_only_when_requested() -> None:
    formatter = ColoredFormatter("UTC", fmt="%(message)s")
    record = _record(logging.INFO, "ready")
    assert formatter.format(record) == "ready"
    record.color = "green"
    assert formatter.format(record) == "\033[32mready\033[0m"
