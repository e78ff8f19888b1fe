"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from ledgerfx.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file in logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("ledgerfx.tests.report")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.WARNING)
    )
    built = builder.build()

    assert built.name == "ledgerfx.tests.report"
    assert built.level == logging.WARNING
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected_path = tmp_path / "logs" / "reports" / "20240101_report_logs.log"
    assert built.handlers[0].baseFilename == str(expected_path)
    assert builder.build() is built
    assert len(built.handlers) == 1


def test_logger_builder_uses_injected_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be honored."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen = {}

    def _file_factory(path, formatter):
        seen["path"] = path
        seen["file_fmt"] = formatter
        return file_handler

    def _console_factory(formatter):
        seen["console_fmt"] = formatter
        return console_handler

    built = (
        logger_module.LoggerBuilder()
        .name("ledgerfx.tests.factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(_console_factory)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen["file_fmt"] is fmt
    assert seen["console_fmt"] is fmt
    assert seen["path"].parent == tmp_path / "logs" / "app"


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    file_handler.close()

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger info/warning/error/etc. should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    logger_module.Logger._instance = None

    logger = logger_module.Logger("app")
    logger.info("hello %s", "there")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")
    logger.exception("boom")

    fake_logger.info.assert_called_with("hello %s", "there")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    fake_logger.exception.assert_called_with("boom")
    assert logger_module.Logger("other") is logger
    logger_module.Logger._instance = None


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return distinct singletons."""
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(name=self._name),
    )
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert isinstance(app_logger.logger, MagicMock)
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None
