"""
Tests for logging_manager module.

Tests ViewerLogger file output, the NullLogger/safe_logger pair that
lets loaders run without a logger, and the shared CLI error handler.
"""
import logging

import click
import pytest
from unittest.mock import MagicMock

from topicview.core.exceptions import LoadError
from topicview.core.logging_manager import (
    NullLogger,
    ViewerLogger,
    format_cli_error,
    handle_cli_error,
    safe_logger,
)


def read_log(path):
    for handler in logging.getLogger("topicview.viewer_test").handlers:
        handler.flush()
    return path.read_text(encoding="utf-8")


class TestViewerLogger:
    """Tests for ViewerLogger handlers and message format."""

    @pytest.fixture
    def logger(self, tmp_dir):
        return ViewerLogger(tmp_dir / "logs", component="viewer_test")

    def test_creates_log_files(self, logger, tmp_dir):
        assert (tmp_dir / "logs" / "viewer_test.log").exists()
        assert (tmp_dir / "logs" / "errors.log").exists()

    def test_operation_details_as_pairs(self, logger, tmp_dir):
        logger.log_operation("export_json", documents=2, spans=False)
        text = read_log(tmp_dir / "logs" / "viewer_test.log")
        assert "export_json | documents=2 spans=False" in text

    def test_message_without_details(self, logger, tmp_dir):
        logger.log_debug("read")
        text = read_log(tmp_dir / "logs" / "viewer_test.log")
        assert text.rstrip().endswith("read")

    def test_errors_go_to_error_log(self, logger, tmp_dir):
        try:
            raise LoadError("missing")
        except LoadError as e:
            logger.log_error(e, file="a.md")
        text = read_log(tmp_dir / "logs" / "errors.log")
        assert "LoadError: missing | file=a.md" in text
        assert "Traceback" in text

    def test_warnings_not_in_error_log(self, logger, tmp_dir):
        logger.log_warning("Duplicate filenames collapsed", records=3)
        assert "Duplicate" not in read_log(tmp_dir / "logs" / "errors.log")
        assert "Duplicate" in read_log(tmp_dir / "logs" / "viewer_test.log")

    def test_reinitializing_replaces_handlers(self, tmp_dir):
        ViewerLogger(tmp_dir, component="viewer_test")
        logger = ViewerLogger(tmp_dir, component="viewer_test")
        assert len(logger.logger.handlers) == 3

    def test_verbose_console_level(self, tmp_dir):
        logger = ViewerLogger(tmp_dir, component="viewer_test", verbose=True)
        console = [
            h for h in logger.logger.handlers
            if type(h) is logging.StreamHandler
        ]
        assert console[0].level == logging.DEBUG

    def test_console_skips_exceptions_unless_verbose(self, tmp_dir):
        record = logging.LogRecord(
            "topicview.viewer_test", logging.ERROR, __file__, 1, "boom", None,
            (ValueError, ValueError("boom"), None),
        )
        for verbose, shown in ((False, False), (True, True)):
            logger = ViewerLogger(tmp_dir, component="viewer_test", verbose=verbose)
            console = [h for h in logger.logger.handlers if type(h) is logging.StreamHandler][0]
            assert bool(console.filter(record)) is shown

    def test_does_not_propagate(self, logger):
        assert logger.logger.propagate is False


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_methods_are_no_ops(self):
        logger = NullLogger()
        logger.log_operation("op", key="value")
        logger.log_error(ValueError("x"), file="a.md")
        logger.log_debug("debug")
        logger.log_warning("warning")


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=ViewerLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)


class TestHandleCliError:
    """Tests for format_cli_error and handle_cli_error."""

    def test_format(self):
        assert format_cli_error(LoadError("gone")) == "❌ LoadError: gone"

    def test_exits_with_code(self, capsys):
        ctx = click.Context(click.Command("show"), obj={"logger": None})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, LoadError("gone"), "show")
        assert exc_info.value.code == 1
        assert "❌ LoadError: gone" in capsys.readouterr().err

    def test_custom_exit_code(self):
        ctx = click.Context(click.Command("show"), obj={})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("x"), "show", exit_code=2)
        assert exc_info.value.code == 2

    def test_context_passed_to_logger(self):
        logger = MagicMock(spec=ViewerLogger)
        ctx = click.Context(click.Command("list"), obj={"logger": logger})
        error = LoadError("gone")

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, error, "list", input="content")

        logger.log_error.assert_called_once_with(error, operation="list", input="content")

    def test_missing_ctx_obj(self):
        ctx = click.Context(click.Command("dates"))
        with pytest.raises(SystemExit):
            handle_cli_error(ctx, ValueError("x"), "dates")
