#!/usr/bin/env python3
"""
logging_manager.py
------------------
Operation logging for the viewer's loaders, exporters and commands.

Everything goes through one ``topicview.<component>`` logger with three
handlers:

- ``<component>.log``: every record from DEBUG up, rotated
- ``errors.log``: ERROR records with their tracebacks, rotated
- stderr: WARNING and above (DEBUG with ``--verbose``)

Details are appended to the message as ``key=value`` pairs so the log
stays greppable by file name or operation.

Functions that may run without a logger take ``logger=None`` and call
through ``safe_logger(logger)``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

# --- Third party imports ---
import click


FILE_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _with_details(message: str, details: dict) -> str:
    if not details:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in details.items())
    return f"{message} | {pairs}"


class ViewerLogger:
    """
    File and console logging for one CLI component.

    Attributes:
        log_dir: Directory holding the log files
        logger: Underlying ``logging.Logger``
    """

    def __init__(
        self,
        log_dir: Path,
        component: str = "viewer",
        verbose: bool = False,
        max_bytes: int = 2 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger(f"topicview.{component}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        file_format = logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        for path, level in (
            (self.log_dir / f"{component}.log", logging.DEBUG),
            (self.log_dir / "errors.log", logging.ERROR),
        ):
            handler = RotatingFileHandler(
                path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            handler.setLevel(level)
            handler.setFormatter(file_format)
            self.logger.addHandler(handler)

        console = logging.StreamHandler()
        console.setLevel(logging.DEBUG if verbose else logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        if not verbose:
            # Logged exceptions stay in the files unless verbose
            console.addFilter(lambda record: not record.exc_info)
        self.logger.addHandler(console)

    def log_operation(self, operation: str, **details: Any) -> None:
        """Record a completed step (``load_directory``, ``export_json``...)."""
        self.logger.info(_with_details(operation, details))

    def log_debug(self, message: str, **details: Any) -> None:
        self.logger.debug(_with_details(message, details))

    def log_warning(self, message: str, **details: Any) -> None:
        self.logger.warning(_with_details(message, details))

    def log_error(self, error: BaseException, **context: Any) -> None:
        """Log an exception with its traceback to both log files."""
        self.logger.error(
            _with_details(f"{type(error).__name__}: {error}", context),
            exc_info=(type(error), error, error.__traceback__),
        )


class NullLogger:
    """Stands in for ViewerLogger when no logger is configured."""

    def log_operation(self, operation: str, **details: Any) -> None:
        pass

    def log_debug(self, message: str, **details: Any) -> None:
        pass

    def log_warning(self, message: str, **details: Any) -> None:
        pass

    def log_error(self, error: BaseException, **context: Any) -> None:
        pass


_null_logger = NullLogger()


def safe_logger(logger: Optional[ViewerLogger]) -> ViewerLogger:
    """Return ``logger``, or a shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def format_cli_error(error: BaseException) -> str:
    """
    One-line error message for the terminal.

    Examples:
        >>> format_cli_error(ValueError("bad palette"))
        '❌ ValueError: bad palette'
    """
    return f"❌ {type(error).__name__}: {error}"


def handle_cli_error(
    ctx: click.Context,
    error: BaseException,
    operation: str,
    exit_code: int = 1,
    **context: Any,
) -> None:
    """
    Log a failed command, print a one-line message to stderr and exit.

    The logger is taken from ``ctx.obj["logger"]`` when the group has set
    one up. Never returns.
    """
    logger = (ctx.obj or {}).get("logger")
    safe_logger(logger).log_error(error, operation=operation, **context)
    click.secho(format_cli_error(error), err=True, fg="red")
    sys.exit(exit_code)
