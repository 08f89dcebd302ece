#!/usr/bin/env python3
"""
cli.py
------
Helpers shared by the ``tview`` commands.

Functions:
    setup_logger: Create the ViewerLogger stored in ``ctx.obj``
    load_for_command: Load the library a command works on
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Tuple

# --- Third party imports ---
import click

# --- Local imports ---
from topicview.core.logging_manager import ViewerLogger
from topicview.pipeline.library import Library, load_library
from topicview.pipeline.loader import LoadStats


def setup_logger(log_dir: Path, verbose: bool = False) -> ViewerLogger:
    """Logger writing ``viewer.log`` and ``errors.log`` under ``log_dir``."""
    return ViewerLogger(Path(log_dir), component="viewer", verbose=verbose)


def load_for_command(
    ctx: click.Context, input: Optional[str]
) -> Tuple[Library, LoadStats]:
    """
    Load the library from ``--input`` or the configured content directory.

    Unreadable files are reported on stderr once loading finishes.

    Raises:
        LoadError: If the content directory cannot be read
    """
    library, stats = load_library(
        ctx.obj["config"], Path(input) if input else None, ctx.obj["logger"]
    )
    if stats.unreadable:
        click.echo(
            f"⚠️  {stats.unreadable} file(s) could not be read (see errors.log)", err=True
        )
    return library, stats
