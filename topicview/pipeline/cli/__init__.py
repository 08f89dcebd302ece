#!/usr/bin/env python3
"""
Topic Viewer CLI
----------------

Browse a folder of Markdown topic files from the terminal.

Commands:
    - list: Documents newest first, optionally for one date key
    - dates: Date keys with document counts
    - show: Render one document
    - export: Write the parsed library to JSON

Usage:
    tview list
    tview list --date 2024/1/2
    tview dates
    tview show 2024-01-02_notes.md
    tview show 2024-01-02_notes.md --section 2
    tview export -o exports/topics.json --spans
"""
from __future__ import annotations

import click
from pathlib import Path

from topicview.core.cli import setup_logger
from topicview.core.cli_options import config_option, log_dir_option, verbose_option
from topicview.core.config import ViewerConfig
from topicview.core.logging_manager import handle_cli_error


@click.group()
@log_dir_option
@verbose_option
@config_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool, config_path: str) -> None:
    """Topic Viewer - browse Markdown topic files"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), verbose)

    try:
        ctx.obj["config"] = ViewerConfig.from_yaml(Path(config_path))
    except Exception as e:
        handle_cli_error(ctx, e, "load_config", config=config_path)


# Import and register commands from submodules
from .browse import list_documents, dates, show
from .export import export

cli.add_command(list_documents)
cli.add_command(dates)
cli.add_command(show)
cli.add_command(export)


if __name__ == "__main__":
    cli(obj={})
