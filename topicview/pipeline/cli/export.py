"""
Export Commands
---------------

Commands:
    - export: Parse the content directory and write it to one JSON file
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from topicview.core.cli import load_for_command
from topicview.core.cli_options import input_option, output_option, spans_option
from topicview.core.config import ViewerConfig
from topicview.core.logging_manager import handle_cli_error
from topicview.core.paths import EXPORT_DIR
from topicview.pipeline.export_json import export_library


@click.command()
@input_option()
@output_option(default=str(EXPORT_DIR / "topics.json"), help_text="Output JSON file")
@spans_option
@click.pass_context
def export(ctx: click.Context, input: Optional[str], output: str, spans: bool) -> None:
    """Export parsed documents to JSON."""
    config: ViewerConfig = ctx.obj["config"]

    click.echo("📤 Exporting documents to JSON...")

    try:
        library, stats = load_for_command(ctx, input)
        written = export_library(
            library, Path(output), spans=spans, palette=config.palette, logger=ctx.obj["logger"]
        )

        click.echo("\n✅ Export complete:")
        click.echo(f"  Documents: {len(library)}")
        click.echo(f"  Files read: {stats.files_read}")
        click.echo(f"  Output: {written}")
        click.echo(f"  Duration: {stats.elapsed():.2f}s")

    except Exception as e:
        handle_cli_error(ctx, e, "export", input=input, output=output)


__all__ = ["export"]
