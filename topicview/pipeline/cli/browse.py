"""
Browsing Commands
-----------------

Commands for reading the library from the terminal.

Commands:
    - list: Documents newest first, optionally for one date key
    - dates: Date keys with document counts, newest first
    - show: Render one document by id (its filename), optionally one section
"""
from __future__ import annotations

import click
from typing import Optional

from topicview.core.cli import load_for_command
from topicview.core.cli_options import (
    date_option,
    input_option,
    no_color_option,
    section_option,
)
from topicview.core.config import ViewerConfig
from topicview.core.exceptions import SectionNotFoundError
from topicview.core.logging_manager import handle_cli_error
from topicview.pipeline.render import format_listing_line, render_document


@click.command("list")
@input_option()
@date_option
@no_color_option
@click.pass_context
def list_documents(
    ctx: click.Context, input: Optional[str], date_key: Optional[str], no_color: bool
) -> None:
    """List documents, newest first."""
    config: ViewerConfig = ctx.obj["config"]

    try:
        library, _ = load_for_command(ctx, input)
        documents = library.filter_by_date(date_key)

        if not documents:
            click.echo("No documents found" + (f" for {date_key}" if date_key else ""))
            return

        for document in documents:
            accent = config.accent_color(document.accent_index)
            click.echo(format_listing_line(document, accent, color=not no_color))

    except Exception as e:
        handle_cli_error(ctx, e, "list", input=input, date=date_key)


@click.command()
@input_option()
@click.pass_context
def dates(ctx: click.Context, input: Optional[str]) -> None:
    """Show date keys with document counts."""
    try:
        library, _ = load_for_command(ctx, input)

        click.echo(f"All dates  {len(library)}")
        for key, count in library.date_index():
            click.echo(f"{key:<10} {count}")

    except Exception as e:
        handle_cli_error(ctx, e, "dates", input=input)


@click.command()
@click.argument("doc_id")
@input_option()
@section_option
@no_color_option
@click.pass_context
def show(
    ctx: click.Context,
    doc_id: str,
    input: Optional[str],
    section: Optional[str],
    no_color: bool,
) -> None:
    """Render the document whose filename is DOC_ID."""
    config: ViewerConfig = ctx.obj["config"]

    try:
        library, _ = load_for_command(ctx, input)
        document = library.require(doc_id)

        only = None
        if section is not None:
            only = document.find_section(section)
            if only is None:
                raise SectionNotFoundError(section)

        accent = config.accent_color(document.accent_index)
        click.echo(render_document(document, accent, color=not no_color, only=only))

    except Exception as e:
        handle_cli_error(ctx, e, "show", input=input, id=doc_id, section=section)


__all__ = ["list_documents", "dates", "show"]
