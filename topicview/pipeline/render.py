#!/usr/bin/env python3
"""
render.py
---------
Plain-terminal rendition of documents for the CLI.

Inline spans map onto ANSI attributes through ``click.style``: bold,
italic, and dimmed code. Each document is drawn in its accent colour
(headings, quote bars, list markers, table headers). With ``color=False``
the output is plain text with the inline markup removed.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional, Sequence, Tuple

# --- Third party imports ---
import click

# --- Local imports ---
from topicview.dataclasses.document import (
    Block,
    BulletList,
    Document,
    OrderedList,
    Paragraph,
    Quote,
    Span,
    Section,
    SpanKind,
    Table,
)
from topicview.parsing.inline import resolve_spans, strip_inline
from topicview.pipeline.library import date_key


QUOTE_BAR = "│ "
BULLET = "▶ "
RULE = "─"


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """
    Convert ``#rrggbb`` to an RGB tuple.

    Examples:
        >>> hex_to_rgb("#00e5ff")
        (0, 229, 255)
    """
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def render_spans(spans: Sequence[Span], color: bool = True) -> str:
    """Join spans, styling each by kind when colour is enabled."""
    if not color:
        return "".join(span.text for span in spans)

    out = []
    for span in spans:
        if span.kind is SpanKind.BOLD:
            out.append(click.style(span.text, bold=True))
        elif span.kind is SpanKind.ITALIC:
            out.append(click.style(span.text, italic=True))
        elif span.kind is SpanKind.CODE:
            out.append(click.style(span.text, dim=True))
        else:
            out.append(span.text)
    return "".join(out)


def render_inline(text: str, color: bool = True) -> str:
    """Resolve and render the inline spans of one line."""
    return render_spans(resolve_spans(text), color)


def render_block(block: Block, accent: str, color: bool = True) -> List[str]:
    """Render one block as output lines."""
    paint = _painter(accent, color)

    if isinstance(block, Paragraph):
        return [render_inline(block.text, color)]

    if isinstance(block, Quote):
        return [paint(QUOTE_BAR) + render_inline(block.text, color)]

    if isinstance(block, BulletList):
        return [paint(BULLET) + render_inline(item, color) for item in block.items]

    if isinstance(block, OrderedList):
        width = len(str(len(block.items)))
        return [
            paint(f"{n:>{width}}. ") + render_inline(item, color)
            for n, item in enumerate(block.items, start=1)
        ]

    if isinstance(block, Table):
        return _render_table(block, paint, color)

    return []


def render_section(section: Section, accent: str, color: bool = True) -> List[str]:
    """Render a section heading, its rule and its blocks."""
    paint = _painter(accent, color)
    lines = [paint(section.title, bold=True), paint(RULE * max(len(section.title), 3))]
    for block in section.blocks:
        lines.extend(render_block(block, accent, color))
        lines.append("")
    return lines


def render_document(
    document: Document,
    accent: str,
    color: bool = True,
    only: Optional[Section] = None,
) -> str:
    """
    Render a full document, or its header and a single section.

    Args:
        document: Parsed document
        accent: ``#rrggbb`` accent colour
        color: Emit ANSI styling
        only: Section of ``document`` to show instead of all of them

    Returns:
        Multi-line string ending without a trailing newline
    """
    paint = _painter(accent, color)
    lines = [paint(document.title, bold=True)]
    if document.subtitle:
        lines.append(render_inline(document.subtitle, color))
    lines.append(
        f"{document.date:%Y-%m-%d} · {len(document.sections)} sections"
        f" · {document.block_count} blocks"
    )

    for section in document.sections if only is None else (only,):
        lines.append("")
        lines.extend(render_section(section, accent, color))

    while lines and lines[-1] == "":
        lines.pop()
    return "\n".join(lines)


def format_listing_line(document: Document, accent: str, color: bool = True) -> str:
    """One-line summary used by ``tview list``."""
    paint = _painter(accent, color)
    return (
        f"{paint('●')} {date_key(document.date):<10}  "
        f"{document.title}  ({document.id}, {len(document.sections)} sec)"
    )


# ----- Helpers -----
def _painter(accent: str, color: bool):
    rgb = hex_to_rgb(accent)

    def paint(text: str, bold: bool = False) -> str:
        if not color:
            return text
        return click.style(text, fg=rgb, bold=bold)

    return paint


def _render_table(table: Table, paint, color: bool) -> List[str]:
    grid: List[Sequence[str]] = [table.headers, *table.rows]
    columns = max(len(row) for row in grid)
    widths = [0] * columns
    for row in grid:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(strip_inline(cell)))

    def draw(row: Sequence[str], header: bool = False) -> str:
        cells = []
        for index, cell in enumerate(row):
            padding = " " * (widths[index] - len(strip_inline(cell)))
            text = paint(strip_inline(cell), bold=True) if header else render_inline(cell, color)
            cells.append(text + padding)
        return "  ".join(cells).rstrip()

    lines = [draw(table.headers, header=True)]
    lines.append(paint("  ".join(RULE * width for width in widths)))
    lines.extend(draw(row) for row in table.rows)
    return lines
