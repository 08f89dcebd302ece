#!/usr/bin/env python3
"""
blocks.py
---------
Block segmentation of a section body.

The segmenter walks the section's lines once with a forward cursor and
never looks back. At each position the first matching rule wins:

    1. Table       ``| a | b |`` followed by a ``|---|---|`` separator
    2. Quote       run of lines starting with ``> ``
    3. Ordered     run of lines starting with ``1. ``
    4. Bullets     run of lines starting with ``- `` or ``* ``
    5. Paragraph   any other non-blank line not starting with ``#``
    6. Skip        blank lines and stray headings

Nothing here raises: text that fits no structure ends up in a paragraph
or is skipped.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from typing import List, Optional, Sequence, Tuple

# --- Local imports ---
from topicview.dataclasses.document import (
    Block,
    BulletList,
    OrderedList,
    Paragraph,
    Quote,
    Table,
)


logger = logging.getLogger(__name__)


# ----- Line patterns -----
TABLE_SEPARATOR = re.compile(r"^\|[-:| ]+\|")
ORDERED_ITEM = re.compile(r"^[0-9]+\.\s")
BULLET_ITEM = re.compile(r"^[-*]\s")
PARAGRAPH_BREAK = re.compile(r"^[-*0-9]")
"""Stripped lines matching this end a paragraph (possible list items)."""

QUOTE_PREFIX = "> "


# ----- Public API -----
def segment_blocks(lines: Sequence[str]) -> List[Block]:
    """
    Partition the lines of one section into typed blocks.

    Args:
        lines: Raw section lines, blank lines included

    Returns:
        Blocks in the order their first line appears

    Examples:
        >>> segment_blocks(["intro", "", "- a", "- b"])
        [Paragraph(text='intro'), BulletList(items=('a', 'b'))]
    """
    blocks: List[Block] = []
    i = 0
    while i < len(lines):
        line = lines[i]

        if _starts_table(lines, i):
            block, i = _read_table(lines, i)
            if block is not None:
                blocks.append(block)
            continue

        if line.startswith(QUOTE_PREFIX):
            block, i = _read_quote(lines, i)
            blocks.append(block)
            continue

        if ORDERED_ITEM.match(line):
            items, i = _read_items(lines, i, ORDERED_ITEM)
            blocks.append(OrderedList(items))
            continue

        if BULLET_ITEM.match(line):
            items, i = _read_items(lines, i, BULLET_ITEM)
            blocks.append(BulletList(items))
            continue

        if line.strip() and not line.startswith("#"):
            block, i = _read_paragraph(lines, i)
            blocks.append(block)
            continue

        i += 1

    return blocks


def split_cells(line: str) -> Tuple[str, ...]:
    """
    Split a pipe-table line into trimmed, non-empty cells.

    Examples:
        >>> split_cells("| A | B |")
        ('A', 'B')
        >>> split_cells("|  | x |")
        ('x',)
    """
    return tuple(cell.strip() for cell in line.split("|") if cell.strip())


# ----- Block readers -----
# Each reader takes the cursor at the block's first line and returns the
# block together with the index of the first unconsumed line.

def _starts_table(lines: Sequence[str], i: int) -> bool:
    if not lines[i].strip().startswith("|"):
        return False
    if i + 1 >= len(lines) or not lines[i + 1]:
        return False
    return TABLE_SEPARATOR.match(lines[i + 1].strip()) is not None


def _read_table(lines: Sequence[str], i: int) -> Tuple[Optional[Table], int]:
    headers = split_cells(lines[i])
    i += 2

    rows: List[Tuple[str, ...]] = []
    while i < len(lines) and lines[i].strip().startswith("|"):
        rows.append(split_cells(lines[i]))
        i += 1

    if not rows:
        logger.debug(f"Dropping table without rows: {headers}")
        return None, i
    return Table(headers=headers, rows=tuple(rows)), i


def _read_quote(lines: Sequence[str], i: int) -> Tuple[Quote, int]:
    parts: List[str] = []
    while i < len(lines) and lines[i].startswith(QUOTE_PREFIX):
        parts.append(lines[i][len(QUOTE_PREFIX):])
        i += 1
    return Quote(" ".join(parts).strip()), i


def _read_items(
    lines: Sequence[str], i: int, marker: re.Pattern
) -> Tuple[Tuple[str, ...], int]:
    items: List[str] = []
    while i < len(lines) and marker.match(lines[i]):
        items.append(marker.sub("", lines[i], count=1).strip())
        i += 1
    return tuple(items), i


def _read_paragraph(lines: Sequence[str], i: int) -> Tuple[Paragraph, int]:
    parts = [lines[i]]
    i += 1
    while i < len(lines) and _continues_paragraph(lines[i]):
        parts.append(lines[i])
        i += 1
    return Paragraph(" ".join(parts).strip()), i


def _continues_paragraph(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return False
    if line.startswith("|") or line.startswith(">"):
        return False
    return PARAGRAPH_BREAK.match(stripped) is None
