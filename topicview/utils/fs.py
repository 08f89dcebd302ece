#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for discovering topic files.

Functions:
    find_markdown_files: Discover document files in a directory
    is_document_file: Check a filename against the document extension
    parse_date_prefix: Extract a YYYY-MM-DD prefix from a filename
    get_mtime: File modification time as a naive local datetime

Usage:
    from topicview.utils.fs import find_markdown_files, parse_date_prefix

    files = find_markdown_files(Path("content"), ".md", recursive=True)
    when = parse_date_prefix("2024-01-15_notes.md")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional


DATE_PREFIX = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})")

PREFIX_HOUR = 12
"""Prefix dates are placed at noon so local-zone shifts keep the day."""


def find_markdown_files(
    directory: Path, extension: str = ".md", recursive: bool = False
) -> List[Path]:
    """
    Find all document files in a directory, sorted by path.

    Hidden files (leading dot) are ignored.
    """
    if not directory.exists():
        return []
    pattern = f"**/*{extension}" if recursive else f"*{extension}"
    return sorted(
        path
        for path in directory.glob(pattern)
        if path.is_file() and not path.name.startswith(".")
    )


def is_document_file(name: str, extension: str = ".md") -> bool:
    """Return True when ``name`` carries the document extension."""
    return name.endswith(extension)


def parse_date_prefix(name: str) -> Optional[datetime]:
    """
    Parse a leading YYYY-MM-DD from a filename.

    Args:
        name: Filename such as "2024-01-15_notes.md"

    Returns:
        Naive datetime at 12:00 on that day, or None when the name has no
        prefix or the prefix is not a real calendar date

    Examples:
        >>> parse_date_prefix("2024-01-15_notes.md")
        datetime.datetime(2024, 1, 15, 12, 0)
        >>> parse_date_prefix("notes.md") is None
        True
    """
    match = DATE_PREFIX.match(name)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, PREFIX_HOUR)
    except ValueError:
        return None


def get_mtime(path: Path) -> datetime:
    """
    Get the modification time of a file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    return datetime.fromtimestamp(Path(path).stat().st_mtime)
