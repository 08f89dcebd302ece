#!/usr/bin/env python3
"""
loader.py
---------
Acquire topic files and turn them into Documents.

Two sources are supported:

- A content directory on disk (``load_directory``), where each file's
  modification time is its timestamp.
- An in-memory mapping of filename → text (``records_from_mapping``) for
  bundled content, which has no timestamps of its own.

When a record has no timestamp, a ``YYYY-MM-DD`` filename prefix supplies
one (at noon); with neither, the current time is used.

Usage:
    from topicview.pipeline.loader import load_directory, parse_records

    records, stats = load_directory(Path("content"), logger=logger)
    documents = parse_records(records)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

# --- Local imports ---
from topicview.core.exceptions import LoadError
from topicview.core.logging_manager import ViewerLogger, safe_logger
from topicview.dataclasses.document import Document
from topicview.parsing.document import parse_document
from topicview.utils.fs import (
    find_markdown_files,
    get_mtime,
    is_document_file,
    parse_date_prefix,
)


@dataclass
class LoadStats:
    """
    Counts collected while reading a content directory.

    Attributes:
        files_read: Documents read successfully
        files_skipped: Files without the document extension
        unreadable: Documents that failed to read or decode
        dates_from_filename: Documents dated by their YYYY-MM-DD prefix
            instead of their modification time
    """

    files_read: int = 0
    files_skipped: int = 0
    unreadable: int = 0
    dates_from_filename: int = 0
    started: float = field(default_factory=time.monotonic, repr=False)

    def elapsed(self) -> float:
        """Seconds since loading started."""
        return time.monotonic() - self.started

    def summary(self) -> str:
        """
        Examples:
            >>> LoadStats(files_read=3, files_skipped=1).summary()
            '3 read, 1 skipped, 0 unreadable'
        """
        text = f"{self.files_read} read, {self.files_skipped} skipped, {self.unreadable} unreadable"
        if self.dates_from_filename:
            text += f", {self.dates_from_filename} dated by filename"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_read": self.files_read,
            "files_skipped": self.files_skipped,
            "unreadable": self.unreadable,
            "dates_from_filename": self.dates_from_filename,
        }


@dataclass(frozen=True)
class SourceRecord:
    """
    One candidate document as delivered by a source.

    Attributes:
        name: Filename (becomes the document id)
        content: Full file text
        last_modified: Timestamp from the source, if it has one
    """

    name: str
    content: str
    last_modified: Optional[datetime] = None


def resolve_timestamp(
    name: str,
    last_modified: Optional[datetime],
    now: Optional[datetime] = None,
) -> datetime:
    """
    Pick the timestamp for a record.

    Args:
        name: Filename, checked for a YYYY-MM-DD prefix
        last_modified: Timestamp supplied by the source
        now: Fallback when neither is available (default: current time)

    Examples:
        >>> resolve_timestamp("2024-03-09_x.md", None)
        datetime.datetime(2024, 3, 9, 12, 0)
    """
    if last_modified is not None:
        return last_modified
    from_name = parse_date_prefix(name)
    if from_name is not None:
        return from_name
    return now if now is not None else datetime.now()


def load_directory(
    directory: Path,
    extension: str = ".md",
    recursive: bool = False,
    date_source: str = "mtime",
    logger: Optional[ViewerLogger] = None,
) -> Tuple[List[SourceRecord], LoadStats]:
    """
    Read every document file in a directory.

    Files that cannot be read or decoded as UTF-8 are logged, counted as
    unreadable and skipped; the rest of the directory still loads.

    Args:
        directory: Content directory
        extension: Document suffix
        recursive: Descend into subdirectories
        date_source: "mtime" keeps file times; "filename" drops the file
            time of names with a date prefix so the prefix is used instead
        logger: Optional logger for operation tracking

    Returns:
        Tuple of (records sorted by path, load statistics)

    Raises:
        LoadError: If the directory does not exist or is not a directory
    """
    directory = Path(directory)
    if not directory.exists():
        raise LoadError(f"Content directory not found: {directory}")
    if not directory.is_dir():
        raise LoadError(f"Content path is not a directory: {directory}")

    log = safe_logger(logger)
    stats = LoadStats()
    paths = find_markdown_files(directory, extension, recursive)
    stats.files_skipped = _count_other_files(directory, extension, recursive)

    records: List[SourceRecord] = []
    for path in paths:
        try:
            content = path.read_text(encoding="utf-8")
            last_modified: Optional[datetime] = get_mtime(path)
        except (OSError, UnicodeDecodeError) as e:
            stats.unreadable += 1
            log.log_error(e, file=path.name)
            continue

        if date_source == "filename" and parse_date_prefix(path.name) is not None:
            last_modified = None
            stats.dates_from_filename += 1

        records.append(SourceRecord(name=path.name, content=content, last_modified=last_modified))
        stats.files_read += 1
        log.log_debug("read", file=path.name, chars=len(content))

    if not records:
        log.log_debug(f"No {extension} documents", directory=directory)

    log.log_operation(
        "load_directory",
        directory=directory,
        stats=stats.summary(),
        seconds=f"{stats.elapsed():.2f}",
    )
    return records, stats


def records_from_mapping(
    files: Mapping[str, str], extension: str = ".md"
) -> List[SourceRecord]:
    """
    Build records for bundled content keyed by path or filename.

    Only the final path component is kept as the name. Entries without
    the document extension are dropped.
    """
    records = []
    for path, content in files.items():
        name = path.replace("\\", "/").rsplit("/", 1)[-1]
        if is_document_file(name, extension):
            records.append(SourceRecord(name=name, content=content))
    return records


def parse_records(
    records: Iterable[SourceRecord],
    extension: str = ".md",
    now: Optional[datetime] = None,
) -> List[Document]:
    """
    Parse eligible records into Documents, in input order.

    Args:
        records: Source records
        extension: Document suffix; other names are ignored
        now: Shared fallback timestamp for records with no date at all
    """
    now = now if now is not None else datetime.now()
    return [
        parse_document(
            record.content,
            record.name,
            resolve_timestamp(record.name, record.last_modified, now),
            extension=extension,
        )
        for record in records
        if is_document_file(record.name, extension)
    ]


def _count_other_files(directory: Path, extension: str, recursive: bool) -> int:
    pattern = "**/*" if recursive else "*"
    return sum(
        1
        for path in directory.glob(pattern)
        if path.is_file() and not is_document_file(path.name, extension)
    )
