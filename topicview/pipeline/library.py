#!/usr/bin/env python3
"""
library.py
----------
The loaded collection of documents.

A Library is an immutable snapshot: reloading the content directory
builds a new one rather than updating the old. Documents are kept newest
first and can be looked up by id or filtered by a date key.

Date keys are strings so that the caller decides what "same day" means;
the default ``date_key`` renders ``YYYY/M/D`` without zero padding.

Usage:
    from topicview.pipeline.library import Library, date_key

    library = Library.from_records(records)
    for key, count in library.date_index():
        print(key, count)
    todays = library.filter_by_date(date_key(datetime.now()))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

# --- Local imports ---
from topicview.core.config import ViewerConfig
from topicview.core.exceptions import DocumentNotFoundError
from topicview.core.logging_manager import ViewerLogger, safe_logger
from topicview.dataclasses.document import Document
from topicview.pipeline.loader import LoadStats, SourceRecord, load_directory, parse_records


DateKey = Callable[[datetime], str]


def date_key(value: datetime) -> str:
    """
    Default date key: ``YYYY/M/D``.

    Examples:
        >>> date_key(datetime(2024, 1, 2, 18, 30))
        '2024/1/2'
    """
    return f"{value.year}/{value.month}/{value.day}"


class Library:
    """
    Newest-first collection of documents, indexed by id.

    When two documents share an id, the one added last wins.
    """

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        by_id: Dict[str, Document] = {}
        for document in documents:
            by_id[document.id] = document
        self._by_id = by_id
        # sorted() is stable, so equal dates keep their load order
        self._documents: Tuple[Document, ...] = tuple(
            sorted(by_id.values(), key=lambda d: d.date, reverse=True)
        )

    @classmethod
    def from_records(
        cls, records: Iterable[SourceRecord], extension: str = ".md"
    ) -> Library:
        """Parse source records and build a library from them."""
        return cls(parse_records(records, extension=extension))

    # ---- Collection protocol ----
    @property
    def documents(self) -> Tuple[Document, ...]:
        """All documents, newest first."""
        return self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._by_id

    # ---- Lookup ----
    def get(self, doc_id: str) -> Optional[Document]:
        """Return the document with this id, or None."""
        return self._by_id.get(doc_id)

    def require(self, doc_id: str) -> Document:
        """
        Return the document with this id.

        Raises:
            DocumentNotFoundError: If no document has this id
        """
        document = self._by_id.get(doc_id)
        if document is None:
            raise DocumentNotFoundError(doc_id)
        return document

    def position(self, doc_id: str) -> Optional[int]:
        """Index of a document in newest-first order, or None."""
        for index, document in enumerate(self._documents):
            if document.id == doc_id:
                return index
        return None

    # ---- Dates ----
    def filter_by_date(
        self, key: Optional[str], key_fn: DateKey = date_key
    ) -> List[Document]:
        """
        Documents whose date key equals ``key``, newest first.

        A key of None means no filter.
        """
        if key is None:
            return list(self._documents)
        return [d for d in self._documents if key_fn(d.date) == key]

    def date_index(self, key_fn: DateKey = date_key) -> List[Tuple[str, int]]:
        """
        Distinct date keys with their document counts.

        Keys are ordered by descending string value, not by date, so
        "2024/1/2" precedes "2024/1/10".
        """
        counts = Counter(key_fn(d.date) for d in self._documents)
        return sorted(counts.items(), key=lambda item: item[0], reverse=True)


def load_library(
    config: ViewerConfig,
    directory: Optional[Path] = None,
    logger: Optional[ViewerLogger] = None,
) -> Tuple[Library, LoadStats]:
    """
    Load a content directory into a fresh Library snapshot.

    Args:
        config: Viewer configuration (extension, recursion, date source)
        directory: Content directory; defaults to ``config.content_dir``
        logger: Optional logger for operation tracking

    Raises:
        LoadError: If the directory cannot be read
    """
    records, stats = load_directory(
        directory if directory is not None else config.content_dir,
        extension=config.extension,
        recursive=config.recursive,
        date_source=config.date_source,
        logger=logger,
    )
    library = Library.from_records(records, extension=config.extension)
    if len(library) < len(records):
        safe_logger(logger).log_warning(
            "Duplicate filenames collapsed",
            records=len(records),
            documents=len(library),
        )
    return library, stats
