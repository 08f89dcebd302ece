"""
Topic Viewer Package
====================

Browse a folder of loosely structured Markdown topic files.

Each file is parsed into a titled document with a subtitle, ordered
sections and typed content blocks (paragraphs, quotes, lists, tables),
and is given an accent colour derived from its filename. The parsed
documents form a library that can be listed by date, rendered in the
terminal or exported to JSON.

Main Components:
    - parsing: Inline spans, block segmentation, document parsing
    - dataclasses: Immutable document model
    - pipeline: Loading, library, rendering, JSON export, CLI
    - core: Logging, configuration, paths, exceptions
    - utils: Filesystem helpers

Primary Interfaces:
    - topicview.parsing.parse_document: Parse one file's text
    - topicview.pipeline.library.Library: The loaded collection
    - topicview.pipeline.cli: The ``tview`` command

Example Usage:
    >>> from datetime import datetime
    >>> from topicview import parse_document
    >>> doc = parse_document("# Hello\\n## Intro\\nSome *text*", "hello.md", datetime.now())
    >>> doc.title
    'Hello'

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"

from topicview.dataclasses.document import Document, Section
from topicview.parsing import parse_document

__all__ = [
    "Document",
    "Section",
    "parse_document",
]
