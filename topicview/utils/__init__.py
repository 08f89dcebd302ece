"""
Utilities package for the Topic Viewer project.

- fs: Filesystem discovery and filename date parsing

Import commonly-used utilities directly from this package:
    from topicview.utils import find_markdown_files, parse_date_prefix
"""

from .fs import (
    find_markdown_files,
    is_document_file,
    parse_date_prefix,
    get_mtime,
)

__all__ = [
    "find_markdown_files",
    "is_document_file",
    "parse_date_prefix",
    "get_mtime",
]
