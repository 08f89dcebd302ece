#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Topic Viewer project.

The document parser itself never raises: malformed text degrades into
paragraphs, filename fallbacks or skipped lines. These exceptions belong
to the layers around it (configuration, file acquisition, lookup and
export) and are surfaced to the user through the CLI error handler.

Exception Hierarchy:
    Exception (built-in)
    └── ViewerError - Base for all Topic Viewer errors
        ├── ConfigError - Invalid or unreadable configuration
        ├── LoadError - Content directory cannot be read
        ├── DocumentNotFoundError - Lookup by an unknown document id
        ├── SectionNotFoundError - Unknown section title or number
        └── ExportError - JSON export failures

Usage:
    from topicview.core.exceptions import LoadError, DocumentNotFoundError

    try:
        records, stats = load_directory(content_dir)
    except LoadError as e:
        logger.log_error(e)
"""


class ViewerError(Exception):
    """
    Base exception for Topic Viewer errors.

    Catch this to handle any error raised by the project, or catch the
    specific subclasses for more granular handling.
    """

    pass


class ConfigError(ViewerError):
    """
    Exception for configuration failures.

    Raised when the YAML configuration file:
    - Cannot be parsed
    - Is not a mapping
    - Contains unknown keys
    - Holds values of the wrong type (e.g. an empty palette)

    Examples:
        >>> raise ConfigError("Unknown configuration keys: colour")
        >>> raise ConfigError("palette must contain at least one colour")
    """

    pass


class LoadError(ViewerError):
    """
    Exception for content acquisition failures.

    Raised when the content directory is missing or is not a directory.
    Failures on individual files are logged and skipped instead.

    Examples:
        >>> raise LoadError("Content directory not found: /data/content")
    """

    pass


class DocumentNotFoundError(ViewerError, KeyError):
    """
    Exception for lookups of a document id absent from the library.

    Subclasses KeyError so callers treating the library as a mapping can
    keep catching the built-in.

    Examples:
        >>> raise DocumentNotFoundError("2024-01-02_notes.md")
    """

    def __str__(self) -> str:
        return f"Document not found: {self.args[0]}" if self.args else "Document not found"


class SectionNotFoundError(ViewerError, KeyError):
    """
    Exception for a section reference that matches nothing in a document.

    Examples:
        >>> raise SectionNotFoundError("Benchmarks")
    """

    def __str__(self) -> str:
        return f"Section not found: {self.args[0]}" if self.args else "Section not found"


class ExportError(ViewerError):
    """
    Exception for JSON export failures.

    Raised when the export file cannot be written or a document cannot
    be serialized.

    Examples:
        >>> raise ExportError("Cannot write export: permission denied")
    """

    pass
