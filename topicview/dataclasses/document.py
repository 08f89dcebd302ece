#!/usr/bin/env python3
"""
document.py
-------------------
Immutable data model for parsed topic documents.

A Document is derived entirely from its source text, filename and
timestamp; nothing here owns external resources. The structure is:

    Document
    ├── title / subtitle / date / accent_index
    └── sections: Tuple[Section, ...]
        └── blocks: Tuple[Block, ...]
            Paragraph | Quote | BulletList | OrderedList | Table

Spans are the inline fragments of a single line of text and are produced
on demand by ``topicview.parsing.inline.resolve_spans``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union


# ----- Inline spans -----
class SpanKind(str, Enum):
    """Inline formatting of a span."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"


@dataclass(frozen=True)
class Span:
    """A contiguous fragment of one line with a single formatting kind."""

    kind: SpanKind
    text: str


# ----- Blocks -----
@dataclass(frozen=True)
class Paragraph:
    """Consecutive prose lines joined with single spaces."""

    kind: ClassVar[str] = "p"
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "text": self.text}


@dataclass(frozen=True)
class Quote:
    """A run of ``> `` lines with their prefixes removed."""

    kind: ClassVar[str] = "quote"
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "text": self.text}


@dataclass(frozen=True)
class BulletList:
    """A run of ``-`` or ``*`` items."""

    kind: ClassVar[str] = "list"
    items: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "items": list(self.items)}


@dataclass(frozen=True)
class OrderedList:
    """A run of ``1.`` style items. Source numbering is not kept."""

    kind: ClassVar[str] = "olist"
    items: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "items": list(self.items)}


@dataclass(frozen=True)
class Table:
    """
    A pipe table.

    Rows may hold more or fewer cells than there are headers; they are
    kept exactly as written.
    """

    kind: ClassVar[str] = "table"
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }


Block = Union[Paragraph, Quote, BulletList, OrderedList, Table]


# ----- Sections & documents -----
@dataclass(frozen=True)
class Section:
    """A ``## `` heading and the blocks beneath it."""

    title: str
    blocks: Tuple[Block, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "blocks": [block.to_dict() for block in self.blocks],
        }


@dataclass(frozen=True)
class Document:
    """
    A parsed topic document.

    Attributes:
        id: Source filename; unique within a loaded library
        title: Heading text, or a title derived from the filename
        subtitle: First ``*...*`` line, or an empty string
        date: Timestamp supplied by the loader
        accent_index: Palette slot in [0, 7] derived from the filename
        sections: Sections in source order

    Examples:
        >>> from topicview.parsing import parse_document
        >>> doc = parse_document("# Hi\\n## One\\ntext", "hi.md", datetime(2024, 1, 2))
        >>> doc.title, doc.sections[0].title
        ('Hi', 'One')
    """

    id: str
    title: str
    date: datetime
    accent_index: int
    subtitle: str = ""
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    @property
    def block_count(self) -> int:
        """Total number of blocks across all sections."""
        return sum(len(section.blocks) for section in self.sections)

    def find_section(self, ref: str) -> Optional[Section]:
        """
        Look up a section by title or by 1-based number.

        Titles match case-insensitively and are tried first, so a section
        titled "2024" is found by its title. The first match wins.

        Examples:
            >>> doc.find_section("overview").title
            'Overview'
            >>> doc.find_section("2").title
            'Trade-offs'
        """
        ref = ref.strip()
        wanted = ref.casefold()
        for section in self.sections:
            if section.title.casefold() == wanted:
                return section
        if ref.isdecimal() and 1 <= int(ref) <= len(self.sections):
            return self.sections[int(ref) - 1]
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "date": self.date.isoformat(),
            "accent_index": self.accent_index,
            "sections": [section.to_dict() for section in self.sections],
        }
