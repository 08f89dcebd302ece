#!/usr/bin/env python3
"""
document.py
-----------
Parse the raw text of one topic file into a Document.

Expected layout (every part optional):

    # Title
    *Subtitle in asterisks*

    ## First section
    Paragraph text...

    - bullet
    - bullet

    ## Second section
    | A | B |
    |---|---|
    | 1 | 2 |

Lines are classified in a single pass. ``# `` lines set the title (the
last one wins), the first asterisk-wrapped line anywhere in the file
becomes the subtitle, ``## `` lines open sections, and everything else is
buffered into the open section for the block segmenter. Text before the
first section only contributes a title or subtitle.

Parsing is a pure function of (content, name, date) and never raises.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# --- Local imports ---
from topicview.dataclasses.document import Document, Section
from topicview.parsing.blocks import segment_blocks


logger = logging.getLogger(__name__)


# ----- Constants -----
TITLE_PREFIX = "# "
SECTION_PREFIX = "## "
SUBTITLE_PATTERN = re.compile(r"^\*.+\*$")
DATE_PREFIX_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}_")

ACCENT_SLOTS = 8


@dataclass
class _PendingSection:
    title: str
    lines: List[str] = field(default_factory=list)

    def build(self) -> Section:
        return Section(title=self.title, blocks=tuple(segment_blocks(self.lines)))


# ----- Public API -----
def parse_document(
    content: str,
    name: str,
    date: datetime,
    extension: str = ".md",
) -> Document:
    """
    Parse a topic file.

    Args:
        content: Full file text
        name: Filename, used as the document id and for fallbacks
        date: Timestamp to attach to the document
        extension: Document suffix removed when deriving a title

    Returns:
        Parsed Document

    Examples:
        >>> doc = parse_document("# Hello\\n*world*\\n## Sec1\\nline one", "a.md", datetime(2024, 1, 2))
        >>> doc.title, doc.subtitle, doc.sections[0].blocks
        ('Hello', 'world', (Paragraph(text='line one'),))
    """
    title: Optional[str] = None
    subtitle = ""
    sections: List[Section] = []
    current: Optional[_PendingSection] = None

    for line in content.split("\n"):
        line = line.rstrip("\r")
        if line.startswith(TITLE_PREFIX):
            heading = line[len(TITLE_PREFIX):].strip()
            if heading:
                title = heading
        elif not subtitle and SUBTITLE_PATTERN.match(line.strip()):
            subtitle = line.strip()[1:-1].strip()
        elif line.startswith(SECTION_PREFIX):
            if current is not None:
                sections.append(current.build())
            current = _PendingSection(title=line[len(SECTION_PREFIX):].strip())
        elif current is not None:
            current.lines.append(line)

    if current is not None:
        sections.append(current.build())

    if title is None:
        title = derive_title(name, extension)
        logger.debug(f"No title heading in {name}, using '{title}'")

    return Document(
        id=name,
        title=title,
        subtitle=subtitle,
        date=date,
        accent_index=accent_index(name),
        sections=tuple(sections),
    )


def derive_title(name: str, extension: str = ".md") -> str:
    """
    Derive a display title from a filename.

    Strips the document extension and a leading ``YYYY-MM-DD_`` prefix.
    Falls back to the unmodified name when nothing would remain.

    Examples:
        >>> derive_title("2024-01-02_notes.md")
        'notes'
        >>> derive_title("2024-01-02_.md")
        '2024-01-02_.md'
    """
    title = name
    if extension and title.endswith(extension):
        title = title[: -len(extension)]
    title = DATE_PREFIX_PATTERN.sub("", title, count=1)
    return title or name or "Untitled"


def accent_index(name: str) -> int:
    """
    Map a filename to an accent slot in [0, 7].

    Sums the first and sixth UTF-16 code units of the name (the sixth
    counts as zero for shorter names). Characters outside the Basic
    Multilingual Plane take two code units, so an emoji shifts which
    character is sixth. Collisions are expected.

    Examples:
        >>> accent_index("2024-01-02_notes.md")
        2
        >>> accent_index("\\U0001F4DDmemo.md")
        4
    """
    units = _utf16_units(name[:6])
    first = units[0] if units else 0
    sixth = units[5] if len(units) > 5 else 0
    return abs(first + sixth) % ACCENT_SLOTS


def _utf16_units(text: str) -> List[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]
