"""
dataclasses package
-------------------
Immutable values produced by the parser:

- Document: A parsed topic file
- Section: A ``##`` heading with its blocks
- Paragraph, Quote, BulletList, OrderedList, Table: Block variants
- Span, SpanKind: Inline formatting fragments
"""
from topicview.dataclasses.document import (
    Block,
    BulletList,
    Document,
    OrderedList,
    Paragraph,
    Quote,
    Section,
    Span,
    SpanKind,
    Table,
)

__all__ = [
    "Block",
    "BulletList",
    "Document",
    "OrderedList",
    "Paragraph",
    "Quote",
    "Section",
    "Span",
    "SpanKind",
    "Table",
]
