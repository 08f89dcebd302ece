"""
parsing package
---------------
Turns raw topic files into Document values.

- inline: bold/italic/code spans within one line
- blocks: section body → paragraphs, quotes, lists and tables
- document: title, subtitle and section extraction, accent index
"""
from topicview.parsing.blocks import segment_blocks, split_cells
from topicview.parsing.document import accent_index, derive_title, parse_document
from topicview.parsing.inline import resolve_spans, spans_to_text, strip_inline

__all__ = [
    "accent_index",
    "derive_title",
    "parse_document",
    "resolve_spans",
    "segment_blocks",
    "spans_to_text",
    "split_cells",
    "strip_inline",
]
