#!/usr/bin/env python3
"""
inline.py
---------
Inline span resolution for a single line of text.

Recognizes three span types, tried as one alternation so the leftmost
match wins across all of them:

    **bold**    *italic*    `code`

Matching is non-greedy and not recursive: the content of a matched span
is never scanned again, so ``**a *b* c**`` is one bold span. Unmatched
delimiters stay in the surrounding plain text.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Iterable, List

# --- Local imports ---
from topicview.dataclasses.document import Span, SpanKind


INLINE_PATTERN = re.compile(r"\*\*(.+?)\*\*|\*(.+?)\*|`(.+?)`")

_GROUP_KINDS = (SpanKind.BOLD, SpanKind.ITALIC, SpanKind.CODE)


def resolve_spans(text: str) -> List[Span]:
    """
    Split a line into plain, bold, italic and code spans.

    The spans cover the input left to right with no gaps; joining their
    text gives the input with the markup delimiters removed.

    Args:
        text: One line of text

    Returns:
        Ordered spans; empty list for empty input

    Examples:
        >>> [s.kind.value for s in resolve_spans("**a** b")]
        ['bold', 'plain']
        >>> resolve_spans("")
        []
    """
    if not text:
        return []

    spans: List[Span] = []
    last = 0
    for match in INLINE_PATTERN.finditer(text):
        if match.start() > last:
            spans.append(Span(SpanKind.PLAIN, text[last:match.start()]))
        for group_index, kind in enumerate(_GROUP_KINDS, start=1):
            content = match.group(group_index)
            if content is not None:
                spans.append(Span(kind, content))
                break
        last = match.end()

    if last < len(text):
        spans.append(Span(SpanKind.PLAIN, text[last:]))

    return spans


def spans_to_text(spans: Iterable[Span]) -> str:
    """Concatenate span text, dropping all formatting."""
    return "".join(span.text for span in spans)


def strip_inline(text: str) -> str:
    """Return ``text`` with bold, italic and code markup removed."""
    return spans_to_text(resolve_spans(text))
