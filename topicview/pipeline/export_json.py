#!/usr/bin/env python3
"""
export_json.py
--------------
Export a loaded library to a single JSON file.

The export mirrors the document model one to one so other tools (a web
front end, a search indexer) can consume parsed documents without
re-implementing the parser:

    {
      "generated_at": "2024-05-01T10:00:00",
      "count": 2,
      "documents": [
        {"id": "...", "title": "...", "subtitle": "...", "date": "...",
         "accent_index": 3, "accent_color": "#c77dff",
         "sections": [{"title": "...", "blocks": [{"type": "p", ...}]}]}
      ]
    }

With ``spans=True`` every text field of every block gets a sibling list
of ``{"kind", "text"}`` spans.

Usage:
    from topicview.pipeline.export_json import export_library

    export_library(library, Path("exports/topics.json"), logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# --- Local imports ---
from topicview.core.config import DEFAULT_PALETTE
from topicview.core.exceptions import ExportError
from topicview.core.logging_manager import ViewerLogger, safe_logger
from topicview.dataclasses.document import Document
from topicview.parsing.inline import resolve_spans
from topicview.pipeline.library import Library


def spans_to_dicts(text: str) -> List[Dict[str, str]]:
    """Resolve inline spans of ``text`` as JSON-ready dicts."""
    return [{"kind": span.kind.value, "text": span.text} for span in resolve_spans(text)]


def document_to_dict(
    document: Document,
    spans: bool = False,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> Dict[str, Any]:
    """
    Serialize a document.

    Args:
        document: Parsed document
        spans: Add resolved inline spans next to each text field
        palette: Colours used to resolve ``accent_color``
    """
    data = document.to_dict()
    data["accent_color"] = palette[document.accent_index % len(palette)]
    if not spans:
        return data

    data["subtitle_spans"] = spans_to_dicts(document.subtitle)
    for section in data["sections"]:
        for block in section["blocks"]:
            if "text" in block:
                block["spans"] = spans_to_dicts(block["text"])
            if "items" in block:
                block["item_spans"] = [spans_to_dicts(item) for item in block["items"]]
            if "rows" in block:
                block["header_spans"] = [spans_to_dicts(h) for h in block["headers"]]
                block["row_spans"] = [
                    [spans_to_dicts(cell) for cell in row] for row in block["rows"]
                ]
    return data


def export_library(
    library: Library,
    output_path: Path,
    spans: bool = False,
    palette: Sequence[str] = DEFAULT_PALETTE,
    logger: Optional[ViewerLogger] = None,
) -> Path:
    """
    Write every document in the library to one JSON file.

    Documents are written newest first. Parent directories are created.

    Returns:
        The written path

    Raises:
        ExportError: If the file cannot be written
    """
    output_path = Path(output_path)
    payload = {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "count": len(library),
        "documents": [document_to_dict(d, spans=spans, palette=palette) for d in library],
    }

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
            f.write("\n")
    except OSError as e:
        safe_logger(logger).log_error(e, output=output_path)
        raise ExportError(f"Cannot write export {output_path}: {e}") from e

    safe_logger(logger).log_operation(
        "export_json", output=output_path, documents=len(library), spans=spans
    )
    return output_path
