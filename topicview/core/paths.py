#!/usr/bin/env python3
"""
paths.py
-------------------
Default locations for the Topic Viewer.

Content, exports and the configuration file live in the directory the
viewer is run from (or ``$TOPICVIEW_HOME`` when set):

    ROOT/
    ├── content/        # Markdown documents to browse
    ├── exports/        # JSON exports
    └── topicview.yaml  # Optional configuration file

Logs are per user, under ``$XDG_STATE_HOME/topicview/logs`` (default
``~/.local/state/topicview/logs``), so running the CLI never writes into
the installed package or clutters the content folder.

Every location can be overridden through the configuration file or the
CLI options.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_root() -> Path:
    """Working root: ``$TOPICVIEW_HOME`` or the current directory."""
    home = os.environ.get("TOPICVIEW_HOME")
    return Path(home).expanduser() if home else Path.cwd()


def _get_state_dir() -> Path:
    """Per-user state directory following the XDG base directory layout."""
    state = os.environ.get("XDG_STATE_HOME")
    base = Path(state).expanduser() if state else Path.home() / ".local" / "state"
    return base / "topicview"


# ----- Working directory -----
ROOT: Path = _get_root()

# ---- Content ----
CONTENT_DIR = ROOT / "content"
EXPORT_DIR = ROOT / "exports"

# ---- Configuration ----
CONFIG_PATH = ROOT / "topicview.yaml"

# ---- Logs ----
LOG_DIR = _get_state_dir() / "logs"
