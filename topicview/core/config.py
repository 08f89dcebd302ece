#!/usr/bin/env python3
"""
config.py
---------
Viewer configuration loaded from an optional YAML file.

Example ``topicview.yaml``:

    content_dir: ~/notes/topics
    extension: .md
    recursive: false
    date_source: filename
    palette:
      - "#00e5ff"
      - "#00ff88"

Relative ``content_dir`` values are resolved against the directory that
holds the configuration file. A missing file yields the defaults.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from topicview.core.exceptions import ConfigError
from topicview.core.paths import CONTENT_DIR


DEFAULT_PALETTE: List[str] = [
    "#00e5ff",
    "#00ff88",
    "#ff6b35",
    "#c77dff",
    "#ffb300",
    "#ff4d8d",
    "#4fc3f7",
    "#a5d6a7",
]
"""Accent colours, indexed by ``Document.accent_index``."""

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

DATE_SOURCES = ("mtime", "filename")


@dataclass
class ViewerConfig:
    """
    Settings shared by the loader, renderer and CLI.

    Attributes:
        content_dir: Directory scanned for documents
        extension: File suffix that marks a document (".md")
        recursive: Whether to descend into subdirectories
        date_source: "mtime" uses file modification times; "filename"
            prefers a YYYY-MM-DD prefix and keeps mtime for the rest
        palette: Accent colours as ``#rrggbb`` strings
    """

    content_dir: Path = CONTENT_DIR
    extension: str = ".md"
    recursive: bool = False
    date_source: str = "mtime"
    palette: List[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))

    def __post_init__(self) -> None:
        """Normalize and validate values."""
        self.content_dir = Path(self.content_dir).expanduser()
        if not isinstance(self.extension, str) or not self.extension:
            raise ConfigError("extension must be a non-empty string")
        if not self.extension.startswith("."):
            self.extension = f".{self.extension}"
        if not isinstance(self.recursive, bool):
            raise ConfigError(f"recursive must be true or false, got {self.recursive!r}")
        if self.date_source not in DATE_SOURCES:
            raise ConfigError(
                f"date_source must be one of {', '.join(DATE_SOURCES)}, got {self.date_source!r}"
            )
        if not isinstance(self.palette, list) or not self.palette:
            raise ConfigError("palette must contain at least one colour")
        for colour in self.palette:
            if not isinstance(colour, str) or not HEX_COLOR.match(colour):
                raise ConfigError(f"Invalid palette colour: {colour!r}")

    def accent_color(self, index: int) -> str:
        """Return the palette colour for an accent index."""
        return self.palette[index % len(self.palette)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> ViewerConfig:
        """
        Build a config from a parsed YAML mapping.

        Args:
            data: Mapping with any subset of the dataclass fields
            base_dir: Directory used to resolve a relative content_dir

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = dict(data)
        if "content_dir" in values:
            content_dir = Path(str(values["content_dir"])).expanduser()
            if not content_dir.is_absolute() and base_dir is not None:
                content_dir = base_dir / content_dir
            values["content_dir"] = content_dir

        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Path) -> ViewerConfig:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            ViewerConfig; defaults when the file does not exist

        Raises:
            ConfigError: If the file is unreadable, malformed or invalid
        """
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            raise ConfigError(f"Cannot read configuration {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {path} must be a mapping")

        return cls.from_dict(data, base_dir=path.parent)
