"""
conftest.py
-----------
Shared pytest fixtures for Topic Viewer tests.

Provides fixtures for:
- Temporary directories
- Sample topic file content
- A populated content directory
"""
import os
import pytest
from pathlib import Path
from datetime import datetime
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixed_date():
    """A stable timestamp for parser tests."""
    return datetime(2024, 1, 2, 12, 0)


# ----- Sample Markdown Content Fixtures -----

@pytest.fixture
def minimal_content():
    """Title, subtitle and one section with a paragraph and a list."""
    return "# Hello\n*world*\n## Sec1\nline one\n\n- a\n- b\n"


@pytest.fixture
def complex_content():
    """A document exercising every block type."""
    return """# Rust vs Go
*A pragmatic comparison*

Intro text before any section is ignored.

## Overview
Both languages target **systems** work.
They differ in *memory* management.

> Simplicity is prerequisite
> for reliability.

## Trade-offs
1. Compile times
2. Learning curve
3. Ecosystem

- `cargo` is great
- `go build` is fast

| Aspect | Rust | Go |
|:-------|:----:|---:|
| GC | no | yes |
| Generics | yes | yes |

## Empty

"""


# ----- Content Directory Fixtures -----

def _write(directory: Path, name: str, content: str, mtime: datetime) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    stamp = mtime.timestamp()
    os.utime(path, (stamp, stamp))
    return path


@pytest.fixture
def content_dir(tmp_dir, minimal_content, complex_content):
    """
    Content directory with three documents and one non-document file.

    Modification times:
        2024-03-01_rust-vs-go.md  -> 2024-03-01 09:00
        2024-01-02_hello.md       -> 2024-01-02 10:00
        untitled.md               -> 2024-01-02 08:00
    """
    _write(tmp_dir, "2024-03-01_rust-vs-go.md", complex_content, datetime(2024, 3, 1, 9, 0))
    _write(tmp_dir, "2024-01-02_hello.md", minimal_content, datetime(2024, 1, 2, 10, 0))
    _write(tmp_dir, "untitled.md", "## Only\ntext\n", datetime(2024, 1, 2, 8, 0))
    _write(tmp_dir, "notes.txt", "not a document", datetime(2024, 1, 1, 8, 0))
    return tmp_dir
