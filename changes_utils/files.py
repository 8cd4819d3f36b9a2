"""Whole-file text reads and writes that fail with FileAccessError."""

from __future__ import annotations

from pathlib import Path

from .exceptions import FileAccessError


def read_file(root: Path, name: str) -> str:
    """Return the full UTF-8 content of root/name, line endings untouched."""
    try:
        fh = open(root / name, encoding="utf-8", newline="")
    except OSError as exc:
        raise FileAccessError("open", name, exc) from exc
    with fh:
        try:
            return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError("read", name, exc) from exc


def write_file(root: Path, name: str, content: str) -> None:
    """Overwrite root/name with content."""
    try:
        with open(root / name, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise FileAccessError("write", name, exc) from exc
