"""Tests for changes_utils.files."""

from __future__ import annotations

from pathlib import Path

import pytest

from changes_utils.exceptions import FileAccessError
from changes_utils.files import read_file, write_file


def test_read_keeps_line_endings(tmp_path: Path) -> None:
    """CRLF is returned untranslated."""
    (tmp_path / "Changes").write_bytes(b"1.00\r\n")
    assert read_file(tmp_path, "Changes") == "1.00\r\n"


def test_read_missing(tmp_path: Path) -> None:
    """A missing file is reported as an open failure."""
    with pytest.raises(FileAccessError) as excinfo:
        read_file(tmp_path, "Changes")
    assert excinfo.value.error_type == "FileAccessError"
    assert excinfo.value.message == (
        "Can't open Changes: [Errno 2] No such file or directory"
    )


def test_read_not_utf8(tmp_path: Path) -> None:
    """Undecodable bytes are reported as a read failure."""
    (tmp_path / "Changes").write_bytes(b"\xff\xfe1.00\n")
    with pytest.raises(FileAccessError, match="Can't read Changes: "):
        read_file(tmp_path, "Changes")


def test_write_overwrites(tmp_path: Path) -> None:
    """Existing content is fully replaced."""
    (tmp_path / "Changes").write_text("old content that is longer\n")
    write_file(tmp_path, "Changes", "new\n")
    assert (tmp_path / "Changes").read_text() == "new\n"


def test_write_into_directory(tmp_path: Path) -> None:
    """Writing over a directory is reported as a write failure."""
    (tmp_path / "Changes").mkdir()
    with pytest.raises(FileAccessError, match="Can't write Changes: "):
        write_file(tmp_path, "Changes", "new\n")
