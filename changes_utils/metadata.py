"""Reading and bumping the version in a project metadata file.

Two kinds of metadata file are understood:

- dist.ini (and any other INI-style file): the first ``version = ...`` line.
- pyproject.toml: ``[project].version``, edited through tomlkit.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import BaseModel
from tomlkit.exceptions import ParseError

from .context import RepoContext
from .exceptions import MetadataUpdateError
from .files import read_file, write_file
from .toml import (
    dump_pyproject,
    get_project_version,
    parse_pyproject,
    set_project_version,
)

logger = logging.getLogger(__name__)

_INI_VERSION_RE = re.compile(r"^([ \t]*version[ \t]*=[ \t]*)(.+)", re.MULTILINE)


class MetadataFile(BaseModel):
    """A metadata file's name, its content, and the version read from it.

    Attributes:
        name: File name relative to the repo root.
        content: Full text as read from disk.
        version: Current version, or None if none could be found.
    """

    name: str
    content: str
    version: str | None = None

    @property
    def is_pyproject(self) -> bool:
        return Path(self.name).name == "pyproject.toml"


def find_metadata_file(context: RepoContext, candidates: list[str]) -> str | None:
    """Return the first of ``candidates`` that exists, or None."""
    for name in candidates:
        if context.is_file(name):
            logger.debug("Using metadata file %s", name)
            return name
    return None


def extract_version(name: str, content: str) -> str | None:
    """Find the current version in a metadata file's content."""
    if Path(name).name == "pyproject.toml":
        try:
            doc = parse_pyproject(content)
        except ParseError as exc:
            logger.warning("Can't parse %s: %s", name, exc)
            return None
        return get_project_version(doc)

    m = _INI_VERSION_RE.search(content)
    return (m.group(2).strip() or None) if m else None


def read_metadata(context: RepoContext, name: str) -> MetadataFile:
    """Read a metadata file and the version it declares.

    A file with no recognisable version is not an error: a warning is logged
    and the returned MetadataFile has ``version`` None.

    Raises:
        FileAccessError: If the file can't be opened or read.
    """
    content = read_file(context.root, name)
    version = extract_version(name, content)
    if version is None:
        logger.warning("Can't extract version from %s", name)
    else:
        logger.debug("Extracted version from %s: %s", name, version)
    return MetadataFile(name=name, content=content, version=version)


def replace_version(metadata: MetadataFile, version: str) -> str:
    """Return the metadata file's content with its version set to ``version``.

    Raises:
        MetadataUpdateError: If there is no version to replace.
    """
    if metadata.is_pyproject:
        doc = parse_pyproject(metadata.content)
        if not set_project_version(doc, version):
            raise MetadataUpdateError(metadata.name)
        return dump_pyproject(doc)

    new_content, count = _INI_VERSION_RE.subn(
        lambda m: m.group(1) + version + _trailing_space(m.group(2)),
        metadata.content,
        count=1,
    )
    if not count:
        raise MetadataUpdateError(metadata.name)
    return new_content


def write_version(context: RepoContext, metadata: MetadataFile, version: str) -> None:
    """Rewrite the metadata file on disk with the new version."""
    write_file(context.root, metadata.name, replace_version(metadata, version))
    logger.debug("Set version in %s to %s", metadata.name, version)


def _trailing_space(value: str) -> str:
    # Keeps a CR (or trailing blanks) that (.+) swallowed at end of line
    return value[len(value.rstrip()) :]
