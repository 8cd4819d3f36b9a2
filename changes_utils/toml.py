"""pyproject.toml reading and writing.

Uses tomlkit to preserve formatting and comments when bumping the version,
so the resulting diff is a single line.
"""

from __future__ import annotations

from typing import Any, cast

import tomlkit


def parse_pyproject(text: str) -> tomlkit.TOMLDocument:
    """Parse pyproject.toml content.

    Returns a TOMLDocument that preserves formatting when modified and dumped.
    """
    return tomlkit.parse(text)


def dump_pyproject(doc: tomlkit.TOMLDocument) -> str:
    """Serialize a TOMLDocument, preserving original formatting."""
    return tomlkit.dumps(doc)


def get_project_version(doc: tomlkit.TOMLDocument) -> str | None:
    """Extract [project].version, or None if it is missing or dynamic."""
    project = doc.get("project", {})
    if not isinstance(project, dict):
        return None
    version = project.get("version")
    return str(version) if version is not None else None


def set_project_version(doc: tomlkit.TOMLDocument, version: str) -> bool:
    """Set [project].version in place.

    Returns False, leaving the document untouched, if there is no
    [project].version to replace.
    """
    project = doc.get("project")
    if not isinstance(project, dict) or "version" not in project:
        return False
    # Cast needed because tomlkit types are complex unions
    cast(dict[str, Any], project)["version"] = version
    return True
