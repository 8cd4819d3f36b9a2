"""Settings, optionally overridden from pyproject.toml.

A project may tune changes-utils with a [tool.changes-utils] table:

    [tool.changes-utils]
    changes-filenames = ["Changes", "HISTORY"]
    author-env-var = "CPANID"

Keys may be spelled with dashes or underscores.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from tomlkit.exceptions import ParseError

from .exceptions import ConfigurationError
from .files import read_file
from .toml import parse_pyproject


class Settings(BaseModel):
    """Everything about the tool's behaviour that a project might change.

    Attributes:
        changes_filenames: Names tried, in order, when no file is given.
        metadata_filenames: Metadata files tried, in order, for the version.
        next_version_placeholder: Used when no version can be read.
        author_env_var: Environment variable holding the author id.
        author_placeholder: Author used when that variable is unset.
        spec_marker: File whose presence marks a spec distribution.
        data_marker: File whose presence marks a data distribution.
        project_marker_glob: Glob whose match means "use git's user.name".
        wrap_width: Maximum line width of entry bullets.
        min_indent: Minimum column at which bullets start.
    """

    changes_filenames: list[str] = Field(
        default_factory=lambda: ["Changes", "CHANGES", "ChangeLog", "CHANGELOG"]
    )
    metadata_filenames: list[str] = Field(
        default_factory=lambda: ["dist.ini", "pyproject.toml"]
    )
    next_version_placeholder: str = "{{NEXT}}"
    author_env_var: str = "PAUSEID"
    author_placeholder: str = "PAUSEID"
    spec_marker: str = ".tag-spec"
    data_marker: str = ".tag-data"
    project_marker_glob: str = ".tag-proj-*"
    wrap_width: int = Field(default=75, gt=10)
    min_indent: int = Field(default=8, ge=0)


def load_settings(root: Path) -> Settings:
    """Read [tool.changes-utils] from root/pyproject.toml, if there is one.

    Raises:
        ConfigurationError: If the table has unknown or invalid values.
        FileAccessError: If pyproject.toml can't be read as UTF-8.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.is_file():
        return Settings()

    content = read_file(root, pyproject.name)
    try:
        doc = parse_pyproject(content)
    except ParseError as exc:
        raise ConfigurationError(f"can't parse {pyproject.name}: {exc}") from exc

    tool = doc.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigurationError("[tool] must be a table")
    table = tool.get("changes-utils")
    if table is None:
        return Settings()
    if not isinstance(table, dict):
        raise ConfigurationError("it must be a table")

    values = {key.replace("-", "_"): value for key, value in table.unwrap().items()}
    unknown = sorted(set(values) - set(Settings.model_fields))
    if unknown:
        raise ConfigurationError(f"unknown keys {', '.join(unknown)}")

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
