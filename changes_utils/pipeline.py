"""Add a release entry to a Changes file: locate → version → log → entry → write.

This module orchestrates a single run:
1. Find the Changes file (given, or the first of the usual names)
2. Work out the next version from dist.ini / pyproject.toml, or use a
   placeholder
3. Fetch the last commit messages from git
4. Build and render the entry
5. Insert it above the newest release and save
6. Bump the version in the metadata file, if that is where it came from

Failures never escape as exceptions: add_changes_entry_from_commits reports
them as a Result with status 500.
"""

from __future__ import annotations

import logging
import re

from .config import Settings, load_settings
from .context import GitContext, RepoContext
from .entry import build_entry, split_commits
from .exceptions import ChangesError, ChangesFileNotFoundError, InsertionPointError
from .files import read_file, write_file
from .metadata import MetadataFile, find_metadata_file, read_metadata, write_version
from .models import EntryOptions, Result
from .versions import increment_version

logger = logging.getLogger(__name__)

# Release history starts at the first line beginning with a version number
_INSERTION_POINT_RE = re.compile(r"^(?=\d)", re.MULTILINE)


def find_changes_file(
    context: RepoContext, settings: Settings, filename: str | None = None
) -> str:
    """Return the Changes file to modify.

    An explicit ``filename`` is returned as is; otherwise the first of
    ``settings.changes_filenames`` that exists wins.

    Raises:
        ChangesFileNotFoundError: If nothing was given and nothing was found.
    """
    if filename is not None:
        return filename
    for name in settings.changes_filenames:
        if context.is_file(name):
            logger.debug("Found Changes file %s", name)
            return name
    raise ChangesFileNotFoundError()


def next_version(
    context: RepoContext, settings: Settings
) -> tuple[str, MetadataFile | None]:
    """Work out the version of the new entry.

    Returns:
        Tuple of (version, metadata file it came from). The metadata file is
        None when the placeholder is used, in which case nothing is bumped.

    Raises:
        VersionFormatError: If the metadata version can't be incremented.
        FileAccessError: If the metadata file can't be read.
    """
    name = find_metadata_file(context, settings.metadata_filenames)
    if name is None:
        return settings.next_version_placeholder, None

    metadata = read_metadata(context, name)
    if metadata.version is None:
        return settings.next_version_placeholder, None
    return increment_version(metadata.version), metadata


def fetch_commits(context: RepoContext, num_commits: int, num_skip: int) -> list[str]:
    """Get the raw message blocks of the commits going into the entry.

    Raises:
        CommitLogError: If git log fails.
    """
    total = num_commits + num_skip
    if total == 0:
        return []
    logger.debug("Reading %d commits, skipping %d", total, num_skip)
    return split_commits(context.log(total), skip=num_skip)


def insert_entry(content: str, entry: str, filename: str) -> str:
    """Insert ``entry`` before the first line of ``content`` starting with a digit.

    Raises:
        InsertionPointError: If no line starts with a digit.
    """
    # A function replacement keeps backslashes in commit messages literal
    new_content, count = _INSERTION_POINT_RE.subn(lambda _: entry, content, count=1)
    if not count:
        raise InsertionPointError(filename)
    return new_content


def _add_entry(options: EntryOptions, context: RepoContext, settings: Settings) -> str:
    filename = find_changes_file(context, settings, options.filename)
    version, metadata = next_version(context, settings)
    commits = fetch_commits(context, options.num_commits, options.num_skip_commits)

    entry = build_entry(
        version,
        commits,
        context,
        settings,
        functional_changes=options.functional_changes,
    )
    text = entry.render(width=settings.wrap_width, min_indent=settings.min_indent)

    content = read_file(context.root, filename)
    write_file(context.root, filename, insert_entry(content, text, filename))
    logger.debug("Wrote entry %s to %s", version, filename)

    if metadata is not None:
        write_version(context, metadata, version)
    return filename


def add_changes_entry_from_commits(
    options: EntryOptions | None = None,
    *,
    context: RepoContext | None = None,
    settings: Settings | None = None,
) -> Result:
    """Add a new release entry to the Changes file from commit log messages.

    Args:
        options: What to add; defaults to one commit with functional changes.
        context: Repository to work in; defaults to a GitContext on the
            current directory.
        settings: Overrides for names and formatting; defaults to the
            [tool.changes-utils] table of the repository's pyproject.toml.

    Returns:
        Result(200, "OK") on success, or Result(500, <what failed>).
    """
    options = options or EntryOptions()
    context = context or GitContext()
    try:
        if settings is None:
            settings = load_settings(context.root)
        filename = _add_entry(options, context, settings)
    except ChangesError as exc:
        logger.debug("Adding entry failed: %s", exc.error_type)
        return Result.failure(exc.message)
    return Result.success(filename)
