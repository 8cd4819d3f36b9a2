"""Turning commit messages into a Changes entry."""

from __future__ import annotations

import logging
import re

from .config import Settings
from .context import RepoContext
from .exceptions import AuthorNotConfiguredError
from .models import ChangesEntry

logger = logging.getLogger(__name__)

# "commit <sha> ..." through the blank line that ends the Author/Date headers
_COMMIT_HEADER_RE = re.compile(r"^commit .+?\n\n", re.MULTILINE | re.DOTALL)
_PARENTHETICAL_RE = re.compile(r"\s*\(.+\)")


def split_commits(log_text: str, skip: int = 0) -> list[str]:
    """Split ``git log`` output into one raw message block per commit.

    Args:
        log_text: Output of ``git log`` in the default (medium) format.
        skip: Number of leading (most recent) commits to drop.

    Returns:
        Message blocks, most recent first, still indented as git prints them.
    """
    commits = [c for c in _COMMIT_HEADER_RE.split(log_text) if c.strip()]
    return commits[skip:]


def clean_message(message: str) -> str:
    """Collapse whitespace and make sure the message ends with a period.

    Line breaks inside a commit body are not kept: the message becomes one
    run of words, which render() then wraps as a single bullet.

    Examples:
        "    Fix typo\\n" → "Fix typo."
        "Add foo.\\n\\n    Also bar." → "Add foo. Also bar."
    """
    text = " ".join(message.split())
    if not text.endswith("."):
        text += "."
    return text


def no_change_message(context: RepoContext, settings: Settings) -> str:
    """Item used for a release without functional changes.

    Spec and data distributions get their own wording.
    """
    if context.is_file(settings.spec_marker):
        return "No spec changes"
    if context.is_file(settings.data_marker):
        return "No data changes"
    return "No functional changes"


def resolve_author(context: RepoContext, settings: Settings) -> str:
    """Work out whose name goes in the entry header.

    Projects carrying a project marker (``.tag-proj-*``) use git's user.name,
    minus any "(...)" suffix. Everything else uses the PAUSE id from the
    environment, or the placeholder if that is unset (an empty value is kept).

    Raises:
        AuthorNotConfiguredError: If a project marker exists but user.name
            is not set.
    """
    if context.glob(settings.project_marker_glob):
        author = _PARENTHETICAL_RE.sub("", context.user_name()).strip()
        if not author:
            raise AuthorNotConfiguredError()
        return author
    author = context.getenv(settings.author_env_var)
    return author if author is not None else settings.author_placeholder


def build_entry(
    version: str,
    commits: list[str],
    context: RepoContext,
    settings: Settings,
    *,
    functional_changes: bool = True,
) -> ChangesEntry:
    """Assemble the entry for ``version`` from raw commit message blocks."""
    items = list(commits)
    if not functional_changes:
        items.insert(0, no_change_message(context, settings))

    entry = ChangesEntry(
        version=version,
        date=context.today().isoformat(),
        author=resolve_author(context, settings),
        items=[clean_message(item) for item in items],
    )
    logger.debug("Built entry %s with %d items", entry.version, len(entry.items))
    return entry
