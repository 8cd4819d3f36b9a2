"""Data models for changes-utils.

These Pydantic models carry the options, the entry being written, and the
outcome of a run.
"""

from __future__ import annotations

import textwrap

from pydantic import BaseModel, Field


class EntryOptions(BaseModel):
    """Arguments to add_changes_entry_from_commits.

    Attributes:
        filename: Changes file to modify, relative to the repo root. If None,
            the usual names (Changes, CHANGES, ChangeLog, CHANGELOG) are
            searched for.
        functional_changes: If False, a "No functional changes." item (or its
            spec/data variant) is put first.
        num_commits: How many commit messages to turn into items.
        num_skip_commits: How many of the most recent commits to skip first.
    """

    filename: str | None = None
    functional_changes: bool = True
    num_commits: int = Field(default=1, ge=0)
    num_skip_commits: int = Field(default=0, ge=0)


class ChangesEntry(BaseModel):
    """One release block of a Changes file.

    Attributes:
        version: Version being released, or the placeholder token.
        date: Release date as YYYY-MM-DD.
        author: Name shown in parentheses after the date.
        items: Cleaned-up commit messages, one bullet each.
    """

    version: str
    date: str
    author: str
    items: list[str] = Field(default_factory=list)

    def indent(self, min_indent: int = 8) -> int:
        """Column at which the date and the bullets start."""
        return max(len(self.version) + 2, min_indent)

    def render(self, width: int = 75, min_indent: int = 8) -> str:
        """Format the entry as it appears in a Changes file.

        The header is followed by a blank line, each item is a wrapped
        hyphen bullet followed by a blank line, and the whole entry ends
        with one more newline. Words longer than the line (URLs, paths) are
        kept whole on a line of their own rather than split.
        """
        indent = self.indent(min_indent)
        pad = " " * indent
        text = f"{self.version:<{indent}}{self.date} ({self.author})\n\n"
        for item in self.items:
            text += textwrap.fill(
                item,
                width=width,
                initial_indent=pad + "- ",
                subsequent_indent=pad + "  ",
                break_long_words=False,
                break_on_hyphens=False,
            )
            text += "\n\n"
        return text + "\n"


class Result(BaseModel):
    """Outcome of a run: an HTTP-style status code and a message.

    Attributes:
        status: 200 on success, 500 on failure.
        message: "OK", or a description of what failed.
        filename: The Changes file written, on success.
    """

    status: int
    message: str
    filename: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == 200

    @classmethod
    def success(cls, filename: str | None = None) -> Result:
        return cls(status=200, message="OK", filename=filename)

    @classmethod
    def failure(cls, message: str) -> Result:
        return cls(status=500, message=message)
