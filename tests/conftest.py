"""Shared test fixtures."""

from __future__ import annotations

import fnmatch
from datetime import date
from pathlib import Path

import pytest

from changes_utils.exceptions import CommitLogError


def make_log(*messages: str) -> str:
    """Render commit messages the way ``git log`` (medium format) prints them."""
    blocks = []
    for i, message in enumerate(messages):
        body = "\n".join(f"    {line}" if line else "" for line in message.splitlines())
        blocks.append(
            f"commit {i:040x}\n"
            "Author: A U Thor <author@example.com>\n"
            "Date:   Mon Jan 6 10:00:00 2020 +0000\n"
            "\n"
            f"{body}\n"
        )
    return "\n".join(blocks)


class FakeContext:
    """RepoContext over a tmp directory with canned git and environment."""

    def __init__(
        self,
        root: Path,
        messages: list[str] | None = None,
        user_name: str = "",
        env: dict[str, str] | None = None,
        today: date = date(2024, 3, 1),
        log_error: str | None = None,
    ) -> None:
        self.root = root
        self.messages = list(messages or [])
        self._user_name = user_name
        self.env = dict(env or {})
        self._today = today
        self.log_error = log_error
        self.log_calls: list[int] = []

    def log(self, count: int) -> str:
        self.log_calls.append(count)
        if self.log_error is not None:
            raise CommitLogError(self.log_error)
        return make_log(*self.messages[:count])

    def user_name(self) -> str:
        return self._user_name

    def is_file(self, name: str) -> bool:
        return (self.root / name).is_file()

    def glob(self, pattern: str) -> list[str]:
        return sorted(p.name for p in self.root.iterdir() if fnmatch.fnmatch(p.name, pattern))

    def getenv(self, name: str) -> str | None:
        return self.env.get(name)

    def today(self) -> date:
        return self._today


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A distribution directory with a Changes file holding one release."""
    (tmp_path / "Changes").write_text(
        "Revision history for Foo-Bar\n\n1.00    2020-01-01 (X)\n\n        - First release.\n\n"
    )
    return tmp_path


@pytest.fixture
def context(repo: Path) -> FakeContext:
    """FakeContext on ``repo`` with two commits and a PAUSE id."""
    return FakeContext(
        repo,
        messages=["Fix the frobnicator", "Add a widget.\n\nLonger explanation."],
        env={"PAUSEID": "PERLANCAR"},
    )
