"""Access to the world outside the Changes file.

Everything the entry builder needs from its surroundings (the git log,
git's user.name, marker files, environment variables, today's date) goes
through a RepoContext. GitContext is the real one; tests pass their own.
"""

from __future__ import annotations

import glob
import os
import subprocess
from datetime import date
from pathlib import Path
from typing import Protocol

from .exceptions import CommitLogError
from .shell import git


class RepoContext(Protocol):
    """What the entry builder needs to know about the repository."""

    root: Path

    def log(self, count: int) -> str:
        """Return the raw text of the last ``count`` commits."""
        ...

    def user_name(self) -> str:
        """Return the configured user name, or "" if unset."""
        ...

    def is_file(self, name: str) -> bool:
        """Whether ``name`` exists under root as a regular file."""
        ...

    def glob(self, pattern: str) -> list[str]:
        """Names under root matching ``pattern``."""
        ...

    def getenv(self, name: str) -> str | None:
        """Look up an environment variable."""
        ...

    def today(self) -> date:
        """The release date to put in the entry header."""
        ...


class GitContext:
    """RepoContext backed by a git working tree and the process environment."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else Path.cwd()

    def log(self, count: int) -> str:
        """Run ``git log`` in medium format, one "commit <sha>" header each.

        Raises:
            CommitLogError: If git is missing or exits non-zero.
        """
        try:
            return git(
                "log",
                "--no-color",
                "--format=medium",
                "-n",
                str(count),
                cwd=self.root,
            )
        except FileNotFoundError as exc:
            raise CommitLogError(f"git not found ({exc.strerror})") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip()
            reason = f"git exited with value {exc.returncode}"
            raise CommitLogError(f"{reason}: {detail}" if detail else reason) from exc

    def user_name(self) -> str:
        try:
            return git("config", "user.name", cwd=self.root, check=False).strip()
        except FileNotFoundError:
            return ""

    def is_file(self, name: str) -> bool:
        return (self.root / name).is_file()

    def glob(self, pattern: str) -> list[str]:
        # glob.glob skips dotfiles unless the pattern itself starts with "."
        return sorted(glob.glob(pattern, root_dir=self.root))

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)

    def today(self) -> date:
        return date.today()
