"""Git subprocess wrapper.

Thin layer over subprocess so the rest of the package (and its tests) only
ever deal with strings in and strings out.
"""

from __future__ import annotations

import subprocess
from pathlib import Path


def git(*args: str, cwd: Path | None = None, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "log", "-n", "3").
        cwd: Directory to run git in. Defaults to the current directory.
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., config lookup
               of an unset key).

    Returns:
        Stdout from the git command with trailing whitespace removed.

    Raises:
        subprocess.CalledProcessError: If check is True and git fails. The
            exception carries git's stderr.
    """
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=check
    )
    return result.stdout.rstrip()
