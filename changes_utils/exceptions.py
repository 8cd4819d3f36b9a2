"""Exceptions raised while adding an entry to a Changes file.

Every failure of the tool is one of these. The pipeline catches the base
class and reports it as a failed Result, so nothing here escapes to callers
of add_changes_entry_from_commits.
"""

from __future__ import annotations


class ChangesError(Exception):
    """Base class for all changes-utils failures.

    Attributes:
        error_type: Short name of the failure kind, for reporting.
        message: Human-readable description, also used as str(error).
    """

    def __init__(self, error_type: str, message: str) -> None:
        self.error_type = error_type
        self.message = message
        super().__init__(self.message)


class ChangesFileNotFoundError(ChangesError):
    """No Changes file was given and none of the usual names exist."""

    def __init__(self) -> None:
        super().__init__(
            "ChangesFileNotFoundError",
            "Can't find file that is named like a Changes file, "
            "please specify via -f",
        )


class VersionFormatError(ChangesError):
    """A version string is not one of the shapes we know how to increment."""

    def __init__(self, version: str) -> None:
        super().__init__(
            "VersionFormatError",
            f"Don't know how to increment version format '{version}' "
            "(only recognize 123, 1.23, or 1.2.3)",
        )


class CommitLogError(ChangesError):
    """git log could not be run or exited with an error."""

    def __init__(self, reason: str) -> None:
        super().__init__("CommitLogError", f"Can't get commit log: {reason}")


class AuthorNotConfiguredError(ChangesError):
    """The project requires git's user.name but it is not set."""

    def __init__(self) -> None:
        super().__init__("AuthorNotConfiguredError", "No user.name is set in git config")


class FileAccessError(ChangesError):
    """Opening, reading or writing a file failed."""

    def __init__(self, action: str, filename: str, error: Exception) -> None:
        reason = str(error)
        if isinstance(error, OSError) and error.strerror:
            reason = f"[Errno {error.errno}] {error.strerror}"
        super().__init__("FileAccessError", f"Can't {action} {filename}: {reason}")


class InsertionPointError(ChangesError):
    """The Changes file has no line starting with a digit to insert before."""

    def __init__(self, filename: str) -> None:
        super().__init__("InsertionPointError", f"Can't insert entry to {filename}")


class MetadataUpdateError(ChangesError):
    """The version line of a metadata file could not be rewritten."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            "MetadataUpdateError", f"Can't replace version in {filename}"
        )


class ConfigurationError(ChangesError):
    """The [tool.changes-utils] table could not be loaded."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            "ConfigurationError", f"Invalid [tool.changes-utils] configuration: {detail}"
        )
