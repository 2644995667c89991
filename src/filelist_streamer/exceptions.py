"""
Exceptions raised while listing or streaming a directory of date-coded files.

All of them are ``OSError`` subclasses built from the underlying ``OSError``
so that ``errno`` (e.g. ``ENOENT`` vs ``EACCES``) and ``filename`` survive:

    FileListStreamError
    ├── DirectoryListError   -> the directory cannot be listed
    ├── FileOpenError        -> a listed file cannot be opened
    └── FileReadError        -> a listed file fails mid-read
"""

from typing_extensions import Self


class FileListStreamError(OSError):
    """Base class for every error surfaced by the stream."""

    @classmethod
    def from_os_error(cls, error: OSError, filename: str | None = None) -> Self:
        """Wrap ``error`` keeping its errno, message and filename."""
        return cls(
            error.errno,
            error.strerror or str(error),
            filename if filename is not None else error.filename,
        )


class DirectoryListError(FileListStreamError):
    """The directory is missing, not a directory, or not readable."""


class FileOpenError(FileListStreamError):
    """A file from the resolved list could not be opened."""


class FileReadError(FileListStreamError):
    """A file from the resolved list failed while being read."""
