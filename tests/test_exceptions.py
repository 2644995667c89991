"""Tests for the stream error hierarchy."""

import errno

from filelist_streamer.exceptions import (
    DirectoryListError,
    FileListStreamError,
    FileOpenError,
    FileReadError,
)


def test_errors_are_os_errors() -> None:
    """Test that every stream error is an OSError."""
    for cls in (DirectoryListError, FileOpenError, FileReadError):
        assert issubclass(cls, FileListStreamError)
        assert issubclass(cls, OSError)


def test_from_os_error_preserves_classification() -> None:
    """Test that errno, message and filename survive wrapping."""
    original = FileNotFoundError(errno.ENOENT, "No such file or directory", "/tmp/a")
    error = FileOpenError.from_os_error(original)

    assert isinstance(error, FileOpenError)
    assert error.errno == errno.ENOENT
    assert error.strerror == "No such file or directory"
    assert error.filename == "/tmp/a"


def test_from_os_error_overrides_filename() -> None:
    """Test that an explicit filename takes precedence."""
    original = PermissionError(errno.EACCES, "Permission denied")
    error = DirectoryListError.from_os_error(original, "/data/recorder")

    assert error.errno == errno.EACCES
    assert error.filename == "/data/recorder"
