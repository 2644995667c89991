"""Filelist-Streamer: stream the concatenated contents of date-coded files in a directory."""

from filelist_streamer.exceptions import (
    DirectoryListError,
    FileListStreamError,
    FileOpenError,
    FileReadError,
)
from filelist_streamer.lister import list_files
from filelist_streamer.reader import FileListReader, ReaderState

__all__ = [
    "DirectoryListError",
    "FileListReader",
    "FileListStreamError",
    "FileOpenError",
    "FileReadError",
    "ReaderState",
    "list_files",
]
