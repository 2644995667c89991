"""Sequential reader over the concatenated contents of date-coded files."""

from collections.abc import Generator, Iterator
from enum import Enum
import logging
from pathlib import Path
from types import TracebackType
from typing import Any, overload

from typing_extensions import Self, override

from filelist_streamer.datecode import DatecodeInput, to_datecode
from filelist_streamer.lister import list_files
from filelist_streamer.sources.base import StreamSource
from filelist_streamer.sources.local import DEFAULT_CHUNK_SIZE, LocalFileSource

logger = logging.getLogger(__name__)


class ReaderState(Enum):
    """Lifecycle of a FileListReader."""

    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    STREAMING = "streaming"
    EXHAUSTED = "exhausted"
    FAILED = "failed"
    CLOSED = "closed"


TERMINAL_STATES: frozenset[ReaderState] = frozenset(
    {
        ReaderState.EXHAUSTED,
        ReaderState.FAILED,
        ReaderState.CLOSED,
    }
)


class FileListReader(StreamSource):
    """
    Pull-based byte stream over every date-coded file of a directory.

    The file list is resolved once, on the first pull, and then each file is
    read to its end before the next one is opened. At most one file handle
    is open at any time.

    Once the reader is EXHAUSTED, FAILED or CLOSED, further pulls return
    None without side effects.
    """

    def __init__(
        self,
        directory: str | Path,
        min_datecode: DatecodeInput = None,
        max_datecode: DatecodeInput = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """
        Initialize the reader. Nothing is listed or opened yet.

        Args:
            directory: Directory containing the date-coded files.
            min_datecode: Inclusive lower bound (default: unbounded).
            max_datecode: Inclusive upper bound (default: unbounded).
            chunk_size: Maximum size of each chunk (default: 64KB).

        Raises:
            TypeError: If a bound has an unsupported type.
            ValueError: If chunk_size is not positive.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        self.directory = str(directory)
        self.min_datecode = to_datecode(min_datecode)
        self.max_datecode = to_datecode(max_datecode)
        self.chunk_size = chunk_size

        # May be preset before the first pull to bypass the directory listing
        self.files: list[str] | None = None
        self.file_index = 0
        self.state = ReaderState.UNRESOLVED
        self.error: BaseException | None = None

        self._current: Generator[bytes, None, None] | None = None
        self._buffer = b""
        self._pending_error: Exception | None = None

        logger.info(
            "FileListReader initialized (directory=%s, min=%s, max=%s)",
            self.directory,
            self.min_datecode,
            self.max_datecode,
        )

    @staticmethod
    def get_list_of_files(
        directory: str | Path,
        min_datecode: DatecodeInput = None,
        max_datecode: DatecodeInput = None,
    ) -> list[str]:
        """List matching files without constructing a stream."""
        return list_files(directory, min_datecode, max_datecode)

    def pull(self) -> bytes | None:
        """
        Produce the next chunk of the concatenated stream.

        Returns:
            bytes | None: A non-empty chunk, or None at end of stream.

        Raises:
            DirectoryListError: If the directory cannot be listed.
            FileOpenError: If a listed file cannot be opened.
            FileReadError: If a listed file fails mid-read.
        """
        if self.state in TERMINAL_STATES:
            return None

        try:
            if self.state is ReaderState.UNRESOLVED:
                self._resolve()

            while self.state is ReaderState.STREAMING:
                files = self.files or []
                current = self._current or self._open_current(
                    files[self.file_index], len(files)
                )
                chunk = next(current, None)
                if chunk is not None:
                    return chunk
                self._advance(len(files))
        except Exception as e:
            self._fail(e)
            raise

        return None

    def _resolve(self) -> None:
        self.state = ReaderState.RESOLVING

        if self.files is None:
            self.files = self.get_list_of_files(
                self.directory, self.min_datecode, self.max_datecode
            )
        else:
            logger.debug("Using preset file list for %s", self.directory)

        logger.info("Resolved %d files in %s", len(self.files), self.directory)

        if self.file_index < len(self.files):
            self.state = ReaderState.STREAMING
        else:
            self._finish()

    def _open_current(self, path: str, count: int) -> Generator[bytes, None, None]:
        logger.debug("Streaming file %d/%d: %s", self.file_index + 1, count, path)
        self._current = LocalFileSource(path, chunk_size=self.chunk_size).get_stream()
        return self._current

    def _advance(self, count: int) -> None:
        self._release()
        self.file_index += 1
        if self.file_index >= count:
            self._finish()

    def _finish(self) -> None:
        self._release()
        self.state = ReaderState.EXHAUSTED
        logger.info("Completed streaming %d files from %s", self.file_index, self.directory)

    def _fail(self, error: BaseException) -> None:
        self._release()
        self.state = ReaderState.FAILED
        self.error = error
        logger.error(
            "Stream from %s failed at file index %d: %s",
            self.directory,
            self.file_index,
            error,
        )

    def _release(self) -> None:
        if self._current is not None:
            self._current.close()
            self._current = None

    def close(self) -> None:
        """Release the open file handle and stop the stream."""
        self._release()
        self._buffer = b""
        self._pending_error = None
        if self.state not in TERMINAL_STATES:
            logger.info("Closing stream from %s before end", self.directory)
            self.state = ReaderState.CLOSED

    @property
    def closed(self) -> bool:
        return self.state in TERMINAL_STATES

    @overload
    def read(self) -> bytes: ...
    @overload
    def read(self, size: int) -> bytes: ...

    def read(self, size: int = -1) -> bytes:
        """
        Read up to ``size`` bytes, pulling only as many chunks as needed.

        If size is -1, reads all remaining bytes. Returns b"" at end of stream.

        Bytes pulled before a failure are returned first; the error is raised
        by the first read that finds the buffer empty.
        """
        if self._pending_error is not None and not self._buffer:
            error, self._pending_error = self._pending_error, None
            raise error

        try:
            while size < 0 or len(self._buffer) < size:
                chunk = self.pull()
                if chunk is None:
                    break
                self._buffer += chunk
        except Exception as e:
            if not self._buffer:
                raise
            self._pending_error = e

        if size < 0:
            result, self._buffer = self._buffer, b""
        else:
            result, self._buffer = self._buffer[:size], self._buffer[size:]

        return result

    @override
    def get_stream(self) -> Iterator[bytes]:
        """
        Iterate over the remaining chunks.

        Abandoning the iterator closes the reader.

        Yields:
            bytes: Chunks of the concatenated file contents.
        """
        try:
            while True:
                chunk = self.pull()
                if chunk is None:
                    break
                yield chunk
        finally:
            self.close()

    def __iter__(self) -> Iterator[bytes]:
        return self.get_stream()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @override
    def get_metadata(self) -> dict[str, Any]:
        """
        Return metadata about the stream.

        Size and file count describe the resolved list and are 0 before the
        first pull.

        Returns:
            dict[str, Any]: Metadata containing size, source type, bounds and state.
        """
        files = self.files or []
        size = sum(
            LocalFileSource(path, chunk_size=self.chunk_size).get_metadata()["size"]
            for path in files
        )

        return {
            "size": size,
            "source_type": "filelist",
            "directory": self.directory,
            "min_datecode": self.min_datecode,
            "max_datecode": self.max_datecode,
            "file_count": len(files),
            "state": self.state.value,
        }
