"""Local file system data source implementation."""

from collections.abc import Generator
import logging
from pathlib import Path
from typing import Any

from typing_extensions import override

from filelist_streamer.exceptions import FileOpenError, FileReadError
from filelist_streamer.sources.base import StreamSource

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 65536


class LocalFileSource(StreamSource):
    """
    Stream a single file from the local file system.

    The file is opened lazily on the first pull, so a file removed after it
    was listed fails at access time with its original errno.
    """

    def __init__(self, file_path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """
        Initialize LocalFileSource.

        Args:
            file_path: Path to the local file.
            chunk_size: Maximum size of each chunk (default: 64KB).

        Raises:
            ValueError: If chunk_size is not positive.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        self.file_path = Path(file_path)
        self.chunk_size = chunk_size

        logger.debug("LocalFileSource initialized for: %s", self.file_path)

    @override
    def get_stream(self) -> Generator[bytes, None, None]:
        """
        Stream the file in chunks.

        The handle is held in a ``with`` block, so exhausting, failing or
        closing the generator all release it.

        Yields:
            bytes: Chunks of file data.

        Raises:
            FileOpenError: If the file cannot be opened.
            FileReadError: If reading the file fails.
        """
        try:
            f = self.file_path.open("rb")
        except OSError as e:
            logger.error("Error opening file %s: %s", self.file_path, e)
            raise FileOpenError.from_os_error(e, str(self.file_path)) from e

        with f:
            logger.debug("Opened %s", self.file_path)
            while True:
                try:
                    chunk = f.read(self.chunk_size)
                except OSError as e:
                    logger.error("Error reading file %s: %s", self.file_path, e)
                    raise FileReadError.from_os_error(e, str(self.file_path)) from e
                if not chunk:
                    break
                yield chunk

    @override
    def get_metadata(self) -> dict[str, Any]:
        """
        Return metadata about the local file.

        Returns:
            dict[str, Any]: Metadata containing file size, source type and path.
        """
        try:
            size = self.file_path.stat().st_size
        except OSError:
            size = 0

        return {
            "size": size,
            "source_type": "local",
            "path": str(self.file_path),
        }
