"""Abstract base class for streaming byte sources."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class StreamSource(ABC):
    """
    Abstract base class for streaming byte sources.

    Provides a unified pull interface over a single file or a whole list of
    files without loading their contents into memory.
    """

    @abstractmethod
    def get_stream(self) -> Iterator[bytes]:
        """
        Return an iterator of byte chunks from the source.

        Chunks are never empty. Their boundaries carry no meaning; only the
        concatenated byte sequence does. Closing the iterator must release
        any open file handle.

        Yields:
            bytes: Chunks of data from the source.

        Raises:
            OSError: If the source cannot be read.
        """
        ...

    @abstractmethod
    def get_metadata(self) -> dict[str, Any]:
        """
        Return metadata about the source.

        Returns:
            dict[str, Any]: Metadata dictionary containing at least:
                - 'size': Size in bytes (0 if unknown)
                - 'source_type': Type of source ('local', 'filelist')
        """
        ...
