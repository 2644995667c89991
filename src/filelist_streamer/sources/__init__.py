"""Data source abstraction layer for byte streaming."""

from filelist_streamer.sources.base import StreamSource
from filelist_streamer.sources.local import LocalFileSource

__all__ = [
    "LocalFileSource",
    "StreamSource",
]
