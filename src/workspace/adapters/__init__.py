"""Adapters - I/O implementations of ports."""

from .file_store import FileKeyValueStore
from .memory_store import MemoryKeyValueStore
from .pinterest_board import PinterestBoardViewer, BoardViewerError

__all__ = [
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "PinterestBoardViewer",
    "BoardViewerError",
]
