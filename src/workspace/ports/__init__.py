"""Ports - interfaces/protocols for external dependencies."""

from .key_value_store import KeyValueStore
from .board_viewer import BoardViewer

__all__ = [
    "KeyValueStore",
    "BoardViewer",
]
