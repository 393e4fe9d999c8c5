"""Key/value store interface."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for durable string storage keyed by name."""

    def get(self, key: str) -> str | None:
        """Read the value for a key. Returns None if it was never set."""
        ...

    def set(self, key: str, value: str) -> bool:
        """Write/overwrite the value for a key. Returns False on failure."""
        ...
