"""In-memory key/value storage adapter."""

import logging

logger = logging.getLogger(__name__)


class MemoryKeyValueStore:
    """
    Process-memory key/value storage.

    Implements KeyValueStore protocol. Used for ephemeral sessions and tests;
    fail_writes simulates an unavailable backend.
    """

    def __init__(self, initial: dict[str, str] | None = None, fail_writes: bool = False):
        self.data: dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        if self.fail_writes:
            logger.warning(f"Write to {key!r} rejected (store unavailable)")
            return False
        self.data[key] = value
        self.writes.append((key, value))
        return True
