"""Observable item list with write-through persistence."""

import logging
from typing import Callable, Iterator

from .core.items import Item, ItemDecodeError, decode_items, encode_items
from .ports import KeyValueStore

logger = logging.getLogger(__name__)

Observer = Callable[[list[Item]], None]


class PersistedItemList:
    """
    Ordered items backed by one store key.

    Every effective mutation replaces the in-memory list, writes the full
    sequence to the store, then notifies observers. A failed write is logged
    and the in-memory state stays authoritative for the session.
    """

    storage_key: str = ""

    def __init__(self, store: KeyValueStore, items: list[Item]):
        self._store = store
        self._items = list(items)
        self._observers: list[Observer] = []

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def find(self, item_id: str) -> Item | None:
        return next((item for item in self._items if item.id == item_id), None)

    def id_at(self, index: int) -> str | None:
        """Id of the item at a 0-based position, None if out of range."""
        if 0 <= index < len(self._items):
            return self._items[index].id
        return None

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer. Returns a callable that unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def persist(self) -> bool:
        """Write the full sequence to the store."""
        ok = self._store.set(self.storage_key, encode_items(self._items))
        if not ok:
            logger.warning(f"Could not persist {self.storage_key!r}; keeping in-memory state")
        return ok

    def _commit(self, items: list[Item], force: bool = False) -> bool:
        """Apply a transform result. Identity with the current list means no-op."""
        if items is self._items and not force:
            return False
        self._items = items
        self.persist()
        self._notify()
        return True

    def _notify(self) -> None:
        snapshot = self.items
        for observer in list(self._observers):
            observer(snapshot)

    @classmethod
    def _read_items(cls, store: KeyValueStore) -> list[Item] | None:
        """Stored items, or None when absent or undecodable."""
        raw = store.get(cls.storage_key)
        if raw is None:
            return None
        try:
            return decode_items(raw)
        except ItemDecodeError as e:
            logger.warning(f"Ignoring corrupt {cls.storage_key!r} value: {e}")
            return None
