"""Daily top-3 priorities with a once-per-day completion reset."""

import logging
from datetime import date

from .core.items import (
    DEFAULT_PRIORITY_TEXTS,
    Item,
    clear_done_flags,
    default_items,
    move_item,
    toggle_item,
    update_item_text,
)
from .ports import KeyValueStore
from .state import PersistedItemList

logger = logging.getLogger(__name__)

PRIORITIES_KEY = "priorities"
LAST_DATE_KEY = "priorities-last-date"


def parse_stamp(raw: str | None) -> date | None:
    """Parse a stored YYYY-MM-DD stamp. Anything else counts as no stamp."""
    if not raw:
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return None


class PriorityList(PersistedItemList):
    """
    Ranked priorities for the day.

    The item count is whatever was seeded or loaded; it is never trimmed or
    grown. Done flags are cleared on the first load of each calendar day.
    """

    storage_key = PRIORITIES_KEY

    def __init__(self, store: KeyValueStore, items: list[Item], last_reset: date | None = None):
        super().__init__(store, items)
        self.last_reset = last_reset

    @classmethod
    def load(cls, store: KeyValueStore, as_of: date | None = None) -> "PriorityList":
        """
        Build the list for a session.

        Falls back to the default priorities when nothing usable is stored.
        If the stored date stamp is not as_of (or missing), all done flags are
        cleared and both the items and the new stamp are written before the
        list is returned, so no user mutation can run ahead of the reset.
        """
        as_of = as_of or date.today()
        last_reset = parse_stamp(store.get(LAST_DATE_KEY))
        items = cls._read_items(store)
        if items is None:
            items = default_items(DEFAULT_PRIORITY_TEXTS)

        priorities = cls(store, items, last_reset=last_reset)
        if last_reset != as_of:
            logger.info(f"New day ({last_reset} -> {as_of}), clearing priority checks")
            priorities._items = clear_done_flags(priorities._items)
            priorities.persist()
            priorities._write_stamp(as_of)
        return priorities

    def _write_stamp(self, as_of: date) -> bool:
        self.last_reset = as_of
        ok = self._store.set(LAST_DATE_KEY, as_of.isoformat())
        if not ok:
            logger.warning("Could not persist priorities date stamp")
        return ok

    def toggle(self, item_id: str) -> bool:
        """Flip done on an item. Unknown ids are ignored."""
        return self._commit(toggle_item(self._items, item_id))

    def update_text(self, item_id: str, text: str) -> bool:
        """Replace an item's text. Unknown ids are ignored."""
        return self._commit(update_item_text(self._items, item_id, text))

    def reorder(self, from_index: int, to_index: int) -> bool:
        """Move the item at from_index to to_index. Invalid indices are ignored."""
        return self._commit(move_item(self._items, from_index, to_index))

    def reset_today(self, as_of: date | None = None) -> None:
        """Clear every done flag and restamp the date, even mid-day."""
        as_of = as_of or date.today()
        self._commit(clear_done_flags(self._items), force=True)
        self._write_stamp(as_of)
