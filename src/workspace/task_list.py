"""Task list: newest-first to-dos."""

from .core.items import (
    DEFAULT_TASK_TEXTS,
    Item,
    count_remaining,
    default_items,
    drop_done,
    prepend_item,
    remove_item,
    toggle_item,
)
from .ports import KeyValueStore
from .state import PersistedItemList

TASKS_KEY = "tasks"


class TaskList(PersistedItemList):
    """Unbounded task list. New tasks go to the top."""

    storage_key = TASKS_KEY

    @classmethod
    def load(cls, store: KeyValueStore) -> "TaskList":
        """Stored tasks, or the default tasks when absent or unreadable."""
        items = cls._read_items(store)
        if items is None:
            items = default_items(DEFAULT_TASK_TEXTS)
        return cls(store, items)

    def add(self, text: str) -> Item | None:
        """Prepend a task. Blank text (after trimming) is ignored."""
        text = text.strip()
        if not text:
            return None
        item = Item.create(text)
        self._commit(prepend_item(self._items, item))
        return item

    def toggle(self, item_id: str) -> bool:
        return self._commit(toggle_item(self._items, item_id))

    def remove(self, item_id: str) -> bool:
        return self._commit(remove_item(self._items, item_id))

    def clear_done(self) -> bool:
        """Drop completed tasks, keeping the order of the rest."""
        return self._commit(drop_done(self._items))

    def remaining_count(self) -> int:
        return count_remaining(self._items)
