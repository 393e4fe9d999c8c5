"""Quick note scratchpad with manual save."""

import logging

from .ports import KeyValueStore

logger = logging.getLogger(__name__)

QUICK_NOTE_KEY = "quick-note"

# How long a UI should show the "saved" confirmation before calling clear_saved().
SAVED_FLAG_SECONDS = 1.2


class QuickNote:
    """
    A single free-text note.

    Edits stay in memory until save() is called.
    """

    def __init__(self, store: KeyValueStore, text: str = ""):
        self._store = store
        self.text = text
        self.saved = False

    @classmethod
    def load(cls, store: KeyValueStore) -> "QuickNote":
        """Read the stored note. Missing note -> empty text. Never writes."""
        return cls(store, store.get(QUICK_NOTE_KEY) or "")

    def edit(self, new_text: str) -> None:
        self.text = new_text
        self.saved = False

    def save(self) -> bool:
        """Write the text verbatim. Sets saved on success."""
        ok = self._store.set(QUICK_NOTE_KEY, self.text)
        if ok:
            self.saved = True
        else:
            logger.warning("Could not save quick note; text kept in memory")
        return ok

    def clear_saved(self) -> None:
        self.saved = False
