"""Pure item-list domain logic - no I/O dependencies."""

import json
import uuid
from dataclasses import dataclass, replace

DEFAULT_PRIORITY_TEXTS = ("Prioridad 1", "Prioridad 2", "Prioridad 3")
DEFAULT_TASK_TEXTS = ("Hacer tarea", "Tomar agua", "Tiempo para mí")


class ItemDecodeError(ValueError):
    """Raised when a stored value is not an encoded item sequence."""

    pass


@dataclass(frozen=True)
class Item:
    """A checkable line in a priority or task list."""

    id: str
    text: str
    done: bool = False

    @classmethod
    def create(cls, text: str) -> "Item":
        """New item with a fresh id."""
        return cls(id=new_id(), text=text, done=False)

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "done": self.done}

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        """Create Item from a decoded JSON object."""
        if not isinstance(data, dict):
            raise ItemDecodeError(f"Expected object, got {type(data).__name__}")
        item_id = data.get("id")
        text = data.get("text")
        done = data.get("done")
        if not isinstance(item_id, str) or not item_id:
            raise ItemDecodeError(f"Invalid id: {item_id!r}")
        if not isinstance(text, str):
            raise ItemDecodeError(f"Invalid text for item {item_id}")
        if not isinstance(done, bool):
            raise ItemDecodeError(f"Invalid done flag for item {item_id}")
        return cls(id=item_id, text=text, done=done)


def new_id() -> str:
    return str(uuid.uuid4())


def default_items(texts: tuple[str, ...]) -> list[Item]:
    """Fresh items (new ids, not done) for each text."""
    return [Item.create(text) for text in texts]


# ============== Serialization ==============


def encode_items(items: list[Item]) -> str:
    """Serialize to a JSON array of {id, text, done} objects."""
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


def decode_items(raw: str) -> list[Item]:
    """
    Parse an encoded item sequence.

    Raises ItemDecodeError for anything that is not a JSON array of
    well-formed item objects.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise ItemDecodeError(f"Not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ItemDecodeError(f"Expected array, got {type(data).__name__}")
    return [Item.from_dict(entry) for entry in data]


# ============== Transforms ==============
# Each returns a new list; an unchanged input is returned as-is so callers can
# detect no-ops with an identity check.


def toggle_item(items: list[Item], item_id: str) -> list[Item]:
    """Flip done on the matching item."""
    if not any(item.id == item_id for item in items):
        return items
    return [replace(item, done=not item.done) if item.id == item_id else item for item in items]


def update_item_text(items: list[Item], item_id: str, text: str) -> list[Item]:
    """Replace text on the matching item. Empty text is allowed."""
    if not any(item.id == item_id for item in items):
        return items
    return [replace(item, text=text) if item.id == item_id else item for item in items]


def move_item(items: list[Item], from_index: int, to_index: int) -> list[Item]:
    """
    Move the item at from_index so it ends up at to_index.

    Move semantics, not swap: [A, B, C] with (0, 2) -> [B, C, A].
    Out-of-range indices and from_index == to_index leave the list unchanged.
    """
    size = len(items)
    if not (0 <= from_index < size and 0 <= to_index < size):
        return items
    if from_index == to_index:
        return items
    moved = list(items)
    item = moved.pop(from_index)
    moved.insert(to_index, item)
    return moved


def clear_done_flags(items: list[Item]) -> list[Item]:
    return [replace(item, done=False) if item.done else item for item in items]


def prepend_item(items: list[Item], item: Item) -> list[Item]:
    return [item, *items]


def remove_item(items: list[Item], item_id: str) -> list[Item]:
    if not any(item.id == item_id for item in items):
        return items
    return [item for item in items if item.id != item_id]


def drop_done(items: list[Item]) -> list[Item]:
    """Remove done items, keeping the relative order of the rest."""
    if not any(item.done for item in items):
        return items
    return [item for item in items if not item.done]


def count_remaining(items: list[Item]) -> int:
    return sum(1 for item in items if not item.done)
