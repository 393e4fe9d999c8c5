"""Functional core - pure business logic with no I/O."""

from .items import (
    Item,
    ItemDecodeError,
    encode_items,
    decode_items,
    default_items,
    move_item,
    count_remaining,
)
from .boards import Board, Pin, board_slug, find_board
from .pages import Page, PAGES, find_page

__all__ = [
    # Items
    "Item",
    "ItemDecodeError",
    "encode_items",
    "decode_items",
    "default_items",
    "move_item",
    "count_remaining",
    # Boards
    "Board",
    "Pin",
    "board_slug",
    "find_board",
    # Pages
    "Page",
    "PAGES",
    "find_page",
]
