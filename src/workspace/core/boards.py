"""Board catalog and board URL parsing - no I/O."""

from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_BOARD_NAME = "my way 🎤💵💚🧑‍🧑‍🧒‍🧒🫂📈🖥️"
DEFAULT_BOARD_URL = (
    "https://mx.pinterest.com/cosmologyp/my-way/"
    "?invite_code=f8fc181c5c89425d8678b9a160f0eaad&sender=697002617238299353"
)


@dataclass(frozen=True)
class Board:
    """A public board shown as a tab on the board page."""

    name: str
    url: str


@dataclass(frozen=True)
class Pin:
    """A pin rendered by the board viewer."""

    id: str
    title: str
    link: str = ""
    image_url: str = ""


DEFAULT_BOARDS: tuple[Board, ...] = (Board(DEFAULT_BOARD_NAME, DEFAULT_BOARD_URL),)


def board_slug(url: str) -> tuple[str, str] | None:
    """
    Extract (user, board) from a board URL.

    Accepts any pinterest host (pinterest.com, mx.pinterest.com, ...).
    Query strings such as invite codes are ignored.
    """
    parsed = urlparse(url)
    host = parsed.hostname or ""
    if not (host == "pinterest.com" or host.endswith(".pinterest.com")):
        return None
    parts = [p for p in parsed.path.split("/") if p]
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


def find_board(boards: list[Board] | tuple[Board, ...], name: str) -> Board | None:
    """Find a board by exact name, then by case-insensitive prefix."""
    for board in boards:
        if board.name == name:
            return board
    lowered = name.lower()
    for board in boards:
        if board.name.lower().startswith(lowered):
            return board
    return None
