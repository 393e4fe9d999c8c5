"""Board viewer interface."""

from typing import Protocol


class BoardViewer(Protocol):
    """Interface for rendering an embedded external board."""

    def rebuild(self, url: str) -> None:
        """Redraw the widget for a board URL. May raise on failure."""
        ...
