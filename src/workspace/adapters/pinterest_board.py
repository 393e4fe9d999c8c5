"""Pinterest board viewer adapter - HTTP client for public board pins."""

import logging

import requests

from workspace.core.boards import Pin, board_slug

logger = logging.getLogger(__name__)

WIDGET_API_BASE = "https://widgets.pinterest.com/v3/pidgets/boards"


class BoardViewerError(Exception):
    """Raised when a board cannot be rendered."""

    pass


class PinterestBoardViewer:
    """
    Pinterest board viewer.

    Implements BoardViewer protocol. Fetches the pins of a public board from
    the widget endpoint the embed script uses and keeps the last render.
    """

    def __init__(
        self,
        pin_limit: int = 25,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        self.pin_limit = pin_limit
        self.timeout = timeout
        self._session = session or requests.Session()
        self.url: str | None = None
        self.pins: list[Pin] = []

    def _fetch_pins(self, user: str, board: str) -> list[dict]:
        """Fetch raw pin objects for a board."""
        try:
            resp = self._session.get(
                f"{WIDGET_API_BASE}/{user}/{board}/pins/",
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise BoardViewerError(f"Board fetch failed: {e}") from e
        except ValueError as e:
            raise BoardViewerError(f"Board response was not JSON: {e}") from e

        if data.get("status") != "success":
            raise BoardViewerError(f"Board fetch failed: {data.get('message', 'unknown error')}")
        return (data.get("data") or {}).get("pins") or []

    def rebuild(self, url: str) -> None:
        """Fetch and render the board at url."""
        slug = board_slug(url)
        if slug is None:
            raise BoardViewerError(f"Not a Pinterest board URL: {url}")

        user, board = slug
        logger.debug(f"Rebuilding board {user}/{board}")
        raw_pins = self._fetch_pins(user, board)
        self.pins = [_pin_from_api(p) for p in raw_pins[: self.pin_limit]]
        self.url = url
        logger.info(f"Rendered {len(self.pins)} pins from {user}/{board}")


def _pin_from_api(data: dict) -> Pin:
    """Create Pin from a widget API pin object."""
    images = data.get("images") or {}
    image = images.get("237x") or next(iter(images.values()), {})
    return Pin(
        id=str(data.get("id", "")),
        title=(data.get("description") or "").strip() or "(sin título)",
        link=data.get("link") or "",
        image_url=image.get("url", "") if isinstance(image, dict) else "",
    )
