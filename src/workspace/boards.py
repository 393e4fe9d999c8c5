"""Board page: board tabs plus a deferred, debounced viewer rebuild."""

import logging
from datetime import datetime, timedelta, timezone

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger

from .core.boards import DEFAULT_BOARDS, Board
from .ports import BoardViewer

logger = logging.getLogger(__name__)

REBUILD_JOB_ID = "board_rebuild"
DEFAULT_REBUILD_DELAY_MS = 150


class BoardPage:
    """
    Board tabs and the active board.

    Selecting a board schedules viewer.rebuild(url) after a short delay so the
    surrounding UI can settle; a newer selection replaces the pending rebuild.
    Viewer failures are logged and never propagated. One-shot callers such as
    the CLI select with defer=False and call rebuild_now() directly.
    """

    def __init__(
        self,
        viewer: BoardViewer,
        boards: list[Board] | tuple[Board, ...] = DEFAULT_BOARDS,
        delay_ms: int = DEFAULT_REBUILD_DELAY_MS,
        scheduler: BackgroundScheduler | None = None,
    ):
        self.viewer = viewer
        self.boards = list(boards)
        self.active_url = self.boards[0].url if self.boards else ""
        self.delay_ms = delay_ms
        self._scheduler = scheduler

    @property
    def active_board(self) -> Board | None:
        return next((b for b in self.boards if b.url == self.active_url), None)

    def select(self, url: str, defer: bool = True) -> bool:
        """
        Make url the active board. Returns False if it already was.

        With defer=False nothing is scheduled; the caller rebuilds itself.
        """
        if url == self.active_url:
            return False
        self.active_url = url
        if defer:
            self.schedule_rebuild()
        return True

    def schedule_rebuild(self) -> None:
        """Queue a rebuild of the active board, replacing any pending one."""
        scheduler = self._ensure_scheduler()
        run_date = datetime.now(timezone.utc) + timedelta(milliseconds=self.delay_ms)
        scheduler.add_job(
            self.rebuild_now,
            DateTrigger(run_date=run_date),
            args=[self.active_url],
            id=REBUILD_JOB_ID,
            replace_existing=True,
            misfire_grace_time=None,
        )
        logger.debug(f"Board rebuild scheduled in {self.delay_ms}ms for {self.active_url}")

    def rebuild_now(self, url: str | None = None) -> bool:
        """Rebuild synchronously. Returns False if the viewer failed."""
        url = url if url is not None else self.active_url
        if not url:
            return False
        try:
            self.viewer.rebuild(url)
        except Exception as e:
            logger.warning(f"Board build error: {e}")
            return False
        return True

    def _ensure_scheduler(self) -> BackgroundScheduler:
        if self._scheduler is None:
            self._scheduler = BackgroundScheduler()
        if not self._scheduler.running:
            self._scheduler.start()
        return self._scheduler

    def close(self) -> None:
        """Stop the scheduler, dropping any pending rebuild."""
        if self._scheduler is not None and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
