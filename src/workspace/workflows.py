"""Session wiring between config, stores and the stateful components.

Each CLI invocation opens one session: the store is resolved from config,
the lists are loaded (running the daily reset), and the command applies a
single event.
"""

from dataclasses import dataclass
from datetime import date

from .adapters.file_store import FileKeyValueStore
from .adapters.memory_store import MemoryKeyValueStore
from .adapters.pinterest_board import PinterestBoardViewer
from .boards import BoardPage
from .config import Config
from .ports import BoardViewer, KeyValueStore
from .priorities import PriorityList
from .quick_note import QuickNote
from .task_list import TaskList


@dataclass
class Session:
    """The stateful pages of one workspace session."""

    store: KeyValueStore
    priorities: PriorityList
    tasks: TaskList
    note: QuickNote


def get_store(config: Config, ephemeral: bool = False) -> KeyValueStore:
    """Resolve the store from config."""
    if ephemeral:
        return MemoryKeyValueStore()
    return FileKeyValueStore(config.resolved_data_dir)


def open_session(store: KeyValueStore, as_of: date | None = None) -> Session:
    """Load every page from the store. The priorities reset runs first."""
    priorities = PriorityList.load(store, as_of=as_of)
    return Session(
        store=store,
        priorities=priorities,
        tasks=TaskList.load(store),
        note=QuickNote.load(store),
    )


def get_board_page(config: Config, viewer: BoardViewer | None = None) -> BoardPage:
    """Board page for the configured boards."""
    viewer = viewer or PinterestBoardViewer(
        pin_limit=config.board_pin_limit,
        timeout=config.http_timeout,
    )
    return BoardPage(viewer, boards=config.boards, delay_ms=config.board_rebuild_delay_ms)


# ============== Summaries ==============


def format_item_line(position: int, text: str, done: bool) -> str:
    mark = "x" if done else " "
    return f"{position:>2}. [{mark}] {text}"


def compile_status(session: Session, as_of: date | None = None) -> str:
    """Plain-text summary of priorities, pending tasks and the note."""
    as_of = as_of or date.today()
    lines = [f"Hoy, {as_of.strftime('%A %d %b')}", "", "Top 3 prioridades:"]
    for idx, item in enumerate(session.priorities, start=1):
        lines.append(format_item_line(idx, item.text or "(vacía)", item.done))

    pending = [t for t in session.tasks if not t.done]
    lines.append("")
    lines.append(f"Pendientes: {session.tasks.remaining_count()}")
    for task in pending[:5]:
        lines.append(f"  - {task.text}")
    if len(pending) > 5:
        lines.append(f"  … y {len(pending) - 5} más")

    lines.append("")
    note = session.note.text.strip()
    lines.append("Nota rápida:" if note else "Nota rápida: (vacía)")
    if note:
        lines.extend(f"  {line}" for line in note.splitlines())
    return "\n".join(lines)
