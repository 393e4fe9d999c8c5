"""Workspace CLI - personal organizer."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.pinterest_board import PinterestBoardViewer
from .config import load_config
from .core.boards import find_board
from .core.pages import PAGES, find_page
from .state import PersistedItemList
from .workflows import (
    compile_status,
    format_item_line,
    get_board_page,
    get_store,
    open_session,
)


@click.group()
@click.version_option(package_name="workspace-organizer")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--ephemeral", is_flag=True, help="Use an in-memory store (nothing is saved)")
@click.option(
    "--data-dir",
    envvar="WORKSPACE_DATA_DIR",
    default=None,
    help="Directory for saved lists (overrides DATA_DIR in workspace.conf)",
)
@click.pass_context
def main(ctx, debug: bool, ephemeral: bool, data_dir: str | None):
    """Workspace - personal organizer CLI."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if data_dir:
        config.data_dir = data_dir
    ctx.obj = {"config": config, "ephemeral": ephemeral}


def _session(ctx):
    obj = ctx.find_root().obj
    store = get_store(obj["config"], ephemeral=obj["ephemeral"])
    return open_session(store)


def _id_at(items: PersistedItemList, position: int) -> str:
    """Translate a 1-based position to an item id, or exit."""
    item_id = items.id_at(position - 1)
    if item_id is None:
        click.echo(f"Error: no item #{position} (list has {len(items)}).", err=True)
        sys.exit(1)
    return item_id


def _items_json(items: PersistedItemList) -> str:
    return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)


@main.command()
@click.argument("page_id", required=False)
def pages(page_id: str | None):
    """List the workspace pages, or show one page's text."""
    if page_id:
        page = find_page(page_id)
        if page is None:
            click.echo(f"Error: unknown page {page_id!r}.", err=True)
            sys.exit(1)
        click.echo(page.label)
        for blurb in page.blurbs:
            click.echo(f"  {blurb}")
        return

    for page in PAGES:
        click.echo(f"{page.label:14} ({page.id})")


# ============== Today ==============


@main.group(invoke_without_command=True)
@click.pass_context
def today(ctx):
    """Top 3 priorities for today."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(today_show)


def _show_priorities(priorities, as_json: bool = False) -> None:
    if as_json:
        click.echo(_items_json(priorities))
        return

    click.echo(f"Top 3 prioridades ({date.today().isoformat()})")
    for idx, item in enumerate(priorities, start=1):
        click.echo(format_item_line(idx, item.text or f"Prioridad {idx}", item.done))


@today.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def today_show(ctx, as_json: bool = False):
    """Show today's priorities."""
    session = _session(ctx)
    _show_priorities(session.priorities, as_json)


@today.command("toggle")
@click.argument("position", type=int)
@click.pass_context
def today_toggle(ctx, position: int):
    """Check or uncheck priority POSITION."""
    session = _session(ctx)
    session.priorities.toggle(_id_at(session.priorities, position))
    _show_priorities(session.priorities)


@today.command("edit")
@click.argument("position", type=int)
@click.argument("text", default="")
@click.pass_context
def today_edit(ctx, position: int, text: str):
    """Set the text of priority POSITION."""
    session = _session(ctx)
    session.priorities.update_text(_id_at(session.priorities, position), text)
    _show_priorities(session.priorities)


@today.command("move")
@click.argument("source", type=int)
@click.argument("target", type=int)
@click.pass_context
def today_move(ctx, source: int, target: int):
    """Move priority SOURCE to position TARGET."""
    session = _session(ctx)
    session.priorities.reorder(source - 1, target - 1)
    _show_priorities(session.priorities)


@today.command("reset")
@click.pass_context
def today_reset(ctx):
    """Uncheck every priority (restart the day)."""
    session = _session(ctx)
    session.priorities.reset_today()
    _show_priorities(session.priorities)


# ============== Tasks ==============


@main.group(invoke_without_command=True)
@click.pass_context
def tasks(ctx):
    """Task list."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(tasks_show)


def _show_tasks(task_list, as_json: bool = False) -> None:
    if as_json:
        click.echo(_items_json(task_list))
        return

    click.echo(f"Pendientes: {task_list.remaining_count()}")
    if not len(task_list):
        click.echo("Sin tareas por ahora ✨")
        return
    for idx, item in enumerate(task_list, start=1):
        click.echo(format_item_line(idx, item.text, item.done))


@tasks.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def tasks_show(ctx, as_json: bool = False):
    """List tasks, newest first."""
    session = _session(ctx)
    _show_tasks(session.tasks, as_json)


@tasks.command("add")
@click.argument("text", nargs=-1, required=True)
@click.pass_context
def tasks_add(ctx, text: tuple[str, ...]):
    """Add a task to the top of the list."""
    session = _session(ctx)
    if session.tasks.add(" ".join(text)) is None:
        click.echo("Nothing to add.", err=True)
    _show_tasks(session.tasks)


@tasks.command("toggle")
@click.argument("position", type=int)
@click.pass_context
def tasks_toggle(ctx, position: int):
    """Check or uncheck task POSITION."""
    session = _session(ctx)
    session.tasks.toggle(_id_at(session.tasks, position))
    _show_tasks(session.tasks)


@tasks.command("rm")
@click.argument("position", type=int)
@click.pass_context
def tasks_rm(ctx, position: int):
    """Delete task POSITION."""
    session = _session(ctx)
    session.tasks.remove(_id_at(session.tasks, position))
    _show_tasks(session.tasks)


@tasks.command("clear-done")
@click.pass_context
def tasks_clear_done(ctx):
    """Remove completed tasks."""
    session = _session(ctx)
    session.tasks.clear_done()
    _show_tasks(session.tasks)


# ============== Quick note ==============


@main.group(invoke_without_command=True)
@click.pass_context
def note(ctx):
    """Quick note."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(note_show)


@note.command("show")
@click.pass_context
def note_show(ctx):
    """Print the quick note."""
    session = _session(ctx)
    if not session.note.text.strip():
        click.echo("(nota vacía)")
        return
    click.echo(session.note.text)


@note.command("save")
@click.argument("text", required=False)
@click.pass_context
def note_save(ctx, text: str | None):
    """Replace the quick note with TEXT (or stdin) and save it."""
    session = _session(ctx)
    if text is None:
        text = click.get_text_stream("stdin").read()
    session.note.edit(text)
    if not session.note.save():
        click.echo("Error: could not save the note.", err=True)
        sys.exit(1)
    click.echo("Guardado ✓")


# ============== Boards ==============


@main.group(invoke_without_command=True)
@click.pass_context
def board(ctx):
    """Embedded Pinterest boards."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(board_list)


@board.command("list")
@click.pass_context
def board_list(ctx):
    """List configured boards."""
    config = ctx.find_root().obj["config"]
    if not config.boards:
        click.echo("No boards configured.")
        return
    for idx, b in enumerate(config.boards, start=1):
        click.echo(f"{idx:>2}. {b.name}")
        click.echo(f"    {b.url}")


@board.command("show")
@click.argument("name", required=False)
@click.pass_context
def board_show(ctx, name: str | None):
    """Render the pins of board NAME (default: the first board)."""
    config = ctx.find_root().obj["config"]
    viewer = PinterestBoardViewer(pin_limit=config.board_pin_limit, timeout=config.http_timeout)
    page = get_board_page(config, viewer)

    if name:
        selected = find_board(page.boards, name)
        if selected is None:
            click.echo(f"Error: no board named {name!r}.", err=True)
            sys.exit(1)
        page.select(selected.url, defer=False)

    if not page.active_url:
        click.echo("No boards configured.")
        return

    active = page.active_board
    click.echo(f"### {active.name if active else page.active_url}")
    if not page.rebuild_now():
        click.echo("Board unavailable right now; try again later.", err=True)
        sys.exit(1)

    if not viewer.pins:
        click.echo("No pins.")
        return
    for pin in viewer.pins:
        link = f" <{pin.link}>" if pin.link else ""
        click.echo(f"  • {pin.title}{link}")


# ============== Status ==============


@main.command()
@click.pass_context
def status(ctx):
    """Quick status check (priorities + pending tasks + note)."""
    session = _session(ctx)
    click.echo(compile_status(session))


if __name__ == "__main__":
    main()
