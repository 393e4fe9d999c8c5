"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from workspace.cli import main
from workspace.config import Config
from workspace.core.boards import Board, Pin


@pytest.fixture(autouse=True)
def isolated_config():
    with patch("workspace.cli.load_config", return_value=Config()):
        yield


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args, **kwargs):
        return runner.invoke(main, ["--data-dir", str(tmp_path), *args], **kwargs)

    return invoke


class TestPages:
    def test_lists_catalog(self, run):
        result = run("pages")
        assert result.exit_code == 0
        for name in ("Hoy", "Tareas", "Notas", "Recuerdos", "Pinterest"):
            assert name in result.output

    def test_single_page(self, run):
        result = run("pages", "memories")
        assert result.exit_code == 0
        assert "Recuerdos" in result.output
        assert "fotos" in result.output

    def test_unknown_page(self, run):
        assert run("pages", "calendar").exit_code == 1


class TestToday:
    def test_default_shows_priorities(self, run):
        result = run("today")
        assert result.exit_code == 0
        assert "Prioridad 1" in result.output
        assert "[ ]" in result.output

    def test_toggle_persists(self, run):
        run("today", "toggle", "2")
        data = json.loads(run("today", "show", "--json").output)
        assert [p["done"] for p in data] == [False, True, False]

    def test_edit_and_move(self, run):
        run("today", "edit", "1", "Estudiar")
        run("today", "move", "1", "3")
        data = json.loads(run("today", "show", "--json").output)
        assert [p["text"] for p in data] == ["Prioridad 2", "Prioridad 3", "Estudiar"]

    def test_reset(self, run):
        run("today", "toggle", "1")
        run("today", "reset")
        data = json.loads(run("today", "show", "--json").output)
        assert not any(p["done"] for p in data)

    def test_bad_position(self, run):
        result = run("today", "toggle", "9")
        assert result.exit_code == 1
        assert "no item #9" in result.output


class TestTasks:
    def test_default_list(self, run):
        result = run("tasks")
        assert result.exit_code == 0
        assert "Pendientes: 3" in result.output
        assert "Hacer tarea" in result.output

    def test_add_prepends(self, run):
        run("tasks", "add", "  wash", "dog ")
        data = json.loads(run("tasks", "show", "--json").output)
        assert data[0]["text"] == "wash dog"
        assert len(data) == 4

    def test_add_blank(self, run):
        result = run("tasks", "add", "   ")
        assert result.exit_code == 0
        data = json.loads(run("tasks", "show", "--json").output)
        assert len(data) == 3

    def test_toggle_and_clear_done(self, run):
        run("tasks", "toggle", "1")
        run("tasks", "toggle", "3")
        result = run("tasks", "clear-done")
        assert "Pendientes: 1" in result.output
        data = json.loads(run("tasks", "show", "--json").output)
        assert [t["text"] for t in data] == ["Tomar agua"]

    def test_rm_all(self, run):
        for _ in range(3):
            run("tasks", "rm", "1")
        result = run("tasks")
        assert "Sin tareas por ahora" in result.output

    def test_unusable_data_dir_serves_defaults(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        runner = CliRunner()

        result = runner.invoke(main, ["--data-dir", str(blocker / "data"), "tasks"])

        assert result.exit_code == 0
        assert "Hacer tarea" in result.output

    def test_unusable_data_dir_keeps_session_changes(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        runner = CliRunner()

        result = runner.invoke(main, ["--data-dir", str(blocker / "data"), "tasks", "add", "wash dog"])

        assert result.exit_code == 0
        assert "wash dog" in result.output
        assert "Pendientes: 4" in result.output

    def test_ephemeral_does_not_touch_disk(self, tmp_path):
        runner = CliRunner()
        runner.invoke(main, ["--data-dir", str(tmp_path), "--ephemeral", "tasks", "add", "temp"])
        assert not (tmp_path / "tasks.json").exists()


class TestNote:
    def test_empty(self, run):
        assert "(nota vacía)" in run("note").output

    def test_save_and_show(self, run):
        result = run("note", "save", "comprar flores")
        assert "Guardado" in result.output
        assert "comprar flores" in run("note", "show").output

    def test_save_from_stdin(self, run):
        run("note", "save", input="desde stdin\n")
        assert "desde stdin" in run("note").output


class TestStatus:
    def test_summary(self, run):
        run("tasks", "add", "wash dog")
        run("note", "save", "hola")
        result = run("status")
        assert result.exit_code == 0
        assert "Top 3 prioridades:" in result.output
        assert "Pendientes: 4" in result.output
        assert "wash dog" in result.output
        assert "hola" in result.output


class TestBoard:
    def test_list(self, run):
        result = run("board")
        assert result.exit_code == 0
        assert "pinterest.com/cosmologyp/my-way" in result.output

    @patch("workspace.cli.PinterestBoardViewer")
    def test_show(self, mock_cls, run):
        viewer = mock_cls.return_value
        viewer.pins = [Pin(id="1", title="Sunset", link="https://example.com")]

        result = run("board", "show")

        assert result.exit_code == 0
        viewer.rebuild.assert_called_once()
        assert "Sunset" in result.output

    @patch("workspace.cli.PinterestBoardViewer")
    def test_show_failure(self, mock_cls, run):
        mock_cls.return_value.rebuild.side_effect = RuntimeError("down")
        result = run("board", "show")
        assert result.exit_code == 1

    def test_show_unknown_board(self, run):
        result = run("board", "show", "nope")
        assert result.exit_code == 1
        assert "no board named" in result.output

    @patch("workspace.cli.PinterestBoardViewer")
    def test_show_named_board(self, mock_cls, tmp_path):
        config = Config(boards=[Board("A", "https://pinterest.com/u/a/"), Board("B", "https://pinterest.com/u/b/")])
        mock_cls.return_value.pins = []
        with patch("workspace.cli.load_config", return_value=config):
            result = CliRunner().invoke(main, ["--data-dir", str(tmp_path), "board", "show", "B"])
        assert result.exit_code == 0
        mock_cls.return_value.rebuild.assert_called_once_with("https://pinterest.com/u/b/")
        assert "No pins." in result.output
