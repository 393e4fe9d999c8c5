"""Tests for the file-backed key/value store."""

from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from workspace.adapters.file_store import FileKeyValueStore
from workspace.priorities import PriorityList
from workspace.task_list import TaskList


@pytest.fixture
def store(tmp_path):
    return FileKeyValueStore(tmp_path / "data")


class TestFileKeyValueStore:
    def test_creates_directory_on_first_write(self, tmp_path):
        store = FileKeyValueStore(tmp_path / "nested" / "data")
        assert not (tmp_path / "nested").exists()
        store.set("tasks", "[]")
        assert (tmp_path / "nested" / "data").is_dir()

    def test_unusable_directory_reads_absent_and_fails_writes(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = FileKeyValueStore(blocker / "data")
        assert store.get("tasks") is None
        assert store.set("tasks", "[]") is False
        assert store.keys() == []

    def test_exists_check_failure_reads_as_absent(self, store):
        with patch.object(Path, "exists", side_effect=PermissionError("denied")):
            assert store.get("tasks") is None

    def test_get_missing_returns_none(self, store):
        assert store.get("tasks") is None

    def test_set_then_get(self, store):
        assert store.set("quick-note", "hola ✨") is True
        assert store.get("quick-note") == "hola ✨"

    def test_overwrite(self, store):
        store.set("tasks", "[]")
        store.set("tasks", '[{"id": "a", "text": "A", "done": false}]')
        assert store.get("tasks").startswith('[{"id": "a"')

    def test_file_layout(self, store):
        store.set("priorities-last-date", "2025-01-15")
        assert (store.data_dir / "priorities-last-date.json").read_text() == "2025-01-15"

    def test_no_temp_file_left_behind(self, store):
        store.set("tasks", "[]")
        assert [p.name for p in store.data_dir.iterdir()] == ["tasks.json"]

    def test_keys(self, store):
        store.set("tasks", "[]")
        store.set("quick-note", "")
        assert store.keys() == ["quick-note", "tasks"]

    @pytest.mark.parametrize("key", ["../escape", "a/b", "", ".hidden", "with space"])
    def test_invalid_key(self, store, key):
        with pytest.raises(ValueError):
            store.get(key)

    def test_write_failure_returns_false(self, store):
        # A directory squatting on the target path makes the rename fail.
        (store.data_dir / "tasks.json").mkdir(parents=True)
        assert store.set("tasks", "[]") is False

    def test_unencodable_value_returns_false_and_cleans_up(self, store):
        assert store.set("tasks", "caf\udce9") is False
        assert list(store.data_dir.iterdir()) == []

    def test_unencodable_task_keeps_memory_state(self, tmp_path):
        tasks = TaskList.load(FileKeyValueStore(tmp_path))
        item = tasks.add("caf\udce9")
        assert tasks.items[0] == item
        assert not (tmp_path / ".tasks.json.tmp").exists()

    def test_undecodable_file_reads_as_absent(self, store):
        store.data_dir.mkdir(parents=True)
        (store.data_dir / "tasks.json").write_bytes(b"\xff\xfe\x00bad")
        assert store.get("tasks") is None


class TestPersistenceAcrossSessions:
    def test_tasks_survive_restart(self, tmp_path):
        TaskList.load(FileKeyValueStore(tmp_path)).add("wash dog")
        reloaded = TaskList.load(FileKeyValueStore(tmp_path))
        assert reloaded.items[0].text == "wash dog"

    def test_priorities_reset_next_day(self, tmp_path):
        day_one = date(2025, 1, 15)
        first = PriorityList.load(FileKeyValueStore(tmp_path), as_of=day_one)
        first.toggle(first.items[0].id)
        first.reorder(0, 2)

        second = PriorityList.load(FileKeyValueStore(tmp_path), as_of=date(2025, 1, 16))

        assert [i.id for i in second] == [i.id for i in first]
        assert not any(i.done for i in second)

    def test_corrupt_file_falls_back(self, tmp_path):
        store = FileKeyValueStore(tmp_path)
        (tmp_path / "tasks.json").write_text("garbage")
        assert [t.text for t in TaskList.load(store)] == ["Hacer tarea", "Tomar agua", "Tiempo para mí"]
