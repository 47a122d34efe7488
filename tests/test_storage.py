"""Tests for key-value storages"""

import pytest

from log_factory.storage import FileStorage, MemoryStorage


@pytest.fixture(params=["memory", "file"])
def storage(request, tmp_path):
    if request.param == "memory":
        return MemoryStorage()
    return FileStorage(str(tmp_path / "state"))


class TestStorage:
    """Behaviour shared by all storages."""

    def test_absent_key(self, storage):
        assert storage.get_item("missing") is None

    def test_set_and_get(self, storage):
        storage.set_item("key", "value")
        assert storage.get_item("key") == "value"

    def test_overwrite(self, storage):
        storage.set_item("key", "one")
        storage.set_item("key", "two")
        assert storage.get_item("key") == "two"

    def test_remove(self, storage):
        storage.set_item("key", "value")
        storage.remove_item("key")
        storage.remove_item("key")
        assert storage.get_item("key") is None

    def test_clear(self, storage):
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.clear()
        assert storage.get_item("a") is None
        assert storage.get_item("b") is None


class TestFileStorage:
    """File specific behaviour."""

    def test_survives_new_instance(self, tmp_path):
        FileStorage(str(tmp_path)).set_item("loggerfactory", "{}")
        assert FileStorage(str(tmp_path)).get_item("loggerfactory") == "{}"

    def test_directory_created_on_write(self, tmp_path):
        directory = tmp_path / "nested" / "dir"
        storage = FileStorage(str(directory))
        assert storage.get_item("key") is None
        storage.set_item("key", "value")
        assert (directory / "key.json").exists()

    def test_unsafe_key_characters(self, tmp_path):
        storage = FileStorage(str(tmp_path))
        storage.set_item("../escape", "value")
        assert storage.get_item("../escape") == "value"
        assert not (tmp_path.parent / "escape.json").exists()

    def test_distinct_keys_do_not_collide(self, tmp_path):
        storage = FileStorage(str(tmp_path))
        storage.set_item("a/b", "slash")
        storage.set_item("a_b", "underscore")
        assert storage.get_item("a/b") == "slash"
        assert storage.get_item("a_b") == "underscore"
        assert storage.keys() == ["a/b", "a_b"]

    def test_empty_key(self, tmp_path):
        with pytest.raises(ValueError):
            FileStorage(str(tmp_path)).get_item("")

    def test_clear_missing_directory(self, tmp_path):
        FileStorage(str(tmp_path / "never")).clear()


class TestMemoryStorage:
    """Memory specific behaviour."""

    def test_initial_items(self):
        storage = MemoryStorage({"a": "1"})
        assert "a" in storage
        assert storage.keys() == ["a"]
        assert len(storage) == 1
