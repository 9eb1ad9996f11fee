"""
Tests for local key-value storage.

These tests verify that:
- Missing files and keys read as None
- Values survive a new store instance on the same file
- Other keys in the same file are preserved on write
- Corrupt files raise StorageReadError on read and are replaced on write
- Unwritable locations raise StorageWriteError
"""

import json

import pytest

from chefbot.errors import StorageReadError, StorageWriteError, UnsupportedFormatError
from chefbot.storage import JsonFileStore, MemoryStore


class TestMemoryStore:
    """Test cases for MemoryStore."""

    def test_get_missing_key(self):
        """Test that an unknown key reads as None."""
        assert MemoryStore().get("saved_recipes") is None

    def test_set_then_get(self):
        """Test that a written value can be read back."""
        store = MemoryStore()
        store.set("saved_recipes", "[]")
        assert store.get("saved_recipes") == "[]"

    def test_initial_data_is_copied(self):
        """Test that the initial dict is not shared with the store."""
        initial = {"k": "v"}
        store = MemoryStore(initial)
        store.set("k", "changed")
        assert initial["k"] == "v"


class TestJsonFileStore:
    """Test cases for JsonFileStore."""

    def test_missing_file_reads_none(self, tmp_path):
        """Test that a store on a non-existent file reads None."""
        assert JsonFileStore(tmp_path / "saved.json").get("saved_recipes") is None

    def test_value_persists_across_instances(self, tmp_path):
        """Test that a value written by one instance is read by another."""
        path = tmp_path / "saved.json"
        JsonFileStore(path).set("saved_recipes", '{"version": 1, "recipes": []}')
        assert JsonFileStore(path).get("saved_recipes") == '{"version": 1, "recipes": []}'

    def test_set_keeps_other_keys(self, tmp_path):
        """Test that writing one key leaves other keys untouched."""
        path = tmp_path / "saved.json"
        store = JsonFileStore(path)
        store.set("a", "1")
        store.set("b", "2")
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": "2"}

    def test_creates_parent_directories(self, tmp_path):
        """Test that missing parent directories are created on write."""
        path = tmp_path / "nested" / "dir" / "saved.json"
        JsonFileStore(path).set("k", "v")
        assert path.exists()

    def test_no_temp_files_left_behind(self, tmp_path):
        """Test that the atomic write leaves only the target file."""
        path = tmp_path / "saved.json"
        JsonFileStore(path).set("k", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["saved.json"]

    def test_corrupt_file_raises_on_read(self, tmp_path):
        """Test that a file that is not JSON raises StorageReadError."""
        path = tmp_path / "saved.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageReadError):
            JsonFileStore(path).get("saved_recipes")

    def test_non_object_file_raises_on_read(self, tmp_path):
        """Test that a JSON file that is not an object raises StorageReadError."""
        path = tmp_path / "saved.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(StorageReadError):
            JsonFileStore(path).get("saved_recipes")

    def test_non_string_value_raises_on_read(self, tmp_path):
        """Test that a non-string value under the key raises StorageReadError."""
        path = tmp_path / "saved.json"
        path.write_text('{"saved_recipes": []}', encoding="utf-8")
        with pytest.raises(StorageReadError):
            JsonFileStore(path).get("saved_recipes")

    def test_corrupt_file_is_replaced_on_write(self, tmp_path):
        """Test that writing over a corrupt file produces a valid document."""
        path = tmp_path / "saved.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileStore(path)
        store.set("saved_recipes", "[]")
        assert store.get("saved_recipes") == "[]"

    def test_unwritable_location_raises(self, tmp_path):
        """Test that a path under a regular file raises StorageWriteError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(StorageWriteError):
            JsonFileStore(blocker / "saved.json").set("k", "v")

    def test_stores_on_same_file_share_mutation_lock(self, tmp_path):
        """Test that every store on one file hands out the same lock."""
        path = tmp_path / "saved.json"
        assert JsonFileStore(path).mutation_lock is JsonFileStore(tmp_path / "." / "saved.json").mutation_lock
        assert JsonFileStore(path).mutation_lock is not JsonFileStore(tmp_path / "other.json").mutation_lock


def test_unsupported_format_is_a_read_error():
    """Test a newer-format blob is reported through the read-error branch."""
    error = UnsupportedFormatError(2)
    assert isinstance(error, StorageReadError)
    assert not isinstance(error, StorageWriteError)
    assert error.version == 2
