"""Tests for the key/value storage media."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from mycore_client.cache.media import InMemoryStorage, JsonFileStorage
from mycore_client.cache.storage import StorageCache
from mycore_client.exceptions import DeserializationError
from mycore_client.protocols.cache import KeyValueStorage

_ORIGINAL_SAVE = JsonFileStorage.save


class TestInMemoryStorage:
    def test_protocol_compliance(self) -> None:
        assert isinstance(InMemoryStorage(), KeyValueStorage)

    def test_basic_operations(self) -> None:
        storage = InMemoryStorage({"a": "1"})
        storage.set_item("b", "2")
        assert storage.get_item("a") == "1"
        assert sorted(storage) == ["a", "b"]
        assert len(storage) == 2
        storage.remove_item("a")
        storage.remove_item("missing")
        assert storage.keys() == ["b"]
        storage.clear()
        assert len(storage) == 0

    def test_keys_is_a_snapshot(self) -> None:
        storage = InMemoryStorage({"a": "1", "b": "2"})
        for key in storage.keys():
            storage.remove_item(key)
        assert len(storage) == 0


class TestJsonFileStorage:
    def test_protocol_compliance(self, tmp_path: Path) -> None:
        assert isinstance(JsonFileStorage(tmp_path / "s.json"), KeyValueStorage)

    def test_creates_file_on_first_write(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "s.json"
        storage = JsonFileStorage(path)
        assert not path.exists()
        storage.set_item("a", "1")
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1"}

    def test_loads_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text(json.dumps({"a": "1", "b": "2"}), encoding="utf-8")
        storage = JsonFileStorage(path)
        assert storage.get_item("b") == "2"
        assert len(storage) == 2

    def test_remove_and_clear_persist(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        storage = JsonFileStorage(path)
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.remove_item("a")
        assert JsonFileStorage(path).keys() == ["b"]
        storage.clear()
        assert len(JsonFileStorage(path)) == 0

    def test_empty_file_loads_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text("  \n", encoding="utf-8")
        assert len(JsonFileStorage(path)) == 0

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(DeserializationError, match="invalid JSON"):
            JsonFileStorage(path)

    def test_non_object_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(DeserializationError, match="expected a JSON object"):
            JsonFileStorage(path)

    def test_non_string_values_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text(json.dumps({"a": "1", "b": 2}), encoding="utf-8")
        assert JsonFileStorage(path).keys() == ["a"]

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        storage = JsonFileStorage(tmp_path / "s.json")
        storage.set_item("a", "1")
        assert [p.name for p in tmp_path.iterdir()] == ["s.json"]

    def test_repr(self, tmp_path: Path) -> None:
        assert "JsonFileStorage" in repr(JsonFileStorage(tmp_path / "s.json"))


class TestJsonFileStorageBatching:
    """``auto_save=False`` and ``batch()`` defer writes to a single save."""

    def test_auto_save_writes_every_mutation(self, tmp_path: Path) -> None:
        storage = JsonFileStorage(tmp_path / "s.json")
        with patch.object(JsonFileStorage, "save", autospec=True, side_effect=_ORIGINAL_SAVE) as save:
            storage.set_item("a", "1")
            storage.set_item("b", "2")
            storage.remove_item("a")
        assert save.call_count == 3

    def test_auto_save_disabled_defers_writes(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        storage = JsonFileStorage(path, auto_save=False)
        storage.set_item("a", "1")
        assert storage.dirty
        assert not path.exists()
        storage.save()
        assert not storage.dirty
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1"}

    def test_batch_writes_once(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        storage = JsonFileStorage(path)
        with patch.object(JsonFileStorage, "save", autospec=True, side_effect=_ORIGINAL_SAVE) as save:
            with storage.batch():
                for i in range(100):
                    storage.set_item(f"k{i}", str(i))
                assert not path.exists()
        assert save.call_count == 1
        assert len(json.loads(path.read_text(encoding="utf-8"))) == 100

    def test_batch_without_changes_does_not_write(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        with JsonFileStorage(path).batch():
            pass
        assert not path.exists()

    def test_batch_flushes_when_block_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        storage = JsonFileStorage(path)
        with pytest.raises(RuntimeError), storage.batch():
            storage.set_item("a", "1")
            raise RuntimeError("boom")
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1"}

    def test_batch_restores_auto_save(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        storage = JsonFileStorage(path)
        with storage.batch():
            pass
        storage.set_item("a", "1")
        assert path.exists()


class _DictMedium:
    """Third-party style medium implementing only the required operations."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def keys(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class TestKeyValueStorageProtocol:
    def test_medium_without_iteration_satisfies_protocol(self) -> None:
        assert isinstance(_DictMedium(), KeyValueStorage)

    def test_medium_without_iteration_backs_storage_cache(self) -> None:
        cache: StorageCache[str] = StorageCache(_DictMedium())
        cache.set_item("k1", "v1")
        assert cache.get_all_items() == {"k1": "v1"}
        assert cache.size() == 1
