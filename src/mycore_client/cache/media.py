"""Key/value storage media for :class:`~mycore_client.cache.storage.StorageCache`."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from mycore_client.exceptions import DeserializationError

logger = logging.getLogger(__name__)


class InMemoryStorage:
    """Session-scoped string medium backed by a dict.

    Implements the ``KeyValueStorage`` protocol.  Useful for tests and for
    sharing one medium between several caches within a single process.
    """

    __slots__ = ("_items",)

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

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

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={len(self._items)})"


class JsonFileStorage:
    """Persistent string medium backed by a single JSON object file.

    Implements the ``KeyValueStorage`` protocol.  Writes are atomic (temp
    file + rename), so entries survive process restarts.  Suitable for
    single-process applications; concurrent writers from several processes
    will overwrite each other.

    By default (``auto_save=True``), mutations (``set_item``, ``remove_item``,
    ``clear``) are persisted to disk immediately.  Set ``auto_save=False``
    for batch operations and call ``save()`` explicitly when ready, or wrap
    the batch in :meth:`batch`.

    Example::

        storage = JsonFileStorage("~/.cache/mycore/translations.json")
        cache = StorageCache[str](storage)
        with storage.batch():
            await CachedLangService(source, cache).get_translations("mir.*")
    """

    __slots__ = ("_auto_save", "_dirty", "_file_path", "_items")

    def __init__(self, file_path: str | Path, *, auto_save: bool = True) -> None:
        self._file_path = Path(file_path).expanduser().resolve()
        self._items: dict[str, str] = {}
        self._dirty: bool = False
        self._auto_save: bool = auto_save
        if self._file_path.exists():
            self.load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def dirty(self) -> bool:
        """True if in-memory items changed since the last save or load."""
        return self._dirty

    # ------------------------------------------------------------------
    # KeyValueStorage protocol methods
    # ------------------------------------------------------------------

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._dirty = True
        if self._auto_save:
            self._maybe_save()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._dirty = True
            if self._auto_save:
                self._maybe_save()

    def clear(self) -> None:
        self._items.clear()
        self._dirty = True
        if self._auto_save:
            self._maybe_save()

    def keys(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # ------------------------------------------------------------------
    # Persistence methods
    # ------------------------------------------------------------------

    @contextmanager
    def batch(self) -> Iterator[JsonFileStorage]:
        """Suspend auto-save inside the block and write once on exit.

        Pending changes are flushed even if the block raises.
        """
        previous = self._auto_save
        self._auto_save = False
        try:
            yield self
        finally:
            self._auto_save = previous
            self._maybe_save()

    def save(self) -> None:
        """Flush all items to the JSON file on disk.

        Uses atomic write (temp file + rename) to prevent corruption.
        Always writes when called explicitly; use internal ``_maybe_save()``
        for dirty-flag-aware auto-saving.
        """
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(self._items, indent=2, ensure_ascii=False)

        fd, tmp_path = tempfile.mkstemp(dir=self._file_path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            Path(tmp_path).replace(self._file_path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

        self._dirty = False

    def _maybe_save(self) -> None:
        """Write to disk only if in-memory state has changed since the last save."""
        if self._dirty:
            self.save()

    def load(self) -> None:
        """Reload items from the JSON file on disk.

        Raises:
            DeserializationError: If the file is not a JSON object.
        """
        self._items.clear()
        self._dirty = False
        if not self._file_path.exists():
            return

        text = self._file_path.read_text(encoding="utf-8")
        if not text.strip():
            return

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            msg = f"Failed to load storage from {self._file_path}: invalid JSON"
            raise DeserializationError(msg) from e
        if not isinstance(raw, dict):
            msg = f"Failed to load storage from {self._file_path}: expected a JSON object"
            raise DeserializationError(msg)

        for key, value in raw.items():
            if not isinstance(value, str):
                logger.warning("Skipping non-string item %r in %s", key, self._file_path)
                continue
            self._items[key] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file={self._file_path!s}, items={len(self._items)})"
