"""
Local key-value storage for persisted app state.

The bookmark store keeps its whole set as one string value under one key.
This module provides the string-keyed, string-valued stores it writes to:

- JsonFileStore: one JSON object file on disk, rewritten atomically per set()
- MemoryStore: process-local dict, used by tests and throwaway sessions

A single set() call is atomic (temp file + os.replace). A caller's
read-modify-write sequence is not; callers hold mutation_lock around it.
Every JsonFileStore on the same file shares one mutation_lock, so separate
store instances in one process still take turns.
"""

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from chefbot.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

# Resolved file path -> lock shared by every JsonFileStore on that file
_file_locks: Dict[Path, threading.RLock] = {}
_file_locks_guard = threading.Lock()


def _lock_for_path(path: Path) -> threading.RLock:
    key = path.resolve()
    with _file_locks_guard:
        lock = _file_locks.get(key)
        if lock is None:
            lock = threading.RLock()
            _file_locks[key] = lock
        return lock


class KeyValueStore(ABC):
    """Abstract string-keyed, string-valued persistent store."""

    @property
    @abstractmethod
    def mutation_lock(self) -> threading.RLock:
        """Reentrant lock callers hold across a read-modify-write of this store's data."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under key.

        Returns:
            The stored string, or None if the key has never been written

        Raises:
            StorageReadError: If the underlying storage exists but cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Replace the value stored under key.

        Raises:
            StorageWriteError: If the value could not be written
        """
        pass


class MemoryStore(KeyValueStore):
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    @property
    def mutation_lock(self) -> threading.RLock:
        return self._lock

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object file mapping keys to string values.

    Example file contents:
        {"saved_recipes": "{\\"version\\": 1, \\"recipes\\": []}"}

    The file is created on the first set(). Every set() rewrites the whole
    document to a temporary file in the same directory and moves it over the
    target, so readers never see a half-written file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = _lock_for_path(self.path)

    @property
    def mutation_lock(self) -> threading.RLock:
        """Lock shared with every other JsonFileStore on the same file."""
        return self._lock

    def _read_document(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(document, dict):
            raise StorageReadError(f"Cannot read {self.path}: expected a JSON object")
        return document

    def get(self, key: str) -> Optional[str]:
        value = self._read_document().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageReadError(f"Value for key {key!r} in {self.path} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            document = self._read_document()
        except StorageReadError:
            # Unreadable document: start again from an empty one.
            logger.warning("Overwriting unreadable storage file %s", self.path)
            document = {}
        document[key] = value

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise StorageWriteError(f"Cannot write {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_name)
        logger.debug("Wrote key %r to %s (%d bytes)", key, self.path, len(value))
