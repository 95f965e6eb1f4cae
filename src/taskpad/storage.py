# src/taskpad/storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for key-value storage failures."""


class StorageQuotaError(StorageError):
    """Raised when a write would push the stored values over the quota."""


class StorageUnavailableError(StorageError):
    """Raised when the backing file cannot be written."""


class JsonFileStorage:
    """
    localStorage-like key-value store backed by a single JSON object file.

    - keys and values are strings
    - every call reads the file fresh (no cached state between calls)
    - writes go to a temp file first, then os.replace
    - the quota counts UTF-8 bytes of all keys + values
    """

    def __init__(self, path: str | Path, *, quota_bytes: int = 5 * 1024 * 1024) -> None:
        self._path = Path(path)
        self._quota_bytes = int(quota_bytes)
        logger.info("JsonFileStorage ready path=%s quota=%s", self._path, self._quota_bytes)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Storage file %s unreadable; treating as empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object; treating as empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False), "utf-8")
            # Private before it becomes visible under the real name.
            with contextlib.suppress(OSError):
                os.chmod(tmp, 0o600)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageUnavailableError(f"cannot write {self._path}: {e}") from e

    @staticmethod
    def _size_of(data: dict[str, str]) -> int:
        return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in data.items())

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        size = self._size_of(data)
        if size > self._quota_bytes:
            raise StorageQuotaError(
                f"setting {key!r} would use {size} bytes (quota {self._quota_bytes})"
            )
        self._dump(data)
        logger.debug("Storage set key=%s bytes=%s", key, size)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._dump(data)

    def clear(self) -> None:
        self._dump({})

    def __len__(self) -> int:
        return len(self._load())
