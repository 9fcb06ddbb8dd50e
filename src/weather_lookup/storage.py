# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
storage.py — Small key/value persistence backends for local state.

Both backends expose the same four methods:

    is_available() -> bool
    get(key)       -> str | None
    set(key, value)
    remove(key)

FileStorage keeps one "<key>.json" file per key inside a directory, which
plays the role of per-installation local storage. MemoryStorage keeps
everything in a dict and is what the tests use.

Errors are raised as OSError subclasses so callers can catch a single
family for "the persistence medium failed".
"""

import os
import tempfile
from pathlib import Path


DEFAULT_QUOTA_BYTES = 5_000_000


class StorageUnavailableError(OSError):
    """Raised when the backend cannot be used at all."""


class StorageQuotaError(OSError):
    """Raised when a value is larger than the backend allows."""


def _check_quota(key: str, value: str, quota_bytes: int | None) -> None:
    if quota_bytes is None:
        return
    size = len(value.encode("utf-8"))
    if size > quota_bytes:
        raise StorageQuotaError(
            f"Value for '{key}' is {size} bytes, over the {quota_bytes} byte quota"
        )


class MemoryStorage:
    """Dict-backed storage. Set available=False to simulate no storage."""

    def __init__(self, available: bool = True, quota_bytes: int | None = None):
        self.available = available
        self.quota_bytes = quota_bytes
        self._data: dict[str, str] = {}

    def is_available(self) -> bool:
        return self.available

    def _require(self) -> None:
        if not self.available:
            raise StorageUnavailableError("In-memory storage is disabled")

    def get(self, key: str) -> str | None:
        self._require()
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._require()
        _check_quota(key, value, self.quota_bytes)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._require()
        self._data.pop(key, None)


class FileStorage:
    """Store each key as a JSON text file in `directory`.

    Writes go to a temp file in the same directory and are moved into
    place with os.replace, so a reader never sees a half-written value.
    """

    def __init__(self, directory: Path, quota_bytes: int | None = DEFAULT_QUOTA_BYTES):
        self.directory = Path(directory)
        self.quota_bytes = quota_bytes

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def is_available(self) -> bool:
        """True if the directory exists (or can be created) and is writable."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        return os.access(self.directory, os.W_OK)

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        _check_quota(key, value, self.quota_bytes)
        self.directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, self._path(key))
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
