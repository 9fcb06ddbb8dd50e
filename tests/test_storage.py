# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for storage.py — MemoryStorage and FileStorage backends."""

import pytest

from weather_lookup.storage import (
    FileStorage,
    MemoryStorage,
    StorageQuotaError,
    StorageUnavailableError,
)


# ---------------------------------------------------------------------------
# MemoryStorage
# ---------------------------------------------------------------------------

class TestMemoryStorage:

    def test_get_missing_key_returns_none(self):
        assert MemoryStorage().get("nope") is None

    def test_set_then_get(self):
        storage = MemoryStorage()
        storage.set("k", "[1, 2]")
        assert storage.get("k") == "[1, 2]"

    def test_set_overwrites(self):
        storage = MemoryStorage()
        storage.set("k", "a")
        storage.set("k", "b")
        assert storage.get("k") == "b"

    def test_remove_missing_key_is_noop(self):
        storage = MemoryStorage()
        storage.remove("k")
        storage.remove("k")
        assert storage.get("k") is None

    def test_unavailable_reports_and_raises(self):
        storage = MemoryStorage(available=False)
        assert storage.is_available() is False
        with pytest.raises(StorageUnavailableError):
            storage.get("k")
        with pytest.raises(StorageUnavailableError):
            storage.set("k", "v")
        with pytest.raises(StorageUnavailableError):
            storage.remove("k")

    def test_quota_exceeded_raises_and_keeps_old_value(self):
        storage = MemoryStorage(quota_bytes=4)
        storage.set("k", "abcd")
        with pytest.raises(StorageQuotaError):
            storage.set("k", "abcde")
        assert storage.get("k") == "abcd"

    def test_storage_errors_are_os_errors(self):
        assert issubclass(StorageUnavailableError, OSError)
        assert issubclass(StorageQuotaError, OSError)


# ---------------------------------------------------------------------------
# FileStorage
# ---------------------------------------------------------------------------

class TestFileStorage:

    def test_is_available_creates_directory(self, tmp_path):
        directory = tmp_path / "state" / "nested"
        storage = FileStorage(directory)
        assert storage.is_available() is True
        assert directory.is_dir()

    def test_is_available_false_when_directory_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        storage = FileStorage(blocker / "state")
        assert storage.is_available() is False

    def test_set_then_get_round_trip(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set("history", '[{"city": "Oslo"}]')
        assert storage.get("history") == '[{"city": "Oslo"}]'

    def test_value_is_written_to_key_named_file(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set("history", "[]")
        assert (tmp_path / "history.json").read_text(encoding="utf-8") == "[]"

    def test_no_temp_files_left_behind(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set("history", "[]")
        storage.set("history", "[1]")
        assert [p.name for p in tmp_path.iterdir()] == ["history.json"]

    def test_get_missing_key_returns_none(self, tmp_path):
        assert FileStorage(tmp_path).get("history") is None

    def test_remove_deletes_and_is_idempotent(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set("history", "[]")
        storage.remove("history")
        storage.remove("history")
        assert storage.get("history") is None

    def test_quota_exceeded_raises(self, tmp_path):
        storage = FileStorage(tmp_path, quota_bytes=10)
        with pytest.raises(StorageQuotaError, match="quota"):
            storage.set("history", "x" * 11)
        assert storage.get("history") is None

    def test_quota_counts_utf8_bytes(self, tmp_path):
        storage = FileStorage(tmp_path, quota_bytes=3)
        # "é" is 2 bytes in UTF-8, so two of them exceed 3 bytes
        with pytest.raises(StorageQuotaError):
            storage.set("history", "éé")

    def test_no_quota(self, tmp_path):
        storage = FileStorage(tmp_path, quota_bytes=None)
        storage.set("history", "x" * 10_000)
        assert len(storage.get("history")) == 10_000
