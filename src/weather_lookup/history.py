# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
history.py — Bounded, locally persisted log of past weather lookups.

The whole history lives in a single storage slot as a JSON array,
most-recent-first, capped at MAX_HISTORY_ITEMS. Every write overwrites
the full array; two processes writing at once means the last one wins.

This is a best-effort cache, not a system of record: storage problems
(backend unavailable, quota exceeded, corrupt JSON) are printed and
logged, and the store degrades to "empty" or "no-op" instead of raising.
"""

import copy
import json
import time
import uuid
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from weather_lookup.utils import DEFAULT_LOG_PATH, log_error

HISTORY_KEY = "weather_search_history"
MAX_HISTORY_ITEMS = 50


def _new_id() -> str:
    return uuid.uuid4().hex


def _is_entry(item) -> bool:
    """True if `item` is a dict with a timestamp that maps to a calendar date."""
    if not isinstance(item, dict):
        return False
    timestamp = item.get("timestamp")
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        return False
    try:
        datetime.fromtimestamp(timestamp / 1000)
    except (OverflowError, OSError, ValueError):
        return False
    return True


class HistoryStore:
    """Record, read and clear the search history held by a storage backend.

    Args:
        storage: Backend with is_available/get/set/remove (see storage.py).
        key: Slot name the history is stored under.
        max_entries: Maximum number of entries kept.
        clock: Returns the current time in seconds since epoch.
        id_factory: Returns a fresh unique id string.
        log_path: Log file for persistence failures.
    """

    def __init__(
        self,
        storage,
        key: str = HISTORY_KEY,
        max_entries: int = MAX_HISTORY_ITEMS,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = _new_id,
        log_path: Path = DEFAULT_LOG_PATH,
    ):
        self.storage = storage
        self.key = key
        self.max_entries = max_entries
        self.clock = clock
        self.id_factory = id_factory
        self.log_path = log_path

    def record(self, entry: dict) -> dict:
        """Prepend a new entry and persist the capped history.

        Any id/timestamp on `entry` is replaced. The stored entry is a deep
        copy, so later changes to `entry` do not reach the history.

        Returns:
            A copy of the stored entry, with its assigned id and timestamp.
        """
        new_entry = copy.deepcopy(entry)
        new_entry["id"] = self.id_factory()
        new_entry["timestamp"] = int(self.clock() * 1000)

        if not self.storage.is_available():
            self._warn("Storage unavailable; search not saved to history")
            return copy.deepcopy(new_entry)

        updated = [new_entry] + self.read_all()
        updated = updated[: self.max_entries]

        try:
            self.storage.set(self.key, json.dumps(updated))
        except (OSError, TypeError, ValueError) as e:
            self._warn(f"Failed to save search history: {e}")

        return copy.deepcopy(new_entry)

    def read_all(self) -> list[dict]:
        """Return the persisted history, most-recent-first.

        Returns an empty list when storage is unavailable, nothing has
        been stored yet, or the stored payload is not a JSON array.
        Items without a usable millisecond timestamp are skipped.
        """
        if not self.storage.is_available():
            return []

        try:
            stored = self.storage.get(self.key)
            if not stored:
                return []
            data = json.loads(stored)
        except (OSError, ValueError) as e:
            self._warn(f"Failed to retrieve search history: {e}")
            return []

        if not isinstance(data, list):
            self._warn("Failed to retrieve search history: stored value is not a list")
            return []
        entries = [item for item in data if _is_entry(item)]
        dropped = len(data) - len(entries)
        if dropped:
            self._warn(f"Ignored {dropped} malformed search history entr{'y' if dropped == 1 else 'ies'}")
        return entries

    def clear(self) -> None:
        """Delete the persisted history. Clearing an empty store is fine."""
        if not self.storage.is_available():
            return

        try:
            self.storage.remove(self.key)
        except OSError as e:
            self._warn(f"Failed to clear search history: {e}")

    def _warn(self, message: str) -> None:
        print(f"[history] {message}")
        log_error(message, log_path=self.log_path)
