# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
query.py — Grouping and filtering of search history for display.

Pure functions over a list of history entries: nothing here reads or
writes storage, and input lists are never modified. Output order always
follows input order (history is most-recent-first).
"""

from __future__ import annotations
from collections import defaultdict
from datetime import datetime

ALL_DATES = "all"


def date_label(timestamp_ms: int) -> str:
    """Return the local calendar date of a timestamp, e.g. 'January 5, 2024'."""
    d = datetime.fromtimestamp(timestamp_ms / 1000)
    return f"{d:%B} {d.day}, {d.year}"


def group_by_date(entries: list[dict]) -> list[dict]:
    """Partition entries by calendar date.

    Groups come out in the order their date is first seen while scanning
    `entries`, not sorted by date. Within a group, entries keep their
    relative input order.

    Returns list of dicts with keys:
        date (str label), entries (list of history entries)
    """
    by_date: dict[str, list[dict]] = defaultdict(list)
    for entry in entries:
        by_date[date_label(entry["timestamp"])].append(entry)

    return [{"date": label, "entries": items} for label, items in by_date.items()]


def filter_history(
    entries: list[dict],
    city_query: str = "",
    date: str | None = ALL_DATES,
) -> list[dict]:
    """Filter entries by city substring and date label.

    Args:
        entries: History entries, most-recent-first.
        city_query: Case-insensitive substring of the city name. Empty
            matches every city.
        date: A label produced by date_label(), or ALL_DATES / None for
            any date.

    Returns:
        Matching entries in their original relative order.
    """
    needle = (city_query or "").strip().casefold()
    any_date = date in (None, "", ALL_DATES)

    result = []
    for entry in entries:
        if needle and needle not in (entry.get("city") or "").casefold():
            continue
        if not any_date and date_label(entry["timestamp"]) != date:
            continue
        result.append(entry)
    return result


def available_dates(entries: list[dict]) -> list[str]:
    """Distinct date labels in the order they first appear in `entries`."""
    labels: list[str] = []
    for entry in entries:
        label = date_label(entry["timestamp"])
        if label not in labels:
            labels.append(label)
    return labels
