"""Rolling per-scorer transaction history used by velocity and outlier rules."""

import bisect
from collections.abc import Iterator
from datetime import datetime, timedelta

from .config import HistorySettings
from .models import HistoryEntry, as_utc_naive


class HistoryWindow:
    """Time-ordered window of recent transactions.

    Entries older than the retention horizon (relative to the newest entry)
    are evicted on every ``record``; the window never holds more than
    ``max_entries`` and always keeps the most recent ones by time.
    Not thread-safe on its own; the owning scorer serializes access.
    """

    def __init__(self, settings: HistorySettings | None = None) -> None:
        settings = settings or HistorySettings()
        self._retention = timedelta(hours=settings.retention_hours)
        self._max_entries = settings.max_entries
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def record(self, entry: HistoryEntry) -> None:
        times = [e.transaction_time for e in self._entries]
        index = bisect.bisect_right(times, entry.transaction_time)
        self._entries.insert(index, entry)
        self._evict()

    def recent(self, window: timedelta, now: datetime) -> list[HistoryEntry]:
        """Entries with ``now - window <= time <= now``, oldest first."""
        now = as_utc_naive(now)
        start = now - window
        return [e for e in self._entries if start <= e.transaction_time <= now]

    def previous(self, now: datetime) -> HistoryEntry | None:
        """Latest entry at or before ``now``."""
        now = as_utc_naive(now)
        for entry in reversed(self._entries):
            if entry.transaction_time <= now:
                return entry
        return None

    def clear(self) -> None:
        self._entries.clear()

    def _evict(self) -> None:
        cutoff = self._entries[-1].transaction_time - self._retention
        self._entries = [e for e in self._entries if e.transaction_time > cutoff]
        if len(self._entries) > self._max_entries:
            self._entries = self._entries[-self._max_entries :]
