"""Unit tests for the rolling history window."""

from datetime import UTC, datetime, timedelta

from src.domains.fraud.config import HistorySettings
from src.domains.fraud.history import HistoryWindow
from src.domains.fraud.models import HistoryEntry

T0 = datetime(2026, 1, 15, 12, 0)


def _entry(when: datetime, amount: float = 100.0, location: str = "Austin, USA") -> HistoryEntry:
    return HistoryEntry(
        amount=amount,
        transaction_time=when,
        location=location,
        merchant_category="retail",
    )


class TestHistoryWindow:
    def test_empty(self):
        window = HistoryWindow()
        assert len(window) == 0
        assert window.previous(T0) is None
        assert window.recent(timedelta(hours=1), T0) == []

    def test_capacity_keeps_most_recent(self):
        window = HistoryWindow(HistorySettings(max_entries=3))
        for i in range(4):
            window.record(_entry(T0 + timedelta(minutes=i), amount=float(i)))

        assert len(window) == 3
        assert [e.amount for e in window] == [1.0, 2.0, 3.0]

    def test_capacity_keeps_most_recent_by_time_not_insertion(self):
        window = HistoryWindow(HistorySettings(max_entries=2))
        window.record(_entry(T0 + timedelta(minutes=5), amount=5.0))
        window.record(_entry(T0 + timedelta(minutes=10), amount=10.0))
        window.record(_entry(T0, amount=0.0))

        assert [e.amount for e in window] == [5.0, 10.0]

    def test_retention_eviction(self):
        window = HistoryWindow()
        window.record(_entry(T0))
        window.record(_entry(T0 + timedelta(hours=23)))
        assert len(window) == 2

        window.record(_entry(T0 + timedelta(hours=25)))
        assert len(window) == 2
        assert all(e.transaction_time > T0 for e in window)

    def test_entry_exactly_at_horizon_evicted(self):
        window = HistoryWindow()
        window.record(_entry(T0))
        window.record(_entry(T0 + timedelta(hours=24)))
        assert len(window) == 1

    def test_out_of_order_insertion_sorted(self):
        window = HistoryWindow()
        window.record(_entry(T0 + timedelta(minutes=10), amount=2.0))
        window.record(_entry(T0, amount=1.0))
        window.record(_entry(T0 + timedelta(minutes=20), amount=3.0))

        assert [e.amount for e in window] == [1.0, 2.0, 3.0]

    def test_recent_is_inclusive(self):
        window = HistoryWindow()
        for minutes in (0, 5, 10):
            window.record(_entry(T0 + timedelta(minutes=minutes)))

        now = T0 + timedelta(minutes=10)
        assert len(window.recent(timedelta(minutes=5), now)) == 2
        assert len(window.recent(timedelta(minutes=10), now)) == 3

    def test_recent_excludes_later_entries(self):
        window = HistoryWindow()
        window.record(_entry(T0 + timedelta(minutes=30)))
        assert window.recent(timedelta(hours=1), T0) == []

    def test_previous(self):
        window = HistoryWindow()
        window.record(_entry(T0, location="Austin, USA"))
        window.record(_entry(T0 + timedelta(minutes=30), location="Mumbai, India"))

        assert window.previous(T0 + timedelta(minutes=10)).location == "Austin, USA"
        assert window.previous(T0 + timedelta(hours=1)).location == "Mumbai, India"

    def test_aware_and_naive_times_compare(self):
        window = HistoryWindow()
        window.record(_entry(T0.replace(tzinfo=UTC)))
        window.record(_entry(T0 + timedelta(minutes=1)))

        assert len(window.recent(timedelta(minutes=5), T0 + timedelta(minutes=2))) == 2
        assert window.previous(T0.replace(tzinfo=UTC)) is not None

    def test_clear(self):
        window = HistoryWindow()
        window.record(_entry(T0))
        window.clear()
        assert len(window) == 0
