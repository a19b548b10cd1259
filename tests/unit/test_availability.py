"""
Unit tests for the availability tracker.
"""

import threading

import pytest

from support_chat.config.settings import Settings
from support_chat.routing import AvailabilityTracker


@pytest.fixture
def tracker():
    """Fresh tracker with the default 60s cooldown."""
    return AvailabilityTracker()


class TestAvailabilityTracker:
    """Tests for AvailabilityTracker."""

    def test_unknown_model_is_available(self, tracker):
        assert tracker.is_available("gemini-2.5-flash", now=0.0)

    def test_suppressed_within_cooldown(self, tracker):
        tracker.mark_unavailable("a", now=100.0)

        assert not tracker.is_available("a", now=100.0)
        assert not tracker.is_available("a", now=130.0)
        assert not tracker.is_available("a", now=159.999)

    def test_available_again_at_cooldown_end(self, tracker):
        tracker.mark_unavailable("a", now=100.0)

        assert tracker.is_available("a", now=160.0)

    def test_stale_entry_is_purged_on_check(self, tracker):
        tracker.mark_unavailable("a", now=0.0)
        assert len(tracker) == 1

        assert tracker.is_available("a", now=61.0)
        assert len(tracker) == 0
        assert tracker.suppressed_until("a") is None

    def test_suppression_does_not_affect_other_models(self, tracker):
        tracker.mark_unavailable("a", now=0.0)

        assert tracker.is_available("b", now=1.0)

    def test_latest_mark_wins(self, tracker):
        """Re-marking replaces the previous suppression, it does not stack."""
        tracker.mark_unavailable("a", now=0.0)
        tracker.mark_unavailable("a", now=30.0)

        assert tracker.suppressed_until("a") == 90.0
        assert not tracker.is_available("a", now=61.0)
        assert tracker.is_available("a", now=90.0)
        assert tracker.snapshot() == {}

    def test_custom_cooldown(self):
        tracker = AvailabilityTracker(cooldown_seconds=5)
        tracker.mark_unavailable("a", now=0.0)

        assert not tracker.is_available("a", now=4.9)
        assert tracker.is_available("a", now=5.0)

    def test_from_settings(self):
        settings = Settings(
            database_url="sqlite+aiosqlite:///:memory:", model_cooldown_seconds=5
        )
        tracker = AvailabilityTracker.from_settings(settings)
        tracker.mark_unavailable("a", now=0.0)

        assert tracker.suppressed_until("a") == 5.0

    def test_invalid_cooldown(self):
        with pytest.raises(ValueError, match="cooldown_seconds"):
            AvailabilityTracker(cooldown_seconds=0)

    def test_concurrent_marks_and_checks(self, tracker):
        """Threads hammering the same ids leave the map consistent."""
        models = [f"m{i}" for i in range(8)]

        def worker(offset: int) -> None:
            for step in range(200):
                model = models[(offset + step) % len(models)]
                tracker.mark_unavailable(model, now=float(step))
                tracker.is_available(model, now=float(step) + 61.0)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert set(tracker.snapshot()) <= set(models)
        for until in tracker.snapshot().values():
            assert until <= 199.0 + 60.0
