"""
Availability tracking for upstream models.
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


DEFAULT_COOLDOWN_SECONDS = 60.0


class AvailabilityTracker:
    """
    Records which models are temporarily suppressed after a failure.

    Maps model id -> suppressed-until timestamp. Expiry is lazy: a stale
    entry is removed the next time ``is_available`` looks at it. Timestamps
    are plain floats on whatever clock the caller uses (the router passes
    ``time.monotonic()``).

    Safe to share between concurrent requests; writes are last-write-wins.
    """

    def __init__(self, cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS):
        if cooldown_seconds <= 0:
            raise ValueError("cooldown_seconds must be > 0")
        self.cooldown_seconds = cooldown_seconds
        self._suppressed_until: dict[str, float] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings) -> "AvailabilityTracker":
        return cls(cooldown_seconds=settings.model_cooldown_seconds)

    def mark_unavailable(self, model: str, now: float) -> None:
        """Suppress ``model`` until ``now + cooldown``, replacing any prior entry."""
        until = now + self.cooldown_seconds
        with self._lock:
            self._suppressed_until[model] = until
        logger.warning(
            f"Model {model} marked unavailable for {self.cooldown_seconds:.0f}s"
        )

    def is_available(self, model: str, now: float) -> bool:
        """Return True if ``model`` may be tried at ``now``."""
        with self._lock:
            until = self._suppressed_until.get(model)
            if until is None:
                return True
            if until <= now:
                del self._suppressed_until[model]
                return True
            return False

    def suppressed_until(self, model: str) -> float | None:
        """Raw suppression timestamp for ``model`` (no expiry applied)."""
        with self._lock:
            return self._suppressed_until.get(model)

    def snapshot(self) -> dict[str, float]:
        """Copy of the current suppression map."""
        with self._lock:
            return dict(self._suppressed_until)

    def __len__(self) -> int:
        with self._lock:
            return len(self._suppressed_until)
