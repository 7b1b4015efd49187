"""Day-rollover bookkeeping for focus streaks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from .tracker import ProductivityTracker


@dataclass
class StreakKeeper:
    """Decides once per calendar day whether a streak grows or restarts.

    The tracker only stores and scores the streak; this object owns the
    calendar rule. An active day directly after the previous one extends the
    streak, a gap restarts it at one.
    """

    last_active_day: str | None = None  # ISO date
    best_streak: int = 0

    @property
    def last_active_date(self) -> date | None:
        if self.last_active_day:
            return date.fromisoformat(self.last_active_day)
        return None

    def record_activity(self, tracker: ProductivityTracker, today: date | None = None) -> bool:
        """Register activity on *today*.

        Returns True when the tracker's streak was changed.
        """
        today = today or date.today()
        last = self.last_active_date

        if last is not None and today <= last:
            return False

        if last is None or today - last > timedelta(days=1):
            tracker.advance_streak(-tracker.stats.streak_days)

        tracker.advance_streak(1)
        self.last_active_day = today.isoformat()
        self.best_streak = max(self.best_streak, tracker.stats.streak_days)
        return True

    def expire_if_stale(self, tracker: ProductivityTracker, today: date | None = None) -> bool:
        """Reset the streak to zero when more than a day passed without activity."""
        today = today or date.today()
        last = self.last_active_date

        if last is None or today - last <= timedelta(days=1):
            return False
        if tracker.stats.streak_days == 0:
            return False

        tracker.advance_streak(-tracker.stats.streak_days)
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary for persistence."""
        return {
            "last_active_day": self.last_active_day,
            "best_streak": self.best_streak,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StreakKeeper":
        """Create from dictionary."""
        return cls(
            last_active_day=data.get("last_active_day"),
            best_streak=int(data.get("best_streak", 0)),
        )
