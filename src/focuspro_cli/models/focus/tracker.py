"""Productivity counters and score."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from fractions import Fraction
from typing import Any

from .clock import SessionType
from .exceptions import InvalidInput

DEFAULT_DAILY_GOAL_MINUTES = 480

SESSION_BONUS_PER_SESSION = 5
SESSION_BONUS_CAP = 25
STREAK_BONUS_PER_DAY = 2
STREAK_BONUS_CAP = 20
MAX_SCORE = 100


@dataclass(frozen=True)
class ScoreBreakdown:
    """The three independently capped terms of the score."""

    goal_progress: Fraction
    session_bonus: int
    streak_bonus: int

    @property
    def total(self) -> int:
        """Sum of the terms, rounded half-up and capped at 100."""
        raw = self.goal_progress + self.session_bonus + self.streak_bonus
        return min(math.floor(raw + Fraction(1, 2)), MAX_SCORE)


def score_breakdown(
    focus_minutes: int,
    completed_sessions: int,
    streak_days: int,
    daily_goal_minutes: int,
) -> ScoreBreakdown:
    """Compute the capped score terms with exact arithmetic."""
    return ScoreBreakdown(
        goal_progress=min(Fraction(focus_minutes * 100, daily_goal_minutes), Fraction(100)),
        session_bonus=min(completed_sessions * SESSION_BONUS_PER_SESSION, SESSION_BONUS_CAP),
        streak_bonus=min(streak_days * STREAK_BONUS_PER_DAY, STREAK_BONUS_CAP),
    )


def compute_score(
    focus_minutes: int,
    completed_sessions: int,
    streak_days: int,
    daily_goal_minutes: int,
) -> int:
    """Compute the 0-100 productivity score.

    Each term is capped on its own, then the rounded sum is capped again.
    Rounding is half-up; the arithmetic is exact so ``x.5`` never drifts.
    """
    return score_breakdown(
        focus_minutes, completed_sessions, streak_days, daily_goal_minutes
    ).total


def _require_non_negative(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInput(field, value, "must be a non-negative integer")
    return value


def _require_positive(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInput(field, value, "must be a positive integer")
    return value


@dataclass(frozen=True)
class ProductivityStats:
    """Snapshot of a user's productivity counters."""

    focus_minutes_accumulated: int = 0
    completed_session_count: int = 0
    streak_days: int = 0
    daily_goal_minutes: int = DEFAULT_DAILY_GOAL_MINUTES

    def __post_init__(self):
        _require_non_negative("focus_minutes_accumulated", self.focus_minutes_accumulated)
        _require_non_negative("completed_session_count", self.completed_session_count)
        _require_non_negative("streak_days", self.streak_days)
        _require_positive("daily_goal_minutes", self.daily_goal_minutes)

    @property
    def breakdown(self) -> ScoreBreakdown:
        return score_breakdown(
            self.focus_minutes_accumulated,
            self.completed_session_count,
            self.streak_days,
            self.daily_goal_minutes,
        )

    @property
    def productivity_score(self) -> int:
        return self.breakdown.total

    @property
    def goal_progress(self) -> float:
        """Percent of the daily goal reached, capped at 100."""
        return min(self.focus_minutes_accumulated / self.daily_goal_minutes * 100, 100.0)

    @property
    def average_session_minutes(self) -> float:
        if self.completed_session_count == 0:
            return 0.0
        return self.focus_minutes_accumulated / self.completed_session_count

    def to_dict(self) -> dict:
        """Convert to dictionary for persistence."""
        data = asdict(self)
        data["productivity_score"] = self.productivity_score
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ProductivityStats":
        """Create from dictionary. A stored score is ignored."""
        fields = {
            key: data[key]
            for key in (
                "focus_minutes_accumulated",
                "completed_session_count",
                "streak_days",
                "daily_goal_minutes",
            )
            if key in data
        }
        return cls(**fields)


class ProductivityTracker:
    """Accumulates completed sessions and exposes the derived score.

    Every mutation validates its input first and then swaps in a new
    ``ProductivityStats`` snapshot, so a rejected call leaves nothing
    half-updated.
    """

    def __init__(self, daily_goal_minutes: int = DEFAULT_DAILY_GOAL_MINUTES):
        self._set_stats(ProductivityStats(daily_goal_minutes=daily_goal_minutes))

    @classmethod
    def from_stats(cls, stats: ProductivityStats) -> "ProductivityTracker":
        """Restore a tracker from a persisted snapshot."""
        tracker = cls.__new__(cls)
        tracker._set_stats(stats)
        return tracker

    @property
    def stats(self) -> ProductivityStats:
        return self._stats

    def _set_stats(self, stats: ProductivityStats) -> None:
        self._stats = stats
        self._score = stats.productivity_score

    def record_completion(
        self, session_type: SessionType, planned_duration_minutes: int
    ) -> ProductivityStats:
        """Count a finished session. Breaks are accepted but not counted."""
        _require_positive("planned_duration_minutes", planned_duration_minutes)

        if SessionType(session_type).is_break:
            return self._stats

        stats = self._stats
        self._set_stats(
            replace(
                stats,
                completed_session_count=stats.completed_session_count + 1,
                focus_minutes_accumulated=stats.focus_minutes_accumulated
                + planned_duration_minutes,
            )
        )
        return self._stats

    def advance_streak(self, days: int) -> ProductivityStats:
        """Add *days* to the streak; the result never drops below zero."""
        if isinstance(days, bool) or not isinstance(days, int):
            raise InvalidInput("days", days, "must be an integer")

        streak = max(self._stats.streak_days + days, 0)
        self._set_stats(replace(self._stats, streak_days=streak))
        return self._stats

    def set_daily_goal(self, minutes: int) -> ProductivityStats:
        """Replace the daily goal."""
        _require_positive("daily_goal_minutes", minutes)

        self._set_stats(replace(self._stats, daily_goal_minutes=minutes))
        return self._stats

    def score(self) -> int:
        """Return the productivity score for the current counters."""
        return self._score
