"""Composes configuration, storage and the focus engine for commands."""

from __future__ import annotations

from datetime import date

from focuspro_cli.models.focus.clock import (
    ClockEvent,
    SessionClock,
    SessionCompleted,
    SessionType,
)
from focuspro_cli.models.focus.streak import StreakKeeper
from focuspro_cli.models.focus.tracker import ProductivityStats, ProductivityTracker
from focuspro_cli.services.config_service import ConfigService, get_config_service
from focuspro_cli.services.session_driver import FocusSessionDriver
from focuspro_cli.services.stats_service import StatsStore
from focuspro_cli.utils.logger import get_logger


class FocusService:
    """Loads the user's tracker and streak state and saves them back."""

    def __init__(
        self,
        config_service: ConfigService | None = None,
        store: StatsStore | None = None,
    ):
        self.config_service = config_service or get_config_service()
        self.config = self.config_service.config
        self.store = store or StatsStore()

        snapshot = self.store.load()
        self.tracker: ProductivityTracker = snapshot.tracker()
        self.streak: StreakKeeper = snapshot.streak
        self.logger = get_logger()

        goal = self.config.goals.daily_minutes
        if self.tracker.stats.daily_goal_minutes != goal:
            self.tracker.set_daily_goal(goal)

    @property
    def stats(self) -> ProductivityStats:
        return self.tracker.stats

    def new_clock(self, session_type: SessionType = SessionType.WORK) -> SessionClock:
        """Create a clock using the configured durations."""
        return SessionClock(self.config.timer.to_durations(), session_type=session_type)

    def new_driver(self, clock: SessionClock, **kwargs) -> FocusSessionDriver:
        """Create a driver that records into this service's tracker and persists."""
        kwargs.setdefault("advance_delay", self.config.timer.advance_delay_seconds)
        driver = FocusSessionDriver(clock, self.tracker, **kwargs)
        driver.add_listener(self.handle_event)
        return driver

    def handle_event(self, event: ClockEvent, clock: SessionClock) -> None:
        """Persist after every completed session; work sessions also feed the streak."""
        if not isinstance(event, SessionCompleted):
            return
        if event.session_type is SessionType.WORK:
            self.streak.record_activity(self.tracker)
        self.save()

    def record_completion(
        self,
        session_type: SessionType,
        minutes: int,
        today: date | None = None,
    ) -> ProductivityStats:
        """Record a finished session, update the streak and persist."""
        self.tracker.record_completion(session_type, minutes)
        if SessionType(session_type) is SessionType.WORK:
            self.streak.record_activity(self.tracker, today)
        self.save()
        return self.tracker.stats

    def refresh_streak(self, today: date | None = None) -> bool:
        """Drop a stale streak. Returns True when it was reset."""
        changed = self.streak.expire_if_stale(self.tracker, today)
        if changed:
            self.logger.info("streak expired, last active %s", self.streak.last_active_day)
            self.save()
        return changed

    def advance_streak(self, days: int) -> ProductivityStats:
        self.tracker.advance_streak(days)
        self.streak.best_streak = max(self.streak.best_streak, self.tracker.stats.streak_days)
        self.save()
        return self.tracker.stats

    def set_daily_goal(self, minutes: int) -> ProductivityStats:
        """Set the goal on the tracker and in the config file."""
        self.tracker.set_daily_goal(minutes)
        self.config.goals.daily_minutes = minutes
        self.config_service.save_config()
        self.save()
        return self.tracker.stats

    def save(self) -> None:
        self.store.save_tracker(self.tracker, self.streak)
