"""Drives a ``SessionClock`` in real time and routes its events.

The clock and tracker never talk to each other. This driver owns the
periodic source: it ticks the clock once per ``tick_interval`` seconds,
hands every event to registered listeners, forwards completed sessions to
the tracker and then rotates the clock to the next session.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from focuspro_cli.models.focus.clock import (
    ClockEvent,
    ClockStatus,
    SessionClock,
    SessionCompleted,
    SessionType,
)
from focuspro_cli.models.focus.tracker import ProductivityStats, ProductivityTracker
from focuspro_cli.utils.logger import get_logger

EventListener = Callable[[ClockEvent, SessionClock], None]


@dataclass(frozen=True)
class SessionOutcome:
    """Result of driving one session."""

    session_type: SessionType
    completed: bool
    event: SessionCompleted | None
    next_session_type: SessionType | None
    stats: ProductivityStats


class FocusSessionDriver:
    """Runs sessions on a clock and records completions on a tracker."""

    def __init__(
        self,
        clock: SessionClock,
        tracker: ProductivityTracker,
        *,
        tick_interval: float = 1.0,
        advance_delay: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.clock = clock
        self.tracker = tracker
        self.tick_interval = tick_interval
        self.advance_delay = advance_delay
        self._sleep = sleep
        self._listeners: list[EventListener] = []
        self._stop_requested = False
        self.logger = get_logger()

    def add_listener(self, listener: EventListener) -> None:
        """Register a callable that receives every clock event."""
        self._listeners.append(listener)

    def remove_listener(self, listener: EventListener) -> None:
        """Unregister a listener added with :meth:`add_listener`."""
        self._listeners.remove(listener)

    def stop(self) -> None:
        """Ask the running loop to pause the clock before the next tick."""
        self._stop_requested = True

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def _publish(self, event: ClockEvent) -> None:
        for listener in self._listeners:
            listener(event, self.clock)

    def _interrupted(self, session_type: SessionType) -> SessionOutcome:
        if self.clock.status is ClockStatus.RUNNING:
            self.clock.pause()
        self.logger.info(
            "session interrupted: %s with %s remaining",
            session_type.value,
            self.clock.format_remaining(),
        )
        return SessionOutcome(
            session_type=session_type,
            completed=False,
            event=None,
            next_session_type=None,
            stats=self.tracker.stats,
        )

    def run_session(self) -> SessionOutcome:
        """Run the clock's current session until it completes or is stopped."""
        self._stop_requested = False
        session_type = self.clock.session_type

        self.clock.start()
        self.logger.info(
            "session started: %s (%s remaining)",
            session_type.value,
            self.clock.format_remaining(),
        )

        try:
            while True:
                if self._stop_requested:
                    return self._interrupted(session_type)

                self._sleep(self.tick_interval)
                event = self.clock.tick()
                if isinstance(event, SessionCompleted):
                    break
                self._publish(event)
        except KeyboardInterrupt:
            self._stop_requested = True
            return self._interrupted(session_type)

        stats = self.tracker.record_completion(
            event.session_type, event.planned_duration_minutes
        )
        self.logger.info(
            "session completed: %s (%d min), score %d",
            event.session_type.value,
            event.planned_duration_minutes,
            self.tracker.score(),
        )
        self._publish(event)

        try:
            self._sleep(self.advance_delay)
        except KeyboardInterrupt:
            # The finished session still rotates; further cycles are skipped
            self._stop_requested = True

        next_type = self.clock.advance_after_completion()
        return SessionOutcome(
            session_type=session_type,
            completed=True,
            event=event,
            next_session_type=next_type,
            stats=stats,
        )

    def run_cycles(self, count: int) -> list[SessionOutcome]:
        """Run up to *count* consecutive sessions, stopping on interruption."""
        outcomes: list[SessionOutcome] = []
        for _ in range(count):
            outcome = self.run_session()
            outcomes.append(outcome)
            if not outcome.completed or self._stop_requested:
                break
        return outcomes
