"""Pomodoro countdown state machine.

``SessionClock`` runs one countdown at a time and decides which session
follows a completed one. It never sleeps or reads the wall clock: the owner
calls :meth:`SessionClock.tick` once per second while the clock is running
and routes the returned events wherever they need to go.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidInput, InvalidTransition


class SessionType(str, Enum):
    """Kind of timed interval."""

    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def is_break(self) -> bool:
        return self is not SessionType.WORK

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class ClockStatus(str, Enum):
    """Lifecycle state of a ``SessionClock``."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass(frozen=True)
class FocusDurations:
    """Nominal session lengths in whole minutes."""

    work: int = 25
    short_break: int = 5
    long_break: int = 15
    sessions_before_long_break: int = 3

    def __post_init__(self):
        for name in ("work", "short_break", "long_break", "sessions_before_long_break"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidInput(name, value, "must be a positive integer")

    def minutes_for(self, session_type: SessionType) -> int:
        """Get duration in minutes for *session_type*."""
        if session_type is SessionType.WORK:
            return self.work
        elif session_type is SessionType.SHORT_BREAK:
            return self.short_break
        else:  # long_break
            return self.long_break


@dataclass(frozen=True)
class Progress:
    """Emitted by a tick that did not finish the session."""

    remaining_seconds: int
    fraction_elapsed: float


@dataclass(frozen=True)
class SessionCompleted:
    """Emitted by the tick that brings the countdown to zero."""

    session_type: SessionType
    planned_duration_minutes: int


ClockEvent = Progress | SessionCompleted


def rotate(
    finished: SessionType, completed_cycles: int, sessions_before_long_break: int
) -> SessionType:
    """Return the session that follows *finished*.

    After work, every ``sessions_before_long_break``-th session (counted from
    zero with *completed_cycles*) earns a long break. Breaks are always
    followed by work.
    """
    if finished is SessionType.WORK:
        if completed_cycles % sessions_before_long_break == sessions_before_long_break - 1:
            return SessionType.LONG_BREAK
        return SessionType.SHORT_BREAK
    return SessionType.WORK


def plan_rotation(
    durations: FocusDurations,
    count: int,
    start: SessionType = SessionType.WORK,
    completed_cycles: int = 0,
) -> list[SessionType]:
    """List the next *count* session types beginning with *start*."""
    plan: list[SessionType] = []
    current = start
    for _ in range(count):
        plan.append(current)
        following = rotate(current, completed_cycles, durations.sessions_before_long_break)
        if current is SessionType.WORK:
            completed_cycles += 1
        current = following
    return plan


_IDLE_LIKE = (ClockStatus.IDLE, ClockStatus.PAUSED, ClockStatus.COMPLETED)


class SessionClock:
    """Single-session countdown with Pomodoro rotation."""

    def __init__(
        self,
        durations: FocusDurations | None = None,
        session_type: SessionType = SessionType.WORK,
    ):
        self.durations = durations or FocusDurations()
        self._session_type = SessionType(session_type)
        self._remaining_seconds = self.planned_seconds
        self._status = ClockStatus.IDLE
        self._completed_work_break_cycles = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def session_type(self) -> SessionType:
        return self._session_type

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def status(self) -> ClockStatus:
        return self._status

    @property
    def completed_work_break_cycles(self) -> int:
        return self._completed_work_break_cycles

    @property
    def planned_minutes(self) -> int:
        return self.durations.minutes_for(self._session_type)

    @property
    def planned_seconds(self) -> int:
        return self.planned_minutes * 60

    @property
    def fraction_elapsed(self) -> float:
        planned = self.planned_seconds
        return (planned - self._remaining_seconds) / planned

    def format_remaining(self) -> str:
        """Format remaining time as MM:SS."""
        mins, secs = divmod(self._remaining_seconds, 60)
        return f"{mins:02d}:{secs:02d}"

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start or resume the countdown."""
        if self._status is ClockStatus.RUNNING:
            raise InvalidTransition("start", self._status)

        # A finished countdown is re-armed rather than started at zero.
        if self._status is ClockStatus.COMPLETED and self._remaining_seconds == 0:
            self._remaining_seconds = self.planned_seconds
        self._status = ClockStatus.RUNNING

    def pause(self) -> None:
        """Pause a running countdown."""
        if self._status is not ClockStatus.RUNNING:
            raise InvalidTransition("pause", self._status)
        self._status = ClockStatus.PAUSED

    def tick(self) -> ClockEvent:
        """Advance the countdown by one second.

        Returns ``SessionCompleted`` on the tick that reaches zero and
        ``Progress`` on every other tick.
        """
        if self._status is not ClockStatus.RUNNING:
            raise InvalidTransition("tick", self._status)

        remaining = max(self._remaining_seconds - 1, 0)
        self._remaining_seconds = remaining

        if remaining == 0:
            self._status = ClockStatus.COMPLETED
            return SessionCompleted(
                session_type=self._session_type,
                planned_duration_minutes=self.planned_minutes,
            )

        return Progress(
            remaining_seconds=remaining,
            fraction_elapsed=self.fraction_elapsed,
        )

    def reset(self) -> None:
        """Rewind the current session to its full duration and go idle."""
        self._remaining_seconds = self.planned_seconds
        self._status = ClockStatus.IDLE

    def switch_session_type(self, new_type: SessionType) -> None:
        """Change session type. Not allowed while running."""
        if self._status not in _IDLE_LIKE:
            raise InvalidTransition("switch session type", self._status)

        self._session_type = SessionType(new_type)
        self.reset()

    def next_session_type(self) -> SessionType:
        """Determine the session that follows the current one."""
        return rotate(
            self._session_type,
            self._completed_work_break_cycles,
            self.durations.sessions_before_long_break,
        )

    def advance_after_completion(self) -> SessionType:
        """Move to the next session after a ``SessionCompleted`` event.

        The rotation is decided from the counter value before it is
        incremented; only finished work sessions increment it.
        """
        if self._status is not ClockStatus.COMPLETED:
            raise InvalidTransition("advance", self._status)

        finished = self._session_type
        next_type = self.next_session_type()
        self.switch_session_type(next_type)

        if finished is SessionType.WORK:
            self._completed_work_break_cycles += 1

        return next_type

    def __repr__(self) -> str:
        return (
            f"SessionClock(session_type={self._session_type.value!r}, "
            f"status={self._status.value!r}, remaining={self.format_remaining()}, "
            f"cycles={self._completed_work_break_cycles})"
        )
