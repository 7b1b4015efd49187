"""Focus mode - Pomodoro clock and productivity scoring."""

from .clock import (
    ClockStatus,
    FocusDurations,
    Progress,
    SessionClock,
    SessionCompleted,
    SessionType,
)
from .exceptions import FocusError, InvalidInput, InvalidTransition
from .streak import StreakKeeper
from .tracker import ProductivityStats, ProductivityTracker, compute_score

__all__ = [
    "ClockStatus",
    "FocusDurations",
    "Progress",
    "SessionClock",
    "SessionCompleted",
    "SessionType",
    "FocusError",
    "InvalidInput",
    "InvalidTransition",
    "StreakKeeper",
    "ProductivityStats",
    "ProductivityTracker",
    "compute_score",
]
