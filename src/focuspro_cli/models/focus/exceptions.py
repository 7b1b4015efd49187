"""Errors raised by the focus clock and productivity tracker."""

from __future__ import annotations

from typing import Any


class FocusError(Exception):
    """Base class for recoverable focus-engine errors."""


class InvalidTransition(FocusError):
    """An operation is not legal from the clock's current status."""

    def __init__(self, attempted: str, from_status: Any):
        self.attempted = attempted
        self.from_status = from_status
        status = getattr(from_status, "value", from_status)
        super().__init__(f"Cannot {attempted} while {status}")


class InvalidInput(FocusError, ValueError):
    """A duration, goal or counter value was rejected."""

    def __init__(self, field: str, value: Any, reason: str = "must be positive"):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r} ({reason})")
