"""Configuration models for FocusPro CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field

from focuspro_cli.models.focus.clock import FocusDurations, SessionType


class TimerConfig(BaseModel):
    """Pomodoro timer configuration."""

    work: int = Field(default=25, gt=0, description="Work session length (minutes)")
    short_break: int = Field(default=5, gt=0, description="Short break length (minutes)")
    long_break: int = Field(default=15, gt=0, description="Long break length (minutes)")
    sessions_before_long_break: int = Field(default=3, gt=0)
    advance_delay_seconds: float = Field(
        default=2.0, ge=0, description="Pause between a finished session and the next"
    )

    def to_durations(self) -> FocusDurations:
        """Build the clock's duration settings."""
        return FocusDurations(
            work=self.work,
            short_break=self.short_break,
            long_break=self.long_break,
            sessions_before_long_break=self.sessions_before_long_break,
        )

    def set_duration(self, session_type: SessionType, minutes: int) -> None:
        """Set the duration of one session type."""
        if minutes <= 0:
            raise ValueError("Duration must be a positive number of minutes")
        setattr(self, SessionType(session_type).value, minutes)


class GoalsConfig(BaseModel):
    """Focus goal configuration."""

    daily_minutes: int = Field(default=480, gt=0)


class FeedbackConfig(BaseModel):
    """Completion feedback configuration."""

    sound: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main FocusPro configuration"""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    goals: GoalsConfig = Field(default_factory=GoalsConfig)
    feedback: FeedbackConfig = Field(default_factory=FeedbackConfig)
