"""Unit tests for focuspro_cli.models.config_models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from focuspro_cli.models.config_models import AppConfig, GoalsConfig, TimerConfig
from focuspro_cli.models.focus.clock import FocusDurations, SessionType


class TestTimerConfig:
    def test_defaults_match_clock_defaults(self):
        assert TimerConfig().to_durations() == FocusDurations()

    def test_to_durations_carries_values(self):
        durations = TimerConfig(work=50, short_break=10, long_break=30).to_durations()
        assert durations.minutes_for(SessionType.WORK) == 50
        assert durations.minutes_for(SessionType.SHORT_BREAK) == 10
        assert durations.minutes_for(SessionType.LONG_BREAK) == 30

    @pytest.mark.parametrize("field", ["work", "short_break", "long_break"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValidationError):
            TimerConfig(**{field: 0})

    def test_negative_advance_delay_rejected(self):
        with pytest.raises(ValidationError):
            TimerConfig(advance_delay_seconds=-1)

    def test_set_duration(self):
        config = TimerConfig()
        config.set_duration(SessionType.LONG_BREAK, 20)
        assert config.long_break == 20

    def test_set_duration_rejects_zero(self):
        config = TimerConfig()
        with pytest.raises(ValueError):
            config.set_duration(SessionType.WORK, 0)
        assert config.work == 25


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.goals.daily_minutes == 480
        assert config.feedback.sound is True

    def test_json_round_trip(self):
        config = AppConfig(goals=GoalsConfig(daily_minutes=300))
        loaded = AppConfig.model_validate_json(config.model_dump_json())
        assert loaded == config

    def test_goal_must_be_positive(self):
        with pytest.raises(ValidationError):
            GoalsConfig(daily_minutes=0)
