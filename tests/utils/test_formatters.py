"""Unit tests for utils/ui/formatters.py."""

from __future__ import annotations

import json

import pytest
import yaml

from focuspro_cli.utils.ui.formatters import (
    format_duration,
    format_error,
    format_output,
    format_success,
    get_score_color,
    render_progress_bar,
)


class TestFormatDuration:
    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "0m"), (25, "25m"), (60, "1h 0m"), (95, "1h 35m"), (24.6, "24m")],
    )
    def test_values(self, minutes, expected):
        assert format_duration(minutes) == expected


class TestProgressBar:
    def test_half(self):
        assert render_progress_bar(50, 100, width=10) == "█████░░░░░"

    def test_overflow_is_capped(self):
        assert render_progress_bar(500, 100, width=4) == "████"

    def test_zero_max(self):
        assert render_progress_bar(5, 0, width=3) == "░░░"


@pytest.mark.parametrize("score,color", [(95, "green"), (80, "green"), (50, "yellow"), (10, "red")])
def test_score_color(score, color):
    assert get_score_color(score) == color


class TestFormatOutput:
    def test_json(self, capsys):
        format_output({"a": 1, "b": None}, "json")
        assert json.loads(capsys.readouterr().out) == {"a": 1, "b": None}

    def test_yaml_keeps_order(self, capsys):
        format_output({"z": 1, "a": 2}, "yaml")
        out = capsys.readouterr().out
        assert yaml.safe_load(out) == {"z": 1, "a": 2}
        assert out.index("z:") < out.index("a:")

    def test_pretty(self, capsys):
        format_output({"daily_goal": 480, "sound": True, "ratio": 0.25}, "pretty")
        out = capsys.readouterr().out
        assert "Daily Goal" in out
        assert "480" in out
        assert "✓" in out
        assert "0.2" in out


def test_messages(capsys):
    format_success("saved")
    format_error("broken")
    out = capsys.readouterr().out
    assert "Success: saved" in out
    assert "Error: broken" in out
