"""Unit tests for models/focus/ui.py.

Renders through a Console writing to a StringIO buffer.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.layout import Layout

from focuspro_cli.models.focus.clock import (
    FocusDurations,
    SessionClock,
    SessionCompleted,
    SessionType,
)
from focuspro_cli.models.focus.tracker import ProductivityStats
from focuspro_cli.models.focus.ui import (
    TimerDisplay,
    show_completion_message,
    show_stopped_message,
)


def _string_console() -> tuple[Console, StringIO]:
    buf = StringIO()
    con = Console(file=buf, force_terminal=False, no_color=True, width=80)
    return con, buf


def _render(layout: Layout) -> str:
    con, buf = _string_console()
    con.print(layout, height=12)
    return buf.getvalue()


class TestTimerDisplay:
    def test_layout_has_sections(self):
        layout = TimerDisplay().create_layout(SessionClock())
        assert layout["header"] is not None
        assert layout["body"] is not None
        assert layout["footer"] is not None

    def test_idle_work_rendering(self):
        output = _render(TimerDisplay().create_layout(SessionClock()))
        assert "Work" in output
        assert "25:00" in output
        assert "0%" in output
        assert "Next: Short Break" in output

    def test_paused_rendering(self):
        clock = SessionClock(FocusDurations(work=1))
        clock.start()
        for _ in range(30):
            clock.tick()
        clock.pause()
        output = _render(TimerDisplay().create_layout(clock))
        assert "PAUSED" in output
        assert "00:30" in output
        assert "50%" in output

    def test_completed_rendering(self):
        clock = SessionClock(FocusDurations(work=1))
        clock.start()
        for _ in range(60):
            clock.tick()
        output = _render(TimerDisplay().create_layout(clock))
        assert "COMPLETED" in output
        assert "100%" in output


class TestMessages:
    def test_completion_message_with_stats(self):
        con, buf = _string_console()
        stats = ProductivityStats(focus_minutes_accumulated=240, completed_session_count=10)
        show_completion_message(SessionCompleted(SessionType.WORK, 25), stats, console=con)
        output = buf.getvalue()
        assert "Work Complete" in output
        assert "25 minutes" in output
        assert "Total focus: 240 minutes" in output
        assert "75/100" in output

    def test_completion_message_for_break_skips_score(self):
        con, buf = _string_console()
        show_completion_message(
            SessionCompleted(SessionType.SHORT_BREAK, 5), ProductivityStats(), console=con
        )
        output = buf.getvalue()
        assert "Short Break Complete" in output
        assert "Productivity score" not in output

    def test_stopped_message(self):
        con, buf = _string_console()
        clock = SessionClock(FocusDurations(work=2))
        clock.start()
        for _ in range(61):
            clock.tick()
        clock.pause()
        show_stopped_message(clock, console=con)
        output = buf.getvalue()
        assert "Session Stopped" in output
        assert "Time elapsed: 1 minutes" in output
        assert "00:59" in output
