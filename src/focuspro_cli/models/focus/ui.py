"""Timer rendering for focus mode."""

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from .clock import ClockStatus, SessionClock, SessionCompleted, SessionType
from .tracker import ProductivityStats

SESSION_ICONS = {
    SessionType.WORK: "🍅",
    SessionType.SHORT_BREAK: "☕",
    SessionType.LONG_BREAK: "🌴",
}


class TimerDisplay:
    """Builds the live countdown layout for a ``SessionClock``."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def create_layout(self, clock: SessionClock) -> Layout:
        """Create the timer layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        if clock.status is ClockStatus.PAUSED:
            title = "⏸️  PAUSED"
            color = "yellow"
        elif clock.status is ClockStatus.COMPLETED:
            title = "✓  COMPLETED"
            color = "green"
        else:
            title = f"{SESSION_ICONS[clock.session_type]}  {clock.session_type.label}"
            color = "cyan"

        header_text = Text(title, style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))
        layout["body"].update(Align.center(self._create_body_content(clock), vertical="middle"))
        layout["footer"].update(
            Align.center(self._create_footer_text(clock), vertical="middle")
        )

        return layout

    def _create_body_content(self, clock: SessionClock) -> Group:
        remaining = clock.remaining_seconds

        if clock.status is ClockStatus.PAUSED:
            timer_color = "yellow"
        elif remaining < 60:
            timer_color = "red"
        elif remaining < 300:
            timer_color = "yellow"
        else:
            timer_color = "cyan"

        timer_text = Text(clock.format_remaining(), style=f"bold {timer_color}", justify="center")

        progress_pct = min(100, int(clock.fraction_elapsed * 100))
        bar_width = 40
        filled = int(bar_width * progress_pct / 100)
        progress_text = Text(justify="center")
        progress_text.append(
            "▓" * filled + "░" * (bar_width - filled) + f"  {progress_pct}%", style="dim"
        )

        return Group(timer_text, Text(""), progress_text)

    def _create_footer_text(self, clock: SessionClock) -> Text:
        upcoming = clock.next_session_type().label
        return Text(f"Next: {upcoming}  •  Ctrl+C to stop", style="dim", justify="center")


def show_completion_message(
    event: SessionCompleted,
    stats: ProductivityStats | None = None,
    console: Console | None = None,
):
    """Show a completion message after a session ends."""
    console = console or Console()

    lines = [
        f"[bold green]🎉 {event.session_type.label} Complete![/bold green]",
        "",
        f"Duration: {event.planned_duration_minutes} minutes",
    ]
    if stats is not None and event.session_type is SessionType.WORK:
        lines.append(f"Total focus: {stats.focus_minutes_accumulated} minutes")
        lines.append(f"Productivity score: {stats.productivity_score}/100")

    console.print(Panel("\n".join(lines), border_style="green", padding=(1, 2)))


def show_stopped_message(clock: SessionClock, console: Console | None = None):
    """Show a message when a session is stopped early."""
    console = console or Console()

    elapsed_minutes = (clock.planned_seconds - clock.remaining_seconds) // 60

    panel = Panel(
        f"""[yellow]Session Stopped[/yellow]

Session: {clock.session_type.label}
Time elapsed: {elapsed_minutes} minutes
Remaining: {clock.format_remaining()}

Unfinished sessions do not count toward your score.""",
        border_style="yellow",
        padding=(1, 2),
    )

    console.print(panel)
