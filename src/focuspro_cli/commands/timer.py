"""Pomodoro timer commands for FocusPro CLI."""

import time

import typer
from rich.live import Live
from rich.table import Table

from focuspro_cli.models.focus.clock import (
    ClockEvent,
    SessionClock,
    SessionCompleted,
    SessionType,
    plan_rotation,
)
from focuspro_cli.models.focus.ui import (
    SESSION_ICONS,
    TimerDisplay,
    show_completion_message,
    show_stopped_message,
)
from focuspro_cli.services.focus_service import FocusService
from focuspro_cli.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Pomodoro timer for focus sessions")


def _bell_on_completion(event: ClockEvent, clock: SessionClock) -> None:
    if isinstance(event, SessionCompleted):
        console.bell()


@app.command("start")
@command_wrapper
def start_timer(
    session_type: SessionType = typer.Option(
        SessionType.WORK, "--type", "-t", help="Session type to start with"
    ),
    cycles: int = typer.Option(
        1, "--cycles", "-c", min=1, help="Number of consecutive sessions to run"
    ),
    display: bool = typer.Option(
        True, "--display/--no-display", help="Show the live countdown"
    ),
):
    """Start a Pomodoro timer session."""
    service = FocusService()
    if service.refresh_streak():
        console.print("[yellow]Your streak expired. Starting fresh today![/yellow]")

    clock = service.new_clock(session_type)
    driver = service.new_driver(clock, sleep=time.sleep)
    if service.config.feedback.sound:
        driver.add_listener(_bell_on_completion)

    timer_display = TimerDisplay(console)

    for _ in range(cycles):
        console.print(
            f"\n[bold green]{SESSION_ICONS[clock.session_type]} Starting "
            f"{clock.session_type.label} Session[/bold green] ({clock.planned_minutes} min)"
        )

        if display:
            with Live(
                timer_display.create_layout(clock),
                console=console,
                refresh_per_second=4,
                transient=True,
            ) as live:
                def refresh(event: ClockEvent, c: SessionClock, live: Live = live) -> None:
                    live.update(timer_display.create_layout(c))

                driver.add_listener(refresh)
                try:
                    outcome = driver.run_session()
                finally:
                    driver.remove_listener(refresh)
        else:
            outcome = driver.run_session()

        if not outcome.completed:
            show_stopped_message(clock, console)
            break

        show_completion_message(outcome.event, service.stats, console)
        if driver.stop_requested:
            break
        console.print(f"[dim]Next up: {outcome.next_session_type.label}[/dim]")


@app.command("preview")
@command_wrapper
def preview_rotation(
    count: int = typer.Option(8, "--count", "-n", min=1, help="Number of sessions to list"),
):
    """Show the upcoming session rotation."""
    service = FocusService()
    durations = service.config.timer.to_durations()

    table = Table(title="Upcoming Sessions", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Session")
    table.add_column("Duration", justify="right")

    elapsed = 0
    for index, session_type in enumerate(plan_rotation(durations, count), start=1):
        minutes = durations.minutes_for(session_type)
        elapsed += minutes
        table.add_row(
            str(index),
            f"{SESSION_ICONS[session_type]} {session_type.label}",
            f"{minutes}m",
        )

    console.print(table)
    console.print(f"[dim]Total: {elapsed} minutes[/dim]")
