"""Productivity statistics commands."""

import typer

from focuspro_cli.models.focus.clock import SessionType
from focuspro_cli.services.focus_service import FocusService
from focuspro_cli.utils import exit_codes
from focuspro_cli.utils.ui.console import get_console
from focuspro_cli.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_duration,
    format_output,
    format_success,
    get_score_color,
)

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Productivity statistics")


def _stats_payload(service: FocusService) -> dict:
    stats = service.stats
    return {
        "productivity_score": stats.productivity_score,
        "focus_minutes": stats.focus_minutes_accumulated,
        "completed_sessions": stats.completed_session_count,
        "average_session_minutes": round(stats.average_session_minutes, 1),
        "daily_goal_minutes": stats.daily_goal_minutes,
        "goal_progress": round(stats.goal_progress, 1),
        "streak_days": stats.streak_days,
        "best_streak": service.streak.best_streak,
        "last_active_day": service.streak.last_active_day,
    }


@app.command("show")
@command_wrapper
def show_stats(
    output: str = typer.Option("pretty", "--output", "-o", help="pretty, json or yaml"),
):
    """Show accumulated focus statistics and the productivity score."""
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Invalid output format: {output}", exit_code=exit_codes.ERROR_INVALID_ARGS
        )

    service = FocusService()
    service.refresh_streak()
    payload = _stats_payload(service)

    if output != "pretty":
        format_output(payload, output)
        return

    score = payload["productivity_score"]
    color = get_score_color(score)
    console.print(f"\n[bold]📊 Productivity Score:[/bold] [bold {color}]{score}/100[/bold {color}]\n")
    console.print(
        f"Focus Time:        {format_duration(payload['focus_minutes'])}"
        f"  ({payload['completed_sessions']} sessions)"
    )
    console.print(f"Average Session:   {format_duration(payload['average_session_minutes'])}")
    console.print(f"Current Streak:    {payload['streak_days']} days")
    console.print(f"Best Streak:       {payload['best_streak']} days")
    console.print()


@app.command("record")
@command_wrapper
def record_session(
    minutes: int = typer.Argument(..., help="Planned session length in minutes"),
    session_type: SessionType = typer.Option(
        SessionType.WORK, "--type", "-t", help="Session type that was completed"
    ),
):
    """Record a session completed outside the timer."""
    service = FocusService()
    service.refresh_streak()
    stats = service.record_completion(session_type, minutes)

    if session_type is SessionType.WORK:
        format_success(
            f"Recorded {minutes} min of focus. Score is now {stats.productivity_score}/100"
        )
    else:
        console.print(f"[dim]{session_type.label} noted. Breaks do not affect the score.[/dim]")


@app.command("streak")
@command_wrapper
def adjust_streak(
    advance: int = typer.Option(0, "--advance", "-a", help="Days to add (negative to remove)"),
    reset: bool = typer.Option(False, "--reset", help="Reset the streak to zero"),
):
    """Adjust the current streak."""
    service = FocusService()

    if reset:
        stats = service.advance_streak(-service.stats.streak_days)
    else:
        stats = service.advance_streak(advance)

    console.print(
        f"Current streak: [bold]{stats.streak_days}[/bold] days  "
        f"(best {service.streak.best_streak})"
    )
