"""Goals and targets commands."""

import typer

from focuspro_cli.models.focus.tracker import (
    SESSION_BONUS_CAP,
    STREAK_BONUS_CAP,
)
from focuspro_cli.services.focus_service import FocusService
from focuspro_cli.utils.ui.console import get_console
from focuspro_cli.utils.ui.formatters import (
    format_duration,
    format_success,
    render_progress_bar,
)

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Focus goals and targets")


@app.command("show")
@command_wrapper
def show_goals():
    """Show the daily goal and how the score is made up."""
    service = FocusService()
    stats = service.stats
    breakdown = stats.breakdown

    console.print("\n[bold cyan]🎯 Focus Goal & Score[/bold cyan]\n")

    achieved = stats.focus_minutes_accumulated >= stats.daily_goal_minutes
    status = "[green]✓[/green]" if achieved else ""
    bar = render_progress_bar(stats.focus_minutes_accumulated, stats.daily_goal_minutes)
    console.print(
        f"  Focus Time:   {format_duration(stats.focus_minutes_accumulated)}"
        f"/{format_duration(stats.daily_goal_minutes)}  "
        f"{bar} {stats.goal_progress:.0f}% {status}"
    )

    console.print("\n[bold]Score Breakdown[/bold]")
    console.print(f"  Goal progress:  {float(breakdown.goal_progress):5.1f} / 100")
    console.print(f"  Session bonus:  {breakdown.session_bonus:5d} / {SESSION_BONUS_CAP}")
    console.print(f"  Streak bonus:   {breakdown.streak_bonus:5d} / {STREAK_BONUS_CAP}")
    console.print(f"  [bold]Score:          {breakdown.total:5d} / 100[/bold]")

    console.print()
    if achieved:
        console.print("[bold green]🎉 Daily goal reached![/bold green]")
    else:
        left = stats.daily_goal_minutes - stats.focus_minutes_accumulated
        console.print(f"[dim]💡 Tip: {format_duration(left)} more focus to hit your goal![/dim]")


@app.command("set")
@command_wrapper
def set_goal(
    minutes: int = typer.Argument(..., help="Daily focus goal in minutes"),
):
    """Set the daily focus goal."""
    service = FocusService()
    stats = service.set_daily_goal(minutes)
    format_success(
        f"Daily goal set to {format_duration(minutes)}. "
        f"Score is now {stats.productivity_score}/100"
    )
