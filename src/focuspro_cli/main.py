"""Main entry point for FocusPro CLI."""

import typer

from focuspro_cli import __version__
from focuspro_cli.commands import config, goals, stats, timer
from focuspro_cli.models.focus.clock import SessionType
from focuspro_cli.utils.ui.console import get_console

app = typer.Typer(
    name="focuspro",
    help="Pomodoro focus timer with productivity scoring",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(timer.app, name="timer", help="Pomodoro timer for focus sessions")
app.add_typer(stats.app, name="stats", help="Productivity statistics")
app.add_typer(goals.app, name="goals", help="Focus goals and targets")
app.add_typer(config.app, name="config", help="Configuration management")


# Add top-level commands
@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]FocusPro CLI[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def focus(
    cycles: int = typer.Option(
        1, "--cycles", "-c", min=1, help="Number of consecutive sessions to run"
    ),
) -> None:
    """Start a work session (shortcut for 'timer start')."""
    # Delegate to timer command
    timer.start_timer(session_type=SessionType.WORK, cycles=cycles, display=True)


@app.command()
def score(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show the productivity score (shortcut for 'stats show')."""
    # Delegate to stats command
    stats.show_stats(output=output)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
