"""Configuration management commands."""

import typer

from focuspro_cli.models.focus.clock import SessionType
from focuspro_cli.services.config_service import get_config_service
from focuspro_cli.utils import exit_codes
from focuspro_cli.utils.ui.console import get_console
from focuspro_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Configuration management")


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("pretty", "--output", "-o", help="pretty, json or yaml"),
):
    """Show the current configuration."""
    config = get_config_service().config
    flat = {}
    for section, values in config.model_dump().items():
        for key, value in values.items():
            flat[f"{section}.{key}"] = value
    format_output(flat, output)


@app.command("set-duration")
@command_wrapper
def set_duration(
    session_type: SessionType = typer.Argument(..., help="Session type to change"),
    minutes: int = typer.Argument(..., help="New length in minutes"),
):
    """Set the length of a session type."""
    if minutes <= 0:
        raise AppError(
            "Duration must be a positive number of minutes",
            exit_code=exit_codes.ERROR_INVALID_ARGS,
        )

    service = get_config_service()
    service.config.timer.set_duration(session_type, minutes)
    service.save_config()
    format_success(f"{session_type.label} sessions now last {minutes} minutes")


@app.command("sound")
@command_wrapper
def set_sound(
    enabled: bool = typer.Argument(..., help="Ring the terminal bell when a session ends"),
):
    """Enable or disable the completion bell."""
    service = get_config_service()
    service.config.feedback.sound = enabled
    service.save_config()
    format_success(f"Completion sound {'enabled' if enabled else 'disabled'}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
):
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all settings to defaults?"):
        console.print("[yellow]Cancelled[/yellow]")
        return

    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
