"""Unit tests for command decorators."""

import pytest
import typer
from typer.testing import CliRunner

from focuspro_cli.commands.decorators import AppError, _exit_code_for, command_wrapper
from focuspro_cli.models.focus.exceptions import FocusError, InvalidInput, InvalidTransition
from focuspro_cli.utils import exit_codes

runner = CliRunner()


def _app_for(func) -> typer.Typer:
    app = typer.Typer()
    app.command()(command_wrapper(func))
    return app


class TestExitCodeFor:
    """Tests for _exit_code_for() mapping."""

    def test_invalid_input(self):
        assert _exit_code_for(InvalidInput("minutes", 0)) == exit_codes.ERROR_INVALID_ARGS

    def test_invalid_transition(self):
        error = InvalidTransition("pause", "idle")
        assert _exit_code_for(error) == exit_codes.ERROR_INVALID_STATE

    def test_generic_focus_error(self):
        assert _exit_code_for(FocusError("boom")) == exit_codes.ERROR_GENERAL


class TestCommandWrapper:
    """Tests for command_wrapper()."""

    def test_success_returns_result(self):
        @command_wrapper
        def ok():
            return 42

        assert ok() == 42

    def test_preserves_name(self):
        @command_wrapper
        def my_command():
            """Doc."""

        assert my_command.__name__ == "my_command"
        assert my_command.__doc__ == "Doc."

    def test_app_error_uses_its_exit_code(self):
        def failing():
            raise AppError("bad storage", exit_code=exit_codes.ERROR_STORAGE)

        result = runner.invoke(_app_for(failing), [])

        assert result.exit_code == exit_codes.ERROR_STORAGE
        assert "Error: bad storage" in result.stdout

    def test_invalid_input_maps_to_invalid_args(self):
        def failing():
            raise InvalidInput("minutes", -5)

        result = runner.invoke(_app_for(failing), [])

        assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
        assert "Invalid minutes: -5" in result.stdout

    def test_invalid_transition_maps_to_invalid_state(self):
        def failing():
            raise InvalidTransition("pause", "idle")

        result = runner.invoke(_app_for(failing), [])

        assert result.exit_code == exit_codes.ERROR_INVALID_STATE
        assert "Cannot pause while idle" in result.stdout

    def test_os_error_maps_to_storage(self):
        def failing():
            raise PermissionError("stats.json")

        result = runner.invoke(_app_for(failing), [])

        assert result.exit_code == exit_codes.ERROR_STORAGE
        assert "Could not access focus data" in result.stdout

    def test_unexpected_error(self):
        def failing():
            raise KeyError("missing")

        result = runner.invoke(_app_for(failing), [])

        assert result.exit_code == exit_codes.ERROR_GENERAL
        assert "An unexpected error occurred" in result.stdout

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def exits():
            raise typer.Exit(code=7)

        with pytest.raises(typer.Exit) as exc_info:
            exits()
        assert exc_info.value.exit_code == 7

    def test_logs_start_and_completion(self, isolated_dirs):
        @command_wrapper
        def logged():
            return None

        logged()

        log_text = (isolated_dirs / "focuspro.log").read_text(encoding="utf-8")
        assert "command started: logged" in log_text
        assert "command completed: logged" in log_text
