"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from focuspro_cli.models.focus.exceptions import FocusError, InvalidInput, InvalidTransition
from focuspro_cli.utils import exit_codes
from focuspro_cli.utils.logger import get_logger
from focuspro_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _exit_code_for(error: FocusError) -> int:
    if isinstance(error, InvalidInput):
        return exit_codes.ERROR_INVALID_ARGS
    if isinstance(error, InvalidTransition):
        return exit_codes.ERROR_INVALID_STATE
    return exit_codes.ERROR_GENERAL


def command_wrapper(func: Callable):
    """Wrap a command with logging and uniform error reporting."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except (AppError, FocusError) as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            code = e.exit_code if isinstance(e, AppError) else _exit_code_for(e)
            raise typer.Exit(code=code) from e

        except typer.Exit:
            raise

        except OSError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(f"Could not access focus data: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_STORAGE) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
