"""FocusPro CLI - Pomodoro focus timer and productivity scoring."""

__version__ = "0.1.0"
