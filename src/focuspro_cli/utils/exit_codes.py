"""
Exit codes for FocusPro CLI.

Semantic exit codes so scripts driving the CLI can tell failures apart.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Operation not allowed in the timer's current state
ERROR_INVALID_STATE = 3

# Config or stats file could not be read or written
ERROR_STORAGE = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_INVALID_STATE: "ERROR_INVALID_STATE",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_INVALID_STATE: "Operation not allowed in the current timer state",
        ERROR_STORAGE: "Config or stats file could not be read or written",
    }
    return descriptions.get(code, "Unknown error")
