"""
Exit codes for TaskDesk CLI.

Semantic exit codes so scripts can tell what happened without parsing output.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (blank task text, bad config value)
ERROR_INVALID_ARGS = 2

# Network or API error (article endpoint unreachable, bad status, bad payload)
ERROR_NETWORK = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NETWORK: "ERROR_NETWORK",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NETWORK: "Network or API error - check connection",
    }
    return descriptions.get(code, "Unknown error")
