"""Error types for the snapshot and CLI surface.

The encoding functions never raise for data edge cases; these exist for
malformed input files and for reporting failures to CLI users.
"""

from __future__ import annotations

from typing import Any

from .logging_config import get_logger

logger = get_logger(__name__)


class SalesVisualsError(Exception):
    """Base exception for sales_visuals errors."""
    pass


class SnapshotNotFoundError(SalesVisualsError):
    """Snapshot file does not exist."""
    pass


class SnapshotFormatError(SalesVisualsError):
    """Snapshot file could not be parsed into sales records."""
    pass


def describe_error(error: Exception, command: str) -> dict[str, Any]:
    """
    Standardized error description for CLI commands.

    Args:
        error: The exception that occurred
        command: Name of the command that failed

    Returns:
        Standardized error response dict
    """
    logger.debug(f"Error in command '{command}': {error}", exc_info=error)

    if isinstance(error, SnapshotNotFoundError):
        error_type = "not_found"
        message = str(error)
    elif isinstance(error, SnapshotFormatError):
        error_type = "format_error"
        message = str(error)
    elif isinstance(error, RuntimeError):
        error_type = "render_error"
        message = str(error)
    elif isinstance(error, OSError):
        error_type = "io_error"
        message = f"Could not write output: {error}"
    else:
        logger.exception(f"Unexpected error in command '{command}'", exc_info=error)
        error_type = "internal_error"
        message = "An unexpected error occurred. Re-run with --log-level DEBUG for details."

    return {
        "success": False,
        "error_type": error_type,
        "message": message,
        "command": command,
    }
