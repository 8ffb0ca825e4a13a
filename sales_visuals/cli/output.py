"""Console output formatting utilities for consistent CLI user experience.

Logging Strategy:
- Use console output functions (success, error, info, warning) for user-facing messages
- Use structured logging (logger.info, logger.error, etc.) for debugging and observability
"""

from __future__ import annotations

from enum import Enum

import typer


class OutputColor(str, Enum):
    """Valid color options for plain text output."""

    WHITE = "WHITE"
    CYAN = "CYAN"
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"
    MAGENTA = "MAGENTA"
    BLUE = "BLUE"


def success(message: str, *, prefix: bool = True) -> None:
    """Display a success message in green with checkmark emoji.

    Example:
        success("Report written to sales.html")
        # Output: ✅ Report written to sales.html
    """
    formatted = f"✅ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.GREEN)


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display an error message in red with cross emoji.

    Args:
        message: The error message to display
        prefix: Whether to include the cross emoji prefix (default: True)
        err: Whether to write to stderr instead of stdout (default: True)
    """
    formatted = f"❌ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.RED, err=err)


def info(message: str, *, prefix: bool = True) -> None:
    formatted = f"ℹ️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.CYAN)


def warning(message: str, *, prefix: bool = True) -> None:
    formatted = f"⚠️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.YELLOW)


def plain(message: str, *, color: OutputColor | None = None) -> None:
    """Display a plain message without emoji prefix.

    Example:
        plain("Jan  ████████  1,200", color=OutputColor.GREEN)
    """
    if color:
        typer.secho(message, fg=getattr(typer.colors, color.value))
    else:
        typer.echo(message)


def data(message: str, *, prefix: bool = True) -> None:
    """Display a data message in cyan with chart emoji."""
    formatted = f"📊 {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.CYAN)
