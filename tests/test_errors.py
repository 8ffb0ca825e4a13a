"""Tests for error description."""

from __future__ import annotations

from sales_visuals.core.errors import (
    SalesVisualsError,
    SnapshotFormatError,
    SnapshotNotFoundError,
    describe_error,
)


def test_error_hierarchy() -> None:
    assert issubclass(SnapshotNotFoundError, SalesVisualsError)
    assert issubclass(SnapshotFormatError, SalesVisualsError)


def test_describe_not_found() -> None:
    result = describe_error(SnapshotNotFoundError("Snapshot file not found: x.yaml"), "summary")
    assert result == {
        "success": False,
        "error_type": "not_found",
        "message": "Snapshot file not found: x.yaml",
        "command": "summary",
    }


def test_describe_format_error() -> None:
    result = describe_error(SnapshotFormatError("monthly[0]: missing field 'value'"), "monthly")
    assert result["error_type"] == "format_error"
    assert "missing field" in result["message"]


def test_describe_render_error() -> None:
    result = describe_error(RuntimeError("Report template not found"), "report")
    assert result["error_type"] == "render_error"


def test_describe_io_error() -> None:
    result = describe_error(PermissionError("denied"), "report")
    assert result["error_type"] == "io_error"
    assert "denied" in result["message"]


def test_describe_unexpected_error_is_sanitized() -> None:
    result = describe_error(KeyError("secret"), "report")
    assert result["error_type"] == "internal_error"
    assert "secret" not in result["message"]
    assert "unexpected error" in result["message"]
