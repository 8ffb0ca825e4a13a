"""Tests for sparse heatmap cell lookup."""

from __future__ import annotations

from sales_visuals.core.models import HeatmapCell
from sales_visuals.encoding.lookup import CellIndex, find_cell


CELLS = [
    HeatmapCell(period="Jan", category="Tea", quantity=4, value=40, intensity=0.4),
    HeatmapCell(period="Feb", category="Tea", quantity=8, value=80, intensity=0.8),
    HeatmapCell(period="Jan", category="Coffee", quantity=1, value=30, intensity=0.1),
]


def test_find_present_cell() -> None:
    assert find_cell(CELLS, "Feb", "Tea") is CELLS[1]


def test_find_absent_cell_returns_none() -> None:
    assert find_cell(CELLS, "Feb", "Coffee") is None
    assert find_cell([], "Jan", "Tea") is None


def test_index_matches_linear_scan() -> None:
    index = CellIndex(CELLS)
    for period in ("Jan", "Feb", "Mar"):
        for category in ("Tea", "Coffee", "Sugar"):
            assert index.get(period, category) is find_cell(CELLS, period, category)


def test_index_first_duplicate_wins() -> None:
    duplicate = HeatmapCell(period="Jan", category="Tea", quantity=99, value=99, intensity=1.0)
    cells = [*CELLS, duplicate]
    index = CellIndex(cells)

    assert index.get("Jan", "Tea") is CELLS[0]
    assert find_cell(cells, "Jan", "Tea") is CELLS[0]
    assert len(index) == 3


def test_index_membership() -> None:
    index = CellIndex(CELLS)
    assert ("Jan", "Coffee") in index
    assert ("Feb", "Coffee") not in index
