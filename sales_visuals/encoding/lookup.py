from __future__ import annotations

from collections.abc import Iterable

from ..core.models import HeatmapCell


def find_cell(
    cells: Iterable[HeatmapCell], period: str, category: str
) -> HeatmapCell | None:
    """Linear scan for the first cell matching ``(period, category)``.

    Returns None when the pair has no record, which means zero sales.
    """
    for cell in cells:
        if cell.period == period and cell.category == category:
            return cell
    return None


class CellIndex:
    """Hash index over a sparse heatmap dataset keyed by (period, category).

    Returns the same record as ``find_cell`` for every key: when the dataset
    holds duplicates, the first one wins.
    """

    def __init__(self, cells: Iterable[HeatmapCell]):
        self._cells: dict[tuple[str, str], HeatmapCell] = {}
        for cell in cells:
            self._cells.setdefault((cell.period, cell.category), cell)

    def get(self, period: str, category: str) -> HeatmapCell | None:
        return self._cells.get((period, category))

    def __contains__(self, key: object) -> bool:
        return key in self._cells

    def __len__(self) -> int:
        return len(self._cells)
