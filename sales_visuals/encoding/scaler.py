from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..core.enums import ViewMode
from ..core.models import HeatmapCell, PeriodSalesRecord


def magnitude_of(record: PeriodSalesRecord | HeatmapCell, mode: ViewMode) -> float:
    if mode == ViewMode.QUANTITY:
        return record.quantity
    return record.value


def scale_max(magnitudes: Iterable[float]) -> float:
    # Floor of 1 keeps empty and all-zero datasets finite
    return max(1.0, max(magnitudes, default=0.0))


def scale(magnitude: float, maximum: float) -> float:
    return magnitude / maximum * 100


def scale_records(
    records: Sequence[PeriodSalesRecord], mode: ViewMode
) -> list[float]:
    """Bar length percentages for one dataset in one view mode.

    The maximum is computed once per call, so quantity and value views of the
    same records are each scaled against their own maximum.
    """
    maximum = scale_max(magnitude_of(r, mode) for r in records)
    return [scale(magnitude_of(r, mode), maximum) for r in records]
