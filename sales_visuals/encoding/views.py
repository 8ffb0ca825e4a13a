"""View models combining the encoding primitives for a single render pass.

Hover and selection state are not modelled here; a renderer owns them and
reads from these immutable views.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass

from ..core.config import DEFAULT_PERIOD_COUNT
from ..core.enums import IntensityBucket, ViewMode
from ..core.logging_config import get_logger
from ..core.models import HeatmapCell, PeriodAverages, PeriodSalesRecord, SalesTotals
from .aggregator import aggregate, per_period_averages
from .buckets import bucketize
from .lookup import CellIndex
from .scaler import magnitude_of, scale_max, scale_records

logger = get_logger(__name__)

dataclass_kwargs = {"frozen": True, "slots": True}


@dataclass(**dataclass_kwargs)
class MonthlyBar:
    period: str
    quantity: float
    value: float
    order_count: int
    percent: float  # 0-100


@dataclass(**dataclass_kwargs)
class MonthlyChartView:
    mode: ViewMode
    bars: list[MonthlyBar]
    totals: SalesTotals
    averages: PeriodAverages

    @property
    def is_empty(self) -> bool:
        return not self.bars


@dataclass(**dataclass_kwargs)
class HeatmapViewCell:
    period: str
    category: str
    record: HeatmapCell | None
    bucket: IntensityBucket
    display_magnitude: float

    @property
    def is_present(self) -> bool:
        return self.record is not None


@dataclass(**dataclass_kwargs)
class HeatmapView:
    mode: ViewMode
    categories: list[str]
    periods: list[str]
    rows: list[list[HeatmapViewCell]]  # one row per category, one cell per period
    cell_count: int

    @property
    def is_empty(self) -> bool:
        return self.cell_count == 0

    def cell(self, period: str, category: str) -> HeatmapViewCell | None:
        try:
            row = self.categories.index(category)
            col = self.periods.index(period)
        except ValueError:
            return None
        return self.rows[row][col]


def build_monthly_view(
    records: Sequence[PeriodSalesRecord],
    mode: ViewMode = ViewMode.VALUE,
    period_count: int = DEFAULT_PERIOD_COUNT,
) -> MonthlyChartView:
    percents = scale_records(records, mode)
    bars = [
        MonthlyBar(
            period=r.period,
            quantity=r.quantity,
            value=r.value,
            order_count=r.order_count,
            percent=pct,
        )
        for r, pct in zip(records, percents, strict=True)
    ]
    totals = aggregate(records)
    logger.debug(
        "Built monthly view",
        extra={"periods": len(bars), "mode": mode.value},
    )
    return MonthlyChartView(
        mode=mode,
        bars=bars,
        totals=totals,
        averages=per_period_averages(totals, period_count),
    )


def build_heatmap_view(
    cells: Sequence[HeatmapCell],
    categories: Sequence[str],
    periods: Sequence[str],
    mode: ViewMode = ViewMode.QUANTITY,
) -> HeatmapView:
    """Lay out a category x period grid from a sparse set of cells.

    Row and column order come from ``categories`` and ``periods``; cells whose
    labels are not listed there are not shown.
    """
    index = CellIndex(cells)
    rows: list[list[HeatmapViewCell]] = []
    for category in categories:
        row = []
        for period in periods:
            record = index.get(period, category)
            if record is None:
                row.append(
                    HeatmapViewCell(
                        period=period,
                        category=category,
                        record=None,
                        bucket=IntensityBucket.NONE,
                        display_magnitude=0.0,
                    )
                )
            else:
                row.append(
                    HeatmapViewCell(
                        period=period,
                        category=category,
                        record=record,
                        bucket=bucketize(record.intensity),
                        display_magnitude=magnitude_of(record, mode),
                    )
                )
        rows.append(row)

    logger.debug(
        "Built heatmap view",
        extra={
            "categories": len(categories),
            "periods": len(periods),
            "cells": len(index),
            "mode": mode.value,
        },
    )
    return HeatmapView(
        mode=mode,
        categories=list(categories),
        periods=list(periods),
        rows=rows,
        cell_count=len(cells),
    )


def derive_intensities(
    cells: Sequence[HeatmapCell], mode: ViewMode = ViewMode.VALUE
) -> list[HeatmapCell]:
    """Recompute intensity as magnitude over the category's maximum.

    The maximum is taken per category across all periods and floored at 1,
    so every derived intensity lies in [0, 1]. Input cells are not modified.
    """
    by_category: dict[str, list[float]] = {}
    for cell in cells:
        by_category.setdefault(cell.category, []).append(magnitude_of(cell, mode))
    maxima = {cat: scale_max(values) for cat, values in by_category.items()}

    return [
        dataclasses.replace(
            cell, intensity=magnitude_of(cell, mode) / maxima[cell.category]
        )
        for cell in cells
    ]
