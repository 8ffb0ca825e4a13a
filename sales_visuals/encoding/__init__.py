"""Data-to-visual encoding for the monthly sales chart and the sales heatmap.

Every function here is pure: it takes read-only snapshots and returns raw
numbers (percentages, bucket indices, totals). Formatting for display is
left to the render package.

Main Components:
    - aggregate / per_period_averages: totals and derived ratios
    - scale / scale_records: magnitudes to 0-100 bar lengths
    - bucketize: normalized intensity to one of five colour buckets
    - CellIndex / find_cell: sparse (period, category) lookup
    - build_monthly_view / build_heatmap_view: combined view models

Usage:
    from sales_visuals.encoding import aggregate, build_monthly_view

    totals = aggregate(records)
    view = build_monthly_view(records, mode=ViewMode.VALUE)
"""

from __future__ import annotations

from .aggregator import aggregate, per_period_averages
from .buckets import BUCKET_COLORS, BUCKET_COUNT, bucket_color, bucket_label, bucketize
from .lookup import CellIndex, find_cell
from .scaler import magnitude_of, scale, scale_max, scale_records
from .views import (
    HeatmapView,
    HeatmapViewCell,
    MonthlyBar,
    MonthlyChartView,
    build_heatmap_view,
    build_monthly_view,
    derive_intensities,
)

__all__ = [
    "BUCKET_COLORS",
    "BUCKET_COUNT",
    "CellIndex",
    "HeatmapView",
    "HeatmapViewCell",
    "MonthlyBar",
    "MonthlyChartView",
    "aggregate",
    "bucket_color",
    "bucket_label",
    "bucketize",
    "build_heatmap_view",
    "build_monthly_view",
    "derive_intensities",
    "find_cell",
    "magnitude_of",
    "per_period_averages",
    "scale",
    "scale_max",
    "scale_records",
]
