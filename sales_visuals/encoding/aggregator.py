from __future__ import annotations

from collections.abc import Iterable

from ..core.config import DEFAULT_PERIOD_COUNT
from ..core.models import PeriodAverages, PeriodSalesRecord, SalesTotals


def aggregate(records: Iterable[PeriodSalesRecord]) -> SalesTotals:
    total_quantity = 0.0
    total_value = 0.0
    total_orders = 0
    for record in records:
        total_quantity += record.quantity
        total_value += record.value
        total_orders += record.order_count

    average = total_value / total_orders if total_orders > 0 else 0.0
    return SalesTotals(
        total_quantity=total_quantity,
        total_value=total_value,
        total_orders=total_orders,
        average_order_value=average,
    )


def per_period_averages(
    totals: SalesTotals | Iterable[PeriodSalesRecord],
    period_count: int = DEFAULT_PERIOD_COUNT,
) -> PeriodAverages:
    """Average value and quantity across the full cycle of periods.

    The divisor is ``period_count`` (12 for months of a year), not the number
    of records supplied, so a partial year is spread over the whole year.
    """
    if period_count <= 0:
        raise ValueError(f"period_count must be positive, got {period_count}")
    if not isinstance(totals, SalesTotals):
        totals = aggregate(totals)
    return PeriodAverages(
        value_per_period=totals.total_value / period_count,
        quantity_per_period=totals.total_quantity / period_count,
        period_count=period_count,
    )
