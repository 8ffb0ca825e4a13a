from __future__ import annotations

from dataclasses import dataclass


dataclass_kwargs = {"frozen": True, "slots": True}


@dataclass(**dataclass_kwargs)
class PeriodSalesRecord:
    period: str
    quantity: float
    value: float
    order_count: int


@dataclass(**dataclass_kwargs)
class HeatmapCell:
    period: str
    category: str
    quantity: float
    value: float
    intensity: float  # 0-1, normalized upstream


@dataclass(**dataclass_kwargs)
class SalesTotals:
    total_quantity: float
    total_value: float
    total_orders: int
    average_order_value: float


@dataclass(**dataclass_kwargs)
class PeriodAverages:
    value_per_period: float
    quantity_per_period: float
    period_count: int
