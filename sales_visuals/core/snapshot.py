"""Load a read-only sales snapshot from a local YAML or JSON file.

Expected layout::

    year: 2024
    monthly:
      - {period: Jan, quantity: 10, value: 1200, order_count: 3}
    heatmap:
      - {period: Jan, category: Widget, quantity: 4, value: 400, intensity: 0.5}
    categories: [Widget, Gadget]   # optional, derived from heatmap cells
    periods: [Jan, Feb]            # optional, derived from heatmap cells

``orders_count`` is accepted for ``order_count``, ``product``/``productName``
for ``category`` and ``month`` for ``period``. Values are not range checked,
but ``order_count`` must be a whole number.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import SnapshotFormatError, SnapshotNotFoundError
from .logging_config import get_logger
from .models import HeatmapCell, PeriodSalesRecord

logger = get_logger(__name__)

_PERIOD_KEYS = ("period", "month")
_CATEGORY_KEYS = ("category", "product", "productName")
_ORDER_KEYS = ("order_count", "orders_count", "ordersCount")


@dataclass
class SalesSnapshot:
    year: int | None = None
    monthly: list[PeriodSalesRecord] = field(default_factory=list)
    heatmap: list[HeatmapCell] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    periods: list[str] = field(default_factory=list)


def _pick(item: dict[str, Any], keys: tuple[str, ...], where: str) -> Any:
    for key in keys:
        if key in item:
            return item[key]
    raise SnapshotFormatError(f"{where}: missing field '{keys[0]}'")


def _number(item: dict[str, Any], key: str, where: str, default: float | None = None) -> float:
    raw = item.get(key, default)
    if raw is None:
        raise SnapshotFormatError(f"{where}: missing field '{key}'")
    return _as_number(raw, key, where)


def _as_number(raw: Any, key: str, where: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SnapshotFormatError(f"{where}: field '{key}' must be a number, got {raw!r}")
    return float(raw)


def _items(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = data.get(key) or []
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise SnapshotFormatError(f"'{key}' must be a list of mappings")
    return items


def _labels(data: dict[str, Any], keys: tuple[str, ...]) -> list[str] | None:
    for key in keys:
        if key in data and data[key] is not None:
            labels = data[key]
            if not isinstance(labels, list):
                raise SnapshotFormatError(f"'{key}' must be a list of labels")
            return [str(label) for label in labels]
    return None


def _first_seen(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def parse_snapshot(data: Any) -> SalesSnapshot:
    if not isinstance(data, dict):
        raise SnapshotFormatError("Snapshot must be a mapping at the top level")

    monthly = []
    for i, item in enumerate(_items(data, "monthly")):
        where = f"monthly[{i}]"
        orders = _as_number(_pick(item, _ORDER_KEYS, where), "order_count", where)
        if not orders.is_integer():
            raise SnapshotFormatError(
                f"{where}: field 'order_count' must be a whole number, got {orders!r}"
            )
        monthly.append(
            PeriodSalesRecord(
                period=str(_pick(item, _PERIOD_KEYS, where)),
                quantity=_number(item, "quantity", where),
                value=_number(item, "value", where),
                order_count=int(orders),
            )
        )

    heatmap = []
    for i, item in enumerate(_items(data, "heatmap")):
        where = f"heatmap[{i}]"
        heatmap.append(
            HeatmapCell(
                period=str(_pick(item, _PERIOD_KEYS, where)),
                category=str(_pick(item, _CATEGORY_KEYS, where)),
                quantity=_number(item, "quantity", where),
                value=_number(item, "value", where),
                intensity=_number(item, "intensity", where, default=0.0),
            )
        )

    categories = _labels(data, ("categories", "products"))
    if categories is None:
        categories = _first_seen([c.category for c in heatmap])
    periods = _labels(data, ("periods", "months"))
    if periods is None:
        periods = _first_seen([c.period for c in heatmap])

    year = data.get("year")
    if year is not None:
        try:
            year = int(year)
        except (TypeError, ValueError) as e:
            raise SnapshotFormatError(f"'year' must be an integer, got {year!r}") from e

    return SalesSnapshot(
        year=year,
        monthly=monthly,
        heatmap=heatmap,
        categories=categories,
        periods=periods,
    )


def load_snapshot(path: str | Path) -> SalesSnapshot:
    p = Path(path)
    if not p.is_file():
        raise SnapshotNotFoundError(f"Snapshot file not found: {p}")
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SnapshotFormatError(f"Could not parse {p}: {e}") from e

    snapshot = parse_snapshot(data)
    logger.info(
        "Loaded sales snapshot",
        extra={
            "path": str(p),
            "monthly": len(snapshot.monthly),
            "heatmap": len(snapshot.heatmap),
        },
    )
    return snapshot
