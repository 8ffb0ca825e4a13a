"""Tests for loading sales snapshot files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sales_visuals.core.errors import SnapshotFormatError, SnapshotNotFoundError
from sales_visuals.core.models import HeatmapCell, PeriodSalesRecord
from sales_visuals.core.snapshot import load_snapshot, parse_snapshot


YAML_SNAPSHOT = """
year: 2024
monthly:
  - {period: Jan, quantity: 10, value: 1200, order_count: 3}
  - {month: Feb, quantity: 2.5, value: 300, orders_count: 1}
heatmap:
  - {period: Jan, category: Tea, quantity: 4, value: 400, intensity: 0.5}
  - {month: Feb, product: Coffee, quantity: 1, value: 100, intensity: 0.1}
"""


def test_load_yaml_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "sales.yaml"
    path.write_text(YAML_SNAPSHOT, encoding="utf-8")

    snap = load_snapshot(path)

    assert snap.year == 2024
    assert snap.monthly == [
        PeriodSalesRecord(period="Jan", quantity=10.0, value=1200.0, order_count=3),
        PeriodSalesRecord(period="Feb", quantity=2.5, value=300.0, order_count=1),
    ]
    assert snap.heatmap[1] == HeatmapCell(
        period="Feb", category="Coffee", quantity=1.0, value=100.0, intensity=0.1
    )
    # Labels derived from cells in first-seen order
    assert snap.categories == ["Tea", "Coffee"]
    assert snap.periods == ["Jan", "Feb"]


def test_load_json_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "sales.json"
    path.write_text(
        json.dumps(
            {
                "monthly": [{"month": "Jan", "quantity": 1, "value": 2, "ordersCount": 1}],
                "heatmap": [],
                "products": ["Tea", "Coffee"],
                "months": ["Jan", "Feb"],
            }
        ),
        encoding="utf-8",
    )

    snap = load_snapshot(path)

    assert snap.year is None
    assert snap.monthly[0].order_count == 1
    assert snap.categories == ["Tea", "Coffee"]
    assert snap.periods == ["Jan", "Feb"]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SnapshotNotFoundError, match="not found"):
        load_snapshot(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("monthly: [unclosed", encoding="utf-8")
    with pytest.raises(SnapshotFormatError, match="Could not parse"):
        load_snapshot(path)


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(SnapshotFormatError, match="mapping"):
        parse_snapshot([1, 2, 3])


def test_missing_field() -> None:
    with pytest.raises(SnapshotFormatError, match=r"monthly\[0\]: missing field 'value'"):
        parse_snapshot({"monthly": [{"period": "Jan", "quantity": 1, "order_count": 1}]})


def test_non_numeric_field() -> None:
    with pytest.raises(SnapshotFormatError, match="must be a number"):
        parse_snapshot(
            {"heatmap": [{"period": "Jan", "category": "Tea", "quantity": "many", "value": 1}]}
        )


def test_missing_intensity_defaults_to_zero() -> None:
    snap = parse_snapshot(
        {"heatmap": [{"period": "Jan", "category": "Tea", "quantity": 1, "value": 1}]}
    )
    assert snap.heatmap[0].intensity == 0.0


def test_negative_values_are_not_validated() -> None:
    snap = parse_snapshot(
        {"monthly": [{"period": "Jan", "quantity": -1, "value": -5, "order_count": 0}]}
    )
    assert snap.monthly[0].quantity == -1.0


def test_empty_mapping() -> None:
    snap = parse_snapshot({})
    assert snap.monthly == []
    assert snap.heatmap == []
    assert snap.categories == []


def test_fractional_order_count_is_rejected() -> None:
    with pytest.raises(SnapshotFormatError, match="whole number"):
        parse_snapshot(
            {"monthly": [{"period": "Jan", "quantity": 1, "value": 1, "order_count": 2.7}]}
        )


def test_integral_float_order_count_is_accepted() -> None:
    snap = parse_snapshot(
        {"monthly": [{"period": "Jan", "quantity": 1, "value": 1, "order_count": 3.0}]}
    )
    assert snap.monthly[0].order_count == 3
