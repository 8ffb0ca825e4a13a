"""Tests for matplotlib chart generation."""

from __future__ import annotations

import base64
from pathlib import Path

from sales_visuals.core.enums import ViewMode
from sales_visuals.core.models import HeatmapCell, PeriodSalesRecord
from sales_visuals.encoding.views import build_heatmap_view, build_monthly_view
from sales_visuals.visuals.charts import ChartGenerator, format_cell_magnitude

PNG_MAGIC = b"\x89PNG"

RECORDS = [
    PeriodSalesRecord(period="Jan", quantity=10, value=1000, order_count=1),
    PeriodSalesRecord(period="Feb", quantity=20, value=2500, order_count=4),
]
CELLS = [
    HeatmapCell(period="Jan", category="Tea", quantity=4, value=4000, intensity=0.4),
    HeatmapCell(period="Feb", category="Coffee", quantity=9, value=9000, intensity=1.0),
]


def test_monthly_chart_base64_only() -> None:
    generator = ChartGenerator()
    chart = generator.generate_monthly_chart(build_monthly_view(RECORDS), "t")

    assert "path" not in chart
    assert base64.b64decode(chart["base64"]).startswith(PNG_MAGIC)


def test_monthly_chart_saved_to_disk(tmp_path: Path) -> None:
    generator = ChartGenerator(output_dir=tmp_path / "assets", dpi=50)
    chart = generator.generate_monthly_chart(
        build_monthly_view(RECORDS, ViewMode.QUANTITY), "sales_2024"
    )

    path = Path(chart["path"])
    assert path.name == "sales_2024_monthly_quantity.png"
    assert path.read_bytes().startswith(PNG_MAGIC)


def test_monthly_chart_empty_view() -> None:
    assert ChartGenerator().generate_monthly_chart(build_monthly_view([])) == {}


def test_heatmap_chart(tmp_path: Path) -> None:
    view = build_heatmap_view(CELLS, ["Tea", "Coffee"], ["Jan", "Feb", "Mar"], ViewMode.VALUE)
    chart = ChartGenerator(output_dir=tmp_path).generate_heatmap_chart(view, "sales")

    assert Path(chart["path"]).name == "sales_heatmap_value.png"
    assert base64.b64decode(chart["base64"]).startswith(PNG_MAGIC)


def test_heatmap_chart_empty_view() -> None:
    view = build_heatmap_view([], ["Tea"], ["Jan"])
    assert ChartGenerator().generate_heatmap_chart(view) == {}


def test_format_cell_magnitude() -> None:
    assert format_cell_magnitude(12.4, ViewMode.QUANTITY) == "12"
    assert format_cell_magnitude(12400, ViewMode.VALUE) == "12k"
