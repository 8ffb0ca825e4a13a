from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from .. import __version__
from ..core.config import DEFAULT_CURRENCY, DEFAULT_PERIOD_COUNT
from ..core.enums import IntensityBucket, ViewMode
from ..core.logging_config import get_logger
from ..core.snapshot import SalesSnapshot
from ..encoding.buckets import bucket_color, bucket_label
from ..encoding.views import (
    HeatmapView,
    HeatmapViewCell,
    MonthlyChartView,
    build_heatmap_view,
    build_monthly_view,
)
from ..visuals.charts import ChartGenerator, format_cell_magnitude

logger = get_logger(__name__)


def thousands(value: float, decimals: int = 0) -> str:
    """Format a number with thousands separators."""
    return f"{value:,.{decimals}f}"


def fixed(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}"


def cell_tooltip(cell: HeatmapViewCell, currency: str = DEFAULT_CURRENCY) -> dict[str, str]:
    title = f"{cell.category} - {cell.period}"
    if cell.record is None:
        return {"title": title, "content": "No sales"}
    return {
        "title": title,
        "content": (
            f"{cell.record.quantity:.1f} units • {thousands(cell.record.value)} {currency}"
        ),
    }


def legend() -> list[dict[str, str]]:
    return [
        {"label": bucket_label(bucket), "color": bucket_color(bucket)}
        for bucket in IntensityBucket
    ]


class ReportRenderer:
    """Renders sales reports using Jinja2 templates."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        assets_dir: Path | None = None,
        currency: str = DEFAULT_CURRENCY,
        dpi: int = 100,
    ):
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"
        # Escape HTML templates only; Markdown is emitted verbatim
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=lambda name: name is not None and name.endswith(".html.j2"),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["thousands"] = thousands
        self.env.filters["fixed"] = fixed
        self.env.filters["cell_label"] = format_cell_magnitude
        self.env.globals["tooltip"] = lambda cell: cell_tooltip(cell, currency)
        self.currency = currency
        self.chart_generator = ChartGenerator(output_dir=assets_dir, dpi=dpi)

    def build_context(
        self,
        snapshot: SalesSnapshot,
        monthly_mode: ViewMode = ViewMode.VALUE,
        heatmap_mode: ViewMode = ViewMode.QUANTITY,
        period_count: int = DEFAULT_PERIOD_COUNT,
    ) -> dict[str, Any]:
        """Build the template context for one snapshot.

        Args:
            snapshot: Loaded sales snapshot
            monthly_mode: Quantity or value view for the bar chart
            heatmap_mode: Quantity or value labels for the heatmap cells
            period_count: Divisor for the per-period averages

        Returns:
            Dict with monthly and heatmap views plus legend and labels
        """
        monthly = build_monthly_view(snapshot.monthly, monthly_mode, period_count)
        heatmap = build_heatmap_view(
            snapshot.heatmap, snapshot.categories, snapshot.periods, heatmap_mode
        )
        return {
            "year": snapshot.year,
            "currency": self.currency,
            "monthly": monthly,
            "heatmap": heatmap,
            "legend": legend(),
        }

    def render_markdown(
        self,
        context: dict[str, Any],
        generate_charts: bool = False,
        report_dir: Path | None = None,
    ) -> str:
        """Render Markdown report.

        Args:
            context: Output of build_context
            generate_charts: Whether to generate and embed charts (default: False)
            report_dir: Directory the report is written to; chart links are made
                relative to it. If None, links are relative to the working directory.

        Returns:
            Rendered Markdown string

        Raises:
            RuntimeError: If the template is missing or rendering fails
        """
        return self._render("sales_report.md.j2", context, generate_charts, report_dir)

    def render_html(self, context: dict[str, Any], generate_charts: bool = True) -> str:
        """Render HTML report with embedded base64 chart images.

        Args:
            context: Output of build_context
            generate_charts: Whether to generate and embed charts (default: True)

        Returns:
            Rendered HTML string

        Raises:
            RuntimeError: If the template is missing or rendering fails
        """
        return self._render("sales_report.html.j2", context, generate_charts)

    def _render(
        self,
        template_name: str,
        context: dict[str, Any],
        generate_charts: bool,
        report_dir: Path | None = None,
    ) -> str:
        charts: dict[str, Any] = {}
        if generate_charts:
            charts = self._generate_charts(context)
            if report_dir is not None:
                for chart in charts.values():
                    if "path" in chart:
                        chart["path"] = Path(
                            os.path.relpath(chart["path"], report_dir)
                        ).as_posix()

        try:
            template = self.env.get_template(template_name)
            logger.debug(
                "Rendering sales report",
                extra={"template": template_name, "year": context.get("year")},
            )
            return template.render(**context, version=__version__, charts=charts)
        except TemplateNotFound as e:
            logger.error("Report template not found", extra={"error": str(e)})
            raise RuntimeError(
                f"Report template not found: {e}. "
                f"Ensure sales_visuals/render/templates/{template_name} exists."
            ) from e
        except Exception as e:
            logger.error("Failed to render sales report", extra={"error": str(e)})
            raise RuntimeError(f"Failed to render sales report: {e}") from e

    def _generate_charts(self, context: dict[str, Any]) -> dict[str, Any]:
        """Generate each chart independently; a failing chart is skipped."""
        charts = {}
        chart_failures = []
        name = f"sales_{context.get('year') or 'report'}"

        monthly: MonthlyChartView = context["monthly"]
        heatmap: HeatmapView = context["heatmap"]

        try:
            chart = self.chart_generator.generate_monthly_chart(monthly, name)
            if chart:
                charts["monthly"] = chart
        except Exception as e:
            chart_failures.append(("monthly", str(e)))
            logger.warning(f"Failed to generate monthly chart: {e}", exc_info=True)

        try:
            chart = self.chart_generator.generate_heatmap_chart(heatmap, name)
            if chart:
                charts["heatmap"] = chart
        except Exception as e:
            chart_failures.append(("heatmap", str(e)))
            logger.warning(f"Failed to generate heatmap chart: {e}", exc_info=True)

        if chart_failures:
            logger.warning(
                f"Generated {len(charts)}/2 charts. Failures: {', '.join(f[0] for f in chart_failures)}",
                extra={"failures": chart_failures},
            )
        else:
            logger.info(f"Generated {len(charts)} charts for report")

        return charts


def write_text(path: str | Path, content: str) -> None:
    """Write text content to file."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
