from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .. import __version__
from ..core.config import get_settings
from ..core.enums import ReportFormat, ViewMode
from ..core.errors import SalesVisualsError, describe_error
from ..core.logging_config import get_logger, setup_logging
from ..core.snapshot import SalesSnapshot, load_snapshot
from ..encoding.buckets import BUCKET_COUNT
from ..encoding.views import build_heatmap_view, build_monthly_view, derive_intensities
from ..render.renderer import ReportRenderer, thousands, write_text
from . import output as cli_output

app = typer.Typer(help="Sales visuals CLI")

logger = get_logger(__name__)

BAR_WIDTH = 30
BUCKET_GLYPHS = " ·░▒▓█"


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    log_file: bool = typer.Option(True, "--log-file/--no-log-file", help="Write JSON logs under logs/"),
) -> None:
    """Configure global CLI options."""
    setup_logging(json_output=json_logs, log_level=log_level, log_to_file=log_file)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": log_level})


def _fail(e: Exception, command: str) -> NoReturn:
    result = describe_error(e, command)
    cli_output.error(f"{command} failed: {result['message']}")
    raise typer.Exit(1) from e


def _load(snapshot: Path, command: str) -> SalesSnapshot:
    try:
        return load_snapshot(snapshot)
    except SalesVisualsError as e:
        _fail(e, command)


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


@app.command()
def summary(
    snapshot: Path = typer.Argument(..., help="Sales snapshot file (YAML or JSON)"),  # noqa: B008
    period_count: int | None = typer.Option(
        None, min=1, help="Periods in a full cycle for averages (default: SV_PERIOD_COUNT or 12)"
    ),  # noqa: B008
) -> None:
    """Print totals and per-period averages for the monthly records."""
    settings = get_settings()
    snap = _load(snapshot, "summary")
    view = build_monthly_view(snap.monthly, ViewMode.VALUE, period_count or settings.period_count)
    totals, averages = view.totals, view.averages

    cli_output.data(f"Sales summary{f' {snap.year}' if snap.year else ''}")
    cli_output.plain(f"Total quantity:      {totals.total_quantity:.0f}")
    cli_output.plain(f"Total value:         {thousands(totals.total_value)} {settings.currency}")
    cli_output.plain(f"Total orders:        {totals.total_orders}")
    cli_output.plain(f"Average order value: {totals.average_order_value:.0f} {settings.currency}")
    cli_output.plain(
        f"Average per period:  {thousands(averages.value_per_period)} {settings.currency}, "
        f"{averages.quantity_per_period:.1f} units (over {averages.period_count} periods)"
    )


@app.command()
def monthly(
    snapshot: Path = typer.Argument(..., help="Sales snapshot file (YAML or JSON)"),  # noqa: B008
    mode: ViewMode = typer.Option(ViewMode.VALUE, case_sensitive=False, help="Bar magnitude: value|quantity"),  # noqa: B008
) -> None:
    """Draw the monthly bar chart as text."""
    settings = get_settings()
    snap = _load(snapshot, "monthly")
    view = build_monthly_view(snap.monthly, mode, settings.period_count)

    if view.is_empty:
        cli_output.warning("No sales data available")
        return

    label_width = max(len(bar.period) for bar in view.bars)
    for bar in view.bars:
        filled = round(bar.percent / 100 * BAR_WIDTH)
        if mode == ViewMode.VALUE:
            amount = f"{thousands(bar.value)} {settings.currency}"
        else:
            amount = f"{bar.quantity:.1f} units"
        cli_output.plain(
            f"{bar.period:<{label_width}}  {'█' * filled:<{BAR_WIDTH}}  {amount}"
            f"  ({bar.order_count} order{'s' if bar.order_count > 1 else ''})"
        )


@app.command()
def heatmap(
    snapshot: Path = typer.Argument(..., help="Sales snapshot file (YAML or JSON)"),  # noqa: B008
    mode: ViewMode = typer.Option(ViewMode.QUANTITY, case_sensitive=False, help="Cell magnitude: quantity|value"),  # noqa: B008
    derive_intensity: bool = typer.Option(
        False, help="Recompute intensity from magnitude / per-category maximum"
    ),  # noqa: B008
) -> None:
    """Print the product x month bucket grid."""
    snap = _load(snapshot, "heatmap")
    cells = derive_intensities(snap.heatmap, mode) if derive_intensity else snap.heatmap
    view = build_heatmap_view(cells, snap.categories, snap.periods, mode)

    if view.is_empty or not view.categories or not view.periods:
        cli_output.warning(f"No sales data{f' for {snap.year}' if snap.year else ''}")
        return

    label_width = max(len(c) for c in view.categories)
    widths = [max(3, len(p)) for p in view.periods]
    cli_output.plain(
        " " * label_width
        + "  "
        + " ".join(f"{p:>{w}}" for p, w in zip(view.periods, widths, strict=True))
    )
    for category, row in zip(view.categories, view.rows, strict=True):
        cells_text = " ".join(
            BUCKET_GLYPHS[cell.bucket] * w for cell, w in zip(row, widths, strict=True)
        )
        cli_output.plain(f"{category:<{label_width}}  {cells_text}")
    cli_output.info(f"Buckets: blank = no sales, then {BUCKET_COUNT} levels of intensity")


@app.command()
def report(
    snapshot: Path = typer.Argument(..., help="Sales snapshot file (YAML or JSON)"),  # noqa: B008
    out: Path | None = typer.Option(
        None, help="Output report path (default: SV_OUTPUT_DIR/sales_<year>.<format>)"
    ),  # noqa: B008
    fmt: ReportFormat = typer.Option(ReportFormat.HTML, "--format", case_sensitive=False, help="html|md"),  # noqa: B008
    charts: bool = typer.Option(True, "--charts/--no-charts", help="Generate chart images"),  # noqa: B008
    monthly_mode: ViewMode = typer.Option(ViewMode.VALUE, case_sensitive=False),  # noqa: B008
    heatmap_mode: ViewMode = typer.Option(ViewMode.QUANTITY, case_sensitive=False),  # noqa: B008
) -> None:
    """Render an HTML or Markdown report with both visualizations."""
    settings = get_settings()
    snap = _load(snapshot, "report")
    if out is None:
        out = settings.output_dir / f"sales_{snap.year or 'report'}.{fmt.value}"

    assets_dir = out.parent / "assets" if fmt == ReportFormat.MD and charts else None
    renderer = ReportRenderer(
        assets_dir=assets_dir, currency=settings.currency, dpi=settings.chart_dpi
    )
    context = renderer.build_context(
        snap,
        monthly_mode=monthly_mode,
        heatmap_mode=heatmap_mode,
        period_count=settings.period_count,
    )
    try:
        if fmt == ReportFormat.HTML:
            content = renderer.render_html(context, generate_charts=charts)
        else:
            content = renderer.render_markdown(
                context, generate_charts=charts, report_dir=out.parent
            )
        write_text(out, content)
    except (RuntimeError, OSError) as e:
        _fail(e, "report")

    logger.info("Report written", extra={"path": str(out), "format": fmt.value})
    cli_output.success(f"Report written to {out}")


if __name__ == "__main__":
    app()
