"""Chart generation utilities for sales reports."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap

from ..core.enums import ViewMode
from ..core.logging_config import get_logger
from ..encoding.buckets import BUCKET_COLORS
from ..encoding.views import HeatmapView, MonthlyChartView

# Use non-interactive backend for server environments
matplotlib.use("Agg")

logger = get_logger(__name__)

MODE_COLORS = {
    ViewMode.VALUE: "#10b981",
    ViewMode.QUANTITY: "#6366f1",
}


def format_cell_magnitude(magnitude: float, mode: ViewMode) -> str:
    """Short label drawn inside a heatmap cell."""
    if mode == ViewMode.QUANTITY:
        return f"{magnitude:.0f}"
    return f"{magnitude / 1000:.0f}k"


class ChartGenerator:
    """Generate charts for sales reports using matplotlib."""

    def __init__(self, output_dir: Path | None = None, dpi: int = 100):
        """Initialize chart generator.

        Args:
            output_dir: Optional directory to save chart images. If None, charts are only returned as base64.
            dpi: Resolution for chart images (default: 100)
        """
        self.output_dir = output_dir
        self.dpi = dpi
        if output_dir:
            output_dir.mkdir(parents=True, exist_ok=True)

    def generate_monthly_chart(
        self, view: MonthlyChartView, name: str = "report", title: str = "Monthly Sales"
    ) -> dict[str, str]:
        """Generate horizontal bar chart of monthly sales.

        Bar widths are the view's 0-100 percentages; labels carry the raw
        magnitude and order count.

        Args:
            view: Monthly chart view model
            name: Base name for file naming
            title: Chart title

        Returns:
            Dict with 'path' (if output_dir set) and 'base64' keys
        """
        if view.is_empty:
            logger.debug("No monthly sales data found, skipping chart")
            return {}

        periods = [bar.period for bar in view.bars]
        widths = [bar.percent for bar in view.bars]

        fig, ax = plt.subplots(figsize=(8, len(periods) * 0.45 + 1.5))

        y_pos = np.arange(len(periods))
        bars = ax.barh(y_pos, widths, color=MODE_COLORS[view.mode], alpha=0.85)

        ax.set_yticks(y_pos)
        ax.set_yticklabels(periods)
        ax.invert_yaxis()  # first period on top
        ax.set_xlim(0, 100)
        ax.set_xlabel(
            "Share of best month (%) by " + view.mode.value, fontsize=11
        )
        ax.set_title(title, fontsize=14, fontweight="bold")
        ax.grid(axis="x", alpha=0.3)

        for rect, bar in zip(bars, view.bars, strict=True):
            if view.mode == ViewMode.VALUE:
                label = f"{bar.value:,.0f}"
            else:
                label = f"{bar.quantity:.1f}"
            orders = f"{bar.order_count} order{'s' if bar.order_count > 1 else ''}"
            ax.text(
                min(rect.get_width() + 1, 80),
                rect.get_y() + rect.get_height() / 2,
                f"{label} ({orders})",
                va="center",
                fontsize=8,
            )

        plt.tight_layout()
        return self._save_chart(fig, f"{name}_monthly_{view.mode.value}")

    def generate_heatmap_chart(
        self, view: HeatmapView, name: str = "report", title: str = "Sales Heatmap"
    ) -> dict[str, str]:
        """Generate category x period heatmap coloured by intensity bucket.

        Args:
            view: Heatmap view model
            name: Base name for file naming
            title: Chart title

        Returns:
            Dict with 'path' (if output_dir set) and 'base64' keys
        """
        if view.is_empty or not view.categories or not view.periods:
            logger.debug("No heatmap data found, skipping chart")
            return {}

        grid = np.array(
            [[int(cell.bucket) for cell in row] for row in view.rows], dtype=int
        )
        cmap = ListedColormap(list(BUCKET_COLORS))
        norm = BoundaryNorm(np.arange(len(BUCKET_COLORS) + 1) - 0.5, cmap.N)

        fig, ax = plt.subplots(
            figsize=(len(view.periods) * 0.8 + 2.5, len(view.categories) * 0.5 + 1.5)
        )
        ax.imshow(grid, cmap=cmap, norm=norm, aspect="auto")

        ax.set_xticks(np.arange(len(view.periods)))
        ax.set_xticklabels(view.periods, rotation=45, ha="right")
        ax.set_yticks(np.arange(len(view.categories)))
        ax.set_yticklabels(view.categories)
        ax.set_title(title, fontsize=14, fontweight="bold")

        for r, row in enumerate(view.rows):
            for c, cell in enumerate(row):
                if cell.is_present:
                    ax.text(
                        c,
                        r,
                        format_cell_magnitude(cell.display_magnitude, view.mode),
                        ha="center",
                        va="center",
                        fontsize=8,
                        fontweight="bold",
                    )

        plt.tight_layout()
        return self._save_chart(fig, f"{name}_heatmap_{view.mode.value}")

    def _save_chart(self, fig: plt.Figure, filename: str) -> dict[str, str]:
        """Save chart to file and/or encode as base64.

        Args:
            fig: Matplotlib figure to save
            filename: Base filename (without extension)

        Returns:
            Dict with 'path' and/or 'base64' keys
        """
        result = {}

        # Save to file if output_dir is set
        if self.output_dir:
            filepath = self.output_dir / f"{filename}.png"
            try:
                fig.savefig(filepath, dpi=self.dpi, bbox_inches="tight", format="png")
                result["path"] = str(filepath)
                logger.debug(f"Chart saved to {filepath}")
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to save chart to {filepath}: {e}")

        # Always generate base64 for embedding
        try:
            buffer = BytesIO()
            fig.savefig(buffer, dpi=self.dpi, bbox_inches="tight", format="png")
            buffer.seek(0)
            result["base64"] = base64.b64encode(buffer.read()).decode("utf-8")
            buffer.close()
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to generate base64 for chart: {e}")

        plt.close(fig)
        return result
