"""Visualization package for sales chart rendering.

This package turns the encoding view models into static chart images. It is
the presentation layer for the monthly bar chart and the product x month
heatmap: the encoding package decides bar lengths and colour buckets, and the
ChartGenerator only draws them.

Main Components:
    - ChartGenerator: Matplotlib-based chart rendering with file and base64 output

Usage:
    from sales_visuals.visuals import ChartGenerator
    from pathlib import Path

    generator = ChartGenerator(output_dir=Path("./output"))
    chart = generator.generate_monthly_chart(view, name="sales_2024")

Architecture Notes:
    - Charts use non-interactive 'Agg' backend for server environments
    - All chart generation is stateless and parallelizable
    - Figures are closed after saving
"""

from __future__ import annotations

from .charts import ChartGenerator

__all__ = ["ChartGenerator"]
