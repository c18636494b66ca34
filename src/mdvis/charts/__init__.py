#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/charts/__init__.py
"""Chart description parsing and Chart.js markup generation."""

from __future__ import annotations

from mdvis.charts.chartjs import (
    build_chart_config,
    build_chart_container,
    build_chart_script,
    generate_chart_markup,
    normalize_chart_kind,
)
from mdvis.charts.models import ChartDescription, ChartPoint
from mdvis.charts.normalize import DATA_NORMALIZERS, normalize_data_text
from mdvis.charts.parser import parse_chart_description
from mdvis.charts.render import compute_chart_id, render_chart, render_chart_block

__all__ = [
    "ChartDescription",
    "ChartPoint",
    "DATA_NORMALIZERS",
    "build_chart_config",
    "build_chart_container",
    "build_chart_script",
    "compute_chart_id",
    "generate_chart_markup",
    "normalize_chart_kind",
    "normalize_data_text",
    "parse_chart_description",
    "render_chart",
    "render_chart_block",
]
