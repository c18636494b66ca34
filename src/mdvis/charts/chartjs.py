#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/charts/chartjs.py
"""Chart.js markup generation.

Given a ChartDescription and a unique element id, this module produces a
sized container holding a ``<canvas>`` and a ``<script>`` element that
draws the chart with Chart.js once the page has loaded. Generation is pure:
the same inputs always produce the same markup.

The configuration object is assembled as a Python dict and serialized with
``to_script_literal`` so that user-supplied labels and titles are embedded
as data and can never alter the surrounding script.
"""

from __future__ import annotations

import logging
from typing import Any, cast

from mdvis.charts.models import ChartDescription
from mdvis.constants import (
    CHART_KINDS,
    DEFAULT_CHART_BORDER_WIDTH,
    DEFAULT_CHART_KIND,
    PIE_SLICE_LIGHTNESS,
    PIE_SLICE_SATURATION,
    ChartKind,
)
from mdvis.options.chart import ChartOptions
from mdvis.utils.html_utils import escape_html, to_script_literal

logger = logging.getLogger(__name__)

_CSS_DECLARATION_BREAKS = frozenset(";{}")


def normalize_chart_kind(kind: str) -> ChartKind:
    """Map a raw ``layout:`` value onto a supported chart type.

    Parameters
    ----------
    kind : str
        Raw chart kind

    Returns
    -------
    ChartKind
        ``"bar"``, ``"line"`` or ``"pie"``. Unrecognized kinds become ``"bar"``.

    """
    normalized = kind.strip().lower()
    if normalized in CHART_KINDS:
        return cast(ChartKind, normalized)
    return DEFAULT_CHART_KIND


def pie_slice_colors(count: int) -> list[str]:
    """Return one HSL colour per slice, spaced evenly around the hue wheel."""
    step = 360 / max(1, count)
    return [f"hsl({index * step:g}, {PIE_SLICE_SATURATION}%, {PIE_SLICE_LIGHTNESS}%)" for index in range(count)]


def _axis_options(color: str, begin_at_zero: bool = False) -> dict[str, Any]:
    axis: dict[str, Any] = {
        "ticks": {"color": color},
        "grid": {"color": color},
    }
    if begin_at_zero:
        axis["beginAtZero"] = True
    return axis


def container_height(description: ChartDescription) -> str:
    """Return the size hint to use as the container's CSS height, or "".

    A hint that could end the ``height`` declaration or open a rule block
    (``;``, ``{`` or ``}``) is dropped with a warning.
    """
    hint = description.size_hint
    if _CSS_DECLARATION_BREAKS.intersection(hint):
        logger.warning("Ignoring chart height %r: not a single CSS value", hint)
        return ""
    return hint


def build_chart_config(description: ChartDescription, options: ChartOptions | None = None) -> dict[str, Any]:
    """Build the Chart.js configuration object for a chart description.

    Parameters
    ----------
    description : ChartDescription
        Parsed chart description
    options : ChartOptions, optional
        Chart options supplying the fallback colour

    Returns
    -------
    dict
        Configuration with ``type``, ``data`` and ``options`` keys. Pie charts
        carry no ``scales`` entry; bar and line charts style both axes.

    Notes
    -----
    The dataset label is the series label, or the title-cased chart type
    when no label was given. The chart title falls back to the series label
    and is explicitly hidden when both are empty.

    """
    options = options or ChartOptions()
    chart_type = normalize_chart_kind(description.kind)
    color = description.color_hint or options.default_color
    title_text = description.title or description.label

    dataset: dict[str, Any] = {
        "label": description.label or chart_type.title(),
        "data": description.values,
        "borderWidth": DEFAULT_CHART_BORDER_WIDTH,
    }
    if chart_type == "pie":
        dataset["backgroundColor"] = pie_slice_colors(len(description.points))

    chart_options: dict[str, Any] = {
        "responsive": True,
        "color": color,
        "plugins": {
            "title": {"display": bool(title_text), "text": title_text, "color": color},
            "legend": {"display": chart_type == "pie" or bool(description.label), "labels": {"color": color}},
        },
    }
    if container_height(description):
        chart_options["maintainAspectRatio"] = False
    if chart_type != "pie":
        chart_options["scales"] = {
            "x": _axis_options(color),
            "y": _axis_options(color, begin_at_zero=True),
        }

    return {
        "type": chart_type,
        "data": {"labels": description.keys, "datasets": [dataset]},
        "options": chart_options,
    }


def build_chart_container(chart_id: str, description: ChartDescription, options: ChartOptions | None = None) -> str:
    """Build the sized container element that holds the chart canvas.

    The height declaration is omitted when the description has no usable size hint.
    """
    options = options or ChartOptions()
    style = "position: relative;"
    height = container_height(description)
    if height:
        style += f" height: {height};"
    return (
        f'<div class="{escape_html(options.css_class)}" style="{escape_html(style)}">'
        f'<canvas id="{escape_html(chart_id)}"></canvas></div>'
    )


def build_chart_script(chart_id: str, description: ChartDescription, options: ChartOptions | None = None) -> str:
    """Build the script element that draws the chart into its canvas.

    Drawing is deferred until the DOM has been parsed so the canvas lookup
    succeeds wherever the script appears in the page.
    """
    config = build_chart_config(description, options)
    return (
        "<script>\n"
        "(function () {\n"
        "  function draw() {\n"
        f"    var canvas = document.getElementById({to_script_literal(chart_id)});\n"
        "    if (!canvas) {\n"
        "      return;\n"
        "    }\n"
        f"    new Chart(canvas.getContext(\"2d\"), {to_script_literal(config)});\n"
        "  }\n"
        "  if (document.readyState === \"loading\") {\n"
        "    document.addEventListener(\"DOMContentLoaded\", draw);\n"
        "  } else {\n"
        "    draw();\n"
        "  }\n"
        "})();\n"
        "</script>"
    )


def generate_chart_markup(chart_id: str, description: ChartDescription, options: ChartOptions | None = None) -> str:
    """Return the container element immediately followed by its script element."""
    return build_chart_container(chart_id, description, options) + build_chart_script(chart_id, description, options)
