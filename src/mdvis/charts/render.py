#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/charts/render.py
"""Render orchestration for chart blocks.

Ties block text to an element id, the description parser and the markup
generator. Each block is handled independently; the output for a block
depends only on that block's own source text and the chart options.
"""

from __future__ import annotations

import hashlib
import logging

from mdvis.ast.nodes import ChartBlock
from mdvis.charts.chartjs import generate_chart_markup
from mdvis.charts.parser import parse_chart_description
from mdvis.constants import DEFAULT_CHART_ID_PREFIX
from mdvis.options.chart import ChartOptions

logger = logging.getLogger(__name__)


def compute_chart_id(text: str, prefix: str = DEFAULT_CHART_ID_PREFIX) -> str:
    """Derive a deterministic element id from the exact block text.

    Parameters
    ----------
    text : str
        Raw block text
    prefix : str, default "chart-"
        Prefix that keeps the id a valid HTML identifier

    Returns
    -------
    str
        ``prefix`` followed by the SHA-256 hex digest of the UTF-8 encoded text

    """
    return prefix + hashlib.sha256(text.encode("utf-8")).hexdigest()


def render_chart(text: str, options: ChartOptions | None = None) -> str:
    """Render chart block text to HTML.

    Parameters
    ----------
    text : str
        Raw block text
    options : ChartOptions, optional
        Chart options

    Returns
    -------
    str
        Container followed by script, or ``""`` when the text is empty

    Raises
    ------
    ChartParseError
        If the text is not a valid chart description. Nothing is rendered.

    """
    if not text:
        return ""

    options = options or ChartOptions()
    chart_id = compute_chart_id(text, options.id_prefix)
    description = parse_chart_description(text)
    logger.debug("Rendering %s chart %s", description.kind, chart_id)
    return generate_chart_markup(chart_id, description, options)


def render_chart_block(node: ChartBlock, options: ChartOptions | None = None) -> str:
    """Render a ChartBlock node to HTML. See ``render_chart``."""
    return render_chart(node.text(), options)
