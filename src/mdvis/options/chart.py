#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for chart block selection and markup generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdvis.constants import (
    DEFAULT_CHART_COLOR,
    DEFAULT_CHART_CSS_CLASS,
    DEFAULT_CHART_ID_PREFIX,
    DEFAULT_CHART_MARKER,
)
from mdvis.options.base import CloneFrozenMixin


# src/mdvis/options/chart.py
@dataclass(frozen=True)
class ChartOptions(CloneFrozenMixin):
    """Configuration options for chart blocks.

    Parameters
    ----------
    marker : str, default "vis"
        Fenced code block language that marks a block as a chart description.
        Matching is exact and case-sensitive.
    default_color : str, default "#666666"
        Text and grid colour used when a chart description has no ``color:`` field.
    id_prefix : str, default "chart-"
        Prefix prepended to the content hash to form the canvas element id.
    css_class : str, default "mdvis-chart"
        CSS class applied to the chart container element.

    """

    marker: str = field(
        default=DEFAULT_CHART_MARKER,
        metadata={"help": "Code block language that marks a chart description", "importance": "core"},
    )
    default_color: str = field(
        default=DEFAULT_CHART_COLOR,
        metadata={"help": "Fallback text/grid colour for charts without a color field", "importance": "core"},
    )
    id_prefix: str = field(
        default=DEFAULT_CHART_ID_PREFIX,
        metadata={"help": "Prefix for generated canvas element ids", "importance": "advanced"},
    )
    css_class: str = field(
        default=DEFAULT_CHART_CSS_CLASS,
        metadata={"help": "CSS class of the chart container element", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If the marker or default colour is empty.

        """
        if not self.marker or not self.marker.strip():
            raise ValueError("marker must be a non-empty string")
        if self.marker != self.marker.strip():
            raise ValueError(f"marker must not contain surrounding whitespace, got {self.marker!r}")
        if not self.default_color.strip():
            raise ValueError("default_color must be a non-empty string")
