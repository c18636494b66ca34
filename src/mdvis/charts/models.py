#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/charts/models.py
"""Structured records produced by the chart description parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

ChartKey = Union[str, int, float]


@dataclass(frozen=True)
class ChartPoint:
    """A single (key, value) data point.

    Parameters
    ----------
    key : str, int or float
        Category label, kept in the representation it was written in
    value : float
        Numeric value of the point

    """

    key: ChartKey
    value: float


@dataclass(frozen=True)
class ChartDescription:
    """Decoded chart description for one chart block.

    A successfully parsed description always has a non-empty ``kind`` and at
    least one point. ``kind`` is kept exactly as written; it is only coerced
    to a supported chart type when markup is generated.

    Parameters
    ----------
    kind : str
        Chart family from the ``layout:`` field, e.g. ``"bar"`` or ``"pie"``
    points : tuple of ChartPoint
        Data points in source order
    keys_are_numeric : bool
        True if every key is a number or a string holding a numeric literal
    size_hint : str, default ""
        CSS length from the ``height:`` field; empty when unspecified
    label : str, default ""
        Name of the data series from the ``label:`` field
    title : str, default ""
        Chart title from the ``title:`` field
    color_hint : str, default ""
        Text and grid colour from the ``color:`` field

    """

    kind: str
    points: tuple[ChartPoint, ...] = field(default_factory=tuple)
    keys_are_numeric: bool = False
    size_hint: str = ""
    label: str = ""
    title: str = ""
    color_hint: str = ""

    @property
    def keys(self) -> list[ChartKey]:
        """Return point keys in order."""
        return [point.key for point in self.points]

    @property
    def values(self) -> list[float]:
        """Return point values in order."""
        return [point.value for point in self.points]
