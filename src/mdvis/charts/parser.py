#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/charts/parser.py
"""Parser for the line-oriented chart description dialect.

A chart description is the body of a fenced block tagged with the chart
marker::

    layout: bar
    height: 300px
    label: Visitors
    title: Weekly visitors
    color: #333
    data: [
      { key: 'Mon', value: 12 },
      { key: 'Tue', value: 18 },
    ]

Scalar fields may appear in any order and the last occurrence of a field
wins. ``data:`` opens the data array; while the array is open every line is
data, so nested content that looks like a field is never read as one. Once
the array's opening bracket is balanced, scalar fields are recognized again.
If no bracket is ever opened, everything after ``data:`` is data.
"""

from __future__ import annotations

import logging

from mdvis.charts.models import ChartDescription
from mdvis.charts.normalize import decode_points, keys_are_numeric, normalize_data_text
from mdvis.constants import (
    FIELD_COLOR,
    FIELD_DATA,
    FIELD_HEIGHT,
    FIELD_LABEL,
    FIELD_LAYOUT,
    FIELD_TITLE,
    SCALAR_FIELDS,
)
from mdvis.exceptions import ChartErrorKind, ChartParseError

logger = logging.getLogger(__name__)

_DATA_PREFIX = f"{FIELD_DATA}:"


class _BracketTracker:
    """Track square-bracket depth outside quoted strings across data lines."""

    def __init__(self) -> None:
        self.depth = 0
        self.opened = False
        self._quote: str | None = None
        self._escaped = False

    @property
    def closed(self) -> bool:
        return self.opened and self.depth <= 0

    def feed(self, text: str) -> None:
        for char in text:
            if self._quote is not None:
                if self._escaped:
                    self._escaped = False
                elif char == "\\":
                    self._escaped = True
                elif char == self._quote:
                    self._quote = None
                continue

            if char in ("'", '"'):
                self._quote = char
            elif char == "[":
                self.depth += 1
                self.opened = True
            elif char == "]":
                self.depth -= 1


def _match_scalar_field(line: str) -> tuple[str, str] | None:
    for name in SCALAR_FIELDS:
        prefix = f"{name}:"
        if line.startswith(prefix):
            return name, line[len(prefix) :].strip()
    return None


def _data_start(line: str) -> str:
    """Return the ``data:`` line from its first ``[`` on, or "" when it has none."""
    bracket = line.find("[", len(_DATA_PREFIX))
    return line[bracket:] if bracket != -1 else ""


def parse_chart_description(text: str) -> ChartDescription:
    """Parse the text of a chart block into a ChartDescription.

    Parameters
    ----------
    text : str
        Raw block text, with line breaks preserved

    Returns
    -------
    ChartDescription
        Decoded description with a non-empty kind and at least one point

    Raises
    ------
    ChartParseError
        ``MISSING_FIELD`` with message ``"layout not found"`` or
        ``"data not found"`` when a required field is absent or empty, or
        ``MALFORMED_DATA`` when the data array cannot be decoded after
        normalization. The decoding error is attached as ``original_error``.

    Examples
    --------
    >>> chart = parse_chart_description("layout: pie\\ndata: [{key:'Dog',value:5},{key:'Cat',value:4}]")
    >>> chart.kind, chart.keys, chart.keys_are_numeric
    ('pie', ['Dog', 'Cat'], False)

    """
    fields: dict[str, str] = {}
    data_lines: list[str] = []
    tracker = _BracketTracker()
    in_data = False

    for raw_line in text.strip().split("\n"):
        line = raw_line.strip()

        if in_data and not tracker.closed:
            data_lines.append(line)
            tracker.feed(line)
            continue

        match = _match_scalar_field(line)
        if match is not None:
            name, value = match
            fields[name] = value
            continue

        if line.startswith(_DATA_PREFIX):
            in_data = True
            start = _data_start(line)
            if start:
                data_lines.append(start)
                tracker.feed(start)
            continue

        # Anything else after a closed data array is kept so that it fails decoding
        if in_data and line:
            data_lines.append(line)

    kind = fields.get(FIELD_LAYOUT, "")
    if not kind:
        raise ChartParseError("layout not found", ChartErrorKind.MISSING_FIELD, field=FIELD_LAYOUT)

    data_text = "\n".join(data_lines).strip()
    if not data_text:
        raise ChartParseError("data not found", ChartErrorKind.MISSING_FIELD, field=FIELD_DATA)

    normalized = normalize_data_text(data_text)
    try:
        points = decode_points(normalized)
    except ValueError as exc:
        raise ChartParseError(
            f"failed to parse chart data: {exc}", ChartErrorKind.MALFORMED_DATA, original_error=exc
        ) from exc

    logger.debug("Parsed %s chart with %d points", kind, len(points))
    return ChartDescription(
        kind=kind,
        points=tuple(points),
        keys_are_numeric=keys_are_numeric(points),
        size_hint=fields.get(FIELD_HEIGHT, ""),
        label=fields.get(FIELD_LABEL, ""),
        title=fields.get(FIELD_TITLE, ""),
        color_hint=fields.get(FIELD_COLOR, ""),
    )
