#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdvis library.

This module centralizes the hardcoded values used across mdvis so that the
chart dialect, the generated markup and the renderer defaults can be found
in one place.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Chart Dialect - field prefixes and block marker
3. Chart Markup - defaults for the generated Chart.js markup
4. HTML Rendering - renderer defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ChartKind = Literal["bar", "line", "pie"]
CodeFenceChar = Literal["`", "~"]

# =============================================================================
# Chart Dialect
# =============================================================================

# Fenced code blocks whose language equals this marker are rendered as charts
DEFAULT_CHART_MARKER = "vis"

CHART_KINDS: tuple[str, ...] = ("bar", "line", "pie")
DEFAULT_CHART_KIND: ChartKind = "bar"

FIELD_LAYOUT = "layout"
FIELD_HEIGHT = "height"
FIELD_LABEL = "label"
FIELD_TITLE = "title"
FIELD_COLOR = "color"
FIELD_DATA = "data"

# Scalar fields, in the order they are documented
SCALAR_FIELDS: tuple[str, ...] = (FIELD_LAYOUT, FIELD_HEIGHT, FIELD_LABEL, FIELD_TITLE, FIELD_COLOR)

# Bare object keys that are quoted before the data array is decoded as JSON
DATA_OBJECT_KEYS: tuple[str, ...] = ("key", "value")

# =============================================================================
# Chart Markup
# =============================================================================

DEFAULT_CHART_COLOR = "#666666"
DEFAULT_CHART_ID_PREFIX = "chart-"
DEFAULT_CHART_CSS_CLASS = "mdvis-chart"
DEFAULT_CHART_BORDER_WIDTH = 1

# Pie slices are spread evenly around the hue wheel at this saturation/lightness
PIE_SLICE_SATURATION = 70
PIE_SLICE_LIGHTNESS = 60

DEFAULT_CHART_LIBRARY_URL = "https://cdn.jsdelivr.net/npm/chart.js"

# =============================================================================
# HTML Rendering
# =============================================================================

DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_HTML_TITLE = "Document"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3

# =============================================================================
# Markdown Parsing
# =============================================================================

# Code fence language identifiers must match this pattern to be kept
SAFE_LANGUAGE_IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_+\-]+$"
MAX_LANGUAGE_IDENTIFIER_LENGTH = 50
