#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for mdvis parsers and renderers.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy rather than mutating an instance.
"""

from __future__ import annotations

from mdvis.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdvis.options.chart import ChartOptions
from mdvis.options.html import HtmlRendererOptions
from mdvis.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "ChartOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
]
