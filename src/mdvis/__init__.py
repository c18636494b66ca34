"""mdvis - Markdown to HTML with inline Chart.js visualizations.

Fenced code blocks tagged ``vis`` hold a small chart description (a layout
plus a list of key/value points). mdvis parses the Markdown with mistune,
replaces those blocks with chart nodes and renders them as a ``<canvas>``
container plus the script that draws the chart with Chart.js. Everything
else renders as ordinary HTML.

Examples
--------
Convert Markdown to an HTML fragment:

    >>> from mdvis import to_html
    >>> html = to_html('''
    ... # Pets
    ...
    ... ```vis
    ... layout: pie
    ... data: [{key: "Dog", value: 5}, {key: "Cat", value: 4}]
    ... ```
    ... ''')

Full page that loads Chart.js from the CDN:

    >>> from mdvis import HtmlRendererOptions
    >>> html = to_html(text, renderer_options=HtmlRendererOptions(standalone=True, allow_remote_scripts=True))

Work with the AST directly:

    >>> from mdvis import to_ast
    >>> from mdvis.transforms import render
    >>> doc = to_ast(text)
    >>> html = render(doc, transforms=["chart-blocks"])

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdvis requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdvis.api import to_ast, to_html  # noqa: E402
from mdvis.charts import ChartDescription, ChartPoint, parse_chart_description, render_chart  # noqa: E402
from mdvis.exceptions import (  # noqa: E402
    ChartErrorKind,
    ChartParseError,
    InvalidOptionsError,
    MdvisError,
    ParsingError,
    RenderingError,
    TransformError,
    ValidationError,
)
from mdvis.options import ChartOptions, HtmlRendererOptions, MarkdownParserOptions  # noqa: E402

__all__ = [
    "__version__",
    "to_ast",
    "to_html",
    "ChartDescription",
    "ChartPoint",
    "parse_chart_description",
    "render_chart",
    "ChartOptions",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "MdvisError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "ChartParseError",
    "ChartErrorKind",
    "RenderingError",
    "TransformError",
]
