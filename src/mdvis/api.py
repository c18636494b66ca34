#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/api.py
"""High-level entry points for turning Markdown into HTML with charts."""

from __future__ import annotations

import logging
from typing import Optional

from mdvis.ast import Document
from mdvis.options.html import HtmlRendererOptions
from mdvis.options.markdown import MarkdownParserOptions
from mdvis.parsers.base import ParserInput
from mdvis.parsers.markdown import MarkdownParser
from mdvis.renderers.html import HtmlRenderer
from mdvis.transforms._builtin_metadata import CHART_BLOCKS_METADATA
from mdvis.transforms.chart_blocks import ChartBlockTransform
from mdvis.transforms.pipeline import Pipeline, TransformSpec

logger = logging.getLogger(__name__)


def to_ast(
    source: ParserInput,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    transforms: Optional[list[TransformSpec]] = None,
) -> Document:
    """Parse Markdown into an AST Document.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        Markdown text, UTF-8 bytes, a path or a stream
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    transforms : list, optional
        Transform names or NodeTransformer instances applied after parsing.
        No transforms are applied by default.

    Returns
    -------
    Document
        AST document node

    Raises
    ------
    ParsingError
        If the input cannot be decoded
    TransformError
        If a transform does not return a Document

    Examples
    --------
        >>> doc = to_ast("```vis\\nlayout: bar\\n```", transforms=["chart-blocks"])
        >>> type(doc.children[0]).__name__
        'ChartBlock'

    """
    doc = MarkdownParser(parser_options).parse(source)
    if transforms:
        doc = Pipeline(transforms=transforms).apply_transforms(doc)
    return doc


def to_html(
    source: ParserInput,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
    transforms: Optional[list[TransformSpec]] = None,
) -> str:
    """Convert Markdown to HTML, rendering chart blocks with Chart.js.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        Markdown text, UTF-8 bytes, a path or a stream
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : HtmlRendererOptions, optional
        Renderer configuration. ``renderer_options.chart.marker`` selects the
        fenced blocks that become charts.
    transforms : list, optional
        Transform names or NodeTransformer instances. Defaults to
        ``["chart-blocks"]``. The name ``"chart-blocks"`` is bound to the
        configured marker.

    Returns
    -------
    str
        Rendered HTML

    Raises
    ------
    RenderingError
        If a chart block is malformed and ``fail_on_chart_errors`` is set

    Examples
    --------
        >>> html = to_html("```vis\\nlayout: pie\\ndata: [{key: 'A', value: 1}]\\n```")
        >>> "new Chart(" in html
        True

    """
    renderer_options = renderer_options or HtmlRendererOptions()
    if transforms is None:
        transforms = [CHART_BLOCKS_METADATA.name]

    resolved: list[TransformSpec] = [
        ChartBlockTransform(marker=renderer_options.chart.marker) if t == CHART_BLOCKS_METADATA.name else t
        for t in transforms
    ]

    doc = MarkdownParser(parser_options).parse(source)
    logger.debug("Rendering Markdown to HTML with %d transform(s)", len(resolved))
    return Pipeline(transforms=resolved, renderer=HtmlRenderer(renderer_options)).execute(doc)


__all__ = ["to_ast", "to_html"]
