#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/transforms/chart_blocks.py
"""Transform that turns marked fenced code blocks into chart blocks.

A fenced code block whose language equals the chart marker (``vis`` by
default) is replaced, at the same position in its parent, by a
``ChartBlock`` that carries only the block's source lines. Block content is
not inspected here; it is decoded when the chart is rendered.

Examples
--------
    >>> from mdvis.transforms.chart_blocks import ChartBlockTransform
    >>> doc = ChartBlockTransform().transform(doc)

Use a different marker:

    >>> doc = ChartBlockTransform(marker="chart").transform(doc)

"""

from __future__ import annotations

import logging

from mdvis.ast.nodes import ChartBlock, CodeBlock, Document, Node
from mdvis.ast.transforms import NodeCollector, NodeTransformer
from mdvis.constants import DEFAULT_CHART_MARKER

logger = logging.getLogger(__name__)


class ChartBlockTransform(NodeTransformer):
    """Replace code blocks tagged with the chart marker by ChartBlock nodes.

    Parameters
    ----------
    marker : str, default "vis"
        Code block language that identifies a chart description. Matching is
        exact and case-sensitive.

    """

    def __init__(self, marker: str = DEFAULT_CHART_MARKER):
        """Initialize with the chart marker."""
        if not marker:
            raise ValueError("marker must be a non-empty string")
        self.marker = marker

    def is_chart_code_block(self, node: Node) -> bool:
        """Return True if node is a code block tagged with the marker."""
        return isinstance(node, CodeBlock) and node.language == self.marker

    def transform(self, node: Node) -> Node | None:
        """Transform a tree, leaving it untouched when it has no chart blocks.

        Matches are collected in one pass before any rewriting. A Document
        with no matching code blocks is returned as the same object.
        """
        if isinstance(node, Document):
            collector = NodeCollector(self.is_chart_code_block)
            node.accept(collector)
            if not collector.collected:
                return node
            logger.debug("Replacing %d '%s' code block(s) with chart blocks", len(collector.collected), self.marker)

        return super().transform(node)

    def visit_code_block(self, node: CodeBlock) -> Node | None:
        """Return a ChartBlock for marked code blocks, else a copy of the block."""
        if not self.is_chart_code_block(node):
            return super().visit_code_block(node)

        return ChartBlock(
            lines=node.content.splitlines(keepends=True),
            source_location=node.source_location,
        )
