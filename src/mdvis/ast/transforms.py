#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/ast/transforms.py
"""AST rewriting and querying visitors.

Examples
--------
Extract all chart blocks from a document:

    >>> from mdvis.ast import transforms
    >>> charts = transforms.extract_nodes(doc, ChartBlock)

Drop every raw HTML block:

    >>> class DropHtml(NodeTransformer):
    ...     def visit_html_block(self, node):
    ...         return None
    >>> new_doc = transforms.transform_nodes(doc, DropHtml())

"""

from __future__ import annotations

import copy
from typing import Callable, Type

from mdvis.ast.nodes import (
    ChartBlock,
    Document,
    Node,
    Table,
    get_node_children,
    replace_node_children,
)
from mdvis.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Rebuild an AST, letting subclasses replace or drop nodes.

    Every ``visit_*`` method defaults to ``_rebuild``, which copies the node
    with its children transformed. Override a method to return a different
    node, or None to remove the node from its parent. The input tree is
    never mutated.

    Examples
    --------
    >>> class Shout(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> loud = Shout().transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform a node and its subtree.

        Returns
        -------
        Node or None
            Replacement node, or None to remove it

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        transformed = (self.transform(child) for child in children)
        return [child for child in transformed if child is not None]

    def _rebuild(self, node: Node) -> Node:
        """Copy ``node`` with transformed children and its own metadata dict."""
        rebuilt = replace_node_children(node, self._transform_children(get_node_children(node)))
        if rebuilt is node:
            rebuilt = copy.copy(node)
        rebuilt.metadata = dict(node.metadata)
        return rebuilt

    def visit_table(self, node: Table) -> Node | None:
        """Rebuild a table, copying its column alignments."""
        table = self._rebuild(node)
        table.alignments = list(node.alignments)  # type: ignore[attr-defined]
        return table

    def visit_chart_block(self, node: ChartBlock) -> Node | None:
        """Copy a chart block with its own line list."""
        return ChartBlock(lines=list(node.lines), metadata=dict(node.metadata), source_location=node.source_location)

    visit_document = visit_heading = visit_paragraph = visit_code_block = _rebuild
    visit_block_quote = visit_list = visit_list_item = visit_table_row = visit_table_cell = _rebuild
    visit_thematic_break = visit_html_block = visit_text = visit_emphasis = visit_strong = _rebuild
    visit_code = visit_link = visit_image = visit_line_break = visit_strikethrough = visit_html_inline = _rebuild


class NodeCollector(NodeVisitor):
    """Collect nodes matching a predicate in depth-first document order.

    Parameters
    ----------
    predicate : callable or None, default = None
        Called with each node; nodes for which it returns True are collected.
        All nodes are collected when omitted.

    """

    def __init__(self, predicate: Callable[[Node], bool] | None = None):
        """Initialize the collector with an optional predicate function."""
        self.predicate = predicate or (lambda n: True)
        self.collected: list[Node] = []

    def _collect(self, node: Node) -> None:
        if self.predicate(node):
            self.collected.append(node)
        for child in get_node_children(node):
            child.accept(self)

    visit_document = visit_heading = visit_paragraph = visit_code_block = visit_chart_block = _collect
    visit_block_quote = visit_list = visit_list_item = visit_table = visit_table_row = visit_table_cell = _collect
    visit_thematic_break = visit_html_block = visit_text = visit_emphasis = visit_strong = _collect
    visit_code = visit_link = visit_image = visit_line_break = visit_strikethrough = visit_html_inline = _collect


def extract_nodes(doc: Document, node_type: Type[Node] | None = None) -> list[Node]:
    """Return every node of ``node_type`` in ``doc`` (all nodes when None), in document order.

    Examples
    --------
    >>> charts = extract_nodes(doc, ChartBlock)

    """
    predicate = (lambda n: isinstance(n, node_type)) if node_type else None
    collector = NodeCollector(predicate=predicate)
    doc.accept(collector)
    return collector.collected


def transform_nodes(doc: Document, transformer: NodeTransformer) -> Document:
    """Apply ``transformer`` to ``doc`` and return the rebuilt document."""
    return transformer.transform(doc)  # type: ignore[return-value]


__all__ = [
    "NodeCollector",
    "NodeTransformer",
    "extract_nodes",
    "transform_nodes",
]
