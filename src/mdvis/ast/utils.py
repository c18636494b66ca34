#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/ast/utils.py
"""Helpers for reading information out of AST nodes."""

from __future__ import annotations

from typing import Union

from mdvis.ast.nodes import Node, Text, get_node_children


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Concatenate the ``Text`` content found under a node or list of nodes.

    Only ``Text`` leaves contribute; empty parts are skipped before joining
    with ``joiner``. Heading ids are built with ``joiner=""``.

    Examples
    --------
    >>> heading = Heading(level=2, content=[Text(content="Sales"), Strong(content=[Text(content=" 2024")])])
    >>> extract_text(heading.content, joiner="")
    'Sales 2024'

    """
    if isinstance(node_or_nodes, Text):
        return node_or_nodes.content
    nodes = node_or_nodes if isinstance(node_or_nodes, list) else get_node_children(node_or_nodes)
    return joiner.join(part for part in (extract_text(n, joiner=joiner) for n in nodes) if part)


__all__ = ["extract_text"]
