#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The module consists of:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern base class for AST traversal
- transforms: Transformer and collector visitors
- utils: Helpers such as plain-text extraction

Examples
--------
    >>> from mdvis.ast import ChartBlock, Document
    >>> doc = Document(children=[ChartBlock(lines=["layout: pie\\n", "data: [{key: 'a', value: 1}]\\n"])])

"""

from __future__ import annotations

from mdvis.ast.nodes import (
    Alignment,
    BlockQuote,
    ChartBlock,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SourceLocation,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
    replace_node_children,
)
from mdvis.ast.transforms import NodeCollector, NodeTransformer, extract_nodes, transform_nodes
from mdvis.ast.utils import extract_text
from mdvis.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "ChartBlock",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "HTMLBlock",
    "HTMLInline",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeCollector",
    "NodeTransformer",
    "NodeVisitor",
    "Paragraph",
    "SourceLocation",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "extract_nodes",
    "extract_text",
    "get_node_children",
    "replace_node_children",
    "transform_nodes",
]
