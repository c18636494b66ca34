#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/ast/visitors.py
"""Visitor base class for AST traversal.

Each node's ``accept`` calls the matching ``visit_<kind>`` method, so a
concrete visitor handles the closed set of node kinds in
:mod:`mdvis.ast.nodes` without isinstance chains.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdvis.ast.nodes import (
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
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Renderers return nothing and accumulate output; transformers return
    replacement nodes. A subclass must provide every ``visit_*`` method.

    Examples
    --------
    Collect the source of every chart block:

        >>> collector = NodeCollector(lambda n: isinstance(n, ChartBlock))
        >>> document.accept(collector)
        >>> [block.text() for block in collector.collected]

    """

    # Block nodes

    @abstractmethod
    def visit_document(self, node: Document) -> Any: ...

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any: ...

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any: ...

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any: ...

    @abstractmethod
    def visit_chart_block(self, node: ChartBlock) -> Any:
        """Handle the placeholder left by the chart block transform."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any: ...

    @abstractmethod
    def visit_list(self, node: List) -> Any: ...

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any: ...

    @abstractmethod
    def visit_table(self, node: Table) -> Any: ...

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any: ...

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any: ...

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any: ...

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any: ...

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text) -> Any: ...

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any: ...

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any: ...

    @abstractmethod
    def visit_code(self, node: Code) -> Any: ...

    @abstractmethod
    def visit_link(self, node: Link) -> Any: ...

    @abstractmethod
    def visit_image(self, node: Image) -> Any: ...

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any: ...

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any: ...

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any: ...


__all__ = ["NodeVisitor"]
