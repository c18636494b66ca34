#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/ast/nodes.py
"""AST node classes for document representation.

A parsed Markdown document is a tree of the dataclasses below. Each class
declares its visitor hook and, for containers, the field that holds its
children through class keywords::

    class Paragraph(Node, kind="paragraph", children="content"): ...

``Node.accept`` dispatches to ``visitor.visit_<kind>``, and the module-level
helpers ``get_node_children`` and ``replace_node_children`` read the
children field, so generic traversals never need isinstance chains.

Block kinds
    Document, Heading, Paragraph, CodeBlock, ChartBlock, BlockQuote, List,
    ListItem, Table, TableRow, TableCell, ThematicBreak, HTMLBlock
Inline kinds
    Text, Emphasis, Strong, Code, Link, Image, LineBreak, Strikethrough,
    HTMLInline

The set is closed: renderers implement one ``visit_*`` method per kind.

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


@dataclass
class SourceLocation:
    """Where a node came from.

    Parameters
    ----------
    format : str
        Source format, always ``'markdown'`` here
    line, column : int or None
        One-based position in the source, when known
    metadata : dict
        Anything else the parser wants to record

    """

    format: str
    line: Optional[int] = None
    column: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


class Node:
    """Base class for all AST nodes.

    Every concrete node carries a ``metadata`` dict and an optional
    ``source_location``; both are declared on the subclasses so that they
    follow the node's own fields in the generated ``__init__``.
    """

    kind: ClassVar[str] = ""
    children_field: ClassVar[Optional[str]] = None

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    def __init_subclass__(cls, kind: str = "", children: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if kind:
            cls.kind = kind
        if children is not None:
            cls.children_field = children

    def accept(self, visitor: Any) -> Any:
        """Call the visitor method for this node's kind and return its result."""
        return getattr(visitor, f"visit_{self.kind}")(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node, kind="document", children="children"):
    """Root of a parsed document.

    ``metadata`` holds document-level values such as ``title`` and ``lang``
    that the standalone HTML wrapper reads.
    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Heading(Node, kind="heading", children="content"):
    """ATX or setext heading; ``level`` runs from 1 to 6."""

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        if self.level not in range(1, 7):
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(Node, kind="paragraph", children="content"):
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class CodeBlock(Node, kind="code_block"):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Literal body of the block
    language : str or None
        First word of the info string, if it is a safe identifier
    fence_char : str
        ``'`'`` or ``'~'``
    fence_length : int
        Length of the opening fence

    Notes
    -----
    The Markdown parser stores the full info string under
    ``metadata["info_string"]`` and anything after the language under
    ``metadata["info_attrs"]``. Blocks whose language is the chart marker are
    swapped for ``ChartBlock`` by the ``chart-blocks`` transform.

    """

    content: str
    language: Optional[str] = None
    fence_char: str = "`"
    fence_length: int = 3
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class ChartBlock(Node, kind="chart_block"):
    """Placeholder for a fenced block selected for chart rendering.

    Only the raw body lines are kept; the block has no language and is never
    rendered as code.

    Examples
    --------
    >>> block = ChartBlock(lines=["layout: bar\\n", "data: [{key: 1, value: 2}]\\n"])
    >>> block.text()
    'layout: bar\\ndata: [{key: 1, value: 2}]\\n'

    """

    lines: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def text(self) -> str:
        """Return the body as one string, line terminators included."""
        return "".join(self.lines)


@dataclass
class BlockQuote(Node, kind="block_quote", children="children"):
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class List(Node, kind="list", children="items"):
    """Bullet or ordered list.

    ``start`` only matters for ordered lists. A tight list renders its item
    paragraphs without ``<p>`` wrappers.
    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class ListItem(Node, kind="list_item", children="children"):
    """List item; ``task_status`` is set for GFM task list entries."""

    children: list[Node] = field(default_factory=list)
    task_status: Optional[Literal["checked", "unchecked"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Table(Node, kind="table"):
    """GFM table.

    The header row is kept apart from the body ``rows``. ``alignments`` has
    one entry per column, None where the delimiter row gives no alignment.
    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class TableRow(Node, kind="table_row", children="cells"):
    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class TableCell(Node, kind="table_cell", children="content"):
    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class ThematicBreak(Node, kind="thematic_break"):
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class HTMLBlock(Node, kind="html_block"):
    """Raw HTML block, kept verbatim.

    Parse untrusted input with ``MarkdownParserOptions(preserve_html=False)``
    to drop these nodes.
    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node, kind="text"):
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Emphasis(Node, kind="emphasis", children="content"):
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Strong(Node, kind="strong", children="content"):
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Code(Node, kind="code"):
    """Inline code span."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Link(Node, kind="link", children="content"):
    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Image(Node, kind="image"):
    """Image; ``alt_text`` is the flattened text of the Markdown alt span."""

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class LineBreak(Node, kind="line_break"):
    """Hard break, or a soft break (a plain newline in the source) when ``soft``."""

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Strikethrough(Node, kind="strikethrough", children="content"):
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class HTMLInline(Node, kind="html_inline"):
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


def get_node_children(node: Node) -> list[Node]:
    """Return a new list of ``node``'s direct children.

    A table yields its header row first, then the body rows. Leaf nodes,
    ``ChartBlock`` included, yield an empty list.

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, Table):
        return ([node.header] if node.header else []) + list(node.rows)
    if node.children_field is None:
        return []
    return list(getattr(node, node.children_field))


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Return a copy of ``node`` holding ``new_children``.

    Leaf nodes are returned as is. For a table, the first row flagged
    ``is_header`` becomes the header and every other row a body row.

    Raises
    ------
    ValueError
        If a table is given anything other than ``TableRow`` instances

    """
    if isinstance(node, Table):
        header: Optional[TableRow] = None
        rows: list[TableRow] = []
        for row in new_children:
            if not isinstance(row, TableRow):
                raise ValueError(f"Table children must be TableRow instances, got {type(row).__name__}")
            if row.is_header and header is None:
                header = row
            else:
                rows.append(row)
        return replace(node, header=header, rows=rows)
    if node.children_field is None:
        return node
    return replace(node, **{node.children_field: new_children})
