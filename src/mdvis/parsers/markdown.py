#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/parsers/markdown.py
"""Markdown to AST converter.

mistune 3 runs with ``renderer=None`` so that it returns its token tree,
which is then mapped node by node onto the mdvis AST. Each mistune token
type has a ``_block_<type>`` or ``_inline_<type>`` method; token types
without one are dropped.

Fenced code blocks keep their language, info string and fence style so the
chart transform can pick out ``vis`` blocks afterwards.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import mistune

from mdvis.ast import (
    BlockQuote,
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
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from mdvis.constants import DEFAULT_CODE_FENCE_CHAR, DEFAULT_CODE_FENCE_MIN
from mdvis.options.markdown import MarkdownParserOptions
from mdvis.parsers.base import BaseParser, ParserInput
from mdvis.utils.security import sanitize_language_identifier

logger = logging.getLogger(__name__)

Token = dict[str, Any]

ALWAYS_ON_PLUGINS = ("table", "task_lists")


def _attrs(token: Token) -> dict[str, Any]:
    return token.get("attrs") or {}


def _raw_text(tokens: list[Token]) -> str:
    """Flatten a token subtree to its raw text, ignoring markup."""
    return "".join(token.get("raw", "") or _raw_text(token.get("children", [])) for token in tokens)


class MarkdownParser(BaseParser):
    r"""Convert Markdown to AST representation.

    Tables and task lists are always recognised; strikethrough and raw HTML
    are controlled by ``MarkdownParserOptions``.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> doc = MarkdownParser().parse("# Hello\\n\\nThis is **bold**.")
        >>> safe = MarkdownParser(MarkdownParserOptions(preserve_html=False))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()
        super().__init__(self.options)

    def parse(self, input_data: ParserInput) -> Document:
        """Parse Markdown text, UTF-8 bytes, a ``Path`` or a stream into a Document.

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded

        """
        text = self._load_text_content(input_data)

        plugins = list(ALWAYS_ON_PLUGINS)
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        tokens, _state = mistune.create_markdown(renderer=None, plugins=plugins).parse(text)

        children = self._blocks(tokens if isinstance(tokens, list) else [])
        logger.debug("Parsed Markdown into %d top-level node(s)", len(children))
        return Document(children=children)

    # Dispatch

    def _convert(self, prefix: str, tokens: list[Token]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            handler: Optional[Callable[[Token], Optional[Node]]] = getattr(
                self, f"{prefix}{token.get('type', '')}", None
            )
            node = handler(token) if handler else None
            if node is not None:
                nodes.append(node)
        return nodes

    def _blocks(self, tokens: list[Token]) -> list[Node]:
        return self._convert("_block_", tokens)

    def _inlines(self, tokens: list[Token]) -> list[Node]:
        return self._convert("_inline_", tokens)

    # Block tokens

    def _block_heading(self, token: Token) -> Heading:
        return Heading(level=_attrs(token).get("level", 1), content=self._inlines(token.get("children", [])))

    def _block_paragraph(self, token: Token) -> Paragraph:
        return Paragraph(content=self._inlines(token.get("children", [])))

    # Tight list items hold block_text instead of paragraphs.
    _block_block_text = _block_paragraph

    def _block_block_code(self, token: Token) -> CodeBlock:
        """Build a CodeBlock, splitting the info string into language and attributes."""
        metadata: dict[str, Any] = {}
        language = None
        info = (_attrs(token).get("info") or "").strip()
        if info:
            metadata["info_string"] = info
            word, *rest = info.split(maxsplit=1)
            language = sanitize_language_identifier(word)
            if rest:
                metadata["info_attrs"] = rest[0]

        marker = token.get("marker") or DEFAULT_CODE_FENCE_CHAR * DEFAULT_CODE_FENCE_MIN
        return CodeBlock(
            content=token.get("raw", ""),
            language=language or None,
            fence_char=marker[0],
            fence_length=len(marker),
            metadata=metadata,
        )

    def _block_block_quote(self, token: Token) -> BlockQuote:
        return BlockQuote(children=self._blocks(token.get("children", [])))

    def _block_list(self, token: Token) -> List:
        attrs = _attrs(token)
        return List(
            ordered=attrs.get("ordered", False),
            items=[self._list_item(child) for child in token.get("children", []) if isinstance(child, dict)],
            start=attrs.get("start", 1),
            tight=token.get("tight", attrs.get("tight", True)),
        )

    def _list_item(self, token: Token) -> ListItem:
        attrs = _attrs(token)
        item = ListItem(children=self._blocks(token.get("children", [])))
        if "checked" in attrs:
            item.task_status = "checked" if attrs["checked"] else "unchecked"
        return item

    def _block_table(self, token: Token) -> Table:
        """Build a Table from mistune's ``table_head`` and ``table_body`` sections.

        Header cells sit directly under ``table_head``; body cells sit under
        ``table_row`` tokens.
        """
        table = Table()
        for section in token.get("children", []):
            if section.get("type") == "table_head":
                table.header = TableRow(cells=self._cells(section), is_header=True)
                table.alignments = [cell.alignment for cell in table.header.cells]
            elif section.get("type") == "table_body":
                table.rows.extend(TableRow(cells=self._cells(row)) for row in section.get("children", []))
        return table

    def _cells(self, row: Token) -> list[TableCell]:
        return [
            TableCell(content=self._inlines(cell.get("children", [])), alignment=_attrs(cell).get("align"))
            for cell in row.get("children", [])
            if cell.get("type") == "table_cell"
        ]

    def _block_thematic_break(self, token: Token) -> ThematicBreak:
        return ThematicBreak()

    def _block_block_html(self, token: Token) -> HTMLBlock | None:
        return HTMLBlock(content=token.get("raw", "")) if self.options.preserve_html else None

    # Inline tokens

    def _inline_text(self, token: Token) -> Text:
        return Text(content=token.get("raw", ""))

    def _inline_codespan(self, token: Token) -> Code:
        return Code(content=token.get("raw", ""))

    def _inline_emphasis(self, token: Token) -> Emphasis:
        return Emphasis(content=self._inlines(token.get("children", [])))

    def _inline_strong(self, token: Token) -> Strong:
        return Strong(content=self._inlines(token.get("children", [])))

    def _inline_strikethrough(self, token: Token) -> Strikethrough:
        return Strikethrough(content=self._inlines(token.get("children", [])))

    def _inline_link(self, token: Token) -> Link:
        attrs = _attrs(token)
        return Link(url=attrs.get("url", ""), content=self._inlines(token.get("children", [])), title=attrs.get("title"))

    def _inline_image(self, token: Token) -> Image:
        attrs = _attrs(token)
        return Image(url=attrs.get("url", ""), alt_text=_raw_text(token.get("children", [])), title=attrs.get("title"))

    def _inline_linebreak(self, token: Token) -> LineBreak:
        return LineBreak(soft=False)

    def _inline_softbreak(self, token: Token) -> LineBreak:
        return LineBreak(soft=True)

    def _inline_inline_html(self, token: Token) -> HTMLInline | None:
        return HTMLInline(content=token.get("raw", "")) if self.options.preserve_html else None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Parse a Markdown string with a fresh ``MarkdownParser``.

    Examples
    --------
    >>> len(markdown_to_ast("# Hello\\n\\nWorld").children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)


__all__ = ["MarkdownParser", "markdown_to_ast"]
