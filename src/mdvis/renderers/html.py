#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/renderers/html.py
"""HTML rendering from AST.

``HtmlRenderer`` walks a document and emits an HTML fragment, or a full
page when ``standalone`` is set. Chart blocks become a sized Chart.js
container plus the script that draws into it; a block that cannot be
decoded is either skipped with a warning or fails the whole render.

"""

from __future__ import annotations

import logging

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
from mdvis.ast.utils import extract_text
from mdvis.ast.visitors import NodeVisitor
from mdvis.charts.render import render_chart_block
from mdvis.constants import DEFAULT_HTML_TITLE
from mdvis.exceptions import ChartParseError, RenderingError
from mdvis.options.html import HtmlRendererOptions
from mdvis.renderers.base import BaseRenderer, InlineContentMixin
from mdvis.utils.html_utils import escape_html
from mdvis.utils.text import slugify

logger = logging.getLogger(__name__)

HEADING_ID_MAX_LENGTH = 50
TASK_CHECKBOXES = {"checked": "&#9745; ", "unchecked": "&#9744; "}


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to HTML.

    A renderer instance can be reused; per-document state (heading ids,
    chart count, page title) is reset on every ``render_to_string`` call.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from mdvis.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1 id="title">Title</h1>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        self.options: HtmlRendererOptions = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, self.options)
        self._reset()

    def _reset(self) -> None:
        self._output: list[str] = []
        self._slugs: set[str] = set()
        self._page_title: str | None = None
        self._charts_drawn = 0

    def render_to_string(self, document: Document) -> str:
        """Render ``document`` to HTML.

        Raises
        ------
        RenderingError
            If a chart block is malformed and ``fail_on_chart_errors`` is set

        """
        self._reset()
        document.accept(self)
        body = "".join(self._output).rstrip("\n")

        if self._charts_drawn:
            logger.debug("Rendered %d chart(s)", self._charts_drawn)
        return self._page(document, body) if self.options.standalone else body

    def _page(self, doc: Document, body: str) -> str:
        """Wrap ``body`` in a complete HTML document."""
        title = doc.metadata.get("title") or self._page_title or DEFAULT_HTML_TITLE
        lang = doc.metadata.get("language") or self.options.language

        head = [
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(str(title))}</title>",
        ]
        if self._charts_drawn and self.options.allow_remote_scripts:
            head.append(f'<script src="{escape_html(self.options.chart_library_url)}"></script>')
        elif self._charts_drawn:
            logger.warning(
                "Document contains %d chart(s) but allow_remote_scripts=False; "
                "Chart.js is not loaded and the host page must provide it.",
                self._charts_drawn,
            )

        return "\n".join(
            ["<!DOCTYPE html>", f'<html lang="{escape_html(str(lang))}">', "<head>", *head, "</head>"]
            + ["<body>", body, "</body>", "</html>"]
        )

    def _emit_blocks(self, nodes: list[Node]) -> None:
        for child in nodes:
            child.accept(self)

    def _wrap_inline(self, tag: str, nodes: list[Node]) -> None:
        self._output.append(f"<{tag}>{self._render_inline_content(nodes)}</{tag}>")

    def _text(self, value: str) -> str:
        return escape_html(value, enabled=self.options.escape_html)

    # Block nodes

    def visit_document(self, node: Document) -> None:
        self._emit_blocks(node.children)

    def visit_heading(self, node: Heading) -> None:
        """Emit ``<hN>`` with an id slugged from the heading text, unique per document."""
        plain = extract_text(node.content, joiner="")
        if self._page_title is None and plain.strip():
            self._page_title = plain.strip()

        anchor = slugify(plain, seen_slugs=self._slugs, max_length=HEADING_ID_MAX_LENGTH)
        inner = self._render_inline_content(node.content)
        self._output.append(f'<h{node.level} id="{anchor}">{inner}</h{node.level}>\n')

    def visit_paragraph(self, node: Paragraph) -> None:
        self._output.append(f"<p>{self._render_inline_content(node.content)}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Emit ``<pre><code>``, tagged with ``language-*`` when highlighting is on."""
        lang_class = ""
        if node.language and self.options.syntax_highlighting:
            lang_class = f' class="language-{escape_html(node.language)}"'
        self._output.append(f"<pre><code{lang_class}>{self._text(node.content)}</code></pre>\n")

    def visit_chart_block(self, node: ChartBlock) -> None:
        """Emit the chart container and draw script for a chart block.

        A block that fails to decode emits nothing. The failure is logged as
        a warning naming its kind, or, with ``fail_on_chart_errors``, raised
        as a ``RenderingError`` chained to the ``ChartParseError``.
        """
        try:
            markup = render_chart_block(node, self.options.chart)
        except ChartParseError as e:
            if not self.options.fail_on_chart_errors:
                logger.warning("Skipping chart block (%s): %s", e.kind.value, e)
                return
            raise RenderingError(
                f"Failed to render chart block: {e}", rendering_stage="chart", original_error=e
            ) from e

        if markup:
            self._charts_drawn += 1
            self._output.append(markup + "\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._output.append("<blockquote>\n")
        self._emit_blocks(node.children)
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        tag = "ol" if node.ordered else "ul"
        start = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
        self._output.append(f"<{tag}{start}>\n")
        self._emit_blocks(node.items)  # type: ignore[arg-type]
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Emit ``<li>``; task items start with a ballot box glyph."""
        self._output.append("<li>")
        rest = node.children
        if node.task_status:
            box = TASK_CHECKBOXES[node.task_status]
            if rest and isinstance(rest[0], Paragraph):
                self._output.append(f"<p>{box}{self._render_inline_content(rest[0].content)}</p>\n")
                rest = rest[1:]
            else:
                self._output.append(box)
        self._emit_blocks(rest)
        self._output.append("</li>\n")

    def visit_table(self, node: Table) -> None:
        self._output.append("<table>\n")
        if node.header:
            self._output.append(f"<thead>\n{self._table_row(node.header, node, 'th')}</thead>\n")
        if node.rows:
            body = "".join(self._table_row(row, node, "td") for row in node.rows)
            self._output.append(f"<tbody>\n{body}</tbody>\n")
        self._output.append("</table>\n")

    def _table_row(self, row: TableRow, table: Table, cell_tag: str) -> str:
        cells = []
        for column, cell in enumerate(row.cells):
            align = table.alignments[column] if column < len(table.alignments) else None
            style = f' style="text-align: {align}"' if align else ""
            cells.append(f"<{cell_tag}{style}>{self._render_inline_content(cell.content)}</{cell_tag}>")
        return "<tr>" + "".join(cells) + "</tr>\n"

    # Rows and cells are emitted by visit_table.

    def visit_table_row(self, node: TableRow) -> None:
        pass

    def visit_table_cell(self, node: TableCell) -> None:
        pass

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._output.append("<hr>\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        if node.content:
            self._output.append(node.content if node.content.endswith("\n") else node.content + "\n")

    # Inline nodes

    def visit_text(self, node: Text) -> None:
        self._output.append(self._text(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        self._wrap_inline("em", node.content)

    def visit_strong(self, node: Strong) -> None:
        self._wrap_inline("strong", node.content)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._wrap_inline("del", node.content)

    def visit_code(self, node: Code) -> None:
        self._output.append(f"<code>{self._text(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        title = f' title="{escape_html(node.title)}"' if node.title else ""
        inner = self._render_inline_content(node.content)
        self._output.append(f'<a href="{escape_html(node.url)}"{title}>{inner}</a>')

    def visit_image(self, node: Image) -> None:
        title = f' title="{escape_html(node.title)}"' if node.title else ""
        self._output.append(f'<img src="{escape_html(node.url)}" alt="{escape_html(node.alt_text)}"{title}>')

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append("\n" if node.soft else "<br>\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        self._output.append(node.content)


__all__ = ["HtmlRenderer"]
