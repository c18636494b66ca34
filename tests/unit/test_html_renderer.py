#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the HTML renderer."""

import logging
from io import BytesIO, StringIO

import pytest

from mdvis.ast import (
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
from mdvis.exceptions import ChartParseError, InvalidOptionsError, RenderingError
from mdvis.options import ChartOptions, HtmlRendererOptions, MarkdownParserOptions
from mdvis.renderers.html import HtmlRenderer

VALID_CHART = ["layout: pie\n", "data: [{key: 'Dog', value: 5}, {key: 'Cat', value: 4}]\n"]
BROKEN_CHART = ["data: [{key: 'Dog', value: 5}]\n"]


def _render(*children, **options):
    return HtmlRenderer(HtmlRendererOptions(**options)).render_to_string(Document(children=list(children)))


def _para(text):
    return Paragraph(content=[Text(content=text)])


@pytest.mark.unit
class TestHtmlRendererBasics:
    """Tests for rendering ordinary nodes."""

    def test_heading_with_slug_id(self):
        """Test that headings get ids derived from their text."""
        html = _render(Heading(level=2, content=[Text(content="Sales "), Strong(content=[Text(content="2024")])]))

        assert html == '<h2 id="sales-2024">Sales <strong>2024</strong></h2>'

    def test_duplicate_heading_ids_unique(self):
        """Test that repeated heading text gets distinct ids."""
        html = _render(Heading(level=1, content=[Text(content="Intro")]), Heading(level=1, content=[Text(content="Intro")]))

        assert 'id="intro"' in html
        assert 'id="intro-2"' in html

    def test_paragraph_escapes_text(self):
        """Test that text is HTML-escaped."""
        assert _render(_para("a < b & c")) == "<p>a &lt; b &amp; c</p>"

    def test_escaping_can_be_disabled(self):
        """Test that escape_html=False passes text through."""
        assert _render(_para("<b>raw</b>"), escape_html=False) == "<p><b>raw</b></p>"

    def test_inline_formatting(self):
        """Test emphasis, strong, code and strikethrough."""
        html = _render(
            Paragraph(
                content=[
                    Emphasis(content=[Text(content="em")]),
                    Strong(content=[Text(content="strong")]),
                    Code(content="x<y"),
                    Strikethrough(content=[Text(content="old")]),
                ]
            )
        )

        assert html == "<p><em>em</em><strong>strong</strong><code>x&lt;y</code><del>old</del></p>"

    def test_link_and_image(self):
        """Test that links and images escape their attributes."""
        html = _render(
            Paragraph(
                content=[
                    Link(url="https://example.com/?a=1&b=2", content=[Text(content="site")], title="T"),
                    Image(url="pic.png", alt_text='a "pic"'),
                ]
            )
        )

        assert '<a href="https://example.com/?a=1&amp;b=2" title="T">site</a>' in html
        assert '<img src="pic.png" alt="a &quot;pic&quot;">' in html

    def test_line_breaks(self):
        """Test hard and soft line breaks."""
        html = _render(
            Paragraph(content=[Text(content="a"), LineBreak(soft=False), Text(content="b"), LineBreak(soft=True), Text(content="c")])
        )

        assert html == "<p>a<br>\nb\nc</p>"

    def test_code_block(self):
        """Test that code blocks get a language class and escaped content."""
        html = _render(CodeBlock(content="if a < b:\n", language="python"))

        assert html == '<pre><code class="language-python">if a &lt; b:\n</code></pre>'

    def test_code_block_without_highlighting(self):
        """Test that syntax_highlighting=False omits the language class."""
        html = _render(CodeBlock(content="x\n", language="python"), syntax_highlighting=False)

        assert html == "<pre><code>x\n</code></pre>"

    def test_lists(self):
        """Test ordered, unordered and task lists."""
        html = _render(
            List(ordered=True, start=3, items=[ListItem(children=[_para("three")])]),
            List(ordered=False, items=[ListItem(children=[_para("done")], task_status="checked")]),
        )

        assert '<ol start="3">' in html
        assert "<li><p>three</p>\n</li>" in html
        assert "<li><p>&#9745; done</p>\n</li>" in html

    def test_block_quote_and_rule(self):
        """Test block quotes and thematic breaks."""
        html = _render(BlockQuote(children=[_para("quoted")]), ThematicBreak())

        assert html == "<blockquote>\n<p>quoted</p>\n</blockquote>\n<hr>"

    def test_raw_html_passthrough(self):
        """Test that raw HTML nodes are emitted verbatim."""
        html = _render(HTMLBlock(content="<div>raw</div>"), Paragraph(content=[HTMLInline(content="<span>")]))

        assert html == "<div>raw</div>\n<p><span></p>"

    def test_table(self):
        """Test table rendering with alignment."""
        table = Table(
            header=TableRow(cells=[TableCell(content=[Text(content="Name")])], is_header=True),
            rows=[TableRow(cells=[TableCell(content=[Text(content="Dog")])])],
            alignments=["center"],
        )
        html = _render(table)

        assert '<th style="text-align: center">Name</th>' in html
        assert '<td style="text-align: center">Dog</td>' in html

    def test_wrong_options_type(self):
        """Test that passing parser options to the renderer fails."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(MarkdownParserOptions())

    def test_render_to_text_stream(self):
        """Test writing output to a text stream."""
        buffer = StringIO()
        HtmlRenderer().render(Document(children=[_para("hi")]), buffer)

        assert buffer.getvalue() == "<p>hi</p>"

    def test_render_to_binary_stream(self):
        """Test writing output to a binary stream."""
        buffer = BytesIO()
        HtmlRenderer().render(Document(children=[_para("hé")]), buffer)

        assert buffer.getvalue() == "<p>hé</p>".encode("utf-8")

    def test_render_to_path(self, tmp_path):
        """Test writing output to a file path."""
        target = tmp_path / "out.html"
        HtmlRenderer().render(Document(children=[_para("hi")]), target)

        assert target.read_text(encoding="utf-8") == "<p>hi</p>"


@pytest.mark.unit
class TestHtmlRendererCharts:
    """Tests for rendering chart blocks."""

    def test_chart_rendered(self):
        """Test that a chart block renders as a canvas and script."""
        html = _render(ChartBlock(lines=VALID_CHART))

        assert '<div class="mdvis-chart"' in html
        assert "<canvas id=\"chart-" in html
        assert "new Chart(" in html

    def test_chart_options_applied(self):
        """Test that the renderer passes its chart options through."""
        html = _render(ChartBlock(lines=VALID_CHART), chart=ChartOptions(css_class="figure"))

        assert '<div class="figure"' in html

    def test_empty_chart_renders_nothing(self):
        """Test that an empty chart block produces no output."""
        assert _render(ChartBlock(lines=[])) == ""

    def test_malformed_chart_skipped_with_warning(self, caplog):
        """Test that a malformed chart is omitted and logged by default."""
        with caplog.at_level(logging.WARNING, logger="mdvis.renderers.html"):
            html = _render(_para("before"), ChartBlock(lines=BROKEN_CHART), _para("after"))

        assert html == "<p>before</p>\n<p>after</p>"
        assert "layout not found" in caplog.text

    def test_malformed_chart_does_not_affect_others(self):
        """Test that a bad block leaves its neighbours intact."""
        html = _render(ChartBlock(lines=BROKEN_CHART), ChartBlock(lines=VALID_CHART))

        assert html.count("<canvas") == 1

    def test_malformed_chart_raises_when_configured(self):
        """Test that fail_on_chart_errors turns the failure into a RenderingError."""
        with pytest.raises(RenderingError) as exc_info:
            _render(ChartBlock(lines=BROKEN_CHART), fail_on_chart_errors=True)

        assert exc_info.value.rendering_stage == "chart"
        assert isinstance(exc_info.value.original_error, ChartParseError)
        assert isinstance(exc_info.value.__cause__, ChartParseError)


@pytest.mark.unit
class TestHtmlRendererStandalone:
    """Tests for complete HTML documents."""

    def test_document_structure(self):
        """Test the document wrapper."""
        html = _render(_para("hi"), standalone=True)

        assert html.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
        assert "<title>Document</title>" in html
        assert "<body>\n<p>hi</p>\n</body>" in html
        assert html.endswith("</html>")

    def test_title_from_first_heading(self):
        """Test that the first heading is used as the page title."""
        html = _render(Heading(level=1, content=[Text(content="Report")]), standalone=True)

        assert "<title>Report</title>" in html

    def test_title_from_metadata(self):
        """Test that metadata title and language take precedence."""
        doc = Document(children=[Heading(level=1, content=[Text(content="Report")])], metadata={"title": "Meta", "language": "fr"})
        html = HtmlRenderer(HtmlRendererOptions(standalone=True)).render_to_string(doc)

        assert "<title>Meta</title>" in html
        assert '<html lang="fr">' in html

    def test_chart_library_loaded_when_allowed(self):
        """Test that Chart.js is loaded in the head when remote scripts are allowed."""
        html = _render(ChartBlock(lines=VALID_CHART), standalone=True, allow_remote_scripts=True)

        head = html.split("</head>")[0]
        assert '<script src="https://cdn.jsdelivr.net/npm/chart.js"></script>' in head

    def test_chart_library_blocked_by_default(self, caplog):
        """Test that remote scripts are not loaded by default and a warning is logged."""
        with caplog.at_level(logging.WARNING, logger="mdvis.renderers.html"):
            html = _render(ChartBlock(lines=VALID_CHART), standalone=True)

        assert "<script src=" not in html
        assert "allow_remote_scripts=False" in caplog.text

    def test_no_library_without_charts(self):
        """Test that documents without charts do not load Chart.js."""
        html = _render(_para("hi"), standalone=True, allow_remote_scripts=True)

        assert "<script src=" not in html

    def test_state_reset_between_renders(self):
        """Test that a renderer can be reused without leaking chart state."""
        renderer = HtmlRenderer(HtmlRendererOptions(standalone=True, allow_remote_scripts=True))
        renderer.render_to_string(Document(children=[ChartBlock(lines=VALID_CHART)]))
        html = renderer.render_to_string(Document(children=[_para("plain")]))

        assert "<script src=" not in html
