#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for Markdown to HTML conversion with charts."""

import logging
import re

import pytest

from mdvis import to_ast, to_html
from mdvis.ast import ChartBlock, CodeBlock
from mdvis.charts.render import compute_chart_id
from mdvis.exceptions import RenderingError
from mdvis.options import ChartOptions, HtmlRendererOptions

_CANVAS_ID = re.compile(r'<canvas id="(chart-[0-9a-f]{64})"></canvas>')


@pytest.mark.integration
class TestMarkdownToHtml:
    """End-to-end conversion tests."""

    def test_full_document(self, sample_markdown):
        """Test that prose, code and both charts are rendered in order."""
        html = to_html(sample_markdown)

        assert html.startswith('<h1 id="weekly-report">Weekly Report</h1>')
        assert "<p>Visitors were <strong>up</strong> this week.</p>" in html
        assert '<pre><code class="language-python">print(&quot;not a chart&quot;)\n</code></pre>' in html
        assert len(_CANVAS_ID.findall(html)) == 2
        assert html.index('"type": "bar"') < html.index("language-python") < html.index('"type": "pie"')

    def test_chart_content(self, sample_markdown):
        """Test the decoded bar chart data."""
        html = to_html(sample_markdown)

        assert '"labels": ["Mon", "Tue"]' in html
        assert '"data": [12.0, 18.0]' in html
        assert '"label": "Visitors"' in html

    def test_chart_id_matches_block_text(self, pie_chart_text):
        """Test that the canvas id is derived from the fenced block body."""
        html = to_html(f"```vis\n{pie_chart_text}```\n")

        assert _CANVAS_ID.findall(html) == [compute_chart_id(pie_chart_text)]

    def test_identical_blocks_share_ids(self, pie_chart_text):
        """Test that identical chart bodies produce identical ids."""
        block = f"```vis\n{pie_chart_text}```\n"
        ids = _CANVAS_ID.findall(to_html(block + "\n" + block))

        assert len(ids) == 2
        assert ids[0] == ids[1]

    def test_output_is_deterministic(self, sample_markdown):
        """Test that converting twice gives identical output."""
        assert to_html(sample_markdown) == to_html(sample_markdown)

    def test_custom_marker(self, pie_chart_text):
        """Test that the configured marker selects chart blocks."""
        markdown = f"```chart\n{pie_chart_text}```\n\n```vis\n{pie_chart_text}```\n"
        options = HtmlRendererOptions(chart=ChartOptions(marker="chart"))

        html = to_html(markdown, renderer_options=options)

        assert len(_CANVAS_ID.findall(html)) == 1
        assert '<code class="language-vis">' in html

    def test_marker_is_case_sensitive(self, pie_chart_text):
        """Test that a differently cased marker stays a code block."""
        html = to_html(f"```VIS\n{pie_chart_text}```\n")

        assert "<canvas" not in html
        assert '<code class="language-VIS">' in html

    def test_no_transforms_leaves_code(self, pie_chart_text):
        """Test that disabling transforms renders chart blocks as code."""
        html = to_html(f"```vis\n{pie_chart_text}```\n", transforms=[])

        assert "<canvas" not in html
        assert '<code class="language-vis">' in html

    def test_malformed_chart_skipped(self, caplog):
        """Test that a malformed block is dropped and the rest of the page renders."""
        markdown = "before\n\n```vis\nlayout: bar\ndata: [{key: 'a', value: 'x'}]\n```\n\nafter\n"

        with caplog.at_level(logging.WARNING, logger="mdvis"):
            html = to_html(markdown)

        assert html == "<p>before</p>\n<p>after</p>"
        assert "malformed_data" in caplog.text

    def test_malformed_chart_fails_when_configured(self):
        """Test that strict mode raises RenderingError."""
        with pytest.raises(RenderingError):
            to_html("```vis\ndata: [{key: 'a', value: 1}]\n```\n", renderer_options=HtmlRendererOptions(fail_on_chart_errors=True))

    def test_standalone_page(self, sample_markdown):
        """Test a complete page that loads Chart.js."""
        options = HtmlRendererOptions(standalone=True, allow_remote_scripts=True)

        html = to_html(sample_markdown, renderer_options=options)

        assert "<title>Weekly Report</title>" in html
        assert html.count('<script src="https://cdn.jsdelivr.net/npm/chart.js"></script>') == 1

    def test_bytes_source(self, sample_markdown):
        """Test that UTF-8 bytes are accepted."""
        assert to_html(sample_markdown.encode("utf-8")) == to_html(sample_markdown)


@pytest.mark.integration
class TestMarkdownToAst:
    """End-to-end AST tests."""

    def test_no_transforms_by_default(self, sample_markdown):
        """Test that to_ast keeps chart blocks as code blocks by default."""
        doc = to_ast(sample_markdown)

        languages = [child.language for child in doc.children if isinstance(child, CodeBlock)]
        assert languages == ["vis", "python", "vis"]

    def test_chart_blocks_transform_by_name(self, sample_markdown):
        """Test that the registered transform is resolved by name."""
        doc = to_ast(sample_markdown, transforms=["chart-blocks"])

        charts = [child for child in doc.children if isinstance(child, ChartBlock)]
        assert len(charts) == 2
        assert charts[0].lines[0] == "layout: bar\n"
        assert charts[1].text() == 'layout: pie\ndata: [{key:"Dog",value:5},{key:"Cat",value:4}]\n'
