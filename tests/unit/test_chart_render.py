#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for chart block render orchestration."""

import hashlib

import pytest

from mdvis.ast import ChartBlock
from mdvis.charts.render import compute_chart_id, render_chart, render_chart_block
from mdvis.exceptions import ChartParseError
from mdvis.options.chart import ChartOptions


@pytest.mark.unit
class TestComputeChartId:
    """Tests for chart element id derivation."""

    def test_sha256_of_text(self):
        """Test that the id is the prefix plus the SHA-256 hex digest."""
        text = "layout: bar\n"
        assert compute_chart_id(text) == "chart-" + hashlib.sha256(text.encode("utf-8")).hexdigest()

    def test_deterministic(self):
        """Test that identical text yields the identical id."""
        assert compute_chart_id("abc") == compute_chart_id("abc")

    def test_distinct_text_distinct_id(self):
        """Test that different text yields a different id."""
        assert compute_chart_id("abc") != compute_chart_id("abd")

    def test_custom_prefix(self):
        """Test that the prefix is configurable."""
        assert compute_chart_id("abc", prefix="viz-").startswith("viz-")


@pytest.mark.unit
class TestRenderChart:
    """Tests for rendering chart text and chart blocks."""

    def test_empty_text_renders_nothing(self):
        """Test that an empty block produces no output."""
        assert render_chart("") == ""

    def test_renders_container_and_script(self, pie_chart_text):
        """Test that a valid block renders its container then its script."""
        html = render_chart(pie_chart_text)
        chart_id = compute_chart_id(pie_chart_text)

        assert html.startswith(f'<div class="mdvis-chart" style="position: relative;"><canvas id="{chart_id}">')
        assert f'document.getElementById("{chart_id}")' in html
        assert html.endswith("</script>")
        assert '"type": "pie"' in html
        assert '"scales"' not in html

    def test_scatter_renders_as_bar(self):
        """Test that an unknown layout is rendered as a bar chart."""
        html = render_chart("layout: scatter\ndata: [{key: 'a', value: 1}]")

        assert '"type": "bar"' in html

    def test_parse_errors_propagate(self):
        """Test that a malformed block raises and renders nothing."""
        with pytest.raises(ChartParseError, match="layout not found"):
            render_chart("data: [{key: 'a', value: 1}]")

    def test_identical_blocks_identical_markup(self, pie_chart_text):
        """Test that rendering is a pure function of the block text."""
        assert render_chart(pie_chart_text) == render_chart(pie_chart_text)

    def test_whitespace_changes_id(self):
        """Test that whitespace-only differences change the id."""
        compact = render_chart("layout: bar\ndata: [{key:'a',value:1}]")
        spaced = render_chart("layout: bar\ndata: [{key: 'a', value: 1}]")

        assert compact != spaced

    def test_options_applied(self, pie_chart_text):
        """Test that chart options control the id prefix and container class."""
        html = render_chart(pie_chart_text, ChartOptions(id_prefix="viz-", css_class="figure"))

        assert '<div class="figure"' in html
        assert 'id="viz-' in html

    def test_render_chart_block(self, pie_chart_text):
        """Test rendering from a ChartBlock node."""
        node = ChartBlock(lines=pie_chart_text.splitlines(keepends=True))

        assert render_chart_block(node) == render_chart(pie_chart_text)

    def test_render_empty_chart_block(self):
        """Test that a chart block without lines renders nothing."""
        assert render_chart_block(ChartBlock(lines=[])) == ""
