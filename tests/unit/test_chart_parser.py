#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the chart description parser."""

import pytest

from mdvis.charts.models import ChartPoint
from mdvis.charts.parser import parse_chart_description
from mdvis.exceptions import ChartErrorKind, ChartParseError, ParsingError


@pytest.mark.unit
class TestParseChartDescription:
    """Tests for successful chart description parsing."""

    def test_pie_chart(self, pie_chart_text):
        """Test the basic pie chart example."""
        chart = parse_chart_description(pie_chart_text)

        assert chart.kind == "pie"
        assert chart.points == (ChartPoint("Dog", 5.0), ChartPoint("Cat", 4.0))
        assert chart.keys_are_numeric is False

    def test_numeric_keys_with_trailing_comma(self):
        """Test numeric keys and a trailing comma before the closing bracket."""
        chart = parse_chart_description("layout: bar\ndata: [{key: 1, value: 5},{key: 2, value: 3},]")

        assert chart.keys == [1, 2]
        assert chart.values == [5.0, 3.0]
        assert chart.keys_are_numeric is True

    def test_multiline_data(self):
        """Test a data array spread over several lines with single quotes."""
        text = "layout: line\ndata: [\n  { key: 'Mon', value: 12 },\n  { key: 'Tue', value: 18 },\n]\n"
        chart = parse_chart_description(text)

        assert chart.kind == "line"
        assert chart.keys == ["Mon", "Tue"]
        assert chart.values == [12.0, 18.0]

    def test_data_without_brackets(self):
        """Test that a bracketless data section takes every following line."""
        text = "layout: line\ndata:\n{key: 1, value: 2},\n{key: 2, value: 3}"
        chart = parse_chart_description(text)

        assert chart.values == [2.0, 3.0]

    def test_missing_closing_bracket(self):
        """Test that an unterminated array is closed by normalization."""
        chart = parse_chart_description("layout: bar\ndata: [{key: 'a', value: 1}")

        assert chart.keys == ["a"]

    def test_unknown_kind_preserved(self):
        """Test that the parser keeps unsupported chart kinds as written."""
        chart = parse_chart_description("layout: scatter\ndata: [{key: 'a', value: 1}]")

        assert chart.kind == "scatter"

    def test_kind_is_stripped(self):
        """Test that surrounding whitespace is removed from the layout value."""
        chart = parse_chart_description("layout:   pie   \ndata: [{key: 'a', value: 1}]")

        assert chart.kind == "pie"

    def test_optional_fields(self):
        """Test the height, label, title and color fields."""
        text = (
            "layout: bar\n"
            "height: 300px\n"
            "label: Visitors\n"
            "title: Weekly visitors\n"
            "color: #333\n"
            "data: [{key: 'Mon', value: 12}]\n"
        )
        chart = parse_chart_description(text)

        assert chart.size_hint == "300px"
        assert chart.label == "Visitors"
        assert chart.title == "Weekly visitors"
        assert chart.color_hint == "#333"

    def test_optional_fields_default_empty(self, pie_chart_text):
        """Test that absent optional fields are empty strings."""
        chart = parse_chart_description(pie_chart_text)

        assert (chart.size_hint, chart.label, chart.title, chart.color_hint) == ("", "", "", "")

    def test_last_occurrence_wins(self):
        """Test that a repeated field keeps its last value."""
        chart = parse_chart_description("layout: bar\nlayout: line\ndata: [{key: 'a', value: 1}]")

        assert chart.kind == "line"

    def test_fields_after_closed_data_array(self):
        """Test that scalar fields are recognized again once the array closes."""
        chart = parse_chart_description("data: [{key: 'a', value: 1}]\nlayout: pie\ntitle: After")

        assert chart.kind == "pie"
        assert chart.title == "After"

    def test_bracket_inside_string(self):
        """Test that brackets inside quoted keys do not close the array."""
        chart = parse_chart_description("layout: bar\ndata: [\n{key: 'a]b', value: 1}\n]\ntitle: T")

        assert chart.keys == ["a]b"]
        assert chart.title == "T"

    def test_whitespace_differences_give_same_points(self):
        """Test that whitespace-only differences in data do not change the points."""
        compact = parse_chart_description("layout: bar\ndata: [{key:'a',value:1},{key:'b',value:2}]")
        spaced = parse_chart_description("layout: bar\ndata: [ { key: 'a', value: 1 }, { key: 'b', value: 2 } ]")

        assert compact.points == spaced.points

    def test_surrounding_blank_lines(self, pie_chart_text):
        """Test that leading and trailing blank lines are ignored."""
        chart = parse_chart_description("\n\n" + pie_chart_text + "\n\n")

        assert chart.kind == "pie"

    def test_key_with_unicode_line_separator(self):
        """Test that only newlines split lines, so U+2028 inside a key is kept."""
        chart = parse_chart_description("layout: bar\ndata: [{key: 'a\u2028b', value: 1}]")

        assert chart.keys == ["a\u2028b"]

    def test_crlf_line_endings(self):
        """Test that carriage returns are stripped with the rest of the line."""
        chart = parse_chart_description("layout: pie\r\ndata: [\r\n{key: 'a', value: 1}\r\n]\r\ntitle: T\r\n")

        assert chart.kind == "pie"
        assert chart.keys == ["a"]
        assert chart.title == "T"


@pytest.mark.unit
class TestParseChartDescriptionErrors:
    """Tests for chart description failures."""

    def test_layout_not_found(self):
        """Test that a missing layout field is reported."""
        with pytest.raises(ChartParseError, match="layout not found") as exc_info:
            parse_chart_description("data: [{key: 'a', value: 1}]")

        assert exc_info.value.kind is ChartErrorKind.MISSING_FIELD
        assert exc_info.value.field == "layout"

    def test_empty_layout_value(self):
        """Test that an empty layout value counts as missing."""
        with pytest.raises(ChartParseError, match="layout not found"):
            parse_chart_description("layout:\ndata: [{key: 'a', value: 1}]")

    def test_data_not_found(self):
        """Test that a missing data field is reported."""
        with pytest.raises(ChartParseError, match="data not found") as exc_info:
            parse_chart_description("layout: bar")

        assert exc_info.value.kind is ChartErrorKind.MISSING_FIELD
        assert exc_info.value.field == "data"

    def test_layout_checked_before_data(self):
        """Test that a block missing both fields reports the layout first."""
        with pytest.raises(ChartParseError, match="layout not found"):
            parse_chart_description("title: nothing")

    def test_empty_data_section(self):
        """Test that a data marker with nothing after it is missing data."""
        with pytest.raises(ChartParseError, match="data not found"):
            parse_chart_description("layout: bar\ndata:")

    def test_empty_data_array(self):
        """Test that an empty array is malformed data."""
        with pytest.raises(ChartParseError) as exc_info:
            parse_chart_description("layout: bar\ndata: []")

        assert exc_info.value.kind is ChartErrorKind.MALFORMED_DATA

    def test_malformed_data_wraps_cause(self):
        """Test that decoding failures carry the underlying error."""
        with pytest.raises(ChartParseError, match="failed to parse chart data") as exc_info:
            parse_chart_description("layout: bar\ndata: [{key: 'a', value: 'x'}]")

        error = exc_info.value
        assert error.kind is ChartErrorKind.MALFORMED_DATA
        assert isinstance(error.original_error, ValueError)
        assert error.__cause__ is error.original_error
        assert "value must be a number" in error.cause

    def test_field_inside_open_array_is_data(self):
        """Test that a field-like line inside an open array is treated as data."""
        with pytest.raises(ChartParseError) as exc_info:
            parse_chart_description("layout: bar\ndata: [\ntitle: nope\n]")

        assert exc_info.value.kind is ChartErrorKind.MALFORMED_DATA

    def test_stray_text_after_array(self):
        """Test that unrecognized text after the array fails decoding."""
        with pytest.raises(ChartParseError) as exc_info:
            parse_chart_description("layout: bar\ndata: [{key: 'a', value: 1}]\nsomething else")

        assert exc_info.value.kind is ChartErrorKind.MALFORMED_DATA

    def test_is_parsing_error(self):
        """Test that chart errors are parsing errors at the chart stage."""
        with pytest.raises(ParsingError) as exc_info:
            parse_chart_description("layout: bar")

        assert exc_info.value.parsing_stage == "chart"

    def test_same_line_data_needs_opening_bracket(self):
        """Test that text after ``data:`` without a ``[`` does not start the data."""
        with pytest.raises(ChartParseError, match="data not found") as exc_info:
            parse_chart_description("layout: bar\ndata: {key: 1, value: 2}")

        assert exc_info.value.kind is ChartErrorKind.MISSING_FIELD

    def test_deeply_nested_data(self):
        """Test that nesting beyond the decoder's limit is malformed data."""
        depth = 10_000
        with pytest.raises(ChartParseError, match="nested too deeply") as exc_info:
            parse_chart_description("layout: bar\ndata: " + "[" * depth + "]" * depth)

        assert exc_info.value.kind is ChartErrorKind.MALFORMED_DATA
        assert isinstance(exc_info.value.__cause__, ValueError)
