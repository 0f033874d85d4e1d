"""Unit tests for the SVG element tree."""

import pytest

from lap_chart.visualization.svg import SvgElement, format_number, group, svg_root


class TestFormatNumber:
    """Test suite for coordinate formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (7, "7"),
            (12.0, "12"),
            (12.5, "12.5"),
            (7.8125, "7.8125"),
            (1 / 3, "0.3333"),
            (-40.0, "-40"),
            (-0.00001, "0"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestSvgElement:
    """Test suite for SvgElement."""

    def test_attribute_names_use_hyphens(self):
        """Test that keyword names are written with hyphens."""
        element = SvgElement("text", "Start", text_anchor="middle", font_size=10.0)
        assert element.attributes == {"text-anchor": "middle", "font-size": "10"}

    def test_attribute_order_preserved(self):
        element = SvgElement("line", x1=0, y1=1, x2=2, y2=3)
        assert element.to_string() == '<line x1="0" y1="1" x2="2" y2="3" />'

    def test_text_is_escaped(self):
        """Test that driver names are escaped in the output."""
        element = SvgElement("text", "Räikkönen & <Co>")
        assert element.to_string() == "<text>Räikkönen &amp; &lt;Co&gt;</text>"

    def test_nested_children(self):
        root = svg_root(100, 50.5)
        child = root.add("rect", width=1, height=2)
        child.add("title", "box")
        assert root.to_string() == (
            '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50.5">'
            '<rect width="1" height="2"><title>box</title></rect></svg>'
        )

    def test_group_translate(self):
        g = group(SvgElement("circle"), translate=(12.5, 0.0))
        assert g.attributes == {"transform": "translate(12.5, 0)"}
        assert len(g.children) == 1

    def test_group_without_translate(self):
        assert group().to_string() == "<g />"
