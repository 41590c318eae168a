"""Tests for svgkit/svg.py element helpers and serializer."""
import pytest
from svgkit.svg import SVG_NS, fmt_num, fmt_points, element, to_xml
from svgkit.types import Element


@pytest.mark.parametrize("v, expected", [
    (1, "1"), (1.0, "1"), (-0.0, "0"), (12.5, "12.5"), (1/3, "0.3333"),
    (-600, "-600"), ("middle", "middle"),
])
def test_fmt_num(v, expected):
    assert fmt_num(v) == expected


def test_fmt_points():
    assert fmt_points([(0, 0), (450, -10)]) == "0,0 450,-10"


class TestElement:
    def test_hyphenates_keywords(self):
        el = element("text", "A", font_size=55, text_anchor="start")
        assert el == Element("text", {"font-size": 55, "text-anchor": "start"}, None, "A")

    def test_children(self):
        child = element("rect", x=1)
        el = element("g", children=[child], **{"class": "viewport"})
        assert el.children == [child]
        assert el.attrs == {"class": "viewport"}


class TestToXml:
    def test_self_closing(self):
        out = to_xml(element("rect", x=1, width=2.5), declaration=False)
        assert out == '<rect x="1" width="2.5"/>\n'

    def test_declaration(self):
        assert to_xml(element("svg")).startswith('<?xml version="1.0"')

    def test_body_escaped(self):
        out = to_xml(element("text", "R&D <1>"), declaration=False)
        assert "R&amp;D &lt;1&gt;" in out

    def test_attr_escaped(self):
        out = to_xml(element("text", "x", style='a"b'), declaration=False)
        assert "&quot;" in out or "'a\"b'" in out

    def test_nesting_and_indent(self):
        root = element("svg", children=[element("g", children=[element("line", x1=0)])],
                       xmlns=SVG_NS)
        lines = to_xml(root, declaration=False).splitlines()
        assert lines[0] == f'<svg xmlns="{SVG_NS}">'
        assert lines[1] == "  <g>"
        assert lines[2] == '    <line x1="0"/>'
        assert lines[3] == "  </g>"
        assert lines[4] == "</svg>"
