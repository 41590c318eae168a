"""Element helpers, number formatting, and the element-tree to SVG text serializer."""
from xml.sax.saxutils import escape, quoteattr

from .types import Point, Element

SVG_NS = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"

# Decimal places kept when a coordinate is written out.
_PLACES = 4


def fmt_num(v) -> str:
    """Format a number for an attribute: integral values lose the '.0', others keep 4 places max."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return str(v)
    v = round(v, _PLACES)
    if float(v).is_integer():
        return str(int(v))
    return repr(float(v))


def fmt_points(points: list[Point]) -> str:
    """SVG points attribute, e.g. '0,0 450,-10'."""
    return " ".join(f"{fmt_num(x)},{fmt_num(y)}" for x, y in points)


def element(name: str, body: str | None = None,
            children: list[Element] | None = None, **attrs) -> Element:
    """Build an Element; underscores in keyword names become hyphens (font_size -> font-size)."""
    return Element(name, {k.replace("_", "-"): v for k, v in attrs.items()}, children, body)


def _open_tag(el: Element) -> str:
    parts = [el.name]
    parts += [f"{k}={quoteattr(fmt_num(v))}" for k, v in el.attrs.items()]
    return "<" + " ".join(parts)


def _write(out: list[str], el: Element, depth: int):
    pad = "  " * depth
    tag = _open_tag(el)
    if not el.children and el.body is None:
        out.append(f"{pad}{tag}/>")
        return
    if not el.children:
        out.append(f"{pad}{tag}>{escape(str(el.body))}</{el.name}>")
        return
    out.append(f"{pad}{tag}>")
    if el.body is not None:
        out.append(f"{pad}  {escape(str(el.body))}")
    for child in el.children:
        _write(out, child, depth + 1)
    out.append(f"{pad}</{el.name}>")


def to_xml(root: Element, declaration: bool = True) -> str:
    """Serialize an element tree to indented XML text."""
    out = ['<?xml version="1.0" encoding="UTF-8"?>'] if declaration else []
    _write(out, root, 0)
    return "\n".join(out) + "\n"
