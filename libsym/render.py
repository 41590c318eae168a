"""Render a schematic symbol record to an SVG element tree.

Every draw primitive goes through one renderer that (a) folds its
coordinates into the conversion's Extents, (b) applies the unit/convert
filter, and (c) builds its elements. Extents are updated before filtering
so that the viewport frames all units even though only one is drawn.
Output coordinates have the source Y negated.
"""
import logging
import math
from collections.abc import Mapping
from typing import Callable

from svgkit.extents import Extents
from svgkit.geometry import arc_needs_swap, arc_svg_params
from svgkit.svg import SVG_NS, SVG_VERSION, element, fmt_num, fmt_points, to_xml
from svgkit.types import Element
from libsym.constants import (
    FONT_SIZE, FIELD_FONT_SIZE, FIELD_V_SHIFT, FIELD_ANCHORS,
    LINE_STYLE, OUTLINE_STYLE, SOLID_FILL, FILL_SHAPE,
    NORMAL_CONVERTS, ALL_UNITS,
)
from libsym.pins import layout_pin
from libsym.record import symbol_from_dict
from libsym.types import (
    Square, Polyline, Pin, Circle, Arc, Text, Draw, Field, Symbol,
    RenderOptions, UnsupportedDrawError,
)

log = logging.getLogger(__name__)


class DrawContext:
    """Per-call state threaded through the renderers."""

    def __init__(self, symbol: Symbol, unit: int):
        self.symbol = symbol
        self.unit = unit
        self.extents = Extents()

    def update_extents(self, x, y):
        if not self.extents.update(x, y):
            log.debug("skipping non-numeric extents point (%r, %r)", x, y)


def _coord(v):
    """*v* when it is a number, else NaN. The element still renders; Extents skips NaN."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return math.nan
    return v


def _pt(p) -> tuple[float, float]:
    if p is None:
        return (math.nan, math.nan)
    return (_coord(p[0]), _coord(p[1]))


def _rotate(angle, x, y) -> str:
    return f"rotate({fmt_num(angle)}, {fmt_num(x)}, {fmt_num(y)})"


# ============================================================
# Unit / convert filter
# ============================================================
def is_unit_selected(draw: Draw, unit: int) -> bool:
    """True when *draw* belongs to the normal representation of *unit*."""
    if draw.convert not in NORMAL_CONVERTS:
        log.debug("skip %s: convert %r", type(draw).__name__, draw.convert)
        return False
    if draw.unit != ALL_UNITS and draw.unit != unit:
        log.debug("skip %s: unit %r, drawing unit %r", type(draw).__name__, draw.unit, unit)
        return False
    return True


# ============================================================
# Primitive renderers
# ============================================================
def render_square(draw: Square, ctx: DrawContext) -> list[Element]:
    (x1, y1), (x2, y2) = _pt(draw.pos), _pt(draw.end)
    ctx.update_extents(x1, -y1)
    ctx.update_extents(x2, -y2)
    if not is_unit_selected(draw, ctx.unit):
        return []
    return [element("rect", x=min(x1, x2), y=-max(y1, y2),
                    width=abs(x2 - x1), height=abs(y2 - y1), style=OUTLINE_STYLE)]


def render_polyline(draw: Polyline, ctx: DrawContext) -> list[Element]:
    points = [(x, -y) for x, y in map(_pt, draw.points)]
    for x, y in points:
        ctx.update_extents(x, y)
    if not is_unit_selected(draw, ctx.unit):
        return []
    fill = SOLID_FILL if draw.fill == FILL_SHAPE else "none"
    return [element("polyline", points=fmt_points(points), fill=fill, style=LINE_STYLE)]


def render_circle(draw: Circle, ctx: DrawContext) -> list[Element]:
    (x, y), r = _pt(draw.pos), _coord(draw.radius)
    ctx.update_extents(x - r, -y - r)
    ctx.update_extents(x + r, -y + r)
    if not is_unit_selected(draw, ctx.unit):
        return []
    return [element("circle", cx=x, cy=-y, r=r, fill="none", style=LINE_STYLE)]


def render_text(draw: Text, ctx: DrawContext) -> list[Element]:
    x, y = _pt(draw.pos)
    ctx.update_extents(x, -y)
    if not is_unit_selected(draw, ctx.unit):
        return []
    return [element("text", draw.text, x=x, y=-y, text_anchor="middle",
                    dominant_baseline="central", font_size=FONT_SIZE)]


def render_arc(draw: Arc, ctx: DrawContext) -> list[Element]:
    """Arc as one elliptical-arc path; t1/t2 only decide the drawing direction."""
    (sx, sy), (ex, ey), (cx, cy) = _pt(draw.start), _pt(draw.end), _pt(draw.pos)
    start, end, center = (sx, -sy), (ex, -ey), (cx, -cy)

    t1, t2 = _coord(draw.t1), _coord(draw.t2)
    if not (math.isfinite(t1) and math.isfinite(t2)):
        log.debug("arc t1=%r t2=%r: not finite, keeping start and end", draw.t1, draw.t2)
    elif arc_needs_swap(t1, t2):
        log.debug("arc t1=%r t2=%r: swapping start and end", draw.t1, draw.t2)
        start, end = end, start

    # Radius box around each end point, wider than the arc itself.
    r = _coord(draw.radius)
    for x, y in (start, end):
        ctx.update_extents(x, y)
    for x, y in (start, end):
        ctx.update_extents(x - r, y - r)
        ctx.update_extents(x + r, y + r)

    if not is_unit_selected(draw, ctx.unit):
        return []

    p = arc_svg_params(center, start, end)
    d = (f"M {fmt_num(p.x0)} {fmt_num(p.y0)}"
         f" A {fmt_num(p.rx)} {fmt_num(p.ry)} {fmt_num(p.phi)}"
         f" {p.large_arc} {p.sweep} {fmt_num(p.x1)} {fmt_num(p.y1)}")
    return [element("path", d=d, fill="none", style=LINE_STYLE)]


def render_pin(draw: Pin, ctx: DrawContext) -> list[Element]:
    """Pin line plus optional name and number text.

    Pins are the only source of the unit count, so the unit is recorded
    before filtering; extents only see pins of the drawn unit.
    """
    ctx.extents.update_max_unit(draw.unit)
    if not is_unit_selected(draw, ctx.unit):
        return []

    draw = draw._replace(pos=_pt(draw.pos), length=_coord(draw.length))
    sym = ctx.symbol
    g = layout_pin(draw, sym.pin_name_offset)
    lay = g.layout
    px, py = draw.pos
    ctx.update_extents(px, -py)
    ctx.update_extents(g.x2, -g.y2)

    out = [element("line", x1=px, y1=-py, x2=g.x2, y2=-g.y2, style=LINE_STYLE)]
    if sym.draw_name:
        out.append(element(
            "text", draw.name, x=g.name_x, y=-g.name_y,
            dominant_baseline=lay.name_baseline, text_anchor=lay.name_anchor,
            font_size=FONT_SIZE, transform=_rotate(lay.rotate, g.name_x, -g.name_y)))
    if sym.draw_nums:
        out.append(element(
            "text", draw.number, x=g.num_x, y=-g.num_y,
            dominant_baseline=lay.num_baseline, text_anchor="middle",
            font_size=FONT_SIZE, transform=_rotate(lay.rotate, g.num_x, -g.num_y)))
    return out


# ============================================================
# Fields
# ============================================================
def render_field(field: Field, ctx: DrawContext) -> list[Element]:
    """Field label; fields are drawn for every unit and representation."""
    x, y = _pt(field.pos)
    y = -y
    rotate = 0
    if field.text_orientation == "V":
        rotate = -90
        x -= FIELD_V_SHIFT

    text = "" if field.text is None else str(field.text)
    if field.index == 0:
        text += "?"

    font_size = _coord(field.size)
    if not font_size or not math.isfinite(font_size):
        font_size = FIELD_FONT_SIZE
    ctx.update_extents(x, y - font_size/2)
    ctx.update_extents(x, y + font_size/2)

    anchor = FIELD_ANCHORS.get(field.horizontal_justify, "middle")
    return [element("text", text, x=x, y=y, dominant_baseline="central",
                    text_anchor=anchor, font_size=font_size,
                    transform=_rotate(rotate, x, y))]


# ============================================================
# Dispatch
# ============================================================
DRAW_RENDERERS: dict[type, Callable[..., list[Element]]] = {
    Square: render_square,
    Polyline: render_polyline,
    Pin: render_pin,
    Circle: render_circle,
    Arc: render_arc,
    Text: render_text,
}


def render_draw(draw: Draw, ctx: DrawContext) -> list[Element]:
    """Render one primitive. Raises UnsupportedDrawError for anything not in DRAW_RENDERERS."""
    renderer = DRAW_RENDERERS.get(type(draw))
    if renderer is None:
        raise UnsupportedDrawError(f"Unsupported draw type '{type(draw).__name__}'")
    return renderer(draw, ctx)


def symbol_elements(symbol: Symbol, ctx: DrawContext) -> list[Element]:
    """All draw primitives in order, then all fields."""
    out: list[Element] = []
    for draw in symbol.draw or []:
        out.extend(render_draw(draw, ctx))
    for field in symbol.fields or []:
        out.extend(render_field(field, ctx))
    return out


# ============================================================
# Symbol renderer
# ============================================================
def _extents_rect(ext: Extents) -> Element:
    return element("rect", x=ext.min_x, y=ext.min_y,
                   width=ext.max_x - ext.min_x, height=ext.max_y - ext.min_y,
                   style=OUTLINE_STYLE)


def _unit_caption(ctx: DrawContext) -> Element:
    ext = ctx.extents
    x, y = (ext.min_x, ext.min_y) if not ext.empty else (0, 0)
    ctx.update_extents(x, y - FONT_SIZE)
    return element("text", f"{ctx.unit} of {ext.max_unit}", x=ext.min_x, y=ext.min_y,
                   text_anchor="start", dominant_baseline="central", font_size=FONT_SIZE)


def symbol_to_elements(symbol: Symbol | Mapping, options: RenderOptions | None = None) -> Element:
    """Build the SVG element tree for one unit of *symbol*.

    *symbol* may be a Symbol or a raw record mapping (see libsym.record).
    """
    if isinstance(symbol, Mapping):
        symbol = symbol_from_dict(symbol)
    opts = options or RenderOptions()
    ctx = DrawContext(symbol, opts.unit)
    log.debug("rendering symbol %r unit %r", symbol.name, opts.unit)

    elems = symbol_elements(symbol, ctx)

    if opts.debug_extents and not ctx.extents.empty:
        elems.append(_extents_rect(ctx.extents))

    if ctx.extents.max_unit > 1:
        elems.append(_unit_caption(ctx))

    log.debug("extents %r", ctx.extents)
    viewport = element("g", children=elems,
                       **{"class": "viewport", "transform": ctx.extents.svg_transform(opts.size)})
    return element("svg", children=[viewport], xmlns=SVG_NS, version=SVG_VERSION,
                   width=opts.size, height=opts.size)


def symbol_to_svg(symbol: Symbol | Mapping, options: RenderOptions | None = None) -> str:
    """SVG document text for one unit of *symbol*."""
    return to_xml(symbol_to_elements(symbol, options))
