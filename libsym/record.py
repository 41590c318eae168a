"""Decode JSON-style symbol records into typed symbol tuples.

The accepted shape is what a KiCad library parser emits, e.g.

    {"type": "pin", "name": "Segm_E", "number": "1", "pos": {"x": -750, "y": -100},
     "length": 250, "orientation": "R", "numberTextSize": 50, "nameTextSize": 50,
     "unit": 1, "convert": 1, "pinType": "P"}

Values are taken as given; a missing or non-numeric coordinate is carried
through and only skipped by the extents accumulator.
"""
import json
from collections.abc import Mapping
from typing import Any

from svgkit.types import Point
from libsym.constants import FIELD_FONT_SIZE
from libsym.types import (
    Square, Polyline, Pin, Circle, Arc, Text, Draw, Field, Symbol,
    UnsupportedDrawError,
)


def _pt(v: Any) -> Point:
    if v is None:
        return (None, None)
    if isinstance(v, Mapping):
        return (v.get("x"), v.get("y"))
    x, y = v
    return (x, y)


def _common(d: Mapping) -> dict:
    return {"unit": d.get("unit", 0), "convert": d.get("convert", 0)}


def _square(d):
    return Square(pos=_pt(d["pos"]), end=_pt(d["end"]), **_common(d))

def _polyline(d):
    return Polyline(points=[_pt(p) for p in d.get("points", [])],
                    fill=d.get("fill", "N"), **_common(d))

def _pin(d):
    return Pin(pos=_pt(d["pos"]), length=d["length"], orientation=d["orientation"],
               name=d.get("name", "~"), number=d.get("number", ""),
               name_text_size=d.get("nameTextSize", 50),
               number_text_size=d.get("numberTextSize", 50),
               pin_type=d.get("pinType", "P"), **_common(d))

def _circle(d):
    return Circle(pos=_pt(d["pos"]), radius=d["radius"], **_common(d))

def _arc(d):
    return Arc(pos=_pt(d["pos"]), radius=d["radius"], t1=d["t1"], t2=d["t2"],
               start=_pt(d["start"]), end=_pt(d["end"]), **_common(d))

def _text(d):
    return Text(pos=_pt(d["pos"]), text=d.get("text", ""),
                horizontal_justify=d.get("horizonalJustify", "C"),
                vertical_justify=d.get("verticalJustify", "C"), **_common(d))


_DRAW_DECODERS = {
    "square": _square,
    "polyline": _polyline,
    "pin": _pin,
    "circle": _circle,
    "arc": _arc,
    "text": _text,
}


def draw_from_dict(d: Mapping) -> Draw:
    """Decode one draw record. Raises UnsupportedDrawError for an unknown 'type'."""
    kind = d.get("type")
    if kind not in _DRAW_DECODERS:
        raise UnsupportedDrawError(f"Unsupported draw type '{kind}'")
    return _DRAW_DECODERS[kind](d)


def field_from_dict(d: Mapping) -> Field:
    # 'horizonalJustify' is the parser's spelling.
    return Field(index=d.get("index"), text=d.get("text", ""), pos=_pt(d["pos"]),
                 size=d.get("size") or FIELD_FONT_SIZE,
                 text_orientation=d.get("textOrientation", "H"),
                 horizontal_justify=d.get("horizonalJustify", "C"))


def symbol_from_dict(d: Mapping) -> Symbol:
    """Decode a whole symbol record; 'draw' and 'fields' may be absent."""
    draw = d.get("draw")
    fields = d.get("fields")
    return Symbol(
        draw=[draw_from_dict(x) for x in draw] if draw is not None else None,
        fields=[field_from_dict(x) for x in fields] if fields is not None else None,
        draw_name=bool(d.get("drawName", True)),
        draw_nums=bool(d.get("drawNums", True)),
        pin_name_offset=d.get("pinNameOffset", 40),
        name=d.get("name", ""),
    )


def load_symbol(path) -> Symbol:
    """Read a symbol record from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return symbol_from_dict(json.load(f))
