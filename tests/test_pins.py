"""Tests for libsym/pins.py pin geometry and label layout."""
import pytest
from libsym.pins import (
    PIN_LABEL_LAYOUTS, PIN_DIRECTIONS, OUTSIDE, INSIDE,
    pin_mode, pin_end, layout_pin,
)
from libsym.types import Pin, UnsupportedOrientationError


def _pin(orientation, pos=(0, 0), length=100):
    return Pin(pos=pos, length=length, orientation=orientation, name="N", number="1")


def test_table_is_exhaustive():
    assert set(PIN_LABEL_LAYOUTS) == {(m, o) for m in (OUTSIDE, INSIDE) for o in PIN_DIRECTIONS}


@pytest.mark.parametrize("offset, mode", [(0, OUTSIDE), (40, INSIDE), (-1, INSIDE)])
def test_pin_mode(offset, mode):
    assert pin_mode(offset) == mode


@pytest.mark.parametrize("orientation, end", [
    ("R", (100, 0)), ("L", (-100, 0)), ("U", (0, 100)), ("D", (0, -100)),
])
def test_pin_end(orientation, end):
    assert pin_end(_pin(orientation)) == end


def test_pin_end_offset_origin():
    assert pin_end(_pin("R", pos=(-750, -100), length=250)) == (-500, -100)


def test_unknown_orientation_raises():
    with pytest.raises(UnsupportedOrientationError, match="orientation: X"):
        pin_end(_pin("X"))


# (offset, orientation) -> number anchor, name anchor, name text-anchor, rotation
_EXPECTED = [
    (0, "R", (50, 6), (50, 12), "middle", 0),
    (0, "L", (-50, 6), (-50, 12), "middle", 0),
    (0, "U", (6, 50), (0, 106), "middle", 0),
    (0, "D", (6, -50), (0, -106), "end", 0),
    (40, "R", (50, 6), (106, 0), "start", 0),
    (40, "L", (-50, 6), (-106, 0), "end", 0),
    (40, "U", (-6, 50), (0, 106), "start", -90),
    (40, "D", (-6, -50), (0, -106), "end", -90),
]


@pytest.mark.parametrize("offset, orientation, num, name, anchor, rotate", _EXPECTED)
def test_layout_pin(offset, orientation, num, name, anchor, rotate):
    g = layout_pin(_pin(orientation), offset)
    assert (g.num_x, g.num_y) == num
    assert (g.name_x, g.name_y) == name
    assert g.layout.name_anchor == anchor
    assert g.layout.rotate == rotate


@pytest.mark.parametrize("orientation", list(PIN_DIRECTIONS))
def test_baselines_by_mode(orientation):
    out = layout_pin(_pin(orientation), 0).layout
    assert out.num_baseline == "text-before-edge"
    assert out.name_baseline == "auto"
    ins = layout_pin(_pin(orientation), 40).layout
    assert ins.num_baseline == "auto"
    assert ins.name_baseline == "central"


def test_layout_pin_library_example():
    g = layout_pin(_pin("R", pos=(-750, -100), length=250), 0)
    assert (g.x2, g.y2) == (-500, -100)
    assert (g.num_x, g.num_y) == (-625, -94)
    assert (g.name_x, g.name_y) == (-625, -88)
