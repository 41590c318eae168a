"""Pin geometry and the name/number label layout table.

Label placement depends on two things: whether pin names are drawn outside
the body (pin_name_offset == 0) or inside next to the pin end, and which way
the pin points. Each of the eight combinations is one row of
PIN_LABEL_LAYOUTS; offsets are in source (Y-up) orientation.
"""
from typing import NamedTuple

from libsym.constants import PIN_TEXT_OFFSET
from libsym.types import Pin, UnsupportedOrientationError

OUTSIDE = "outside"
INSIDE = "inside"

# Unit vector of each pin orientation, source orientation.
PIN_DIRECTIONS = {
    "R": (1, 0),
    "L": (-1, 0),
    "U": (0, 1),
    "D": (0, -1),
}


class PinLabelLayout(NamedTuple):
    """Label offsets for one (mode, orientation) pair.

    The number is offset from the pin midpoint; the name from the midpoint
    or, when name_from_end is set, from the pin's far end.
    """
    num_dx: float; num_dy: float
    name_from_end: bool
    name_dx: float; name_dy: float
    name_anchor: str
    num_baseline: str
    name_baseline: str
    rotate: float


_O = PIN_TEXT_OFFSET

PIN_LABEL_LAYOUTS: dict[tuple[str, str], PinLabelLayout] = {
    # Outside: number beside the pin, name past the number or past the end.
    (OUTSIDE, "R"): PinLabelLayout(0,  _O, False, 0, 2*_O, "middle", "text-before-edge", "auto", 0),
    (OUTSIDE, "L"): PinLabelLayout(0,  _O, False, 0, 2*_O, "middle", "text-before-edge", "auto", 0),
    (OUTSIDE, "U"): PinLabelLayout(_O, 0,  True,  0, _O,   "middle", "text-before-edge", "auto", 0),
    (OUTSIDE, "D"): PinLabelLayout(_O, 0,  True,  0, -_O,  "end",    "text-before-edge", "auto", 0),
    # Inside: number along the pin, name beyond the end reading away from it.
    (INSIDE, "R"):  PinLabelLayout(0,   _O, True, _O,  0,   "start", "auto", "central", 0),
    (INSIDE, "L"):  PinLabelLayout(0,   _O, True, -_O, 0,   "end",   "auto", "central", 0),
    (INSIDE, "U"):  PinLabelLayout(-_O, 0,  True, 0,   _O,  "start", "auto", "central", -90),
    (INSIDE, "D"):  PinLabelLayout(-_O, 0,  True, 0,   -_O, "end",   "auto", "central", -90),
}


class PinGeometry(NamedTuple):
    """Pin end point and label anchors, all in source orientation."""
    x2: float; y2: float
    num_x: float; num_y: float
    name_x: float; name_y: float
    layout: PinLabelLayout


def pin_mode(pin_name_offset) -> str:
    return OUTSIDE if pin_name_offset == 0 else INSIDE


def pin_end(pin: Pin) -> tuple[float, float]:
    """Far end of the pin. Raises UnsupportedOrientationError for an unknown orientation."""
    if pin.orientation not in PIN_DIRECTIONS:
        raise UnsupportedOrientationError(
            f"Not Implemented draw orientation: {pin.orientation}")
    dx, dy = PIN_DIRECTIONS[pin.orientation]
    return (pin.pos[0] + pin.length*dx, pin.pos[1] + pin.length*dy)


def layout_pin(pin: Pin, pin_name_offset) -> PinGeometry:
    """End point and name/number anchors for *pin*."""
    x2, y2 = pin_end(pin)
    dx, dy = PIN_DIRECTIONS[pin.orientation]
    layout = PIN_LABEL_LAYOUTS[(pin_mode(pin_name_offset), pin.orientation)]
    half = pin.length / 2
    mx = pin.pos[0] + half*dx; my = pin.pos[1] + half*dy
    bx, by = (x2, y2) if layout.name_from_end else (mx, my)
    return PinGeometry(
        x2=x2, y2=y2,
        num_x=mx + layout.num_dx, num_y=my + layout.num_dy,
        name_x=bx + layout.name_dx, name_y=by + layout.name_dy,
        layout=layout,
    )
