"""Arc angle normalisation, start/end swap decision, and SVG arc parameters.

Angles are carried in tenths of a degree, the unit used by schematic symbol
libraries. The 1800/3600 thresholds below are in that unit.
"""
import math
from typing import NamedTuple

import numpy as np

from .types import Point

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Angle Constants
# ============================================================
HALF_TURN = 1800   # 180 degrees in tenths
FULL_TURN = 3600   # 360 degrees in tenths

# Symbol frame for a library preview: x along +X, angles CCW-positive.
SOURCE_BASIS = np.array([[1.0, 0.0],
                         [0.0, 1.0]])

# ============================================================
# Angle Utilities
# ============================================================
def normalize_angle_pos(angle: float) -> float:
    """Fold an angle in tenths of a degree into [0, 3600)."""
    if not math.isfinite(angle):
        raise GeometryError(f"Non-finite angle: {angle}")
    while angle < 0:
        angle += FULL_TURN
    while angle >= FULL_TURN:
        angle -= FULL_TURN
    return angle

def map_angle(angle: float, basis: np.ndarray = SOURCE_BASIS) -> float:
    """Rotate a unit vector at *angle* through *basis* and re-measure it.

    Result is in tenths of a degree, biased by +0.5 and not yet normalised.
    """
    if not math.isfinite(angle):
        raise GeometryError(f"Non-finite angle: {angle}")
    rad = angle * math.pi / HALF_TURN
    x, y = basis @ np.array([math.cos(rad), math.sin(rad)])
    return math.atan2(float(y), float(x)) * HALF_TURN / math.pi + 0.5

def map_arc_angles(t1: float, t2: float,
                   basis: np.ndarray = SOURCE_BASIS) -> tuple[float, float, bool]:
    """Map an arc's (t1, t2) through *basis* so the span is at most 180 degrees.

    Returns (a1, a2, swapped). When swapped is True the arc has to be drawn
    from its end point to its start point.
    """
    delta = t2 - t1
    # Keep spans of exactly 180/360 degrees off the comparison boundary.
    if delta >= HALF_TURN:
        t1 -= 1
        t2 += 1

    a1 = normalize_angle_pos(map_angle(t1, basis))
    a2 = normalize_angle_pos(map_angle(t2, basis))
    if a2 < a1:
        a2 += FULL_TURN

    swapped = False
    if a2 - a1 > HALF_TURN:
        a1, a2 = normalize_angle_pos(a2), normalize_angle_pos(a1)
        if a2 < a1:
            a2 += FULL_TURN
        swapped = True

    if delta >= HALF_TURN:
        a1 += 1
        a2 -= 1
    return a1, a2, swapped

def arc_needs_swap(t1: float, t2: float, basis: np.ndarray = SOURCE_BASIS) -> bool:
    """True when an arc's start and end points must be exchanged before drawing."""
    return map_arc_angles(t1, t2, basis)[2]

# ============================================================
# SVG Arc Parameters
# ============================================================
class ArcParams(NamedTuple):
    """Arguments of an SVG ``M x0 y0 A rx ry phi large sweep x1 y1`` command."""
    x0: float; y0: float
    rx: float; ry: float; phi: float
    large_arc: int; sweep: int
    x1: float; y1: float

def arc_svg_params(center: Point, start: Point, end: Point) -> ArcParams:
    """Elliptical-arc parameters for a circular arc from *start* to *end*.

    All points are in output (Y-down) orientation. The arc runs
    counter-clockwise on screen, which is the positive angle direction of
    the Y-up source frame, so the sweep flag is always 0.
    """
    c = np.asarray(center, dtype=float)
    vs = np.asarray(start, dtype=float) - c
    ve = np.asarray(end, dtype=float) - c
    r = float(np.hypot(vs[0], vs[1]))
    ang_s = math.atan2(vs[1], vs[0])
    ang_e = math.atan2(ve[1], ve[0])
    span = (ang_s - ang_e) % (2*math.pi)
    large_arc = 1 if span > math.pi else 0
    return ArcParams(start[0], start[1], r, r, 0, large_arc, 0, end[0], end[1])
